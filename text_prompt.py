import curses
from typing import Callable, Optional


class TextPrompt:
    def __init__(
        self,
        read_key: Callable[[], object],
        redraw_cb: Callable[[], None],
        resize_cb: Optional[Callable[[], None]] = None,
    ):
        self._read_key = read_key
        self._redraw = redraw_cb
        self._on_resize = resize_cb

        self.active = False
        self.label = ""
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0
        self.result: Optional[str] = None

    # ---------- public API ----------
    def ask(self, label: str) -> Optional[str]:
        """Block until Enter (returns the text) or Esc / C-g (returns None)."""
        self.start(label)
        while self.active:
            self._redraw()
            ch = self._read_key()
            if ch == curses.KEY_RESIZE:
                if self._on_resize is not None:
                    self._on_resize()
                continue
            self.handle_key(ch)
        return self.result

    def start(self, label: str):
        self.active = True
        self.label = label
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0
        self.result = None

    def handle_key(self, ch):
        if not self.active:
            return

        # get_wch hands back str for characters, int for function keys
        if isinstance(ch, str):
            if len(ch) == 1 and (ord(ch) < 32 or ord(ch) == 127):
                ch = ord(ch)
            else:
                self._insert(ch)
                return

        if ch == -1:
            return

        if ch in (10, 13, curses.KEY_ENTER):  # Enter
            self.result = self.buffer
            self._reset()
            return

        if ch in (27, 7):  # Esc / Ctrl+G
            self.result = None
            self._reset()
            return

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.cursor > 0:
                self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
                self.cursor -= 1
            return

        if ch == 21:  # Ctrl+U, kill to line start
            self.buffer = self.buffer[self.cursor :]
            self.cursor = 0
            return

        if ch == curses.KEY_LEFT:
            self.cursor = max(0, self.cursor - 1)
            return

        if ch == curses.KEY_RIGHT:
            self.cursor = min(len(self.buffer), self.cursor + 1)
            return

        if ch in (curses.KEY_HOME, 1):  # Home or Ctrl+A
            self.cursor = 0
            return

        if ch in (curses.KEY_END, 5):  # End or Ctrl+E
            self.cursor = len(self.buffer)
            return

        if 32 <= ch <= 126:
            self._insert(chr(ch))

    def draw(self, win):
        if not self.active:
            return

        prompt = f"{self.label}: "
        h, w = win.getmaxyx()
        text_w = max(1, w - len(prompt) - 1)

        if self.cursor < self.hscroll:
            self.hscroll = self.cursor
        elif self.cursor > self.hscroll + text_w:
            self.hscroll = self.cursor - text_w

        start = self.hscroll
        end = start + text_w
        visible = self.buffer[start:end]

        try:
            win.addnstr(0, 0, prompt, len(prompt))
            win.addnstr(0, len(prompt), visible, text_w)
            win.move(0, min(w - 1, len(prompt) + (self.cursor - self.hscroll)))
        except curses.error:
            pass
        win.refresh()

    # ---------- internals ----------
    def _insert(self, text):
        self.buffer = self.buffer[: self.cursor] + text + self.buffer[self.cursor :]
        self.cursor += len(text)

    def _reset(self):
        self.active = False
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0
