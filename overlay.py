import curses
from typing import List


class OverlayView:
    TITLE = " unibrowse keys (q to close)"

    def __init__(self, layout):
        self.layout = layout
        self.visible = False
        self.lines: List[str] = []
        self.scroll = 0
        self.win = None

    def open_help(self, lines: List[str]):
        self.lines = list(lines or [])
        self.scroll = 0
        self.win = curses.newwin(max(3, self.layout.H), self.layout.W, 0, 0)
        self.win.leaveok(True)
        self.visible = True

    def close(self):
        self.visible = False
        self.lines = []
        self.scroll = 0
        self.win = None

    @property
    def body_rows(self) -> int:
        if self.win is None:
            return 0
        h, _ = self.win.getmaxyx()
        # first row holds the title
        return max(1, h - 1)

    def handle_key(self, ch):
        if not self.visible or self.win is None or ch == -1:
            return

        if ch in (27, ord("q"), 10, 13, curses.KEY_ENTER, ord("?")):
            self.close()
            return

        max_scroll = max(0, len(self.lines) - self.body_rows)
        step = {
            curses.KEY_DOWN: 1,
            ord("j"): 1,
            curses.KEY_UP: -1,
            ord("k"): -1,
            curses.KEY_NPAGE: self.body_rows,
            curses.KEY_PPAGE: -self.body_rows,
        }.get(ch)

        if ch == curses.KEY_HOME:
            self.scroll = 0
        elif ch == curses.KEY_END:
            self.scroll = max_scroll
        elif step is not None:
            self.scroll = max(0, min(max_scroll, self.scroll + step))

    def draw(self):
        if not self.visible or not self.win:
            return

        win = self.win
        win.erase()
        _, w = win.getmaxyx()
        width = max(1, w - 1)

        try:
            win.addnstr(0, 0, self.TITLE.ljust(width), width, curses.A_REVERSE)
        except curses.error:
            pass

        visible = self.lines[self.scroll : self.scroll + self.body_rows]
        for idx, line in enumerate(visible, start=1):
            try:
                win.addnstr(idx, 0, line, width)
            except curses.error:
                pass

        win.refresh()
