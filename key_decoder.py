import curses

_CURSES_KEYS = {
    curses.KEY_UP: "UP",
    curses.KEY_DOWN: "DOWN",
    curses.KEY_NPAGE: "NEXT",
    curses.KEY_PPAGE: "PRIOR",
    curses.KEY_HOME: "HOME",
    curses.KEY_END: "END",
    curses.KEY_F1: "F1",
}


class KeyDecoder:
    """Turns raw curses key codes into tokens like ``C-s`` or ``M-g``.

    Alt arrives as Esc followed by the key, so Esc is held until the next
    code. A read timeout (-1) right after Esc yields a bare ``ESC``.
    """

    def __init__(self):
        self.meta_pending = False

    def feed(self, ch):
        if self.meta_pending:
            self.meta_pending = False
            if ch == -1:
                return "ESC"
            if ch == 27:
                self.meta_pending = True
                return "ESC"
            base = self._plain(ch)
            if base is None:
                return "ESC"
            return f"M-{base}"

        if ch == -1:
            return None

        if ch == 27:  # Esc
            self.meta_pending = True
            return None

        return self._plain(ch)

    @staticmethod
    def _plain(ch):
        if ch in _CURSES_KEYS:
            return _CURSES_KEYS[ch]
        if ch in (10, 13):
            return "RET"
        if ch == 9:
            return "TAB"
        if ch in (127, curses.KEY_BACKSPACE):
            return "DEL"
        if 1 <= ch <= 26:
            return f"C-{chr(ch + 96)}"
        if 32 <= ch <= 126:
            return chr(ch)
        return None
