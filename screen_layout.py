import curses


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: code point list (main), help bar (1 line), message line (1 line)
        self.status_h = 1
        self.msg_h = 1

        self.list_h = max(1, self.H - self.status_h - self.msg_h)

        self.list_win = curses.newwin(self.list_h, self.W, 0, 0)
        self.list_win.leaveok(True)

        self.status_win = curses.newwin(self.status_h, self.W, self.list_h, 0)
        # do not let status bar steal cursor
        self.status_win.leaveok(True)

        self.msg_win = curses.newwin(self.msg_h, self.W, self.list_h + self.status_h, 0)
