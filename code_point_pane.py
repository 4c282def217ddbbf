# ~/Apps/unibrowse/code_point_pane.py
import curses


def format_row(cp, glyph, name):
    return f"{cp} 0x{cp:02x} 0{cp:o} '{glyph}' {name}"


class CodePointPane:
    INDENT = 2

    def __init__(self, db, marker=">"):
        self.db = db
        self.marker = (marker or ">")[:1]

    def lines(self, code_points):
        return [
            format_row(cp, self.db.glyph(cp), self.db.name_of(cp))
            for cp in code_points
        ]

    def draw(self, win, code_points):
        win.erase()
        h, w = win.getmaxyx()
        text_w = max(1, w - self.INDENT)

        for row, line in enumerate(self.lines(code_points)[:h]):
            try:
                win.addnstr(row, self.INDENT, line, text_w)
            except curses.error:
                # wide glyphs can push the last cell off the window
                pass

        if code_points:
            try:
                win.addnstr(0, 0, self.marker, 1)
            except curses.error:
                pass

        win.refresh()
