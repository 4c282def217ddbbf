# ~/Apps/unibrowse/orchestrator.py
import curses
import logging

from code_point_pane import CodePointPane
from command_dispatcher import CommandDispatcher, HELP_LINES
from key_decoder import KeyDecoder
from navigation import NavigationController
from overlay import OverlayView
from screen_layout import ScreenLayout
from status_bar import render_status
from text_prompt import TextPrompt

logger = logging.getLogger(__name__)


class Orchestrator:
    def __init__(self, stdscr, app_state, db, config=None):
        self.stdscr = stdscr
        config = config or {}
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)

        self.state = app_state
        self.db = db
        self.layout = ScreenLayout(stdscr)
        self.state.set_viewport_height(self.layout.list_h)

        self.nav = NavigationController(app_state, db)
        self.pane = CodePointPane(db, marker=config.get("CURSOR_MARKER", ">"))
        self.decoder = KeyDecoder()
        self.overlay = OverlayView(self.layout)

        # ---- prompt (nested loop, redraws through us) ----
        self.prompt = TextPrompt(self._read_wide_key, self.redraw, self._resize)
        self.dispatcher = CommandDispatcher(app_state, self.nav, self._prompt_for_text)

    # ---------------- helpers ----------------

    def _read_wide_key(self):
        try:
            return self.stdscr.get_wch()
        except curses.error:
            # timeout with no input
            return -1

    def _prompt_for_text(self, label):
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        try:
            return self.prompt.ask(label)
        finally:
            try:
                curses.curs_set(0)
            except curses.error:
                pass

    def _resize(self):
        curses.update_lines_cols()
        self.stdscr.clear()
        self.layout = ScreenLayout(self.stdscr)
        self.overlay.layout = self.layout
        if self.overlay.visible:
            self.overlay.open_help(self.overlay.lines)
        self.state.set_viewport_height(self.layout.list_h)
        logger.debug("resized to %dx%d", self.layout.W, self.layout.H)
        self.stdscr.refresh()

    # ---------------- UI ----------------

    def redraw(self):
        if self.overlay.visible:
            self.overlay.draw()
            return

        self.pane.draw(
            self.layout.list_win,
            self.nav.visible_code_points(self.state.viewport_height),
        )

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        text = render_status(
            {"current": self.state.current, "unicode_version": self.db.version}, w
        )
        try:
            # writing the bottom-right cell raises even when the text lands
            sw.addnstr(0, 0, text, w, curses.A_REVERSE)
        except curses.error:
            pass
        sw.refresh()

        mw = self.layout.msg_win
        mw.erase()
        if self.prompt.active:
            self.prompt.draw(mw)
            return
        if self.state.status_msg:
            _, mw_w = mw.getmaxyx()
            try:
                mw.addnstr(0, 0, self.state.status_msg, max(1, mw_w - 1))
            except curses.error:
                pass
        mw.refresh()

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.nav.settle()
        self.redraw()

        while True:
            ch = self.stdscr.getch()

            if ch == curses.KEY_RESIZE:
                self._resize()
                self.redraw()
                continue

            if self.overlay.visible:
                self.overlay.handle_key(ch)
                self.redraw()
                continue

            token = self.decoder.feed(ch)
            if token is None:
                continue

            if token in ("?", "F1"):
                self.overlay.open_help(HELP_LINES)
                self.redraw()
                continue

            if not self.dispatcher.dispatch(token):
                break

            self.redraw()
