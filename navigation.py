import logging
import re

from char_database import next_displayable, prev_displayable

logger = logging.getLogger(__name__)

_OCTAL_LEGACY = re.compile(r"^0[0-7_]+$")


def parse_code_point(text):
    """Parse an unsigned integer written in decimal, hex, octal or binary.

    Accepts the ``0x``, ``0o`` and ``0b`` prefixes, a bare leading ``0`` for
    octal, and ``_`` digit separators. Raises ``ValueError`` with a message
    fit for the status line.
    """
    raw = (text or "").strip()
    if not raw:
        raise ValueError("Jump failed: empty number")
    if raw[0] in "+-" or not raw.isascii():
        raise ValueError(f"Jump failed: invalid number {raw!r}")
    try:
        if _OCTAL_LEGACY.match(raw):
            return int(raw, 8)
        return int(raw, 0)
    except ValueError:
        raise ValueError(f"Jump failed: invalid number {raw!r}") from None


def decode_rune(text):
    if not text:
        raise ValueError("No or erroneous rune provided")
    cp = ord(text[0])
    if 0xD800 <= cp <= 0xDFFF:
        raise ValueError("No or erroneous rune provided")
    return cp


class NavigationController:
    def __init__(self, state, db):
        self.state = state
        self.db = db

    # ---------- invariants ----------
    def settle(self):
        s = self.state
        if s.current > s.max_code_point:
            s.current = s.max_code_point
            return
        if s.current < 0:
            s.current = 0
        s.current = next_displayable(self.db, s.current, s.max_code_point)

    def visible_code_points(self, count):
        s = self.state
        rows = []
        cp = s.current
        while len(rows) < count and cp <= s.max_code_point:
            cp = next_displayable(self.db, cp, s.max_code_point)
            if not self.db.is_displayable(cp):
                break
            rows.append(cp)
            cp += 1
        return rows

    # ---------- jumps ----------
    def jump_start(self):
        self.state.current = 0

    def jump_end(self):
        self.state.current = self.state.max_code_point

    def jump_to_number(self, text):
        try:
            target = parse_code_point(text)
        except ValueError as e:
            logger.debug("jump rejected: %s", e)
            self.state.set_status(str(e))
            return False
        self.state.current = min(target, self.state.max_code_point)
        return True

    def find_rune(self, text):
        try:
            cp = decode_rune(text)
        except ValueError as e:
            self.state.set_status(str(e))
            return False
        # landing spot may be non-displayable; settle moves it forward
        self.state.current = cp
        return True

    def search_name(self, query):
        s = self.state
        if not query:
            query = s.last_search
        if not query:
            s.set_status("No previous search")
            return False

        needle = query.upper()
        orig = s.current
        cp = s.current + 1
        while cp <= s.max_code_point:
            if self.db.is_displayable(cp) and needle in self.db.name_of(cp).upper():
                s.current = cp
                s.last_search = query
                return True
            cp += 1

        logger.debug("no match for %r after U+%04X", query, orig)
        s.set_status(f"No match found for {query}")
        s.current = orig
        return False

    # ---------- stepping ----------
    def step_up(self):
        s = self.state
        if s.current <= 0:
            s.current = 0
            return
        s.current = prev_displayable(self.db, s.current - 1)

    def step_down(self):
        self.state.current += 1

    def page_down(self):
        self.state.current += self.state.viewport_height

    def page_up(self):
        self.state.current -= self.state.viewport_height
