# ~/Apps/unibrowse/char_database.py
import unicodedata

from wcwidth import wcwidth

UNICODE_MAX = 0x10FFFF

# general categories that have something to draw: letters, marks, numbers,
# punctuation, symbols and the plain space separator
_GRAPHIC_MAJOR = frozenset("LMNPS")
_GRAPHIC_EXTRA = frozenset({"Zs"})

DOTTED_CIRCLE = "\u25cc"


class UnicodeDatabase:
    def __init__(self, unicode_version="auto"):
        self.unicode_version = unicode_version or "auto"
        self.version = unicodedata.unidata_version

    def category(self, cp: int) -> str:
        if cp < 0 or cp > UNICODE_MAX:
            return "Cn"
        return unicodedata.category(chr(cp))

    def is_displayable(self, cp: int) -> bool:
        cat = self.category(cp)
        return cat[0] in _GRAPHIC_MAJOR or cat in _GRAPHIC_EXTRA

    def name_of(self, cp: int) -> str:
        if cp < 0 or cp > UNICODE_MAX:
            return ""
        return unicodedata.name(chr(cp), "")

    def glyph_width(self, cp: int) -> int:
        return wcwidth(chr(cp), unicode_version=self.unicode_version)

    def glyph(self, cp: int) -> str:
        ch = chr(cp)
        # combining marks have no advance of their own
        if self.glyph_width(cp) < 1:
            return DOTTED_CIRCLE + ch
        return ch


def compute_max_code_point(db) -> int:
    """Highest displayable code point known to ``db``.

    Scanned downward at startup rather than hard-coded, since it moves with
    every Unicode release.
    """
    cp = UNICODE_MAX
    while cp > 0 and not db.is_displayable(cp):
        cp -= 1
    return cp


def next_displayable(db, cp: int, max_cp: int) -> int:
    ret = max(0, cp)
    while ret < max_cp and not db.is_displayable(ret):
        ret += 1
    return min(ret, max_cp)


def prev_displayable(db, cp: int) -> int:
    ret = cp
    while ret > 0 and not db.is_displayable(ret):
        ret -= 1
    return max(0, ret)
