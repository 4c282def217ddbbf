import unittest

from char_database import UnicodeDatabase
from code_point_pane import CodePointPane, format_row


class DummyWin:
    def __init__(self, h=5, w=60):
        self._h = h
        self._w = w
        self.calls = []
        self.erased = False

    def getmaxyx(self):
        return self._h, self._w

    def erase(self):
        self.erased = True
        self.calls = []

    def addnstr(self, y, x, text, n, *attrs):
        self.calls.append((y, x, text[:n]))

    def refresh(self):
        pass


class FormatRowTests(unittest.TestCase):
    def test_format_row_columns(self):
        self.assertEqual(
            format_row(65, "A", "LATIN CAPITAL LETTER A"),
            "65 0x41 0101 'A' LATIN CAPITAL LETTER A",
        )

    def test_hex_is_padded_to_two_digits(self):
        self.assertEqual(format_row(32, " ", "SPACE"), "32 0x20 040 ' ' SPACE")
        self.assertTrue(format_row(10, "x", "").startswith("10 0x0a 012 "))

    def test_large_code_point(self):
        self.assertEqual(
            format_row(0x1F600, "\U0001F600", "GRINNING FACE"),
            "128512 0x1f600 0373000 '\U0001F600' GRINNING FACE",
        )


class CodePointPaneTests(unittest.TestCase):
    def test_draw_indents_rows_and_marks_first(self):
        pane = CodePointPane(UnicodeDatabase())
        win = DummyWin(h=5, w=60)
        pane.draw(win, [0x41, 0x42])

        self.assertTrue(win.erased)
        self.assertIn((0, 2, "65 0x41 0101 'A' LATIN CAPITAL LETTER A"), win.calls)
        self.assertIn((1, 2, "66 0x42 0102 'B' LATIN CAPITAL LETTER B"), win.calls)
        self.assertIn((0, 0, ">"), win.calls)

    def test_draw_never_exceeds_window_height(self):
        pane = CodePointPane(UnicodeDatabase(), marker="*")
        win = DummyWin(h=2, w=60)
        pane.draw(win, list(range(0x41, 0x50)))

        rows = {y for y, x, _ in win.calls}
        self.assertEqual(rows, {0, 1})
        self.assertIn((0, 0, "*"), win.calls)

    def test_rows_are_truncated_to_width(self):
        pane = CodePointPane(UnicodeDatabase())
        win = DummyWin(h=1, w=12)
        pane.draw(win, [0x41])
        text = [t for y, x, t in win.calls if x == 2][0]
        self.assertEqual(len(text), 10)

    def test_empty_frame_has_no_marker(self):
        pane = CodePointPane(UnicodeDatabase())
        win = DummyWin()
        pane.draw(win, [])
        self.assertEqual(win.calls, [])


if __name__ == "__main__":
    unittest.main()
