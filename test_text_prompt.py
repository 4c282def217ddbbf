import curses
import unittest

from text_prompt import TextPrompt


class DummyWin:
    def __init__(self, h=1, w=40):
        self._h = h
        self._w = w
        self.calls = []
        self.cursor = None

    def getmaxyx(self):
        return self._h, self._w

    def addnstr(self, y, x, text, n, *attrs):
        self.calls.append((y, x, text[:n]))

    def move(self, y, x):
        self.cursor = (y, x)

    def refresh(self):
        pass


class ScriptedKeys:
    def __init__(self, keys):
        self.keys = list(keys)

    def __call__(self):
        return self.keys.pop(0)


class TextPromptTests(unittest.TestCase):
    def _prompt(self, keys):
        redraws = []
        resizes = []
        prompt = TextPrompt(
            ScriptedKeys(keys),
            lambda: redraws.append(1),
            lambda: resizes.append(1),
        )
        return prompt, redraws, resizes

    def test_enter_returns_typed_text(self):
        prompt, redraws, _ = self._prompt(["0", "x", "4", "1", "\n"])
        self.assertEqual(prompt.ask("Jump to #"), "0x41")
        self.assertFalse(prompt.active)
        # one redraw per keystroke
        self.assertEqual(len(redraws), 5)

    def test_escape_cancels(self):
        prompt, _, _ = self._prompt(["a", "\x1b"])
        self.assertIsNone(prompt.ask("Find rune"))

    def test_ctrl_g_cancels(self):
        prompt, _, _ = self._prompt(["a", 7])
        self.assertIsNone(prompt.ask("Find rune"))

    def test_accepts_non_ascii_characters(self):
        prompt, _, _ = self._prompt(["é", "\n"])
        self.assertEqual(prompt.ask("Find rune"), "é")

    def test_editing_keys(self):
        keys = [
            "a", "c", curses.KEY_LEFT, "b",  # abc
            curses.KEY_END, "d", curses.KEY_BACKSPACE,  # abc
            curses.KEY_HOME, "_",  # _abc
            "\n",
        ]
        prompt, _, _ = self._prompt(keys)
        self.assertEqual(prompt.ask("Search for rune name"), "_abc")

    def test_ctrl_u_kills_to_start(self):
        prompt, _, _ = self._prompt(["a", "b", "c", curses.KEY_LEFT, "\x15", "\n"])
        self.assertEqual(prompt.ask("Search for rune name"), "c")

    def test_timeouts_and_resize(self):
        prompt, redraws, resizes = self._prompt([-1, curses.KEY_RESIZE, "z", "\r"])
        self.assertEqual(prompt.ask("Search for rune name"), "z")
        self.assertEqual(len(resizes), 1)
        self.assertEqual(len(redraws), 4)

    def test_empty_submit_returns_empty_string(self):
        prompt, _, _ = self._prompt(["\n"])
        self.assertEqual(prompt.ask("Search for rune name"), "")

    def test_draw_shows_label_and_places_cursor(self):
        prompt = TextPrompt(lambda: -1, lambda: None)
        prompt.start("Jump to #")
        for ch in "123":
            prompt.handle_key(ch)
        win = DummyWin()
        prompt.draw(win)
        self.assertEqual(win.calls[0], (0, 0, "Jump to #: "))
        self.assertEqual(win.calls[1], (0, len("Jump to #: "), "123"))
        self.assertEqual(win.cursor, (0, len("Jump to #: ") + 3))


if __name__ == "__main__":
    unittest.main()
