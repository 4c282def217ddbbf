import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# token -> command name
KEY_BINDINGS = {
    "C-c": "quit",
    "M-<": "jump_start",
    "HOME": "jump_start",
    "M->": "jump_end",
    "END": "jump_end",
    "M-g": "jump_to_number",
    "C-f": "find_rune",
    "C-s": "search_name",
    "UP": "step_up",
    "C-p": "step_up",
    "DOWN": "step_down",
    "C-n": "step_down",
    "NEXT": "page_down",
    "C-v": "page_down",
    "PRIOR": "page_up",
    "C-z": "page_up",
    "M-v": "page_up",
}

PROMPT_LABELS = {
    "jump_to_number": "Jump to #",
    "find_rune": "Find rune",
    "search_name": "Search for rune name",
}

HELP_LINES = [
    " Keys",
    "",
    "  C-c            quit",
    "  C-f            find a code point by typing the character",
    "  C-s            search names (empty input repeats the last search)",
    "  M-g            jump to a number (decimal, 0x hex, 0o or 0 octal, 0b binary)",
    "  M-< / Home     jump to the first code point",
    "  M-> / End      jump to the last code point",
    "  Up / C-p       previous code point",
    "  Down / C-n     next code point",
    "  PgDn / C-v     page down",
    "  PgUp / C-z M-v page up",
    "  ? / F1         this help",
    "",
    " In prompts: Enter submits, Esc or C-g cancels",
]


class CommandDispatcher:
    def __init__(
        self,
        state,
        navigator,
        prompt_for_text: Callable[[str], Optional[str]],
    ):
        self.state = state
        self.nav = navigator
        self.prompt_for_text = prompt_for_text

    def command_for(self, token):
        return KEY_BINDINGS.get(token)

    def dispatch(self, token) -> bool:
        """Apply the command bound to ``token``. Returns False on quit."""
        command = self.command_for(token)
        if command is None:
            return True
        logger.debug("dispatch %s -> %s", token, command)

        if command == "quit":
            return False

        self.state.clear_status()

        if command in PROMPT_LABELS:
            text = self.prompt_for_text(PROMPT_LABELS[command])
            if text is None:
                self.state.set_status("Canceled")
            else:
                getattr(self.nav, command)(text)
        else:
            getattr(self.nav, command)()

        self.nav.settle()
        return True
