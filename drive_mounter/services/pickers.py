import shlex
import logging
from typing import List, Sequence
from ..disk_manager.utils import run_command
from .errors import InteractionError, SelectionError

logger = logging.getLogger(__name__)

class Picker:
    """Abstract base class for single-choice selection front-ends."""

    def choose_one(self, prompt: str, options: Sequence[str]) -> str:
        raise NotImplementedError

    def input_text(self, prompt: str) -> str:
        raise NotImplementedError

    def select(self, prompt: str, options: Sequence[str]) -> int:
        """Index of the chosen option, matched on trimmed text."""
        value = self.choose_one(prompt, options).strip()
        for i, option in enumerate(options):
            if option.strip() == value:
                return i
        raise SelectionError("Selected mount point is not in the list!")

class DmenuPicker(Picker):
    """Runs an external dmenu-compatible program, options go in on stdin."""

    def __init__(self, command: str = "dmenu", prompt_flag: str = "-p"):
        self.command = shlex.split(command)
        self.prompt_flag = prompt_flag

    def _build_command(self, prompt: str) -> List[str]:
        cmd = list(self.command)
        if self.prompt_flag:
            cmd += [self.prompt_flag, prompt]
        return cmd

    def _run(self, prompt: str, stdin: str) -> str:
        success, output = run_command(self._build_command(prompt), input_text=stdin)
        if not success:
            raise SelectionError(f"Picker was cancelled or failed: {output or 'no output'}")
        if not output:
            raise SelectionError("Nothing was selected")
        return output

    def choose_one(self, prompt: str, options: Sequence[str]) -> str:
        return self._run(prompt, "\n".join(options) + "\n")

    def input_text(self, prompt: str) -> str:
        return self._run(prompt, "\n")

class TerminalPicker(Picker):
    """Numbered menu on stdin/stdout; Enter picks the first entry."""

    def _read(self, prompt: str) -> str:
        try:
            return input(prompt)
        except (EOFError, KeyboardInterrupt) as e:
            raise InteractionError("Failed to read line") from e

    def select(self, prompt: str, options: Sequence[str]) -> int:
        if not options:
            raise SelectionError("There is nothing to choose from")

        print(prompt)
        for i, option in enumerate(options, start=1):
            print(f"  {i}) {option}")

        while True:
            choice = self._read(f"Select [1-{len(options)}] (default 1): ").strip()
            if not choice:
                return 0
            if choice.isdecimal() and 1 <= int(choice) <= len(options):
                return int(choice) - 1
            print(f"Invalid choice '{choice}', enter a number between 1 and {len(options)}.")

    def choose_one(self, prompt: str, options: Sequence[str]) -> str:
        return options[self.select(prompt, options)]

    def input_text(self, prompt: str) -> str:
        while True:
            value = self._read(f"{prompt}: ").strip()
            if value:
                return value

def get_picker(preferences) -> Picker:
    """Chooses the selection front-end once, from the DMENU_USE setting."""
    if preferences.use_dmenu:
        command = str(preferences.get('DMENU_COMMAND') or "dmenu")
        logger.debug(f"Using external picker '{command}'")
        return DmenuPicker(command, str(preferences.get('DMENU_PROMPT_FLAG', "-p") or ""))
    return TerminalPicker()
