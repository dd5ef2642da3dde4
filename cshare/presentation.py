import time
from typing import List, Optional, Sequence

from rich.console import Console
from rich.prompt import Prompt

TITLE = "CShare - Secure File Sharing"

STYLES = {
    "title": "bold cyan",
    "error": "red",
    "success": "green",
    "info": "cyan",
    "menu": "white",
    "endpoint": "italic magenta",
}


class Terminal:
    """Everything the user sees or types goes through here."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)

    def header(self) -> None:
        self.console.clear()
        self.console.print(f"\n     {TITLE}\n", style=STYLES["title"])

    def line(self, text: str = "") -> None:
        self.console.print(text, markup=False)

    def info(self, text: str) -> None:
        self.console.print(text, style=STYLES["info"], markup=False)

    def success(self, text: str) -> None:
        self.console.print(text, style=STYLES["success"], markup=False)

    def error(self, text: str) -> None:
        self.console.print(f"Error: {text}", style=STYLES["error"], markup=False)

    def endpoint(self, text: str) -> None:
        self.console.print(text, style=STYLES["endpoint"], markup=False)

    def _read(self, message: str, password: bool = False, choices: Optional[List[str]] = None) -> str:
        return Prompt.ask(message, console=self.console, password=password, choices=choices)

    def ask(self, message: str) -> str:
        return self._read(message).strip()

    def ask_password(self, message: str) -> str:
        return self._read(message, password=True)

    def choose(self, message: str, options: Sequence[str]) -> int:
        """Show numbered options and return the zero-based index picked."""
        for number, option in enumerate(options, start=1):
            self.console.print(f"  {number}. {option}", style=STYLES["menu"], markup=False)
        choices = [str(number) for number in range(1, len(options) + 1)]
        answer = self._read(message, choices=choices)
        return int(answer) - 1

    def pause(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)
