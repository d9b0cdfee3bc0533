"""
Interactive prompts backed by ``rich.prompt``.

The workflow only talks to a ``Prompter``; tests substitute a scripted one.
"""

from typing import List, Optional, Sequence, Tuple, TypeVar

from rich.console import Console
from rich.prompt import Confirm, Prompt

T = TypeVar("T")
Choice = Tuple[str, T]


def parse_indices(answer: str, count: int) -> List[int]:
    """
    Parse ``"1,3,5-7"`` or ``"all"`` into zero-based indices, in first-seen order.

    Raises:
        ValueError: On anything that is not a valid number or range within 1..count.
    """
    answer = answer.strip().lower()
    if answer in ("all", "*"):
        return list(range(count))

    indices: List[int] = []
    for part in answer.replace(" ", ",").split(","):
        if not part:
            continue
        if "-" in part:
            start_s, _, end_s = part.partition("-")
            start, end = int(start_s), int(end_s)
            if start > end:
                raise ValueError(f"invalid range {part!r}")
            numbers = range(start, end + 1)
        else:
            numbers = [int(part)]
        for n in numbers:
            if not 1 <= n <= count:
                raise ValueError(f"{n} is out of range (1-{count})")
            if n - 1 not in indices:
                indices.append(n - 1)
    return indices


class Prompter:
    """Console prompts: single choice, multi choice, free text and yes/no."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _print_choices(self, message: str, choices: Sequence[Choice]) -> None:
        self.console.print(f"[bold]{message}[/bold]")
        for i, (label, _) in enumerate(choices, start=1):
            self.console.print(f"  [cyan]{i:>3}[/cyan]  {label}")

    def choose(self, message: str, choices: Sequence[Choice]) -> T:
        self._print_choices(message, choices)
        numbers = [str(i) for i in range(1, len(choices) + 1)]
        answer = Prompt.ask("Choice", choices=numbers, default="1", console=self.console)
        return choices[int(answer) - 1][1]

    def choose_many(self, message: str, choices: Sequence[Choice], empty_error: str) -> List[T]:
        self._print_choices(message, choices)
        while True:
            answer = Prompt.ask("Numbers (e.g. 1,3,5-7 or all)", default="", show_default=False,
                                console=self.console)
            try:
                indices = parse_indices(answer, len(choices))
            except ValueError as e:
                self.console.print(f"[red]{e}[/red]")
                continue
            if not indices:
                self.console.print(f"[red]{empty_error}[/red]")
                continue
            return [choices[i][1] for i in indices]

    def ask_text(self, message: str, default: str = "") -> str:
        return Prompt.ask(message, default=default, console=self.console)

    def confirm(self, message: str, default: bool = True) -> bool:
        return Confirm.ask(message, default=default, console=self.console)
