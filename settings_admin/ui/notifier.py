"""Notification and confirmation seams used by the settings core."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

Confirmer = Callable[[str], bool]


class Notifier(ABC):
    """Transient user-visible notifications (toasts)."""

    @abstractmethod
    def success(self, message: str) -> None:
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        pass


class ConsoleNotifier(Notifier):
    """Prints notifications to a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def success(self, message: str) -> None:
        self.console.print(f"[green]✔[/green] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✖[/red] {escape(message)}")


def console_confirm(message: str) -> bool:
    """Blocking yes/no prompt; defaults to no."""
    return Confirm.ask(message, default=False)
