#!/usr/bin/env python3
"""
Interactive settings shell - manage categories and branches from the console.

Talks to the settings API configured in .env (SETTINGS_API_URL,
SETTINGS_API_TOKEN) unless overridden on the command line.

Usage:
    python scripts/settings_shell.py [--url URL] [--token TOKEN] [--role ROLE]

Type 'help' inside the shell for the list of commands.
"""
import argparse
import asyncio
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from settings_admin.container import get_container, set_container
from settings_admin.errors import AccessDenied
from settings_admin.forms.base import FormSession
from settings_admin.repositories.http.factory import create_http_container
from settings_admin.screen import SettingsScreen
from settings_admin.ui.notifier import ConsoleNotifier, console_confirm

console = Console()

HELP = """
Commands:
  list                      Show categories and branches
  reload                    Fetch both collections again
  add-category              Create a category
  edit-category ID          Edit a category
  delete-category ID        Delete a category
  toggle-category ID        Activate / deactivate a category
  add-branch                Create a branch
  edit-branch ID            Edit a branch
  delete-branch ID          Delete a branch
  toggle-branch ID          Activate / deactivate a branch
  help                      Show this help
  quit                      Exit
"""


def _status(is_active: bool) -> str:
    return "[green]Active[/green]" if is_active else "[dim]Inactive[/dim]"


def render(screen: SettingsScreen) -> None:
    categories = Table(title=f"Categories ({len(screen.categories)})")
    for column in ("ID", "Name", "Label", "Value", "Description", "Status"):
        categories.add_column(column)
    for c in screen.categories:
        categories.add_row(
            escape(c.id),
            escape(c.name),
            escape(c.display_label),
            escape(c.value),
            escape(c.description or ""),
            _status(c.is_active),
        )

    branches = Table(title=f"Branches ({len(screen.branches)})")
    for column in ("ID", "Name", "Address", "Phone", "Email", "Status"):
        branches.add_column(column)
    for b in screen.branches:
        branches.add_row(
            escape(b.id),
            escape(b.name),
            escape(b.address or ""),
            escape(b.phone or ""),
            escape(b.email or ""),
            _status(b.is_active),
        )

    console.print(categories)
    console.print(branches)


async def fill_and_submit(form: FormSession) -> None:
    """Prompts for every draft field, then submits until it succeeds or the user gives up."""
    while True:
        for field in form.draft_cls.model_fields:
            current = getattr(form.draft, field)
            value = await asyncio.to_thread(Prompt.ask, f"  {field}", default=current)
            form.set_field(field, value)
        result = await form.submit()
        if result.ok or result.status == "rejected":
            return
        if not await asyncio.to_thread(console_confirm, "Edit the draft and try again?"):
            form.cancel()
            return


async def run_shell(screen: SettingsScreen) -> None:
    render(screen)
    console.print("\nType 'help' for the list of commands.")

    while True:
        try:
            line = (await asyncio.to_thread(input, "\nsettings> ")).strip()
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not line:
            continue

        command, _, arg = line.partition(" ")
        arg = arg.strip()
        command = command.lower()

        if command in ("quit", "exit"):
            break
        if command == "help":
            console.print(HELP)
        elif command == "list":
            render(screen)
        elif command == "reload":
            await screen.load()
            render(screen)
        elif command == "add-category":
            screen.category_form.open_create()
            await fill_and_submit(screen.category_form)
        elif command == "add-branch":
            screen.branch_form.open_create()
            await fill_and_submit(screen.branch_form)
        elif command in ("edit-category", "edit-branch"):
            synchronizer = screen.categories if command == "edit-category" else screen.branches
            form = screen.category_form if command == "edit-category" else screen.branch_form
            entity = synchronizer.find(arg)
            if entity is None:
                console.print(f"[red]No entry with id {arg!r}[/red]")
                continue
            form.open_edit(entity)
            await fill_and_submit(form)
        elif command == "delete-category":
            await screen.delete_category(arg)
        elif command == "delete-branch":
            await screen.delete_branch(arg)
        elif command == "toggle-category":
            await screen.toggle_category_status(arg)
        elif command == "toggle-branch":
            await screen.toggle_branch_status(arg)
        else:
            console.print(f"[red]Unknown command: {command}[/red] (type 'help')")


async def amain(args: argparse.Namespace) -> int:
    set_container(create_http_container(base_url=args.url, token=args.token))
    container = get_container()
    screen = SettingsScreen(container, ConsoleNotifier(console), console_confirm)
    try:
        try:
            with console.status("Loading settings..."):
                await screen.mount(args.role)
        except AccessDenied as e:
            console.print(f"[red]{e}[/red]")
            return 1
        await run_shell(screen)
    finally:
        await container.aclose()
    return 0


def main():
    parser = argparse.ArgumentParser(description="Manage categories and branches")
    parser.add_argument("--url", help="Settings API base URL (default: SETTINGS_API_URL)")
    parser.add_argument("--token", help="Bearer token (default: SETTINGS_API_TOKEN)")
    parser.add_argument(
        "--role",
        default=os.getenv("SETTINGS_ROLE", "admin"),
        help="Role of the current user; only 'admin' may open the settings",
    )
    args = parser.parse_args()
    sys.exit(asyncio.run(amain(args)))


if __name__ == "__main__":
    main()
