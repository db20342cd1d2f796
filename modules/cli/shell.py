"""
Interactive Shell Mode.

Menu-driven REPL over a NoteService. The shell only converts raw input
lines into service arguments and renders results; all note logic lives
in the service.

Input conversion:
    - blank title line  -> None (rejected by the service), when
      shell.blank_title_is_absent is set in application.yaml
    - blank body line   -> "" (valid empty text)
    - blank search line -> None (lists every note)
"""

from collections.abc import Callable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from modules.backend.core.exceptions import ApplicationError
from modules.backend.core.logging import get_logger, log_with_source
from modules.backend.core.utils import is_blank
from modules.backend.models.note import Note
from modules.backend.schemas.note import NoteExport, NoteResponse
from modules.backend.services.note import NoteService

logger = get_logger(__name__)


class NoteShell:
    """
    Interactive shell for note commands.

    Usage:
        shell = NoteShell(build_note_service())
        shell.run()
    """

    def __init__(
        self,
        service: NoteService,
        console: Console | None = None,
        blank_title_is_absent: bool = True,
    ) -> None:
        self.service = service
        self.console = console or Console()
        self.blank_title_is_absent = blank_title_is_absent
        self.running = False

        self.menu: list[tuple[str, str, str, Callable[[], None]]] = [
            ("1", "list", "List notes", self._cmd_list),
            ("2", "create", "Create a new note", self._cmd_create),
            ("3", "update", "Update a note", self._cmd_update),
            ("4", "delete", "Delete a note", self._cmd_delete),
            ("5", "search", "Search notes", self._cmd_search),
            ("6", "show", "Show a note by ID", self._cmd_show),
            ("7", "export", "Export all notes as JSON", self._cmd_export),
            ("0", "quit", "Exit", self._cmd_quit),
        ]
        self.commands: dict[str, Callable[[], None]] = {}
        for number, name, _, handler in self.menu:
            self.commands[number] = handler
            self.commands[name] = handler
        self.commands["exit"] = self._cmd_quit

    def run(self) -> None:
        """Run the menu loop until quit or end of input."""
        self.running = True
        log_with_source(logger, "shell", "info", "Shell started", notes=self.service.count())

        self.console.print(Panel(
            "[bold]Notes[/bold]\n"
            "Pick an option by number or name.",
            title="Welcome",
        ))

        while self.running:
            self._print_menu()
            try:
                choice = self.console.input("Choose: ").strip().lower()
                handler = self.commands.get(choice)
                if handler is None:
                    self.console.print("[red]Invalid option![/red]")
                    continue
                handler()
            except ApplicationError as e:
                log_with_source(logger, "shell", "warning", "Operation rejected", code=e.code)
                self.console.print(f"[red]Error: {escape(e.message)}[/red]")
            except KeyboardInterrupt:
                self.console.print("\n[dim]Use 'quit' to exit[/dim]")
            except EOFError:
                break

        self.console.print("[dim]Goodbye![/dim]")

    def _print_menu(self) -> None:
        table = Table(title="Menu", show_header=False)
        table.add_column("Option", style="cyan")
        table.add_column("Command")
        table.add_column("Description")
        for number, name, description, _ in self.menu:
            table.add_row(number, name, description)
        self.console.print(table)

    def _print_notes(self, notes: list[Note]) -> None:
        if not notes:
            self.console.print("No notes found.")
            return
        for note in notes:
            self._print_note(note)

    def _print_note(self, note: Note) -> None:
        self.console.print(Panel(Text(note.render()), expand=False))

    def _read_title(self, prompt: str) -> str | None:
        title = self.console.input(prompt)
        if self.blank_title_is_absent and is_blank(title):
            return None
        return title

    def _cmd_list(self) -> None:
        self._print_notes(self.service.list_all())

    def _cmd_create(self) -> None:
        title = self._read_title("Title: ")
        body = self.console.input("Body: ")
        note = self.service.create(title, body)
        self.console.print(f"[green]Note created with ID: {note.id}[/green]")

    def _cmd_update(self) -> None:
        note_id = self.console.input("Note ID: ").strip()
        title = self._read_title("New title: ")
        body = self.console.input("New body: ")
        if self.service.update(note_id, title, body):
            self.console.print("[green]Note updated![/green]")
        else:
            self.console.print("[yellow]Note not found![/yellow]")

    def _cmd_delete(self) -> None:
        note_id = self.console.input("Note ID: ").strip()
        if self.service.delete(note_id):
            self.console.print("[green]Note deleted![/green]")
        else:
            self.console.print("[yellow]Note not found![/yellow]")

    def _cmd_search(self) -> None:
        query = self.console.input("Search: ")
        self._print_notes(self.service.search(None if is_blank(query) else query))

    def _cmd_show(self) -> None:
        note = self.service.find_by_id(self.console.input("Note ID: ").strip())
        if note is None:
            self.console.print("[yellow]Note not found![/yellow]")
        else:
            self._print_note(note)

    def _cmd_export(self) -> None:
        notes = self.service.list_all()
        export = NoteExport(
            count=len(notes),
            notes=[NoteResponse.model_validate(note) for note in notes],
        )
        self.console.print_json(export.model_dump_json())

    def _cmd_quit(self) -> None:
        self.running = False
