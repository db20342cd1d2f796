"""
Unit Tests for the Interactive Shell.

Drives NoteShell with scripted input and checks the rendered output
and the resulting service state.
"""

import json

import pytest

from modules.cli.shell import NoteShell


@pytest.fixture
def shell(note_service, console):
    return NoteShell(note_service, console=console)


def output(shell: NoteShell) -> str:
    return shell.console.file.getvalue()


class TestShellLoop:
    """Tests for menu dispatch and exit handling."""

    def test_quit_prints_goodbye(self, shell, feed_input):
        feed_input(["0"])

        shell.run()

        assert "Goodbye!" in output(shell)
        assert shell.running is False

    def test_end_of_input_exits(self, shell, feed_input):
        """Should stop cleanly when stdin is closed."""
        feed_input([])

        shell.run()

        assert "Goodbye!" in output(shell)

    def test_invalid_option(self, shell, feed_input):
        feed_input(["9", "0"])

        shell.run()

        assert "Invalid option!" in output(shell)

    def test_menu_lists_commands(self, shell, feed_input):
        feed_input(["quit"])

        shell.run()

        text = output(shell)
        for name in ("list", "create", "update", "delete", "search", "show", "export", "quit"):
            assert name in text

    @pytest.mark.parametrize("choice", ["1", "list", "LIST", " 1 "])
    def test_options_by_number_or_name(self, shell, feed_input, choice):
        feed_input([choice, "exit"])

        shell.run()

        assert "No notes found." in output(shell)


class TestShellCommands:
    """Tests for individual menu commands."""

    def test_list_renders_notes(self, shell, note_service, feed_input):
        note_service.create("Welcome", "Hello there")
        feed_input(["1", "0"])

        shell.run()

        text = output(shell)
        assert "ID: note-1" in text
        assert "Title: Welcome" in text
        assert "Body: Hello there" in text
        assert "Created at: 2024-01-01T12:00:00" in text

    def test_create(self, shell, note_service, feed_input):
        feed_input(["2", "My title", "My body", "0"])

        shell.run()

        assert "Note created with ID: note-1" in output(shell)
        note = note_service.find_by_id("note-1")
        assert note.title == "My title"
        assert note.body == "My body"

    def test_create_blank_title_is_rejected(self, shell, note_service, feed_input):
        """Should report the error and keep running."""
        feed_input(["2", "   ", "body", "1", "0"])

        shell.run()

        text = output(shell)
        assert "Error: title is required" in text
        assert "No notes found." in text
        assert note_service.count() == 0

    def test_create_blank_body_is_kept(self, shell, note_service, feed_input):
        feed_input(["2", "Title", "", "0"])

        shell.run()

        assert note_service.find_by_id("note-1").body == ""

    def test_blank_title_allowed_when_configured(self, note_service, console, feed_input):
        shell = NoteShell(note_service, console=console, blank_title_is_absent=False)
        feed_input(["2", "", "body", "0"])

        shell.run()

        assert note_service.find_by_id("note-1").title == ""

    def test_update(self, shell, note_service, feed_input):
        note = note_service.create("Old", "Old body")
        feed_input(["3", note.id, "New", "New body", "0"])

        shell.run()

        assert "Note updated!" in output(shell)
        assert note.title == "New"
        assert note.body == "New body"

    def test_update_unknown(self, shell, feed_input):
        feed_input(["3", "missing", "New", "New body", "0"])

        shell.run()

        assert "Note not found!" in output(shell)

    def test_update_blank_title_leaves_note(self, shell, note_service, feed_input):
        note = note_service.create("Old", "Old body")
        feed_input(["3", note.id, "", "New body", "0"])

        shell.run()

        assert "Error:" in output(shell)
        assert note.title == "Old"
        assert note.body == "Old body"

    def test_delete(self, shell, note_service, feed_input):
        note = note_service.create("Doomed", "x")
        feed_input(["4", f"  {note.id}  ", "0"])

        shell.run()

        assert "Note deleted!" in output(shell)
        assert note_service.count() == 0

    def test_delete_unknown(self, shell, feed_input):
        feed_input(["4", "missing", "0"])

        shell.run()

        assert "Note not found!" in output(shell)

    def test_search(self, shell, note_service, feed_input):
        note_service.create("Hello World", "x")
        note_service.create("Other", "y")
        feed_input(["5", "hello", "0"])

        shell.run()

        text = output(shell)
        assert "Title: Hello World" in text
        assert "Title: Other" not in text

    def test_blank_search_lists_everything(self, shell, note_service, feed_input):
        note_service.create("First", "x")
        note_service.create("Second", "y")
        feed_input(["5", "", "0"])

        shell.run()

        text = output(shell)
        assert "Title: First" in text
        assert "Title: Second" in text

    def test_search_without_match(self, shell, note_service, feed_input):
        note_service.create("First", "x")
        feed_input(["5", "zebra", "0"])

        shell.run()

        assert "No notes found." in output(shell)

    def test_show(self, shell, note_service, feed_input):
        note_service.create("First", "x")
        feed_input(["6", "note-1", "0"])

        shell.run()

        assert "Title: First" in output(shell)

    def test_show_unknown(self, shell, feed_input):
        feed_input(["6", "missing", "0"])

        shell.run()

        assert "Note not found!" in output(shell)

    def test_export_json(self, shell, note_service):
        note_service.create("First", "x")
        note_service.create("Second", "y")

        shell._cmd_export()

        payload = json.loads(output(shell))
        assert payload["count"] == 2
        assert [n["title"] for n in payload["notes"]] == ["First", "Second"]
        assert payload["notes"][0]["id"] == "note-1"
        assert payload["notes"][0]["created_at"] == "2024-01-01T12:00:00"

    def test_titles_with_markup_are_printed_verbatim(self, shell, note_service, feed_input):
        note_service.create("[bold]not markup[/bold]", "x")
        feed_input(["1", "0"])

        shell.run()

        assert "Title: [bold]not markup[/bold]" in output(shell)
