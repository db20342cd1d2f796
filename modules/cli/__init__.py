"""
CLI Module.

Interactive command-line client built with Typer and Rich.

Architecture:
- CLI is a thin presentation layer
- All business logic lives in the backend NoteService
- The shell calls the service in-process

Usage:
    python cli.py --help
    python cli.py shell  # Interactive mode
"""
