"""
Application Modules.

- backend/: Note entity, in-memory store, service, configuration, logging
- cli/: Interactive CLI client (Typer + Rich)
"""
