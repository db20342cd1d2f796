"""
CLI Commands.

Organized by domain/feature area.
"""

from modules.cli.commands.system import app as system_app

__all__ = [
    "system_app",
]
