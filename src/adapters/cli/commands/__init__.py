"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.title_commands import (
    display_title,
    fetch,
    verify,
)

__all__ = [
    "display_title",
    "fetch",
    "verify",
]
