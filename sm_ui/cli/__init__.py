"""Typer CLI for searchable-multiselect."""

from sm_ui.cli.commands import app, main

__all__ = ["app", "main"]
