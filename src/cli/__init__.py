"""Typer/Rich command line layer."""
