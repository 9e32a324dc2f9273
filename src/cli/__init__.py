"""Command line layer (typer + Rich)."""
