"""Typer command line interface for Mirror Relay."""
