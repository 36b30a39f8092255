"""CLI layer: typer commands and the error boundary."""
