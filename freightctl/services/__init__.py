"""Service layer: command logic independent of the CLI framework."""
