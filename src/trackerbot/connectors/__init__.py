"""User-facing I/O shells (console)."""
