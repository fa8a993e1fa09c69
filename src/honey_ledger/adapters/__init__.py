"""Entry-point adapters (CLI and UI)."""
