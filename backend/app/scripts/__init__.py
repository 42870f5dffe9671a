"""Operational scripts — run with `python -m app.scripts.<name>`."""
