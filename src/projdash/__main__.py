"""Entry point for ``python -m projdash``."""

from projdash.cli import app

app()
