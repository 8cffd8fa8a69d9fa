"""PySide6 desktop surface for the project dashboard."""
