"""Data access: project sources and the persisted filter preference."""
