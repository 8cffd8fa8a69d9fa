"""Configuration for projdash."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    data_source: str = "projects.json"
    cache_dir: Path = field(default_factory=lambda: Path.home() / ".cache" / "projdash")
    page_size: int = 10
    http_timeout: float = 30.0

    @property
    def preferences_path(self) -> Path:
        return self.cache_dir / "preferences.json"
