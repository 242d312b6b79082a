"""Configuration settings for glossator."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from glossator.translation.translator import DEFAULT_MAX_DEPTH

# Environment overrides
WORKDIR_ENV = "GLOSSATOR_WORKDIR"
MAX_DEPTH_ENV = "GLOSSATOR_MAX_DEPTH"


@dataclass
class Settings:
    """Application settings."""

    # Language project directory
    working_dir: Path = field(default_factory=lambda: Path("."))

    # Files inside the working directory
    lexicon_file: str = "lexicon.csv"
    morphology_file: str = "morphology.yaml"
    generator_file: str = "generators.txt"

    # Translation
    max_depth: int = DEFAULT_MAX_DEPTH
    include_sources: bool = False

    @property
    def lexicon_path(self) -> Path:
        return self.working_dir / self.lexicon_file

    @property
    def morphology_path(self) -> Path:
        return self.working_dir / self.morphology_file

    @property
    def generator_path(self) -> Path:
        return self.working_dir / self.generator_file

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings, applying GLOSSATOR_* environment overrides."""
        environ = os.environ if environ is None else environ
        settings = cls()

        workdir = environ.get(WORKDIR_ENV)
        if workdir:
            settings.working_dir = Path(workdir)

        max_depth = environ.get(MAX_DEPTH_ENV)
        if max_depth:
            try:
                settings.max_depth = int(max_depth)
            except ValueError:
                raise ValueError(
                    f"{MAX_DEPTH_ENV} must be an integer, got {max_depth!r}"
                )

        return settings
