"""
Anwendungskonfiguration.

Werte kommen aus (schwächste zuerst):
- Defaults
- Umgebungsvariablen HOCHSCHUL_DATA_DIR / HOCHSCHUL_LOG_LEVEL
- Kommandozeile (siehe main.py)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping, Optional

ENV_DATA_DIR = "HOCHSCHUL_DATA_DIR"
ENV_LOG_LEVEL = "HOCHSCHUL_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Konfigurationswerte der Anwendung."""

    # Standard: aktuelles Arbeitsverzeichnis
    data_dir: Path = field(default_factory=Path.cwd)
    students_file: str = "Students.txt"
    teachers_file: str = "Teachers.txt"
    log_level: str = "WARNING"

    @property
    def students_path(self) -> Path:
        return self.data_dir / self.students_file

    @property
    def teachers_path(self) -> Path:
        return self.data_dir / self.teachers_file

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Liest die Konfiguration aus Umgebungsvariablen."""
        env = os.environ if env is None else env
        cfg = cls()

        data_dir = env.get(ENV_DATA_DIR, "").strip()
        if data_dir:
            cfg = replace(cfg, data_dir=Path(data_dir).expanduser())

        log_level = env.get(ENV_LOG_LEVEL, "").strip()
        if log_level:
            cfg = replace(cfg, log_level=log_level.upper())

        return cfg

    def mit_overrides(
        self,
        data_dir: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> "AppConfig":
        """Überschreibt Werte, die von der Kommandozeile gesetzt wurden."""
        cfg = self
        if data_dir:
            cfg = replace(cfg, data_dir=Path(data_dir).expanduser())
        if log_level:
            cfg = replace(cfg, log_level=log_level.upper())
        return cfg
