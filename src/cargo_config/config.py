# src/cargo_config/config.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

APP_NAME = "cargo-config"
CURRENT_FILE_NAME = "cargo-config-current"
ACTIVE_FILE_NAME = "config.toml"
PROFILE_SUFFIX = ".toml"


def resolve_home() -> Path:
    try:
        return Path.home()
    except (KeyError, RuntimeError) as e:
        raise RuntimeError("Cargo directory could not be found") from e


@dataclass(frozen=True)
class CargoPaths:
    """The two directories every operation works against."""

    cargo_dir: Path
    profile_dir: Path

    @classmethod
    def from_home(cls, home: Path | None = None) -> "CargoPaths":
        base = (home if home is not None else resolve_home()) / ".cargo"
        return cls(cargo_dir=base, profile_dir=base / APP_NAME)

    @property
    def current_file(self) -> Path:
        return self.profile_dir / CURRENT_FILE_NAME

    @property
    def active_link(self) -> Path:
        return self.cargo_dir / ACTIVE_FILE_NAME

    def profile_path(self, name: str) -> Path:
        return self.profile_dir / f"{name}{PROFILE_SUFFIX}"
