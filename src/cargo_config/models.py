# src/cargo_config/models.py
from __future__ import annotations
from dataclasses import dataclass
from typing import TypedDict

class ProfileEntryDict(TypedDict):
    name: str
    active: bool

@dataclass
class ProfileEntry:
    name: str
    active: bool = False

    def to_dict(self) -> ProfileEntryDict:
        return {
            "name": self.name,
            "active": self.active,
        }
