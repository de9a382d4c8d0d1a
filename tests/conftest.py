import sys
from pathlib import Path

import pytest

# Ensure package is importable when running tests from repo root
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Point HOME (and the log dir) at a throwaway directory with an empty ~/.cargo."""
    h = tmp_path / "home"
    (h / ".cargo").mkdir(parents=True)
    monkeypatch.setenv("HOME", str(h))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    return h
