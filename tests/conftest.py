from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def clear_config_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CLI tests independent of separator overrides in the environment."""

    monkeypatch.delenv("CMAKEPLATE_LIST_SEPARATOR", raising=False)
    monkeypatch.delenv("CMAKEPLATE_INTERFACE_MARKERS", raising=False)
