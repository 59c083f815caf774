from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core import config as core_config  # noqa: E402


@pytest.fixture()
def data_file(tmp_path, monkeypatch):
    """Points FEEDBACK_DATA_FILE at a temp path and resets cached settings."""
    path = tmp_path / "feedback-data.json"
    monkeypatch.setenv("FEEDBACK_DATA_FILE", str(path))
    core_config.get_settings.cache_clear()
    yield path
    core_config.get_settings.cache_clear()
