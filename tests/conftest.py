"""
Pytest configuration and shared fixtures for the cjsengine tests.

Every engine fixture is function-scoped: engines own their module cache, and
tests assert on exactly what one engine has loaded.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from cjsengine import CJSEngine, EngineOptions


@pytest.fixture
def engine(tmp_path):
    """Engine whose base path is the test's temporary directory."""
    return CJSEngine(options=EngineOptions(base_path=str(tmp_path)))


@pytest.fixture
def no_color(monkeypatch):
    """Plain diagnostics regardless of the terminal."""
    monkeypatch.setenv("NO_COLOR", "1")
