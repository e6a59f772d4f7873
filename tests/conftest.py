"""Test configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from cooknote.config import reset_config

SMOOTHIE = """>> servings: 2
>> source: https://cooklang.org

Blend @frozen mixed berries{1,5%cups}, @banana and @milk{250%ml} in a #blender{}.
-- taste before serving
Pour into #glasses{2} and rest for ~{1%minute}.

[- optional -]
Top with @mint leaves{a few}.

[fruit]
banana
frozen mixed berries|berries

[dairy]
milk
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def smoothie_source():
    """Recipe text exercising every part of the notation."""
    return SMOOTHIE


@pytest.fixture
def sample_cook_file(temp_dir):
    """Create a sample .cook file."""
    path = temp_dir / "Mixed Berry Smoothie.cook"
    path.write_text(SMOOTHIE, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_globals(monkeypatch, temp_dir):
    """Keep tests independent of user config files and env vars."""
    monkeypatch.chdir(temp_dir)
    monkeypatch.setenv("HOME", str(temp_dir))
    for var in ("COOKNOTE_IMAGE_EXTENSION", "COOKNOTE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()
