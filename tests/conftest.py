"""Shared fixtures for translator tests."""

import pytest

from morsetranslator.codec import MorseCodec
from morsetranslator.utils.config_manager import ConfigManager


@pytest.fixture
def codec():
    return MorseCodec()


@pytest.fixture
def strict_codec():
    return MorseCodec(strict=True)


@pytest.fixture
def config_manager(tmp_path):
    return ConfigManager(db_dir=str(tmp_path / "config"))
