"""Shared fixtures keeping the process-wide dictionary and settings isolated per test."""

import os
from pathlib import Path

import pytest
from loguru import logger

from step_dict import dictionary
from step_dict.config import get_settings
from step_dict.dictionary import DictionaryTable

# Captured before the isolation fixture clears the environment.
REAL_WORD_LIST = os.environ.get("STEP_DICT_WORD_LIST")

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SMALL_WORDS = ["apple", "banana", "cherry", "date", "elder", "fig", "grape"]


@pytest.fixture(autouse=True)
def isolate_dictionary(monkeypatch):
    """Start every test with no table loaded and no word list configured."""
    monkeypatch.delenv("STEP_DICT_WORD_LIST", raising=False)
    monkeypatch.delenv("STEP_DICT_LOG_LEVEL", raising=False)
    monkeypatch.setattr(dictionary, "_dictionary", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger.remove()


@pytest.fixture
def small_table(monkeypatch):
    """Install a seven-word table as the process-wide dictionary."""
    table = DictionaryTable(SMALL_WORDS, source="small")
    monkeypatch.setattr(dictionary, "_dictionary", table)
    return table


@pytest.fixture
def bundled_table():
    """Load the bundled word list as the process-wide dictionary."""
    return dictionary.get_dictionary()
