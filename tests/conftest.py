"""Shared test fixtures."""

from pathlib import Path

import pytest

from criteria.reader import read_games


DATA_DIR = Path(__file__).resolve().parent.parent / 'data'


@pytest.fixture(scope='session')
def data_dir() -> Path:
    """Path to the data directory."""
    return DATA_DIR


@pytest.fixture(scope='session')
def sample_games():
    """All games from sample.pgn."""
    return list(read_games(DATA_DIR / 'sample.pgn'))
