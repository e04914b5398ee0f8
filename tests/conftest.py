"""
Shared fixtures: deterministic dice and a throwaway attribute store.
"""

import os

# No rotating log file while testing; must be set before the logger is first used.
os.environ["TRPG_LOG_FILE"] = ""

import pytest

from models.database import AttributeDB
from utils.config import GuildConfig
from utils.dice import ExpressionEvaluator


class ScriptedRng:
    """Stands in for random.Random; hands out queued die faces in order."""

    def __init__(self, values=None):
        self.values = list(values or [])
        self.calls = []

    def push(self, *values):
        self.values.extend(values)

    def randint(self, a, b):
        if not self.values:
            raise AssertionError(f"unexpected die roll 1..{b}")
        value = self.values.pop(0)
        assert a <= value <= b, f"scripted face {value} outside {a}..{b}"
        self.calls.append((a, b))
        return value


@pytest.fixture
def rng():
    return ScriptedRng()


@pytest.fixture
def evaluator(rng):
    return ExpressionEvaluator(rng=rng)


@pytest.fixture
def db(tmp_path):
    return AttributeDB(db_path=str(tmp_path / "attributes.db"))


@pytest.fixture
def view(db):
    return db.view(1, 100)


@pytest.fixture
def rules():
    return GuildConfig()
