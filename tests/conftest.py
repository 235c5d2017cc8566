"""Shared fixtures: a raw upstream payload, a fake clock, and an offline engine."""

import copy
from unittest.mock import AsyncMock

import pytest

from tekken_framedata.core.cache import TTLCache
from tekken_framedata.core.engine import FrameDataEngine
from tests.factories import MOVES, FakeClock


@pytest.fixture
def payload():
    """Raw upstream document for one character."""
    return {"framesNormal": copy.deepcopy(MOVES)}


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fetcher(payload):
    return AsyncMock(return_value=payload)


@pytest.fixture
def engine(fetcher, clock):
    return FrameDataEngine(fetcher=fetcher, cache=TTLCache(clock=clock))
