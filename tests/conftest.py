"""Shared test fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from numpy.random import MT19937, Generator

from particlemc.core.rng import RandomVariateService
from particlemc.utils.logging_utils import LOGGER_NAME


@pytest.fixture
def rng() -> Generator:
    """Deterministic RNG for tests."""
    return Generator(MT19937(42))


@pytest.fixture
def service() -> RandomVariateService:
    """Service seeded with 42."""
    return RandomVariateService(42)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo any handler the CLI installs so tests stay independent."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
