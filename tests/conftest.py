from __future__ import annotations

import logging
from typing import Iterator

import pytest

from tarloc.languages import LanguageClassifier, LineCounter, discover_languages
from tests._fixtures.tar_builder import TarBuilder


@pytest.fixture
def tar_builder() -> TarBuilder:
    """Provide a fresh in-memory tar builder."""
    return TarBuilder()


@pytest.fixture
def classifier() -> LanguageClassifier:
    return LanguageClassifier(discover_languages())


@pytest.fixture
def counter() -> LineCounter:
    return LineCounter(discover_languages())


@pytest.fixture(autouse=True)
def _reset_tarloc_logger() -> Iterator[None]:
    """Drop handlers bound to per-test capture streams."""
    yield
    logger = logging.getLogger("tarloc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
