"""Shared pytest fixtures for nativepath tests."""

import sys
from collections.abc import Iterator

import pytest
from loguru import logger

from nativepath.services.tokens import reset_token_generator
from nativepath.traits import PosixTraits, WindowsTraits


@pytest.fixture
def win() -> WindowsTraits:
    """Traits for Windows-style paths."""
    return WindowsTraits()


@pytest.fixture
def posix() -> PosixTraits:
    """Traits for POSIX-style paths."""
    return PosixTraits()


@pytest.fixture(autouse=True)
def _restore_global_state() -> Iterator[None]:
    """Let package log records through and undo global changes afterwards."""
    logger.enable("nativepath")
    yield
    reset_token_generator()
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
    logger.disable("nativepath")


class FixedTokens:
    """Token source returning predetermined tokens."""

    def __init__(self, *tokens: str) -> None:
        self._tokens = list(tokens)

    def generate(self) -> str:
        return self._tokens.pop(0)


@pytest.fixture
def fixed_tokens() -> type[FixedTokens]:
    """Factory for deterministic token sources."""
    return FixedTokens
