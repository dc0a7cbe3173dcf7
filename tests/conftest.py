"""
Pytest fixtures for semantic splitter tests.
"""

import asyncio
from typing import Optional

import pytest


SCENARIO_TEXT = "A. B. C. D. E. F. G."


class StubEmbeddings:
    """
    Scripted embeddings: vectors by exact window text, else a default.

    Records every call and the highest number of calls in flight at once.
    """

    def __init__(
        self,
        vectors: Optional[dict[str, list[float]]] = None,
        default: Optional[list[float]] = None,
        error: Optional[Exception] = None,
    ):
        self.vectors = vectors or {}
        self.default = default if default is not None else [1.0, 0.0]
        self.error = error
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def embed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            if self.error is not None:
                raise self.error
            return list(self.vectors.get(text, self.default))
        finally:
            self.in_flight -= 1


@pytest.fixture
def make_embeddings():
    """Factory for StubEmbeddings."""
    return StubEmbeddings


@pytest.fixture
def scenario_embeddings():
    """
    Embeddings for SCENARIO_TEXT with window_size=3.

    Windows 0-3 point the same way; window 4 ("E. F. G.") is orthogonal,
    so the only non-zero distance is the last gap.
    """
    return StubEmbeddings(
        vectors={"E. F. G.": [0.0, 1.0]},
        default=[1.0, 0.0],
    )


@pytest.fixture
def scenario_text():
    return SCENARIO_TEXT
