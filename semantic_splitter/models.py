"""
Data Models for the Semantic Splitter

Defines:
1. SplitterConfig - Threshold, delimiters, window size and chunk filtering
2. SplitStats - Size statistics of one split
3. SplitResult - Chunks plus every intermediate of the pipeline
4. SplitDocument - A chunk of text with metadata (document splitting)
5. SplitRequest / SplitResponse - HTTP service payloads

Design Principles:
- Pydantic v2 for validation and serialization
- Invalid options fail at construction, before any embedding call
- Intermediates are kept on SplitResult for inspection and tuning

Usage:
    config = SplitterConfig(window_size=2, min_chunk_size=50)
    result = await SemanticTextSplitter(embeddings, config).analyze(text)
    print(result.breakpoints, result.stats.total_chunks)
"""

import json
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ShortChunkPolicy = Literal["drop", "merge"]

DEFAULT_DELIMITERS = [".", "!", "?"]


class SplitterConfig(BaseModel):
    """
    Configuration for the semantic splitting pipeline.

    Defaults match the common case of English prose split at sentence
    punctuation with a 95th-percentile cut.
    """
    model_config = ConfigDict(extra="forbid")

    breakpoint_threshold: float = Field(
        0.95,
        description="Percentile (0-1) of the distance distribution used as the cut threshold",
        ge=0.0,
        le=1.0,
    )
    delimiters: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DELIMITERS),
        description="Characters that terminate a sentence",
        min_length=1,
    )
    min_chunk_size: int = Field(
        100,
        description="Minimum character length for a chunk to be kept",
        ge=0,
    )
    window_size: int = Field(
        3,
        description="Number of sentences per sliding window",
        ge=1,
    )
    short_chunk_policy: ShortChunkPolicy = Field(
        "drop",
        description="What happens to chunks below min_chunk_size: 'drop' or 'merge' into a neighbor",
    )

    @field_validator("delimiters")
    @classmethod
    def _single_characters(cls, value: list[str]) -> list[str]:
        for delimiter in value:
            if len(delimiter) != 1:
                raise ValueError(
                    f"delimiters must be single characters, got {delimiter!r}"
                )
        return value


class SplitStats(BaseModel):
    """Statistics about one split."""
    total_sentences: int = 0
    total_windows: int = 0
    total_chunks: int = 0
    total_chars: int = 0
    avg_chunk_chars: float = 0.0
    min_chunk_chars: int = 0
    max_chunk_chars: int = 0
    dropped_chars: int = Field(
        0,
        description="Characters of candidate chunks that are not part of the output",
    )


class SplitResult(BaseModel):
    """
    Complete result of splitting one text.

    Carries the chunks together with the sentences, windows, distances,
    threshold and breakpoints that produced them.
    """
    chunks: list[str] = Field(default_factory=list)
    sentences: list[str] = Field(default_factory=list)
    windows: list[str] = Field(default_factory=list)
    distances: list[float] = Field(default_factory=list)
    threshold: Optional[float] = Field(
        None,
        description="Distance threshold; None when the text was not split",
    )
    breakpoints: list[int] = Field(default_factory=list)
    short_circuited: bool = Field(
        False,
        description="True when the text had too few sentences to compare windows",
    )
    stats: SplitStats = Field(default_factory=SplitStats)

    @property
    def total_chunks(self) -> int:
        return len(self.chunks)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)


class SplitDocument(BaseModel):
    """A chunk of text with the metadata of the document it came from."""
    page_content: str
    metadata: dict[str, Any] = Field(default_factory=dict)


class SplitRequest(BaseModel):
    text: str = Field(..., min_length=1)
    breakpoint_threshold: Optional[float] = None
    delimiters: Optional[list[str]] = None
    min_chunk_size: Optional[int] = None
    window_size: Optional[int] = None
    short_chunk_policy: Optional[ShortChunkPolicy] = None

    def config_overrides(self) -> dict[str, Any]:
        return self.model_dump(exclude={"text"}, exclude_none=True)


class SplitResponse(BaseModel):
    chunks: list[str]
    total_chunks: int
    breakpoints: list[int]
    stats: SplitStats
