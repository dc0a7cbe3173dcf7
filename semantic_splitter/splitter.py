"""
Semantic Text Splitter - Core splitting logic

Cuts a text where the meaning shifts the most between neighboring groups of
sentences.

Algorithm:
1. Split the text into sentences at the configured delimiters.
2. Build sliding windows of window_size sentences (step of one sentence).
3. Embed every window, one call at a time, in window order.
4. Compute the cosine distance between each pair of adjacent windows.
5. Flag gaps whose distance is strictly above the breakpoint_threshold
   percentile; the gap after window i becomes a cut before sentence i + 1.
6. Join the sentences between cuts and filter chunks below min_chunk_size.

Texts with no more sentences than window_size are returned unchanged as a
single chunk without calling the embeddings.

Usage:
    from semantic_splitter import SemanticTextSplitter, OllamaEmbedder

    splitter = SemanticTextSplitter(OllamaEmbedder(), window_size=3)
    chunks = await splitter.split_text(long_text)
"""

import logging
from typing import Any, Iterable, Optional

from .assembly import build_candidate_chunks, filter_candidates, log_dropped
from .breakpoints import breakpoints_above, percentile_threshold
from .distances import calculate_sequential_distances
from .embedder import Embeddings
from .exceptions import ConfigurationError, EmbeddingDimensionError
from .models import SplitDocument, SplitResult, SplitStats, SplitterConfig
from .sentence_splitter import split_sentences
from .windows import create_sliding_windows

logger = logging.getLogger(__name__)


class SemanticTextSplitter:
    """
    Splits text into semantically coherent chunks using window embeddings.

    Options can be given as a SplitterConfig, as keyword overrides, or both
    (keywords win).
    """

    def __init__(
        self,
        embeddings: Embeddings,
        config: Optional[SplitterConfig] = None,
        **overrides: Any,
    ):
        if embeddings is None:
            raise ConfigurationError("An embeddings implementation is required")
        if not callable(getattr(embeddings, "embed_query", None)):
            raise ConfigurationError(
                "embeddings must provide an async embed_query(text) method",
                details=type(embeddings).__name__,
            )

        self.embeddings = embeddings
        config = config or SplitterConfig()
        if overrides:
            config = SplitterConfig(**{**config.model_dump(), **overrides})
        self.config = config

    async def split_text(self, text: str) -> list[str]:
        """
        Split a text into chunks.

        Args:
            text: The text to split.

        Returns:
            Chunk texts in reading order.
        """
        result = await self.analyze(text)
        return result.chunks

    async def analyze(self, text: str) -> SplitResult:
        """
        Split a text and keep every intermediate of the pipeline.

        Returns:
            SplitResult with sentences, windows, distances, threshold,
            breakpoints, chunks and statistics.
        """
        # Step 1: Split into sentences
        sentences = split_sentences(text, self.config.delimiters)
        if len(sentences) <= self.config.window_size:
            logger.info(
                "Text has %d sentence(s), window size is %d; returning it unsplit",
                len(sentences), self.config.window_size,
            )
            return SplitResult(
                chunks=[text],
                sentences=sentences,
                short_circuited=True,
                stats=self._compute_stats([text], sentences, [], []),
            )

        # Step 2: Create sliding windows of sentences
        windows = create_sliding_windows(sentences, self.config.window_size)

        # Step 3: Embed each window
        embeddings = await self._embed_windows(windows)

        # Step 4: Cosine distances between sequential windows
        distances = calculate_sequential_distances(embeddings)
        logger.debug(
            "%d sentences, %d windows, %d distances",
            len(sentences), len(windows), len(distances),
        )

        # Step 5: Breakpoints above the percentile threshold
        threshold = percentile_threshold(distances, self.config.breakpoint_threshold)
        breakpoints = breakpoints_above(distances, threshold) if threshold is not None else []
        logger.info(
            "Distance threshold %s gives %d breakpoint(s)", threshold, len(breakpoints)
        )

        # Step 6: Chunks from breakpoints
        candidates = build_candidate_chunks(sentences, breakpoints)
        chunks, dropped = filter_candidates(
            candidates, self.config.min_chunk_size, self.config.short_chunk_policy
        )
        log_dropped(dropped, self.config.min_chunk_size)

        return SplitResult(
            chunks=chunks,
            sentences=sentences,
            windows=windows,
            distances=distances,
            threshold=threshold,
            breakpoints=breakpoints,
            stats=self._compute_stats(chunks, sentences, windows, dropped),
        )

    async def create_documents(
        self,
        texts: list[str],
        metadatas: Optional[list[dict[str, Any]]] = None,
    ) -> list[SplitDocument]:
        """
        Split several texts into documents carrying their source metadata.

        Each chunk gets a copy of its text's metadata plus ``chunk_index``
        and ``total_chunks``. Texts are processed one after another.
        """
        if metadatas is not None and len(metadatas) != len(texts):
            raise ValueError(
                f"Got {len(metadatas)} metadata entries for {len(texts)} texts"
            )
        metadatas = metadatas if metadatas is not None else [{} for _ in texts]

        documents: list[SplitDocument] = []
        for text, metadata in zip(texts, metadatas):
            chunks = await self.split_text(text)
            for i, chunk in enumerate(chunks):
                documents.append(SplitDocument(
                    page_content=chunk,
                    metadata={**metadata, "chunk_index": i, "total_chunks": len(chunks)},
                ))
        return documents

    async def split_documents(
        self, documents: Iterable[SplitDocument]
    ) -> list[SplitDocument]:
        """Split existing documents, keeping their metadata on every chunk."""
        documents = list(documents)
        return await self.create_documents(
            [doc.page_content for doc in documents],
            [dict(doc.metadata) for doc in documents],
        )

    # -------------------------------------------------------------------------
    # Internal methods
    # -------------------------------------------------------------------------

    async def _embed_windows(self, windows: list[str]) -> list[list[float]]:
        """
        Embed windows sequentially, in order.

        Errors from the embeddings implementation propagate unchanged.
        """
        embeddings: list[list[float]] = []
        for window in windows:
            embedding = await self.embeddings.embed_query(window)
            if embeddings and len(embedding) != len(embeddings[0]):
                raise EmbeddingDimensionError(
                    expected=len(embeddings[0]),
                    actual=len(embedding),
                    index=len(embeddings),
                )
            embeddings.append(embedding)
        return embeddings

    def _compute_stats(
        self,
        chunks: list[str],
        sentences: list[str],
        windows: list[str],
        dropped: list[str],
    ) -> SplitStats:
        """Compute statistics about the split."""
        stats = SplitStats(
            total_sentences=len(sentences),
            total_windows=len(windows),
            dropped_chars=sum(len(d) for d in dropped),
        )
        if not chunks:
            return stats

        lengths = [len(c) for c in chunks]
        stats.total_chunks = len(chunks)
        stats.total_chars = sum(lengths)
        stats.avg_chunk_chars = sum(lengths) / len(lengths)
        stats.min_chunk_chars = min(lengths)
        stats.max_chunk_chars = max(lengths)
        return stats
