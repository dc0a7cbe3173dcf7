"""
Chunk Assembly - Slice sentences at breakpoints and filter short chunks

Every sentence lands in exactly one candidate chunk, in order. Candidates
shorter than min_chunk_size are then handled by the short-chunk policy:

- "drop": the candidate is discarded and its sentences are not returned.
- "merge": the candidate is carried into the next candidate; a short tail
  is appended to the previous kept chunk (or dropped if none was kept).

Either way every returned chunk is at least min_chunk_size characters.
"""

import logging

from .models import ShortChunkPolicy

logger = logging.getLogger(__name__)


def build_candidate_chunks(sentences: list[str], breakpoints: list[int]) -> list[str]:
    """Join the sentences between consecutive breakpoints, before any filtering."""
    candidates = []
    start_index = 0
    for breakpoint in breakpoints:
        candidates.append(" ".join(sentences[start_index:breakpoint]))
        start_index = breakpoint
    candidates.append(" ".join(sentences[start_index:]))
    return candidates


def filter_candidates(
    candidates: list[str],
    min_chunk_size: int,
    policy: ShortChunkPolicy = "drop",
) -> tuple[list[str], list[str]]:
    """
    Apply the short-chunk policy.

    Returns:
        Tuple of (chunks, dropped) where dropped holds the text that did not
        make it into any chunk.
    """
    if policy == "drop":
        chunks = [c for c in candidates if len(c) >= min_chunk_size]
        dropped = [c for c in candidates if len(c) < min_chunk_size]
        return chunks, dropped

    if policy != "merge":
        raise ValueError(f"Unknown short chunk policy: {policy!r}")

    chunks: list[str] = []
    pending = ""
    for candidate in candidates:
        if pending:
            candidate = f"{pending} {candidate}" if candidate else pending
        if len(candidate) >= min_chunk_size:
            chunks.append(candidate)
            pending = ""
        else:
            pending = candidate

    if not pending:
        return chunks, []
    if chunks:
        chunks[-1] = f"{chunks[-1]} {pending}"
        return chunks, []
    return chunks, [pending]


def create_chunks_from_breakpoints(
    sentences: list[str],
    breakpoints: list[int],
    min_chunk_size: int,
    policy: ShortChunkPolicy = "drop",
) -> list[str]:
    """
    Build the final chunks for a sentence sequence.

    Args:
        sentences: Sentences in reading order.
        breakpoints: Strictly increasing sentence indices to cut before.
        min_chunk_size: Minimum chunk length in characters.
        policy: "drop" or "merge" for chunks below min_chunk_size.

    Returns:
        Chunk texts in reading order.
    """
    candidates = build_candidate_chunks(sentences, breakpoints)
    chunks, dropped = filter_candidates(candidates, min_chunk_size, policy)
    log_dropped(dropped, min_chunk_size)
    return chunks


def log_dropped(dropped: list[str], min_chunk_size: int) -> None:
    if dropped:
        logger.warning(
            "Dropped %d chunk(s) shorter than %d characters (%d characters lost)",
            len(dropped), min_chunk_size, sum(len(d) for d in dropped),
        )
