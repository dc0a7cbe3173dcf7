"""
Semantic Splitter - Embedding-based semantic text chunking for RAG

Splits a long text into chunks at the points where the meaning of
neighboring sentence windows drifts the most.

Quick Start:
    from semantic_splitter import SemanticTextSplitter, OllamaEmbedder

    splitter = SemanticTextSplitter(OllamaEmbedder(), window_size=3)
    chunks = await splitter.split_text(long_text)
"""

__version__ = "1.0.0"

from .assembly import build_candidate_chunks, create_chunks_from_breakpoints
from .breakpoints import breakpoints_above, find_breakpoints, percentile_threshold
from .config import SplitterServiceConfig
from .distances import (
    calculate_sequential_distances,
    cosine_distance,
    cosine_similarity,
)
from .embedder import Embeddings, OllamaEmbedder
from .exceptions import (
    ConfigurationError,
    DegenerateEmbeddingError,
    EmbeddingConnectionError,
    EmbeddingDimensionError,
    EmbeddingError,
    SplitterError,
)
from .models import (
    SplitDocument,
    SplitResult,
    SplitStats,
    SplitterConfig,
)
from .sentence_splitter import split_sentences
from .service import SplittingService
from .splitter import SemanticTextSplitter
from .windows import create_sliding_windows

__all__ = [
    "__version__",
    "SemanticTextSplitter",
    "SplittingService",
    "SplitterServiceConfig",
    "SplitterConfig",
    "SplitResult",
    "SplitStats",
    "SplitDocument",
    "Embeddings",
    "OllamaEmbedder",
    "SplitterError",
    "ConfigurationError",
    "EmbeddingError",
    "EmbeddingConnectionError",
    "EmbeddingDimensionError",
    "DegenerateEmbeddingError",
    "split_sentences",
    "create_sliding_windows",
    "calculate_sequential_distances",
    "cosine_similarity",
    "cosine_distance",
    "find_breakpoints",
    "breakpoints_above",
    "percentile_threshold",
    "build_candidate_chunks",
    "create_chunks_from_breakpoints",
]
