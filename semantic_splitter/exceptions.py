"""
Custom Exceptions for the Semantic Splitter.

Exception Hierarchy:
    SplitterError (base)
    ├── ConfigurationError
    └── EmbeddingError
        ├── EmbeddingConnectionError
        ├── EmbeddingDimensionError
        └── DegenerateEmbeddingError

Errors raised by a caller-supplied embeddings implementation are NOT
wrapped by the splitter; they reach the caller unchanged. EmbeddingError
and its subclasses are raised by the bundled OllamaEmbedder and by the
numeric checks on returned vectors.

Usage:
    from semantic_splitter.exceptions import SplitterError, EmbeddingError

    try:
        chunks = await splitter.split_text(text)
    except EmbeddingError as e:
        print(f"Embedding failed: {e}")
    except SplitterError as e:
        print(f"Splitting failed: {e}")
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class SplitterError(Exception):
    """
    Base exception for all splitter-related errors.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "A splitting error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


class ConfigurationError(SplitterError):
    """Raised before any work starts when the splitter is misconfigured."""

    def __init__(
        self,
        message: str = "Invalid splitter configuration",
        details: Optional[str] = None,
    ):
        super().__init__(message, details)


# =============================================================================
# EMBEDDING ERRORS
# =============================================================================


class EmbeddingError(SplitterError):
    """
    Raised when the embedding provider fails or returns unusable vectors.

    Attributes:
        original_error: The underlying provider exception
    """

    def __init__(
        self,
        message: str = "Embedding failed",
        original_error: Optional[Exception] = None,
        details: Optional[str] = None,
    ):
        self.original_error = original_error
        if details is None and original_error is not None:
            details = str(original_error)
        super().__init__(message, details)


class EmbeddingConnectionError(EmbeddingError):
    """Raised when the embedding provider cannot be reached."""

    def __init__(
        self,
        base_url: str,
        original_error: Optional[Exception] = None,
    ):
        self.base_url = base_url
        super().__init__(
            message=(
                f"Cannot connect to Ollama at {base_url}. "
                f"Is Ollama running? Start it with: ollama serve"
            ),
            original_error=original_error,
        )


class EmbeddingDimensionError(EmbeddingError):
    """
    Raised when vectors within one run have different lengths.

    Attributes:
        expected: Length of the first vector in the run
        actual: Length of the offending vector
        index: Position of the offending vector (0-indexed)
    """

    def __init__(self, expected: int, actual: int, index: int):
        self.expected = expected
        self.actual = actual
        self.index = index
        super().__init__(
            message=(
                f"Embedding {index} has {actual} dimensions, "
                f"expected {expected}"
            ),
        )


class DegenerateEmbeddingError(EmbeddingError):
    """
    Raised when a zero-norm vector makes cosine similarity undefined.

    Attributes:
        index: Position of the zero vector in the run, if known
    """

    def __init__(self, index: Optional[int] = None):
        self.index = index
        message = "Cosine similarity is undefined for a zero-norm embedding"
        if index is not None:
            message = f"{message} (embedding {index})"
        super().__init__(message)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def format_error_chain(error: Exception) -> str:
    """
    Format an exception and its chain for logging.

    Returns a multi-line string showing the error hierarchy.
    """
    lines = []
    current = error
    depth = 0

    while current is not None:
        prefix = "  " * depth + ("└─ " if depth > 0 else "")
        lines.append(f"{prefix}{type(current).__name__}: {current}")

        if getattr(current, "original_error", None):
            current = current.original_error
            depth += 1
        elif current.__cause__:
            current = current.__cause__
            depth += 1
        else:
            break

    return "\n".join(lines)
