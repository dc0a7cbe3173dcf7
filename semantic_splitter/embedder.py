"""
Embeddings - The embedding capability consumed by the splitter

The splitter only needs ``await embeddings.embed_query(text)``. Any object
with that coroutine method works (LangChain-style embeddings included).

OllamaEmbedder is the bundled implementation on top of ollama.AsyncClient:
- Single and batch embedding (batch preserves input order)
- Provider errors mapped onto the package exception hierarchy
- Health check to verify Ollama is running and the model is available

Usage:
    from semantic_splitter.embedder import OllamaEmbedder

    embedder = OllamaEmbedder(model="nomic-embed-text")
    vector = await embedder.embed_query("Some text")
    vectors = await embedder.embed_documents(["Text 1", "Text 2"])
"""

import logging
from typing import Optional, Protocol, runtime_checkable

import ollama

from .exceptions import EmbeddingConnectionError, EmbeddingError

logger = logging.getLogger(__name__)


@runtime_checkable
class Embeddings(Protocol):
    """Maps a text to a fixed-length vector."""

    async def embed_query(self, text: str) -> list[float]:
        ...


class OllamaEmbedder:
    """
    Generates text embeddings using a local Ollama model.

    The embedder connects to a running Ollama instance and uses a specified
    embedding model to convert text into dense vector representations.
    """

    def __init__(
        self,
        model: str = "nomic-embed-text",
        base_url: str = "http://localhost:11434",
    ):
        """
        Initialize the embedder.

        Args:
            model: Ollama model name for embeddings.
            base_url: Ollama API base URL.
        """
        self.model = model
        self.base_url = base_url
        self._client = ollama.AsyncClient(host=base_url)
        self._dimensions: Optional[int] = None

    @property
    def dimensions(self) -> Optional[int]:
        """Return the embedding dimensions (available after first embed call)."""
        return self._dimensions

    async def embed_query(self, text: str) -> list[float]:
        """
        Generate an embedding for a single text.

        Raises:
            ValueError: If the text is empty.
            EmbeddingConnectionError: If Ollama is not reachable.
            EmbeddingError: If embedding generation fails.
        """
        if not text or not text.strip():
            raise ValueError("Cannot embed empty text")

        try:
            response = await self._client.embed(model=self.model, input=text)
        except Exception as e:
            raise self._map_error(e, "Ollama embedding failed") from e

        embedding = list(response["embeddings"][0])
        self._dimensions = len(embedding)
        return embedding

    async def embed_documents(self, texts: list[str]) -> list[list[float]]:
        """
        Generate embeddings for multiple texts in one request.

        Args:
            texts: List of texts to embed.

        Returns:
            List of embedding vectors, one per input text, in input order.
        """
        if not texts:
            return []
        if any(not t or not t.strip() for t in texts):
            raise ValueError("Cannot embed empty text")

        try:
            response = await self._client.embed(model=self.model, input=texts)
        except Exception as e:
            raise self._map_error(e, "Ollama batch embedding failed") from e

        embeddings = [list(e) for e in response["embeddings"]]
        if len(embeddings) != len(texts):
            raise EmbeddingError(
                f"Ollama returned {len(embeddings)} embeddings for {len(texts)} texts"
            )
        if embeddings:
            self._dimensions = len(embeddings[0])
        return embeddings

    async def health_check(self) -> dict[str, bool | str]:
        """
        Check if Ollama is running and the embedding model is available.

        Returns:
            Dict with 'healthy' (bool), 'ollama_running' (bool),
            'model_available' (bool), 'model' (str) and 'error' (str).
        """
        result = {
            "healthy": False,
            "ollama_running": False,
            "model_available": False,
            "model": self.model,
            "error": "",
        }

        try:
            models = await self._client.list()
            result["ollama_running"] = True

            model_names = [m.model for m in models.models]
            # Match by prefix (e.g., "nomic-embed-text" matches "nomic-embed-text:latest")
            result["model_available"] = any(
                m.startswith(self.model) for m in model_names
            )

            if not result["model_available"]:
                result["error"] = (
                    f"Model '{self.model}' not found. "
                    f"Available: {model_names}. "
                    f"Pull it with: ollama pull {self.model}"
                )
            else:
                result["healthy"] = True

        except Exception as e:
            logger.warning("Ollama health check failed: %s", e)
            result["error"] = f"Cannot connect to Ollama: {e}"

        return result

    def _map_error(self, error: Exception, message: str) -> EmbeddingError:
        if isinstance(error, ollama.ResponseError):
            return EmbeddingError(
                f"{message} for model '{self.model}'", original_error=error
            )
        if (
            isinstance(error, ConnectionError)
            or "Connection" in type(error).__name__
            or "refused" in str(error).lower()
        ):
            return EmbeddingConnectionError(self.base_url, original_error=error)
        return EmbeddingError(message, original_error=error)
