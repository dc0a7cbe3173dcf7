import logging
from typing import Any, Optional

from .config import SplitterServiceConfig
from .embedder import Embeddings, OllamaEmbedder
from .models import SplitResult, SplitterConfig
from .splitter import SemanticTextSplitter

logger = logging.getLogger(__name__)


class SplittingService:
    def __init__(
        self,
        config: SplitterServiceConfig | None = None,
        embedder: Optional[Embeddings] = None,
    ):
        self.config = config or SplitterServiceConfig()
        self.embedder = embedder or OllamaEmbedder(
            model=self.config.embedding_model,
            base_url=self.config.ollama_base_url,
        )
        self.splitter = SemanticTextSplitter(self.embedder, self.config.splitter)

    async def split(
        self, text: str, config_overrides: Optional[dict[str, Any]] = None
    ) -> SplitResult:
        splitter = self.splitter
        if config_overrides:
            config = SplitterConfig(
                **{**self.config.splitter.model_dump(), **config_overrides}
            )
            splitter = SemanticTextSplitter(self.embedder, config)
        return await splitter.analyze(text)

    async def health(self) -> dict:
        health_check = getattr(self.embedder, "health_check", None)
        if health_check is None:
            return {"status": "ok", "embedder": {"healthy": True}}
        embedder_health = await health_check()
        status = "ok" if embedder_health.get("healthy") else "degraded"
        return {"status": status, "embedder": embedder_health}
