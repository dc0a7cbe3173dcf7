from dataclasses import dataclass, field
import os

from .models import DEFAULT_DELIMITERS, SplitterConfig


@dataclass
class SplitterServiceConfig:
    ollama_base_url: str = "http://localhost:11434"
    embedding_model: str = "nomic-embed-text"
    log_level: str = "INFO"
    splitter: SplitterConfig = field(default_factory=SplitterConfig)

    @classmethod
    def from_env(cls) -> "SplitterServiceConfig":
        def _int(name: str, default: int) -> int:
            value = os.environ.get(name)
            return int(value) if value else default

        def _float(name: str, default: float) -> float:
            value = os.environ.get(name)
            return float(value) if value else default

        def _chars(name: str, default: list[str]) -> list[str]:
            value = os.environ.get(name)
            return list(value) if value else list(default)

        defaults = SplitterConfig()
        return cls(
            ollama_base_url=os.environ.get("OLLAMA_BASE_URL", cls.ollama_base_url),
            embedding_model=os.environ.get("EMBEDDING_MODEL", cls.embedding_model),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level),
            splitter=SplitterConfig(
                breakpoint_threshold=_float(
                    "SPLITTER_BREAKPOINT_THRESHOLD", defaults.breakpoint_threshold
                ),
                delimiters=_chars("SPLITTER_DELIMITERS", DEFAULT_DELIMITERS),
                min_chunk_size=_int("SPLITTER_MIN_CHUNK_SIZE", defaults.min_chunk_size),
                window_size=_int("SPLITTER_WINDOW_SIZE", defaults.window_size),
                short_chunk_policy=os.environ.get(
                    "SPLITTER_SHORT_CHUNK_POLICY", defaults.short_chunk_policy
                ),
            ),
        )
