"""Tests for semantic_splitter.splitter — end-to-end pipeline with stub embeddings."""

import asyncio
import logging

import pytest
from pydantic import ValidationError

from semantic_splitter import SemanticTextSplitter, SplitDocument, SplitterConfig
from semantic_splitter.exceptions import (
    ConfigurationError,
    DegenerateEmbeddingError,
    EmbeddingDimensionError,
)


def _scenario_splitter(embeddings, **overrides) -> SemanticTextSplitter:
    options = dict(
        delimiters=["."],
        window_size=3,
        min_chunk_size=1,
        breakpoint_threshold=0.5,
    )
    options.update(overrides)
    return SemanticTextSplitter(embeddings, SplitterConfig(**options))


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_defaults(self, make_embeddings):
        splitter = SemanticTextSplitter(make_embeddings())
        assert splitter.config.breakpoint_threshold == 0.95
        assert splitter.config.delimiters == [".", "!", "?"]
        assert splitter.config.min_chunk_size == 100
        assert splitter.config.window_size == 3
        assert splitter.config.short_chunk_policy == "drop"

    def test_missing_embeddings_fails_fast(self):
        with pytest.raises(ConfigurationError, match="required"):
            SemanticTextSplitter(None)

    def test_embeddings_without_embed_query(self):
        with pytest.raises(ConfigurationError, match="embed_query"):
            SemanticTextSplitter(object())

    def test_keyword_overrides(self, make_embeddings):
        splitter = SemanticTextSplitter(
            make_embeddings(), SplitterConfig(min_chunk_size=10), window_size=2
        )
        assert splitter.config.window_size == 2
        assert splitter.config.min_chunk_size == 10

    def test_invalid_override(self, make_embeddings):
        with pytest.raises(ValidationError):
            SemanticTextSplitter(make_embeddings(), window_size=0)

    def test_misspelled_override_rejected(self, make_embeddings):
        with pytest.raises(ValidationError, match="windowSize"):
            SemanticTextSplitter(make_embeddings(), windowSize=1, min_chunk_size=1)


# ---------------------------------------------------------------------------
# Short-circuit
# ---------------------------------------------------------------------------

class TestShortCircuit:
    def test_few_sentences_returned_unchanged(self, make_embeddings):
        embeddings = make_embeddings()
        text = "  One. Two. Three.  "
        chunks = asyncio.run(SemanticTextSplitter(embeddings).split_text(text))
        assert chunks == [text]
        assert embeddings.calls == []

    def test_no_delimiters(self, make_embeddings):
        embeddings = make_embeddings()
        text = "a text without any sentence punctuation"
        chunks = asyncio.run(SemanticTextSplitter(embeddings).split_text(text))
        assert chunks == [text]
        assert embeddings.calls == []

    def test_short_text_ignores_min_chunk_size(self, make_embeddings):
        chunks = asyncio.run(
            SemanticTextSplitter(make_embeddings(), min_chunk_size=1000).split_text("Hi.")
        )
        assert chunks == ["Hi."]

    def test_analyze_marks_short_circuit(self, make_embeddings):
        result = asyncio.run(SemanticTextSplitter(make_embeddings()).analyze("One. Two."))
        assert result.short_circuited is True
        assert result.threshold is None
        assert result.sentences == ["One.", "Two."]
        assert result.stats.total_chunks == 1

    def test_short_circuit_logged(self, make_embeddings, caplog):
        with caplog.at_level(logging.INFO, logger="semantic_splitter.splitter"):
            asyncio.run(SemanticTextSplitter(make_embeddings()).split_text("One."))
        assert "returning it unsplit" in caplog.text
        assert all(r.levelno < logging.WARNING for r in caplog.records)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

class TestPipeline:
    def test_outlier_gap_splits_text(self, scenario_embeddings, scenario_text):
        splitter = _scenario_splitter(scenario_embeddings)
        result = asyncio.run(splitter.analyze(scenario_text))

        assert result.breakpoints == [4]
        assert result.chunks == ["A. B. C. D.", "E. F. G."]

    def test_intermediate_counts(self, scenario_embeddings, scenario_text):
        result = asyncio.run(_scenario_splitter(scenario_embeddings).analyze(scenario_text))

        assert len(result.sentences) == 7
        assert len(result.windows) == 7 - 3 + 1
        assert len(result.distances) == len(result.windows) - 1
        assert result.distances[:3] == [0.0, 0.0, 0.0]
        assert result.distances[3] == pytest.approx(1.0)
        assert result.threshold == 0.0

    def test_windows_embedded_in_order_one_at_a_time(self, scenario_embeddings, scenario_text):
        asyncio.run(_scenario_splitter(scenario_embeddings).split_text(scenario_text))

        assert scenario_embeddings.calls == [
            "A. B. C.",
            "B. C. D.",
            "C. D. E.",
            "D. E. F.",
            "E. F. G.",
        ]
        assert scenario_embeddings.max_in_flight == 1

    def test_default_threshold_on_few_gaps_keeps_text_whole(self, scenario_embeddings, scenario_text):
        splitter = _scenario_splitter(scenario_embeddings, breakpoint_threshold=0.95)
        chunks = asyncio.run(splitter.split_text(scenario_text))
        assert chunks == ["A. B. C. D. E. F. G."]

    def test_identical_embeddings_give_single_chunk(self, make_embeddings, scenario_text):
        splitter = _scenario_splitter(make_embeddings(default=[0.5, 0.5, 0.5]))
        result = asyncio.run(splitter.analyze(scenario_text))
        assert result.breakpoints == []
        assert result.chunks == ["A. B. C. D. E. F. G."]

    def test_identical_embeddings_below_minimum(self, make_embeddings, scenario_text):
        splitter = _scenario_splitter(make_embeddings(), min_chunk_size=1000)
        assert asyncio.run(splitter.split_text(scenario_text)) == []

    def test_sentence_count_and_window_count(self, make_embeddings):
        text = " ".join(f"Sentence number {i}." for i in range(10))
        splitter = SemanticTextSplitter(make_embeddings(), window_size=4, min_chunk_size=1)
        result = asyncio.run(splitter.analyze(text))
        assert result.stats.total_sentences == 10
        assert result.stats.total_windows == 7
        assert len(result.distances) == 6


# ---------------------------------------------------------------------------
# Short-chunk policy
# ---------------------------------------------------------------------------

class TestShortChunks:
    def test_short_chunk_dropped(self, scenario_embeddings, scenario_text):
        splitter = _scenario_splitter(scenario_embeddings, min_chunk_size=9)
        result = asyncio.run(splitter.analyze(scenario_text))

        assert result.chunks == ["A. B. C. D."]
        assert all(len(c) >= 9 for c in result.chunks)
        assert result.stats.dropped_chars == len("E. F. G.")

    def test_short_chunk_merged(self, scenario_embeddings, scenario_text):
        splitter = _scenario_splitter(
            scenario_embeddings, min_chunk_size=9, short_chunk_policy="merge"
        )
        result = asyncio.run(splitter.analyze(scenario_text))

        assert result.chunks == ["A. B. C. D. E. F. G."]
        assert result.stats.dropped_chars == 0

    def test_stats(self, scenario_embeddings, scenario_text):
        result = asyncio.run(_scenario_splitter(scenario_embeddings).analyze(scenario_text))
        stats = result.stats
        assert stats.total_chunks == 2
        assert stats.total_chars == len("A. B. C. D.") + len("E. F. G.")
        assert stats.min_chunk_chars == len("E. F. G.")
        assert stats.max_chunk_chars == len("A. B. C. D.")
        assert stats.avg_chunk_chars == pytest.approx(stats.total_chars / 2)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TestErrors:
    def test_embedding_failure_propagates(self, make_embeddings, scenario_text):
        embeddings = make_embeddings(error=RuntimeError("provider down"))
        with pytest.raises(RuntimeError, match="provider down"):
            asyncio.run(_scenario_splitter(embeddings).split_text(scenario_text))
        assert len(embeddings.calls) == 1

    def test_dimension_mismatch(self, make_embeddings, scenario_text):
        embeddings = make_embeddings(vectors={"C. D. E.": [1.0, 0.0, 0.0]})
        with pytest.raises(EmbeddingDimensionError) as exc_info:
            asyncio.run(_scenario_splitter(embeddings).split_text(scenario_text))
        assert exc_info.value.index == 2

    def test_zero_vector(self, make_embeddings, scenario_text):
        embeddings = make_embeddings(vectors={"B. C. D.": [0.0, 0.0]})
        with pytest.raises(DegenerateEmbeddingError):
            asyncio.run(_scenario_splitter(embeddings).split_text(scenario_text))


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

class TestDocuments:
    def test_create_documents_copies_metadata(self, scenario_embeddings, scenario_text):
        splitter = _scenario_splitter(scenario_embeddings)
        docs = asyncio.run(
            splitter.create_documents([scenario_text, "Short."], [{"source": "a"}, {"source": "b"}])
        )

        assert [d.page_content for d in docs] == ["A. B. C. D.", "E. F. G.", "Short."]
        assert docs[0].metadata == {"source": "a", "chunk_index": 0, "total_chunks": 2}
        assert docs[1].metadata == {"source": "a", "chunk_index": 1, "total_chunks": 2}
        assert docs[2].metadata == {"source": "b", "chunk_index": 0, "total_chunks": 1}

    def test_create_documents_without_metadata(self, make_embeddings):
        docs = asyncio.run(SemanticTextSplitter(make_embeddings()).create_documents(["One."]))
        assert docs == [SplitDocument(page_content="One.", metadata={"chunk_index": 0, "total_chunks": 1})]

    def test_metadata_length_mismatch(self, make_embeddings):
        with pytest.raises(ValueError, match="metadata"):
            asyncio.run(
                SemanticTextSplitter(make_embeddings()).create_documents(["a", "b"], [{}])
            )

    def test_split_documents(self, scenario_embeddings, scenario_text):
        source = SplitDocument(page_content=scenario_text, metadata={"page": 3})
        docs = asyncio.run(_scenario_splitter(scenario_embeddings).split_documents([source]))

        assert len(docs) == 2
        assert all(d.metadata["page"] == 3 for d in docs)
        assert source.metadata == {"page": 3}
