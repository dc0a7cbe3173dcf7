import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from .exceptions import (
    ConfigurationError,
    EmbeddingConnectionError,
    EmbeddingError,
    format_error_chain,
)
from .models import SplitRequest, SplitResponse
from .service import SplittingService

logger = logging.getLogger(__name__)


def create_app(service: Optional[SplittingService] = None) -> FastAPI:
    service = service or SplittingService()
    app = FastAPI(
        title="Semantic Splitter Service",
        version="1.0.0",
        description="Embedding-based semantic text splitting service.",
    )

    @app.get("/health")
    async def health() -> dict:
        return await service.health()

    @app.post("/split", response_model=SplitResponse)
    async def split(request: SplitRequest) -> SplitResponse:
        try:
            result = await service.split(request.text, request.config_overrides())
        except (ConfigurationError, ValidationError) as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except EmbeddingConnectionError as exc:
            logger.error("Embedding provider unreachable:\n%s", format_error_chain(exc))
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        except EmbeddingError as exc:
            logger.error("Embedding failed:\n%s", format_error_chain(exc))
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        except Exception as exc:
            logger.exception("Split failed")
            raise HTTPException(status_code=500, detail=str(exc)) from exc

        return SplitResponse(
            chunks=result.chunks,
            total_chunks=result.total_chunks,
            breakpoints=result.breakpoints,
            stats=result.stats,
        )

    return app
