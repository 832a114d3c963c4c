"""
FastAPI API layer for tokensheet.

Provides REST endpoints for:
- Aggregating token records into class groups
- Rendering token records to stylesheet text
"""

from typing import Any, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from . import __version__
from .aggregator import aggregate
from .config import BuildConfig
from .exceptions import AggregationError
from .models import TokenRecord
from .renderer import render


# Pydantic models for API
class RecordInput(BaseModel):
    """A single token record, flat or with a CTI attributes object."""

    category: Optional[str] = None
    type: Optional[str] = None
    item: Optional[str] = None
    subitem: Optional[str] = None
    attributes: Optional[dict[str, Optional[str]]] = None
    value: Optional[Union[str, int, float]] = None

    def to_record(self) -> TokenRecord:
        return TokenRecord.from_dict(self.model_dump(exclude_none=True))


class RecordsRequest(BaseModel):
    """Request carrying the records for one output target."""

    records: list[RecordInput]
    strict: Optional[bool] = None


class AggregateResponse(BaseModel):
    """Response from aggregation."""

    classes: dict[str, dict[str, Any]]
    class_count: int
    record_count: int


class RenderResponse(BaseModel):
    """Response from rendering."""

    stylesheet: str
    class_count: int


# FastAPI app factory
def create_app(config: Optional[BuildConfig] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Build configuration (strict default and render format)

    Returns:
        Configured FastAPI app
    """
    config = config or BuildConfig()

    app = FastAPI(
        title="Tokensheet API",
        description="Group design tokens by component class and render SCSS",
        version=__version__,
    )

    def run_aggregate(request: RecordsRequest):
        strict = config.strict if request.strict is None else request.strict
        try:
            return aggregate((r.to_record() for r in request.records), strict=strict)
        except AggregationError as e:
            raise HTTPException(
                status_code=422,
                detail={
                    "error": type(e).__name__,
                    "message": e.message,
                    "details": e.details,
                },
            )

    # Health check
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.post("/aggregate", response_model=AggregateResponse)
    async def aggregate_records(request: RecordsRequest):
        """
        Group records by class key and sub-class.
        """
        groups = run_aggregate(request)
        return AggregateResponse(
            classes=groups.to_dict(),
            class_count=len(groups),
            record_count=len(request.records),
        )

    @app.post("/render", response_model=RenderResponse)
    async def render_records(request: RecordsRequest):
        """
        Aggregate records and render them as a stylesheet.
        """
        groups = run_aggregate(request)
        return RenderResponse(
            stylesheet=render(groups, config.render),
            class_count=len(groups),
        )

    return app


# Create default app instance
app = create_app()
