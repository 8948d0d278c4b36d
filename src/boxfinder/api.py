"""FastAPI endpoint for box matching."""

from __future__ import annotations

import logging
import math
from typing import Any

from fastapi import FastAPI, HTTPException

from boxfinder.catalog import load_catalog
from boxfinder.config import get_boxfile, get_default_results
from boxfinder.errors import SidewaysWithoutHeightError
from boxfinder.io.schemas import (
    DimensionsSchema,
    MatchRequestSchema,
    MatchResponseSchema,
    RankedBoxSchema,
)
from boxfinder.matching import find_matches
from boxfinder.models import Dimensions, RankedBox

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Boxfinder API",
    description="Find the catalog boxes that best fit given dimensions",
)


def _finite(value: float) -> float | None:
    return value if math.isfinite(value) else None


def to_ranked_schema(result: RankedBox) -> RankedBoxSchema:
    dims = result.box.dimensions
    return RankedBoxSchema(
        rank=result.rank,
        name=result.box.name,
        dimensions=DimensionsSchema(length=dims.length, width=dims.width, height=dims.height),
        fill_ratio=_finite(result.ratio),
        fill_percent=_finite(round(result.percent, 2)),
    )


@app.post("/match", response_model=MatchResponseSchema)
def match(request: MatchRequestSchema) -> MatchResponseSchema:
    """
    Rank catalog boxes against the requested dimensions.

    Input (request body):
        { "length": 300, "width": 200, "height": 100, "mode": "over", "sideways": false, "results": 5 }

    Returns:
        Target echo plus up to `results` matches, best first
    """
    target = Dimensions(length=request.length, width=request.width, height=request.height)

    if request.sideways and target.height == 0:
        raise HTTPException(
            status_code=422,
            detail={
                "error": "SIDEWAYS_WITHOUT_HEIGHT",
                "summary": str(SidewaysWithoutHeightError()),
                "details": ["height"],
            },
        )

    boxfile = get_boxfile()
    try:
        count = request.results if request.results is not None else get_default_results()
        catalog = load_catalog(boxfile, request.mode)
    except (OSError, ValueError) as e:
        # UnicodeDecodeError and DimensionParseError are ValueErrors too
        logger.error(f"Cannot load box catalog {boxfile}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Box catalog unavailable: {e}")

    results = find_matches(catalog, target, request.mode, request.sideways, count)

    logger.info(
        f"target={target}, mode={request.mode.value}, sideways={request.sideways}, "
        f"matches={len(results)}"
    )

    return MatchResponseSchema(
        target=DimensionsSchema(length=target.length, width=target.width, height=target.height),
        mode=request.mode,
        sideways=request.sideways,
        results=[to_ranked_schema(r) for r in results],
    )


@app.get("/health")
def health() -> dict[str, Any]:
    """Health check endpoint."""
    boxfile = get_boxfile()
    return {
        "ok": True,
        "boxfile": str(boxfile),
        "boxfile_exists": boxfile.is_file(),
    }
