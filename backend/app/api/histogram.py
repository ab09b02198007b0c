"""
API routes for weather dataset histograms (JSON data, SVG chart, HTML page).
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, UploadFile, File, Query
from fastapi.responses import Response

from app.config import DEFAULT_METRICS, DEFAULT_THRESHOLD_COUNT
from app.engine.binning import compute_histogram
from app.engine.dataset_loader import parse_dataset
from app.engine.page_builder import draw_bars
from app.engine.svg_renderer import render_histogram_svg
from app.models.histogram import HistogramOutput
from app.models.weather import WeatherRecord

router = APIRouter(prefix="/api/v1", tags=["histogram"])

ALLOWED_EXTENSIONS = (".json",)


async def _read_dataset(file: UploadFile) -> list[WeatherRecord]:
    """Validate the upload and parse it; HTTP 400 for upload problems."""
    filename = (file.filename or "").lower()
    if not any(filename.endswith(ext) for ext in ALLOWED_EXTENSIONS):
        raise HTTPException(
            status_code=400,
            detail="File must be a .json file.",
        )

    try:
        content = await file.read()
        text = content.decode("utf-8", errors="replace")
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Could not read file: {e}")

    try:
        return parse_dataset(text)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/histogram/metrics")
async def list_metrics() -> list[str]:
    """Metrics drawn on the histogram page by default, in page order."""
    return DEFAULT_METRICS


@router.post("/histogram/data", response_model=HistogramOutput)
async def histogram_data(
    file: UploadFile = File(...),
    metric: str = Query(...),
    thresholds: int = Query(DEFAULT_THRESHOLD_COUNT, ge=0, le=100),
):
    """
    Upload a weather dataset and get one metric's bins, scales and mean.
    """
    dataset = await _read_dataset(file)
    try:
        return compute_histogram(dataset, metric, thresholds)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/histogram/svg")
async def histogram_svg(
    file: UploadFile = File(...),
    metric: str = Query(...),
    thresholds: int = Query(DEFAULT_THRESHOLD_COUNT, ge=0, le=100),
) -> Response:
    """Upload a weather dataset and get one metric's histogram as SVG."""
    dataset = await _read_dataset(file)
    try:
        markup = render_histogram_svg(dataset, metric, thresholds)
        return Response(content=markup, media_type="image/svg+xml")
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/histogram/page")
async def histogram_page(
    file: UploadFile = File(...),
    metrics: Optional[list[str]] = Query(None),
    thresholds: int = Query(DEFAULT_THRESHOLD_COUNT, ge=0, le=100),
) -> Response:
    """
    Upload a weather dataset and get an HTML page with one histogram per metric.

    Without `metrics`, all default metrics are drawn.
    """
    dataset = await _read_dataset(file)
    try:
        page = draw_bars(dataset, metrics or None, thresholds)
        return Response(content=page, media_type="text/html")
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
