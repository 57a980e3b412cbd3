# solar_estimator/main.py

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .analysis.colors import legend
from .analysis.core import estimate
from .analysis.errors import (
    InvalidInputError,
    UnknownRegionError,
    UnknownVisualizationModeError,
)
from .analysis.heatmap import (
    MODE_LABELS,
    grid_size,
    make_rng,
    parse_mode,
    synthesize_heatmap,
)
from .analysis.models import Record, Region, ScoredPoint, SolarInputs, SolarResults
from .analysis.regions import get_region_catalog

app = FastAPI(
    title="Solar Estimator API",
    description="API for rooftop solar system estimation and roof heatmaps",
)

origins = [
    "http://localhost",
    "http://localhost:3000",
    "http://127.0.0.1:8000",
]

# --- Add CORS Middleware to the app ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class EstimateRequest(SolarInputs):
    region_id: str


class HeatmapRequest(Record):
    roof_area: float
    mode: str = "annual"
    seed: Optional[int] = None


class LegendEntry(Record):
    band: str
    color: str
    above: Optional[int] = None


class HeatmapResponse(Record):
    mode: str
    label: str
    grid_size: int
    points: List[ScoredPoint]
    legend: List[LegendEntry]


@app.get("/")
async def root():
    """
    Root endpoint providing API information and available endpoints.
    """
    return {
        "message": "Solar Estimator API",
        "description": "API for rooftop solar system estimation and roof heatmaps",
        "version": "1.0.0",
        "endpoints": {
            "root": "/",
            "regions": "/api/regions",
            "region": "/api/regions/{region_id}",
            "districts": "/api/regions/{region_id}/children",
            "estimate": "/api/estimate",
            "heatmap": "/api/heatmap",
            "docs": "/docs",
            "redoc": "/redoc",
        },
    }


@app.get("/api/regions", response_model=List[Region])
async def list_regions():
    """Top-level regions in catalog order; the first one is the default."""
    return get_region_catalog().list_top_level()


@app.get("/api/regions/{region_id}", response_model=Region)
async def get_region(region_id: str):
    try:
        return get_region_catalog().get_by_id(region_id)
    except UnknownRegionError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.get("/api/regions/{region_id}/children", response_model=List[Region])
async def list_districts(region_id: str):
    return get_region_catalog().list_children(region_id)


@app.post("/api/estimate", response_model=SolarResults)
async def get_solar_estimate(input_data: EstimateRequest):
    """
    Estimates system size, production, savings, payback and CO2 impact
    for the submitted roof in the selected region.
    """
    inputs = SolarInputs(**input_data.model_dump(exclude={"region_id"}))
    try:
        return estimate(inputs, input_data.region_id)
    except UnknownRegionError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post(
    "/api/heatmap", response_model=HeatmapResponse, response_model_exclude_none=True
)
async def get_heatmap(input_data: HeatmapRequest):
    """
    Scored grid over the roof surface for one visualization mode.
    Pass a seed to get a reproducible jitter pattern.
    """
    try:
        mode = parse_mode(input_data.mode)
        size = grid_size(input_data.roof_area)
        points = synthesize_heatmap(
            input_data.roof_area, mode, make_rng(input_data.seed)
        )
    except (InvalidInputError, UnknownVisualizationModeError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return HeatmapResponse(
        mode=mode.value,
        label=MODE_LABELS[mode],
        grid_size=size,
        points=points,
        legend=[
            LegendEntry(
                band=entry["band"].value, color=entry["color"], above=entry["above"]
            )
            for entry in legend()
        ],
    )
