# solar_estimator/analysis/heatmap.py

import logging
import math
from enum import Enum

import numpy as np

from .constants import (
    ANNUAL_REFERENCE_KWH,
    CELL_SIZE,
    JITTER,
    MAX_SCORE,
    MIN_SCORE,
)
from .errors import InvalidInputError, UnknownVisualizationModeError
from .models import ScoredPoint

logger = logging.getLogger(__name__)


class VisualizationMode(str, Enum):
    POTENTIAL = "potential"
    EFFICIENCY = "efficiency"
    COST = "cost"
    ANNUAL = "annual"


MODE_LABELS = {
    VisualizationMode.ANNUAL: "Annual Energy Production",
    VisualizationMode.POTENTIAL: "Solar Potential",
    VisualizationMode.EFFICIENCY: "Panel Efficiency",
    VisualizationMode.COST: "Cost Effectiveness",
}


def _potential(i, j, grid_size):
    # Highest in the middle of the roof, Manhattan decay toward the edges
    center = grid_size / 2
    return 100 - (np.abs(i - center) + np.abs(j - center)) * 10


def _efficiency(i, j, grid_size):
    return 50 + 20 * np.sin(i / 2) + 20 * np.cos(j / 2)


def _cost(i, j, grid_size):
    # Economies of scale toward higher indices
    return 100 - (i + j) / (2 * grid_size) * 50


def _annual(i, j, grid_size):
    center = grid_size / 2
    return 80 - np.abs(i - center) * 5 - np.abs(j - center) * 3


MODE_FORMULAS = {
    VisualizationMode.POTENTIAL: _potential,
    VisualizationMode.EFFICIENCY: _efficiency,
    VisualizationMode.COST: _cost,
    VisualizationMode.ANNUAL: _annual,
}


def parse_mode(mode):
    if isinstance(mode, VisualizationMode):
        return mode
    try:
        return VisualizationMode(mode)
    except (ValueError, TypeError):
        logger.warning(f"Rejected visualization mode {mode!r}")
        raise UnknownVisualizationModeError(mode) from None


def grid_size(roof_area):
    """Number of cells along each side of the heatmap for a roof area in m²."""
    if not math.isfinite(roof_area) or roof_area < 0:
        raise InvalidInputError(f"roof_area must be non-negative, got {roof_area}")
    return math.ceil(math.sqrt(roof_area) / 2)


def make_rng(seed=None):
    """Seedable jitter source; the same seed reproduces the same heatmap."""
    return np.random.default_rng(seed)


def score_grid(roof_area, mode, rng=None):
    """
    Jittered, clamped scores as an (n, n) array indexed [i, j].

    ``rng`` only needs a numpy-Generator compatible ``uniform(low, high, size)``.
    """
    mode = parse_mode(mode)
    size = grid_size(roof_area)
    if size <= 0:
        return np.empty((0, 0))
    if rng is None:
        rng = make_rng()

    i, j = np.meshgrid(
        np.arange(size, dtype=float), np.arange(size, dtype=float), indexing="ij"
    )
    raw = MODE_FORMULAS[mode](i, j, size)
    jitter = rng.uniform(-JITTER, JITTER, size=raw.shape)
    return np.clip(raw + jitter, MIN_SCORE, MAX_SCORE)


def annual_energy_grid(values, roof_area):
    """Per-cell kWh: share of the reference yield for the roof area one cell covers."""
    size = values.shape[0]
    energy = values / 100 * ANNUAL_REFERENCE_KWH * (roof_area / size**2)
    # Round half up; energies are never negative
    return np.floor(energy + 0.5).astype(int)


def synthesize_heatmap(roof_area, mode, rng=None):
    """Scored grid points covering the roof, in row-major (x, then y) order."""
    mode = parse_mode(mode)
    values = score_grid(roof_area, mode, rng)
    size = values.shape[0]
    logger.info(f"Synthesized {mode.value} heatmap with grid size {size}")
    if size == 0:
        return []

    energies = None
    if mode is VisualizationMode.ANNUAL:
        energies = annual_energy_grid(values, roof_area)

    points = []
    for i in range(size):
        for j in range(size):
            points.append(
                ScoredPoint(
                    x=i * CELL_SIZE,
                    y=j * CELL_SIZE,
                    value=float(values[i, j]),
                    annual_energy=int(energies[i, j]) if energies is not None else None,
                )
            )
    return points
