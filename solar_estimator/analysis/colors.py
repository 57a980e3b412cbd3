# solar_estimator/analysis/colors.py

from enum import Enum


class Band(str, Enum):
    VERY_LOW = "veryLow"
    LOW = "low"
    MEDIUM = "medium"
    GOOD = "good"
    HIGH = "high"


# Lower bounds are exclusive: a score must be strictly greater to reach a band
BAND_THRESHOLDS = [
    (80, Band.HIGH),
    (60, Band.GOOD),
    (40, Band.MEDIUM),
    (20, Band.LOW),
]

BAND_COLORS = {
    Band.HIGH: "#9b87f5",
    Band.GOOD: "#7E69AB",
    Band.MEDIUM: "#FEF7CD",
    Band.LOW: "#FEC6A1",
    Band.VERY_LOW: "#FFDEE2",
}


def band_of(value):
    """Map a 0-100 score to its band; boundary values fall into the lower band."""
    for threshold, band in BAND_THRESHOLDS:
        if value > threshold:
            return band
    return Band.VERY_LOW


def color_of(value):
    return BAND_COLORS[band_of(value)]


def legend():
    """Bands from lowest to highest with their color and exclusive lower bound."""
    entries = [
        {"band": Band.VERY_LOW, "color": BAND_COLORS[Band.VERY_LOW], "above": None}
    ]
    for threshold, band in reversed(BAND_THRESHOLDS):
        entries.append({"band": band, "color": BAND_COLORS[band], "above": threshold})
    return entries
