# solar_estimator/analysis/errors.py


class SolarEstimatorError(Exception):
    """Base class for errors raised by the estimation core."""


class InvalidInputError(SolarEstimatorError, ValueError):
    """Site parameters outside their allowed range."""


class UnknownRegionError(SolarEstimatorError, LookupError):
    def __init__(self, region_id):
        super().__init__(f"Unknown region: {region_id!r}")
        self.region_id = region_id


class UnknownVisualizationModeError(SolarEstimatorError, ValueError):
    def __init__(self, mode):
        super().__init__(f"Unknown visualization mode: {mode!r}")
        self.mode = mode
