# solar_estimator/analysis/constants.py

from dataclasses import dataclass

# Define global constants for solar system estimation
BASE_YIELD_FACTOR = 0.95
OPTIMAL_ROOF_ANGLE = 30.0  # degrees
SPECIFIC_YIELD = 1400.0  # kWh per kW per year
PANEL_WATTAGE = 400.0  # W
PANEL_AREA_PER_KW = 6.0  # m² of roof per kW installed
FIXED_INSTALLATION_COST = 1500.0
COST_PER_KW = 2800.0
GRID_EMISSION_FACTOR = 0.4  # kg CO2 per kWh
DEGRADATION_RATE = 0.005  # per year
LIFETIME_YEARS = 25
KG_CO2_PER_TREE = 21.0  # kg absorbed by one tree per year

UNBOUNDED = "unbounded"

# Heatmap grid constants
CELL_SIZE = 10
JITTER = 5.0
MIN_SCORE = 0.0
MAX_SCORE = 100.0
ANNUAL_REFERENCE_KWH = 1200.0  # kWh for a 100% score cell


@dataclass(frozen=True)
class EstimationParameters:
    """Tunable constants of the estimation engine.

    Defaults come from the module constants above; tests and callers may
    substitute any of them with ``dataclasses.replace``.
    """

    base_yield_factor: float = BASE_YIELD_FACTOR
    optimal_roof_angle: float = OPTIMAL_ROOF_ANGLE
    specific_yield: float = SPECIFIC_YIELD
    panel_wattage: float = PANEL_WATTAGE
    panel_area_per_kw: float = PANEL_AREA_PER_KW
    fixed_installation_cost: float = FIXED_INSTALLATION_COST
    cost_per_kw: float = COST_PER_KW
    grid_emission_factor: float = GRID_EMISSION_FACTOR
    degradation_rate: float = DEGRADATION_RATE
    lifetime_years: int = LIFETIME_YEARS
    kg_co2_per_tree: float = KG_CO2_PER_TREE

    def gross_cost(self, system_size_kw: float) -> float:
        return self.fixed_installation_cost + self.cost_per_kw * system_size_kw


DEFAULT_PARAMETERS = EstimationParameters()
