# solar_estimator/analysis/models.py
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Immutable record serialized with camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class Region(Record):
    id: str
    name: str
    electricity_rate: float = Field(ge=0)  # currency per kWh
    solar_subsidy: float = Field(ge=0)  # currency per kWh of first-year output
    tax_credit: float = Field(ge=0, le=1)
    type: Optional[Literal["state", "district"]] = None
    parent_id: Optional[str] = None


class SolarInputs(Record):
    # Ranges are checked by the engine, which raises InvalidInputError
    location: str = ""
    roof_area: float  # m²
    electricity_usage: float  # kWh per month
    roof_angle: Optional[float] = None  # degrees
    shading: Optional[float] = None  # percent


class SolarResults(Record):
    system_size: float  # kW
    panels_required: int
    annual_energy_production: float  # kWh per year
    monthly_savings: float
    payback_period: Union[float, Literal["unbounded"]]  # years
    co2_reduction: float  # kg per year
    lifetime_savings: float
    gross_system_cost: float
    net_system_cost: float
    yield_factor: float
    trees_equivalent: float
    lifetime_co2_reduction: float  # kg


class ScoredPoint(Record):
    x: int
    y: int
    value: float
    annual_energy: Optional[int] = None  # kWh, annual mode only
