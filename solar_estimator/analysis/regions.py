# solar_estimator/analysis/regions.py

import logging
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Iterable, List, Optional

import pandas as pd

from .errors import InvalidInputError, UnknownRegionError
from .models import Region
from .region_data import REGIONS

logger = logging.getLogger(__name__)


class RegionCatalog:
    """Read-only lookup over the tariff table.

    States and districts live in one flat table; districts point at their
    state through ``parent_id``. Query results keep seed order.
    """

    def __init__(self, records: Iterable):
        regions = [r if isinstance(r, Region) else Region(**r) for r in records]
        self._table = pd.DataFrame(
            [r.model_dump() for r in regions],
            columns=list(Region.model_fields),
        )
        self._validate()
        self._by_id = {r.id: r for r in regions}
        logger.info(f"Loaded region catalog with {len(self._by_id)} entries")

    def _validate(self):
        table = self._table
        duplicated = table.loc[table["id"].duplicated(), "id"]
        if not duplicated.empty:
            raise ValueError(f"Duplicate region ids: {duplicated.tolist()}")

        top_level = table[table["parent_id"].isna()]
        misplaced = top_level.loc[top_level["type"] == "district", "id"]
        if not misplaced.empty:
            raise ValueError(f"Districts without a parent: {misplaced.tolist()}")

        children = table[table["parent_id"].notna()]
        typed_state = children.loc[children["type"] == "state", "id"]
        if not typed_state.empty:
            raise ValueError(f"States cannot have a parent: {typed_state.tolist()}")

        state_ids = set(top_level["id"])
        orphans = children.loc[~children["parent_id"].isin(state_ids), "id"]
        if not orphans.empty:
            raise ValueError(
                f"Districts referencing an unknown state: {orphans.tolist()}"
            )

    def __len__(self):
        return len(self._by_id)

    def __contains__(self, region_id):
        return region_id in self._by_id

    def _regions(self, ids) -> List[Region]:
        return [self._by_id[region_id] for region_id in ids]

    def list_top_level(self) -> List[Region]:
        return self._regions(self._table.loc[self._table["parent_id"].isna(), "id"])

    def list_children(self, parent_id: str) -> List[Region]:
        """Districts of ``parent_id``; empty when it has none or is unknown."""
        return self._regions(
            self._table.loc[self._table["parent_id"] == parent_id, "id"]
        )

    def get_by_id(self, region_id: str) -> Region:
        try:
            return self._by_id[region_id]
        except KeyError:
            logger.warning(f"Region lookup failed for '{region_id}'")
            raise UnknownRegionError(region_id) from None

    def default_region(self) -> Region:
        return self.list_top_level()[0]


@lru_cache(maxsize=None)
def get_region_catalog() -> RegionCatalog:
    """The process-wide catalog, built from the static table on first use."""
    return RegionCatalog(REGIONS)


@dataclass(frozen=True)
class RegionSelection:
    """A caller's current state / district choice.

    A district choice is only valid while its state stays selected, so picking
    another state always clears it.
    """

    state_id: Optional[str] = None
    district_id: Optional[str] = None

    def select_state(self, state_id: str) -> "RegionSelection":
        return RegionSelection(state_id=state_id)

    def select_district(
        self, district_id: str, catalog: Optional[RegionCatalog] = None
    ) -> "RegionSelection":
        if catalog is None:
            catalog = get_region_catalog()
        district = catalog.get_by_id(district_id)
        if self.state_id is None or district.parent_id != self.state_id:
            raise InvalidInputError(
                f"District '{district_id}' does not belong to selected state "
                f"'{self.state_id}'"
            )
        return replace(self, district_id=district_id)

    def resolve(self, catalog: Optional[RegionCatalog] = None) -> Region:
        if catalog is None:
            catalog = get_region_catalog()
        if self.district_id is not None:
            return catalog.get_by_id(self.district_id)
        if self.state_id is not None:
            return catalog.get_by_id(self.state_id)
        return catalog.default_region()
