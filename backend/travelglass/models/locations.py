"""
Static country → region → city reference data used to fill the scene creation
form. The hierarchy is built once at startup and handed to whoever needs it;
nothing mutates it afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar
from uuid import UUID, uuid4


@dataclass(frozen=True, eq=False)
class City:
    name: str
    local_name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    id: UUID = field(default_factory=uuid4)

    @property
    def coordinate(self) -> Optional[Tuple[float, float]]:
        if self.latitude is None or self.longitude is None:
            return None
        return self.latitude, self.longitude

    @property
    def display_name(self) -> str:
        return self.local_name or self.name


@dataclass(frozen=True, eq=False)
class Region:
    name: str
    local_name: Optional[str] = None
    cities: Tuple[City, ...] = ()
    id: UUID = field(default_factory=uuid4)

    @property
    def display_name(self) -> str:
        return self.local_name or self.name


@dataclass(frozen=True, eq=False)
class Country:
    name: str
    code: str
    local_name: Optional[str] = None
    regions: Tuple[Region, ...] = ()
    id: UUID = field(default_factory=uuid4)

    @property
    def display_name(self) -> str:
        return self.local_name or self.name

    @property
    def region_label(self) -> str:
        return "Province/City" if self.code == "CN" else "State/Region"


_Named = TypeVar("_Named", Country, Region, City)


def _first_named(items: Iterable[_Named], name: str) -> Optional[_Named]:
    return next((item for item in items if name in (item.name, item.local_name)), None)


class LocationDatabase:
    def __init__(self, countries: Sequence[Country]) -> None:
        self._countries: Tuple[Country, ...] = tuple(countries)

    @property
    def countries(self) -> List[Country]:
        return list(self._countries)

    def find_country(self, name: str) -> Optional[Country]:
        return _first_named(self._countries, name)

    def find_region(self, country: Country, name: str) -> Optional[Region]:
        return _first_named(country.regions, name)

    def find_city(self, region: Region, name: str) -> Optional[City]:
        return _first_named(region.cities, name)

    @classmethod
    def from_data(cls, data: Iterable[dict]) -> "LocationDatabase":
        countries = [
            Country(
                name=c["name"],
                code=c["code"],
                local_name=c.get("local_name"),
                regions=tuple(
                    Region(
                        name=r["name"],
                        local_name=r.get("local_name"),
                        cities=tuple(
                            City(
                                name=city["name"],
                                local_name=city.get("local_name"),
                                latitude=city.get("latitude"),
                                longitude=city.get("longitude"),
                            )
                            for city in r.get("cities", [])
                        ),
                    )
                    for r in c.get("regions", [])
                ),
            )
            for c in data
        ]
        return cls(countries)
