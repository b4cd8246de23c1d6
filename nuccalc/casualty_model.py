from __future__ import annotations
from dataclasses import dataclass
from math import pi, sqrt, exp

from .effects_model import WeaponEffects
from .reference_data import CityRecord

RINGS = 20

# Fraction of the people in a ring assigned to each outcome
BLAST_DEATH_FRACTION = 0.9
BLAST_SEVERE_FRACTION = 0.5
BLAST_LIGHT_FRACTION = 0.3
THERMAL_DEATH_FRACTION = 0.7
RADIATION_SEVERE_FRACTION = 0.8

# Long-term mortality among the exposed (severe + light injuries)
LONG_TERM_FRACTIONS = {1: 0.1, 5: 0.2, 10: 0.3, 20: 0.4}


def density_at(city: CityRecord, distance_km: float) -> float:
    """
    People per km^2 at a distance from the city centre: exponential decay over
    the urban core, then a faster suburban falloff beyond the city radius.
    """
    if distance_km <= city.radius_km:
        return city.density * exp(-distance_km / city.radius_km)
    return city.suburban_density * exp(-(distance_km - city.radius_km) / (0.5 * city.radius_km))


@dataclass(frozen=True)
class CasualtyEstimate:
    deaths: float = 0.0
    severe_injuries: float = 0.0
    light_injuries: float = 0.0
    long_term_deaths_1y: float = 0.0
    long_term_deaths_5y: float = 0.0
    long_term_deaths_10y: float = 0.0
    long_term_deaths_20y: float = 0.0

    @property
    def total_casualties(self) -> float:
        return self.deaths + self.severe_injuries + self.light_injuries

    def as_dict(self) -> dict:
        return {
            "deaths": self.deaths,
            "severe_injuries": self.severe_injuries,
            "light_injuries": self.light_injuries,
            "total_casualties": self.total_casualties,
            "long_term_deaths": {
                "1_year": self.long_term_deaths_1y,
                "5_years": self.long_term_deaths_5y,
                "10_years": self.long_term_deaths_10y,
                "20_years": self.long_term_deaths_20y,
            },
        }


def _radius_km_from_area(area_km2: float) -> float:
    return sqrt(area_km2 / pi)


def estimate_casualties(effects: WeaponEffects, city: CityRecord, rings: int = RINGS) -> CasualtyEstimate:
    """
    Concentric-ring integration of the city density out to the largest light
    radius of the three channels. Moderate/light thermal and radiation bands
    contribute nothing.
    """
    blast_severe = _radius_km_from_area(effects.blast.severe_area_km2)
    blast_moderate = _radius_km_from_area(effects.blast.moderate_area_km2)
    blast_light = _radius_km_from_area(effects.blast.light_area_km2)
    thermal_severe = _radius_km_from_area(effects.thermal.severe_area_km2)
    radiation_severe = _radius_km_from_area(effects.radiation.severe_area_km2)

    max_radius = max(
        blast_light,
        _radius_km_from_area(effects.thermal.light_area_km2),
        _radius_km_from_area(effects.radiation.light_area_km2),
    )

    deaths = severe = light = 0.0
    for i in range(rings):
        inner = i * max_radius / rings
        outer = (i + 1) * max_radius / rings
        mid = (inner + outer) / 2.0
        people = pi * (outer * outer - inner * inner) * density_at(city, mid)

        if mid <= blast_severe:
            deaths += BLAST_DEATH_FRACTION * people
        elif mid <= blast_moderate:
            severe += BLAST_SEVERE_FRACTION * people
        elif mid <= blast_light:
            light += BLAST_LIGHT_FRACTION * people

        if mid <= thermal_severe:
            deaths += THERMAL_DEATH_FRACTION * people

        if mid <= radiation_severe:
            severe += RADIATION_SEVERE_FRACTION * people

    exposed = severe + light
    return CasualtyEstimate(
        deaths=deaths,
        severe_injuries=severe,
        light_injuries=light,
        long_term_deaths_1y=exposed * LONG_TERM_FRACTIONS[1],
        long_term_deaths_5y=exposed * LONG_TERM_FRACTIONS[5],
        long_term_deaths_10y=exposed * LONG_TERM_FRACTIONS[10],
        long_term_deaths_20y=exposed * LONG_TERM_FRACTIONS[20],
    )
