from __future__ import annotations
from dataclasses import dataclass

from .casualty_model import CasualtyEstimate, estimate_casualties
from .effects_model import (
    WeaponEffects, weapon_effects, optimal_heights, is_extreme_height,
    height_damping_factor, stabilized_cloud_height_m, effective_fallout_yield,
    activity_fraction, fireball_temperature_k, yield_to_joules,
)
from .reference_data import CityRecord


@dataclass(frozen=True)
class Scenario:
    yield_mt: float
    height_m: float
    wind_speed_kmh: float
    city: CityRecord

    @property
    def is_airburst(self) -> bool:
        return self.height_m > 0.0


@dataclass(frozen=True)
class ScenarioResults:
    effects: WeaponEffects
    casualties: CasualtyEstimate

    @property
    def blast(self):
        return self.effects.blast

    @property
    def thermal(self):
        return self.effects.thermal

    @property
    def radiation(self):
        return self.effects.radiation

    @property
    def fallout(self):
        return self.effects.fallout


class NuclearEffectsCalculator:
    """
    Blast + thermal + initial radiation tiers, fallout footprint and casualty
    estimate for one Scenario. Pure: the same scenario always gives the same numbers.
    """

    def __init__(self, scenario: Scenario):
        self.s = scenario

    def calculate_effects(self) -> WeaponEffects:
        return weapon_effects(self.s.yield_mt, self.s.height_m, self.s.wind_speed_kmh)

    def estimate_casualties(self, effects: WeaponEffects | None = None) -> CasualtyEstimate:
        effects = self.calculate_effects() if effects is None else effects
        return estimate_casualties(effects, self.s.city)

    def results(self) -> ScenarioResults:
        effects = self.calculate_effects()
        return ScenarioResults(effects=effects, casualties=self.estimate_casualties(effects))

    def warnings(self) -> list[str]:
        out = []
        if is_extreme_height(self.s.height_m, self.s.yield_mt):
            out.append("Height might be too high for effective weapon use")
        return out

    # ---------- Convenience summary ----------
    def summary(self) -> dict:
        res = self.results()
        s = self.s
        oh = optimal_heights(s.yield_mt)
        return {
            "scenario": {
                "yield_mt": s.yield_mt,
                "energy_J": yield_to_joules(s.yield_mt),
                "height_m": s.height_m,
                "is_airburst": s.is_airburst,
                "wind_speed_kmh": s.wind_speed_kmh,
                "city": {"name": s.city.name, "country": s.city.country,
                         "population_m": s.city.population_m},
            },
            "optimal_heights_m": {"thermal": oh.thermal_m, "blast": oh.blast_m, "combined": oh.combined_m},
            "height_damping_factor": height_damping_factor(s.height_m) if s.is_airburst else 1.0,
            "blast": res.blast.as_dict(),
            "thermal": {**res.thermal.as_dict(), "fireball_temperature_K": fireball_temperature_k(s.yield_mt)},
            "radiation": res.radiation.as_dict(),
            "fallout": {
                **res.fallout.as_dict(),
                "stabilized_cloud_height_m": stabilized_cloud_height_m(s.yield_mt, s.height_m),
                "activity_fraction": activity_fraction(s.yield_mt),
                "effective_yield_mt": effective_fallout_yield(s.yield_mt, s.height_m),
            },
            "casualties": res.casualties.as_dict(),
            "warnings": self.warnings(),
        }
