import math
from dataclasses import replace

import pytest

from nuccalc.casualty_model import CasualtyEstimate, density_at, estimate_casualties
from nuccalc.effects_model import EffectTier, FalloutFootprint, WeaponEffects, weapon_effects
from nuccalc.reference_data import CITIES, find_city

LONDON = find_city("London")


def _effects(blast, thermal, radiation):
    calm = FalloutFootprint(0.0, 0.0, 0.0, 360.0)
    return WeaponEffects(thermal=thermal, blast=blast, radiation=radiation, fallout=calm)


def test_density_inside_core():
    assert density_at(LONDON, 0.0) == LONDON.density
    assert density_at(LONDON, LONDON.radius_km) == pytest.approx(LONDON.density * math.exp(-1.0))


def test_density_suburban_falloff():
    d = LONDON.radius_km + 0.5 * LONDON.radius_km
    assert density_at(LONDON, d) == pytest.approx(LONDON.suburban_density * math.exp(-1.0))


def test_density_never_negative():
    for city in CITIES:
        for d in (0.0, 1.0, city.radius_km, 5 * city.radius_km, 1000.0):
            assert density_at(city, d) >= 0.0


def test_blast_only_rings():
    # near-uniform density, blast severe covers every ring
    city = replace(LONDON, density=100.0, radius_km=1e9, suburban_density=100.0)
    tiny = EffectTier(0.0, 0.0, 0.0)
    effects = _effects(EffectTier(20_000.0, 20_000.0, 20_000.0), tiny, tiny)
    c = estimate_casualties(effects, city)
    # density ~ 100 everywhere (radius huge), total area = pi * 20^2
    assert c.deaths == pytest.approx(0.9 * 100.0 * math.pi * 400.0, rel=1e-6)
    assert c.severe_injuries == 0.0
    assert c.light_injuries == 0.0


def test_bands_accumulate_per_channel():
    city = replace(LONDON, density=100.0, radius_km=1e9, suburban_density=100.0)
    effects = _effects(
        blast=EffectTier(5000.0, 10_000.0, 20_000.0),
        thermal=EffectTier(5000.0, 15_000.0, 20_000.0),
        radiation=EffectTier(5000.0, 10_000.0, 20_000.0),
    )
    c = estimate_casualties(effects, city)
    # rings are 1 km wide; ring i covers [i, i+1]
    inner5 = math.pi * 25.0 * 100.0
    ring_5_10 = math.pi * (100.0 - 25.0) * 100.0
    ring_10_20 = math.pi * (400.0 - 100.0) * 100.0
    assert c.deaths == pytest.approx((0.9 + 0.7) * inner5, rel=1e-6)
    assert c.severe_injuries == pytest.approx(0.5 * ring_5_10 + 0.8 * inner5, rel=1e-6)
    assert c.light_injuries == pytest.approx(0.3 * ring_10_20, rel=1e-6)


def test_long_term_bands_ordered_and_fractions():
    effects = weapon_effects(1.0, 0.0, 0.0)
    c = estimate_casualties(effects, LONDON)
    exposed = c.severe_injuries + c.light_injuries
    assert c.long_term_deaths_1y == pytest.approx(0.1 * exposed)
    assert c.long_term_deaths_20y == pytest.approx(0.4 * exposed)
    assert 0.0 <= c.long_term_deaths_1y <= c.long_term_deaths_5y <= c.long_term_deaths_10y <= c.long_term_deaths_20y


@pytest.mark.parametrize("k", [0.5, 2.0, 10.0])
def test_casualties_scale_with_population(k):
    effects = weapon_effects(0.3, 300.0, 10.0)
    base = estimate_casualties(effects, LONDON)
    scaled_city = replace(LONDON, density=LONDON.density * k, suburban_density=LONDON.suburban_density * k)
    scaled = estimate_casualties(effects, scaled_city)
    assert scaled.deaths == pytest.approx(k * base.deaths, rel=1e-12)
    assert scaled.severe_injuries == pytest.approx(k * base.severe_injuries, rel=1e-12)
    assert scaled.light_injuries == pytest.approx(k * base.light_injuries, rel=1e-12)


def test_total_casualties_and_dict():
    c = CasualtyEstimate(deaths=10.0, severe_injuries=5.0, light_injuries=2.5)
    assert c.total_casualties == 17.5
    d = c.as_dict()
    assert d["total_casualties"] == 17.5
    assert set(d["long_term_deaths"]) == {"1_year", "5_years", "10_years", "20_years"}
