from fastapi import FastAPI, Query, HTTPException
from pydantic import BaseModel, Field
from dataclasses import asdict
from typing import Optional, Literal

from .calculator import NuclearEffectsCalculator, Scenario
from .effects_model import (
    BurstChoice, BurstType, PA_PER_PSI, blast_overpressure_pa, optimal_heights,
    resolve_burst_height, thermal_fluence_jpm2,
)
from .reference_data import BURST_TYPES, CITIES, WEAPON_PRESETS, find_city, find_weapon
from .settings import load_settings

app = FastAPI(title="Nuclear effects calculator", version="1.0.0")

# -------------------------------
# Health + reference tables
# -------------------------------
@app.get("/health")
def health():
    return {"status": "ok"}

@app.get("/presets/weapons")
def list_weapons():
    return [asdict(w) for w in WEAPON_PRESETS]

@app.get("/presets/cities")
def list_cities():
    return [asdict(c) for c in CITIES]

@app.get("/presets/burst-types")
def list_burst_types():
    return [asdict(b) for b in BURST_TYPES.values()]

@app.get("/optimal-heights")
def get_optimal_heights(yield_mt: float = Query(..., gt=0, allow_inf_nan=False, description="Yield in megatons")):
    oh = optimal_heights(yield_mt)
    return {"yield_mt": yield_mt, "thermal_m": oh.thermal_m, "blast_m": oh.blast_m, "combined_m": oh.combined_m}

# -------------------------------
# Effects
# -------------------------------

class ScenarioIn(BaseModel):
    weapon: Optional[str] = Field(None, description="Weapon preset name (alternative to yield_mt)")
    yield_mt: Optional[float] = Field(None, gt=0, allow_inf_nan=False, description="Yield in megatons")
    burst: Literal["surface", "optimum", "low", "high", "thermal", "blast", "custom", "preset"] = Field(
        "optimum", description="'custom' uses height_m, 'preset' uses the weapon's typical height")
    height_m: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="Burst height in meters, only with burst 'custom'")
    wind_speed_kmh: float = Field(0.0, ge=0, allow_inf_nan=False, description="Wind speed in km/h")
    city: Optional[str] = Field(None, description="Target city name (defaults to NUCCALC_DEFAULT_CITY)")


def _lookup(fn, name: str):
    try:
        return fn(name)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))


def build_scenario(req: ScenarioIn) -> Scenario:
    settings = load_settings()
    if (req.weapon is None) == (req.yield_mt is None):
        raise HTTPException(status_code=422, detail="Give exactly one of 'weapon' or 'yield_mt'.")

    preset = _lookup(find_weapon, req.weapon) if req.weapon is not None else None
    yield_mt = preset.yield_mt if preset is not None else req.yield_mt
    if yield_mt > settings.max_yield_mt:
        raise HTTPException(status_code=422, detail=f"Yield above the configured maximum of {settings.max_yield_mt:g} MT.")

    if req.height_m is not None and req.burst != "custom":
        raise HTTPException(status_code=422, detail="'height_m' is only accepted with burst 'custom'.")

    if req.burst == "preset":
        if preset is None:
            raise HTTPException(status_code=422, detail="Burst 'preset' requires a weapon preset.")
        burst = BurstChoice(BurstType.CUSTOM, preset.typical_height_m)
    else:
        burst = BurstChoice.parse(req.burst, req.height_m)
    try:
        height = resolve_burst_height(burst, yield_mt)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    city = _lookup(find_city, req.city or settings.default_city)
    return Scenario(yield_mt=yield_mt, height_m=height, wind_speed_kmh=req.wind_speed_kmh, city=city)


@app.post("/effects/summary")
def effects_summary(req: ScenarioIn):
    print(f"[effects] weapon={req.weapon} yield_mt={req.yield_mt} burst={req.burst} "
          f"wind_kmh={req.wind_speed_kmh} city={req.city}")
    scenario = build_scenario(req)
    print(f"[effects] resolved yield_mt={scenario.yield_mt} height_m={scenario.height_m:.1f} city={scenario.city.name}")
    summary = NuclearEffectsCalculator(scenario).summary()
    for w in summary["warnings"]:
        print(f"[effects.warning] {w}")
    print(f"[effects.done] deaths={summary['casualties']['deaths']:.0f} "
          f"fallout_area_km2={summary['fallout']['dangerous_zone_area_km2']:.2f}")
    return summary

@app.get("/effects/overpressure")
def overpressure(
    distance_m: float = Query(..., gt=0, allow_inf_nan=False, description="Ground distance in meters"),
    yield_mt: float = Query(..., gt=0, allow_inf_nan=False, description="Yield in megatons"),
    height_m: float = Query(0.0, ge=0, allow_inf_nan=False, description="Burst height in meters"),
):
    p = blast_overpressure_pa(distance_m, yield_mt, height_m)
    return {"distance_m": distance_m, "yield_mt": yield_mt, "height_m": height_m,
            "overpressure_pa": p, "overpressure_psi": p / PA_PER_PSI}

@app.get("/effects/thermal-fluence")
def thermal_fluence(
    distance_m: float = Query(..., gt=0, allow_inf_nan=False, description="Ground distance in meters"),
    yield_mt: float = Query(..., gt=0, allow_inf_nan=False, description="Yield in megatons"),
    height_m: float = Query(0.0, ge=0, allow_inf_nan=False, description="Burst height in meters"),
):
    return {"distance_m": distance_m, "yield_mt": yield_mt, "height_m": height_m,
            "fluence_jpm2": thermal_fluence_jpm2(distance_m, yield_mt, height_m)}
