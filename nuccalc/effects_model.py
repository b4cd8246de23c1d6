from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from math import pi, sqrt, exp, log10

# -----------------------------
# Physical constants & defaults
# -----------------------------
G_EARTH = 9.80665                     # m/s^2
P_AMBIENT = 101325.0                  # Pa
J_PER_MT_TNT = 4.184e15               # J in 1 megaton TNT
PA_PER_PSI = 6894.757

# Nominal tier coefficients (m), multiplied by the channel's yield scaling
BLAST_TIERS_M = (2000.0, 3000.0, 4500.0)      # ~20 / 10 / 5 psi
THERMAL_TIERS_M = (1200.0, 1800.0, 2400.0)    # severe / moderate / light burns
RADIATION_TIERS_M = (800.0, 1200.0, 1600.0)   # lethal / severe / light dose

# Thermal fluence
THERMAL_FRACTION = 0.35
THERMAL_CALIBRATION = 10_000.0
ATTENUATION_PER_KM = 0.17
THERMAL_SCALE_HEIGHT_M = 7400.0

# Height of burst damping
HOB_DAMPING_SCALE_M = 10_000.0
HOB_MIN_FACTOR = 0.3

# Fallout
CALM_WIND_KMH = 0.1
ACTIVITY_FRACTION_MIN = 0.05
ACTIVITY_FRACTION_MAX = 1.0


# -----------------------------
# Scaling primitives
# -----------------------------
def area_km2(radius_m: float) -> float:
    """Circle area in km^2 for a radius in meters."""
    return pi * (radius_m / 1000.0) ** 2


def yield_to_joules(yield_mt: float) -> float:
    return yield_mt * J_PER_MT_TNT


def cube_root_scaling(yield_mt: float) -> float:
    return yield_mt ** (1.0 / 3.0)


def thermal_scaling(yield_mt: float) -> float:
    return yield_mt ** 0.4


def radiation_scaling(yield_mt: float) -> float:
    return yield_mt ** 0.19


# -----------------------------
# Effect tiers
# -----------------------------
@dataclass(frozen=True)
class EffectTier:
    """Severe / moderate / light radii (m) of one effect channel.

    Areas are always derived from the radii so that area = pi * (r/1000)^2 holds.
    """
    severe_m: float
    moderate_m: float
    light_m: float

    @classmethod
    def from_coefficients(cls, coefficients: tuple[float, float, float], scale: float) -> "EffectTier":
        severe, moderate, light = coefficients
        return cls(severe * scale, moderate * scale, light * scale)

    @property
    def severe_area_km2(self) -> float:
        return area_km2(self.severe_m)

    @property
    def moderate_area_km2(self) -> float:
        return area_km2(self.moderate_m)

    @property
    def light_area_km2(self) -> float:
        return area_km2(self.light_m)

    def scaled(self, factor: float) -> "EffectTier":
        return EffectTier(self.severe_m * factor, self.moderate_m * factor, self.light_m * factor)

    def as_dict(self) -> dict:
        return {
            "severe_radius_m": self.severe_m,
            "moderate_radius_m": self.moderate_m,
            "light_radius_m": self.light_m,
            "severe_area_km2": self.severe_area_km2,
            "moderate_area_km2": self.moderate_area_km2,
            "light_area_km2": self.light_area_km2,
        }


# ---------- Blast ----------
def blast_tier(yield_mt: float) -> EffectTier:
    return EffectTier.from_coefficients(BLAST_TIERS_M, cube_root_scaling(yield_mt))


def mach_stem_factor(yield_mt: float, height_m: float) -> float:
    """Ground overpressure enhancement from the Mach stem for an air burst."""
    if height_m <= 0.0:
        return 1.0
    factor = 1.0 + 0.1 * exp(-(height_m / cube_root_scaling(yield_mt)) / 100.0)
    # below the triple point the merged shock is stronger still
    if height_m < 83.0 * yield_mt ** 0.4:
        factor *= 1.25
    return factor


def blast_overpressure_pa(distance_m: float, yield_mt: float, height_m: float = 0.0) -> float:
    """
    Modified Brode overpressure (Pa) at ground distance with Sachs scaling:
    scaled = d / (E/P0)^(1/3).

    Not cross-calibrated with blast_tier(); do not mix both in one result.
    """
    E = yield_to_joules(yield_mt)
    scaled = distance_m / (E / P_AMBIENT) ** (1.0 / 3.0)
    brode = 1.0 + 0.076 / scaled + 0.255 / scaled**2 + 0.536 / scaled**3
    return P_AMBIENT * brode * mach_stem_factor(yield_mt, height_m)


# ---------- Thermal ----------
def thermal_tier(yield_mt: float) -> EffectTier:
    return EffectTier.from_coefficients(THERMAL_TIERS_M, thermal_scaling(yield_mt))


def thermal_fluence_jpm2(distance_m: float, yield_mt: float, height_m: float = 0.0) -> float:
    """
    Phi(d) = K * 0.35 E / (4 pi d^2) * exp(-0.17 d_km), with an obliquity and
    scale-height term sqrt(1 - (h/(d+h))^2) * exp(-h/7400) for air bursts.
    """
    E_therm = yield_to_joules(yield_mt) * THERMAL_FRACTION
    fluence = THERMAL_CALIBRATION * E_therm / (4.0 * pi * distance_m**2)
    transmission = exp(-ATTENUATION_PER_KM * distance_m / 1000.0)
    if height_m > 0.0:
        angle = sqrt(1.0 - (height_m / (distance_m + height_m)) ** 2)
        fluence *= angle * exp(-height_m / THERMAL_SCALE_HEIGHT_M)
    return fluence * transmission


def fireball_temperature_k(yield_mt: float) -> float:
    return 6000.0 + 1000.0 * log10(yield_mt)


# ---------- Initial radiation ----------
def radiation_tier(yield_mt: float) -> EffectTier:
    return EffectTier.from_coefficients(RADIATION_TIERS_M, radiation_scaling(yield_mt))


# ---------- Height of burst ----------
def height_damping_factor(height_m: float) -> float:
    """Linear falloff with height, never below 30 %."""
    return max(HOB_MIN_FACTOR, 1.0 - height_m / HOB_DAMPING_SCALE_M)


# -----------------------------
# Optimal heights & burst selection
# -----------------------------
@dataclass(frozen=True)
class OptimalHeights:
    thermal_m: float
    blast_m: float
    combined_m: float


def optimal_heights(yield_mt: float) -> OptimalHeights:
    s = cube_root_scaling(yield_mt)
    return OptimalHeights(thermal_m=220.0 * s, blast_m=180.0 * s, combined_m=200.0 * s)


class BurstType(str, Enum):
    SURFACE = "surface"
    OPTIMUM = "optimum"
    LOW = "low"
    HIGH = "high"
    THERMAL = "thermal"
    BLAST = "blast"
    CUSTOM = "custom"


@dataclass(frozen=True)
class BurstChoice:
    kind: BurstType
    custom_height_m: float | None = None

    @classmethod
    def parse(cls, kind: str, custom_height_m: float | None = None) -> "BurstChoice":
        try:
            bt = BurstType(kind.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown burst type '{kind}'.") from None
        return cls(bt, custom_height_m)


def resolve_burst_height(choice: BurstChoice, yield_mt: float) -> float:
    """Height of burst (m) for a burst selection at the given yield."""
    oh = optimal_heights(yield_mt)
    kind = choice.kind
    if kind is BurstType.SURFACE:
        return 0.0
    if kind is BurstType.OPTIMUM:
        return oh.combined_m
    if kind is BurstType.LOW:
        return 0.7 * oh.combined_m
    if kind is BurstType.HIGH:
        return 1.5 * oh.combined_m
    if kind is BurstType.THERMAL:
        return oh.thermal_m
    if kind is BurstType.BLAST:
        return oh.blast_m
    if choice.custom_height_m is None:
        raise ValueError("Custom burst requires a height.")
    return max(0.0, float(choice.custom_height_m))


def is_extreme_height(height_m: float, yield_mt: float) -> bool:
    return height_m > 3.0 * optimal_heights(yield_mt).combined_m


# -----------------------------
# Fallout
# -----------------------------
@dataclass(frozen=True)
class FalloutFootprint:
    max_downwind_km: float
    max_width_km: float
    dangerous_zone_area_km2: float
    angle_deg: float

    def as_dict(self) -> dict:
        return {
            "max_downwind_distance_km": self.max_downwind_km,
            "max_width_km": self.max_width_km,
            "dangerous_zone_area_km2": self.dangerous_zone_area_km2,
            "fallout_angle_deg": self.angle_deg,
        }


def stabilized_cloud_height_m(yield_mt: float, height_m: float) -> float:
    coefficient = 212.0 if height_m == 0.0 else 188.0
    return coefficient * yield_mt ** 0.375


def activity_fraction(yield_mt: float) -> float:
    fa = 0.6 + 0.2 * log10(yield_mt)
    return min(ACTIVITY_FRACTION_MAX, max(ACTIVITY_FRACTION_MIN, fa))


def particle_fraction(height_m: float, cloud_height_m: float) -> float:
    if height_m <= 0.0:
        return 1.0
    return 0.3 * exp(-height_m / (0.7 * cloud_height_m))


def effective_fallout_yield(yield_mt: float, height_m: float) -> float:
    Hs = stabilized_cloud_height_m(yield_mt, height_m)
    return yield_mt * particle_fraction(height_m, Hs) * activity_fraction(yield_mt)


def fallout_footprint(yield_mt: float, height_m: float, wind_speed_kmh: float) -> FalloutFootprint:
    """
    Downwind plume (or calm circular pattern) from stabilized cloud height and
    effective yield. Air bursts keep 30 % of the ground-burst danger zone.
    """
    airburst = height_m > 0.0
    Hs = stabilized_cloud_height_m(yield_mt, height_m)
    fp = particle_fraction(height_m, Hs)
    Ye = yield_mt * fp * activity_fraction(yield_mt)
    base_radius_km = (1000.0 * Ye ** 0.4) / 1000.0   # r0 in m -> km

    if wind_speed_kmh < CALM_WIND_KMH:
        downwind = width = base_radius_km
        angle = 360.0
        area = pi * downwind**2
    else:
        drift = wind_speed_kmh * 3600.0 * (Ye ** 0.4 / G_EARTH) * (1.0 + 0.15 * log10(yield_mt))
        downwind = max(base_radius_km, drift)
        width = downwind * (0.14 + 0.02 * log10(yield_mt)) * sqrt(Hs / 1000.0)
        angle = 40.0 * exp(-height_m / (2.0 * Hs)) * (1.0 - 0.1 * log10(max(1.0, wind_speed_kmh)))
        area = 0.5 * downwind * width * fp * (1.0 - 0.2 * airburst)

    area *= 1.0 if not airburst else 0.3
    return FalloutFootprint(downwind, width, area, angle)


# -----------------------------
# Combined channel output
# -----------------------------
@dataclass(frozen=True)
class WeaponEffects:
    thermal: EffectTier
    blast: EffectTier
    radiation: EffectTier
    fallout: FalloutFootprint


def weapon_effects(yield_mt: float, height_m: float, wind_speed_kmh: float) -> WeaponEffects:
    """All channel tiers at the given burst height, plus the fallout footprint."""
    blast = blast_tier(yield_mt)
    radiation = radiation_tier(yield_mt)
    if height_m > 0.0:
        hf = height_damping_factor(height_m)
        blast = blast.scaled(hf)
        radiation = radiation.scaled(hf)
    return WeaponEffects(
        thermal=thermal_tier(yield_mt),
        blast=blast,
        radiation=radiation,
        fallout=fallout_footprint(yield_mt, height_m, wind_speed_kmh),
    )
