from __future__ import annotations
from dataclasses import dataclass

# -----------------------------
# Reference records
# -----------------------------

@dataclass(frozen=True)
class WeaponPreset:
    name: str
    type: str
    yield_mt: float
    is_airburst: bool
    typical_height_m: float


@dataclass(frozen=True)
class BurstTypePreset:
    key: str
    name: str
    fallout_factor: float
    radiation_factor: float
    description: str


@dataclass(frozen=True)
class CityRecord:
    name: str
    country: str
    population_m: float          # millions
    area_km2: float
    density: float               # people / km^2 (urban core)
    radius_km: float
    suburban_density: float      # people / km^2


# -----------------------------
# Weapon presets (name, type, MT, airburst, typical height m)
# -----------------------------
WEAPON_PRESETS: tuple[WeaponPreset, ...] = (
    # Historic
    WeaponPreset("Little Boy (US)", "Uranium Gun-Type", 0.015, True, 580.0),
    WeaponPreset("Fat Man (US)", "Plutonium Implosion", 0.021, True, 503.0),
    WeaponPreset("Ivy King (US)", "Fission", 0.500, True, 450.0),
    WeaponPreset("Castle Bravo (US)", "Thermonuclear", 15.0, True, 2000.0),
    WeaponPreset("Tsar Bomba (USSR)", "Thermonuclear", 50.0, True, 4000.0),
    # United States
    WeaponPreset("W88", "SLBM Thermonuclear", 0.475, True, 300.0),
    WeaponPreset("W87", "ICBM Thermonuclear", 0.300, True, 300.0),
    WeaponPreset("W76-1", "SLBM Thermonuclear", 0.100, True, 250.0),
    WeaponPreset("W78", "ICBM Thermonuclear", 0.350, True, 300.0),
    WeaponPreset("B61-12", "Variable Yield", 0.050, True, 200.0),
    WeaponPreset("W80", "Cruise Missile", 0.150, True, 250.0),
    WeaponPreset("B83", "Strategic Bomb", 1.200, True, 300.0),
    # Russia
    WeaponPreset("RS-28 Sarmat", "MIRV Thermonuclear", 0.800, True, 350.0),
    WeaponPreset("R-36M2 Voevoda", "MIRV Thermonuclear", 0.750, True, 300.0),
    WeaponPreset("RT-2PM2 Topol-M", "Thermonuclear", 0.550, True, 300.0),
    WeaponPreset("RSM-56 Bulava", "SLBM MIRV", 0.150, True, 250.0),
    WeaponPreset("9K720 Iskander", "Enhanced Radiation", 0.050, True, 200.0),
    WeaponPreset("RS-24 Yars", "Mobile ICBM", 0.300, True, 300.0),
    # China
    WeaponPreset("DF-5B", "MIRV Thermonuclear", 0.500, True, 300.0),
    WeaponPreset("DF-41", "Mobile MIRV", 0.350, True, 250.0),
    WeaponPreset("JL-2", "SLBM", 0.250, True, 250.0),
    WeaponPreset("DF-31AG", "Mobile ICBM", 0.250, True, 300.0),
    WeaponPreset("DF-26", "IRB Thermonuclear", 0.150, True, 200.0),
    WeaponPreset("DF-21", "Medium Range", 0.300, True, 250.0),
    # Other nuclear powers
    WeaponPreset("Trident D5", "UK SLBM", 0.100, True, 250.0),
    WeaponPreset("M51", "French SLBM", 0.150, True, 250.0),
    WeaponPreset("ASMP-A", "French Cruise", 0.300, True, 200.0),
    WeaponPreset("Jericho III", "Israeli IRBM", 0.400, True, 250.0),
    WeaponPreset("Agni-V", "Indian ICBM", 0.250, True, 300.0),
    WeaponPreset("K-15 Sagarika", "Indian SLBM", 0.200, True, 250.0),
    WeaponPreset("Shaheen-III", "Pakistani MRBM", 0.200, True, 250.0),
    WeaponPreset("Babur", "Pakistani Cruise", 0.050, True, 200.0),
    WeaponPreset("Hwasong-15", "NK ICBM", 0.200, True, 250.0),
    WeaponPreset("Hwasong-14", "NK ICBM", 0.150, True, 250.0),
    WeaponPreset("Pukguksong-2", "NK MRBM", 0.050, True, 200.0),
)

# Menu headings -> [start, end) slices of WEAPON_PRESETS
PRESET_GROUPS: tuple[tuple[str, int, int], ...] = (
    ("Historic Weapons", 0, 5),
    ("United States", 5, 12),
    ("Russian Weapons", 12, 18),
    ("Chinese Weapons", 18, 24),
    ("Other Nuclear Powers", 24, len(WEAPON_PRESETS)),
)

# -----------------------------
# Burst type presets
# -----------------------------
BURST_TYPES: dict[str, BurstTypePreset] = {
    "surface": BurstTypePreset("surface", "Surface Burst", 1.0, 1.0,
                               "Maximum fallout, reduced blast radius"),
    "optimum": BurstTypePreset("optimum", "Optimal Air Burst", 0.5, 0.7,
                               "Best blast/thermal effects"),
    "low":     BurstTypePreset("low", "Low Air Burst", 0.7, 0.8,
                               "Balanced effects"),
    "high":    BurstTypePreset("high", "High Air Burst", 0.3, 0.5,
                               "Minimum fallout, reduced blast"),
}

# -----------------------------
# Cities (name, country, pop M, area km^2, density, radius km, suburban density)
# -----------------------------
CITIES: tuple[CityRecord, ...] = (
    CityRecord("Amsterdam", "Netherlands", 1.1, 219, 5023, 9.2, 2100),
    CityRecord("Athens", "Greece", 3.2, 412, 7767, 15.2, 2200),
    CityRecord("Barcelona", "Spain", 1.6, 101, 15842, 5.8, 3500),
    CityRecord("Belgrade", "Serbia", 1.7, 360, 4722, 10.7, 1200),
    CityRecord("Berlin", "Germany", 3.7, 892, 4147, 16.8, 1800),
    CityRecord("Brussels", "Belgium", 2.1, 161, 13043, 7.2, 3200),
    CityRecord("Bucharest", "Romania", 2.1, 228, 9210, 8.5, 1500),
    CityRecord("Budapest", "Hungary", 1.8, 525, 3428, 12.9, 1100),
    CityRecord("Copenhagen", "Denmark", 0.8, 180, 4444, 7.5, 1800),
    CityRecord("Dublin", "Ireland", 1.4, 115, 12174, 6.1, 2500),
    CityRecord("Graz", "Austria", 0.29, 127, 2283, 6.4, 800),
    CityRecord("Hamburg", "Germany", 1.9, 755, 2517, 15.5, 1200),
    CityRecord("Helsinki", "Finland", 0.66, 215, 3070, 8.2, 1400),
    CityRecord("Kiev", "Ukraine", 3.0, 839, 3575, 16.3, 900),
    CityRecord("Linz", "Austria", 0.21, 96, 2187, 5.5, 700),
    CityRecord("Lisbon", "Portugal", 2.9, 100, 29000, 5.6, 4200),
    CityRecord("London", "UK", 9.0, 1572, 5724, 22.5, 3500),
    CityRecord("Madrid", "Spain", 3.3, 604, 5464, 13.8, 2200),
    CityRecord("Milan", "Italy", 1.4, 182, 7692, 7.6, 2800),
    CityRecord("Moscow", "Russia", 12.5, 2511, 4978, 28.1, 2000),
    CityRecord("Munich", "Germany", 1.5, 310, 4839, 9.9, 1900),
    CityRecord("Oslo", "Norway", 0.7, 454, 1542, 12.0, 800),
    CityRecord("Paris", "France", 2.2, 105, 20952, 5.8, 5500),
    CityRecord("Prague", "Czech Rep.", 1.3, 496, 2621, 12.5, 1100),
    CityRecord("Rome", "Italy", 4.3, 1285, 3345, 20.2, 1600),
    CityRecord("Sofia", "Bulgaria", 1.3, 492, 2642, 12.5, 900),
    CityRecord("Stockholm", "Sweden", 1.0, 188, 5319, 7.7, 1700),
    CityRecord("Vienna", "Austria", 1.9, 415, 4579, 11.5, 1600),
    CityRecord("Warsaw", "Poland", 1.8, 517, 3483, 12.8, 1400),
    CityRecord("Zagreb", "Croatia", 0.8, 641, 1248, 14.2, 600),
    CityRecord("Zurich", "Switzerland", 0.43, 88, 4886, 5.3, 2200),
)


def find_city(name: str, cities: tuple[CityRecord, ...] = CITIES) -> CityRecord:
    """Case-insensitive lookup by city name."""
    key = name.strip().lower()
    for c in cities:
        if c.name.lower() == key:
            return c
    raise KeyError(f"Unknown city '{name}'.")


def find_weapon(name: str, presets: tuple[WeaponPreset, ...] = WEAPON_PRESETS) -> WeaponPreset:
    """Case-insensitive lookup by weapon name."""
    key = name.strip().lower()
    for w in presets:
        if w.name.lower() == key:
            return w
    raise KeyError(f"Unknown weapon '{name}'.")
