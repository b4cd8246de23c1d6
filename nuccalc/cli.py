"""
Interactive terminal calculator.

    nuccalc [--no-clear]
    python -m nuccalc.cli

Walks through weapon, burst type, target city and wind speed, then prints the
effect tiers, fallout footprint and casualty estimate.
"""
from __future__ import annotations
import argparse
import math
import os
import sys

from .calculator import NuclearEffectsCalculator, Scenario
from .effects_model import (
    BurstChoice, BurstType, optimal_heights, resolve_burst_height, is_extreme_height,
)
from .reference_data import CITIES, PRESET_GROUPS, WEAPON_PRESETS, CityRecord, WeaponPreset
from .report import header, optimal_heights_block, render_results, rule, weapon_option
from .settings import load_settings

# Menu number -> burst variant (7 = custom, 8 = weapon's typical height)
BURST_MENU = {
    1: BurstType.SURFACE,
    2: BurstType.OPTIMUM,
    3: BurstType.LOW,
    4: BurstType.HIGH,
    5: BurstType.THERMAL,
    6: BurstType.BLAST,
}


def clear_screen(enabled: bool) -> None:
    if enabled:
        os.system("cls" if os.name == "nt" else "clear")


# -----------------------------
# Input helpers (re-prompt until valid)
# -----------------------------
def ask_number(prompt: str, minimum: float = 0.0, strict: bool = False) -> float:
    while True:
        raw = input(prompt).strip()
        try:
            value = float(raw)
        except ValueError:
            print(f"Not a number: {raw!r}")
            continue
        if not math.isfinite(value):
            print("Value must be finite.")
            continue
        if (strict and value <= minimum) or value < minimum:
            bound = ">" if strict else ">="
            print(f"Value must be {bound} {minimum:g}.")
            continue
        return value


def ask_choice(prompt: str, low: int, high: int) -> int:
    while True:
        raw = input(prompt).strip()
        try:
            choice = int(raw)
        except ValueError:
            print(f"Enter a number between {low} and {high}.")
            continue
        if low <= choice <= high:
            return choice
        print(f"Enter a number between {low} and {high}.")


# -----------------------------
# Menus
# -----------------------------
def weapon_menu() -> str:
    lines = [header("Nuclear Weapon Selection")]
    for title, start, end in PRESET_GROUPS:
        lines.append(f"{title}:")
        row = ""
        for i in range(start, end):
            entry = weapon_option(i, WEAPON_PRESETS[i])
            if (i - start) % 2 == 0:
                row = f"{entry:<52}"
                if i == end - 1:
                    lines.append(row.rstrip())
            else:
                lines.append(row + entry)
        lines.append(rule())
    lines.append(f"{len(WEAPON_PRESETS) + 1}. Custom Input")
    lines.append(rule())
    return "\n".join(lines)


def select_weapon(clear: bool) -> tuple[float, WeaponPreset | None]:
    clear_screen(clear)
    print(weapon_menu())
    choice = ask_choice(f"\nSelect weapon (1-{len(WEAPON_PRESETS) + 1}): ", 1, len(WEAPON_PRESETS) + 1)
    if choice <= len(WEAPON_PRESETS):
        preset = WEAPON_PRESETS[choice - 1]
        print(f"\nSelected: {preset.name} ({preset.type})")
        return preset.yield_mt, preset
    return ask_number("Enter yield (MT): ", minimum=0.0, strict=True), None


def burst_menu(yield_mt: float, preset: WeaponPreset | None) -> str:
    oh = optimal_heights(yield_mt)
    rows = [
        ("1. Surface Burst     ", "Height: 0m              ", "Maximum fallout, reduced blast radius"),
        ("2. Optimal Air Burst ", f"Height: {int(oh.combined_m):>5}m          ", "Best combined blast/thermal effects"),
        ("3. Low Air Burst     ", f"Height: {int(oh.combined_m * 0.7):>5}m          ", "Balanced effects, moderate fallout"),
        ("4. High Air Burst    ", f"Height: {int(oh.combined_m * 1.5):>5}m          ", "Minimum fallout, reduced effects"),
        ("5. Thermal Optimized ", f"Height: {int(oh.thermal_m):>5}m          ", "Maximum thermal radiation effects"),
        ("6. Blast Optimized   ", f"Height: {int(oh.blast_m):>5}m          ", "Maximum blast wave effects"),
        ("7. Custom Height     ", "User defined height     ", "Manual height input"),
    ]
    if preset is not None:
        rows.append(("8. Weapon Typical    ", f"Height: {int(preset.typical_height_m):>5}m          ",
                     f"Typical burst height of {preset.name}"))
    lines = [header("Burst Type Selection"), optimal_heights_block(oh), "Select burst type:", rule()]
    for label, height, note in rows:
        lines.append(f"{label}| {height}| {note}")
        lines.append(rule())
    return "\n".join(lines)


def select_burst(yield_mt: float, preset: WeaponPreset | None, clear: bool) -> float:
    clear_screen(clear)
    print(burst_menu(yield_mt, preset))
    last = 8 if preset is not None else 7
    choice = ask_choice(f"Enter selection (1-{last}): ", 1, last)
    if choice in BURST_MENU:
        burst = BurstChoice(BURST_MENU[choice])
    elif choice == 7:
        burst = BurstChoice(BurstType.CUSTOM, ask_number("Enter burst height (meters): ", minimum=0.0))
    else:
        burst = BurstChoice(BurstType.CUSTOM, preset.typical_height_m)
    height = resolve_burst_height(burst, yield_mt)
    if is_extreme_height(height, yield_mt):
        print("Warning: Height might be too high for effective weapon use")
    return height


def city_menu(cities: tuple[CityRecord, ...]) -> str:
    lines = [header("Target City Selection")]
    for i, c in enumerate(cities, start=1):
        lines.append(f"{i:>2}. {c.name:<15}  {c.country:<12}  Pop: {c.population_m:g}M")
    lines.append(rule())
    return "\n".join(lines)


def select_city(clear: bool, cities: tuple[CityRecord, ...] = CITIES) -> CityRecord:
    clear_screen(clear)
    print(city_menu(cities))
    return cities[ask_choice("Enter city number: ", 1, len(cities)) - 1]


def ask_wind(clear: bool) -> float:
    clear_screen(clear)
    print(header("Wind Parameters"))
    wind = ask_number("Enter wind speed (km/h): ", minimum=0.0)
    print(rule())
    return wind


def run_session(clear: bool = True, cities: tuple[CityRecord, ...] = CITIES) -> Scenario:
    """Collect one Scenario from the terminal."""
    yield_mt, preset = select_weapon(clear)
    height = select_burst(yield_mt, preset, clear)
    city = select_city(clear, cities)
    wind = ask_wind(clear)
    return Scenario(yield_mt=yield_mt, height_m=height, wind_speed_kmh=wind, city=city)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the nuccalc terminal calculator."""
    ap = argparse.ArgumentParser(prog="nuccalc", description="Nuclear weapons effects calculator")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between menus")
    args = ap.parse_args(argv)

    settings = load_settings()
    clear = settings.clear_screen and not args.no_clear

    try:
        scenario = run_session(clear=clear)
    except EOFError:
        print("\nInput closed, nothing calculated.")
        return 0
    except KeyboardInterrupt:
        print()
        return 130

    results = NuclearEffectsCalculator(scenario).results()
    clear_screen(clear)
    print()
    print(render_results(scenario, results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
