"""
Plain-text rendering of calculator results for the terminal.

Everything here returns strings; printing and screen handling stay in the CLI.
"""
from __future__ import annotations

from .calculator import Scenario, ScenarioResults
from .casualty_model import CasualtyEstimate
from .effects_model import EffectTier, FalloutFootprint, OptimalHeights
from .reference_data import WeaponPreset

WIDTH = 78


def rule(char: str = "-") -> str:
    return char * WIDTH


def header(title: str) -> str:
    return f"{rule()}\n{title}\n{rule()}"


def format_distance(distance_m: float) -> str:
    """'< 1 m', whole meters below 1 km, otherwise km truncated to one decimal."""
    if distance_m < 1.0:
        return "< 1 m"
    if distance_m >= 1000.0:
        km = int(distance_m // 1000)
        tenths = int((distance_m % 1000.0) // 100)
        return f"{km}.{tenths} km"
    return f"{int(distance_m)} m"


def weapon_option(index: int, preset: WeaponPreset) -> str:
    return f"{index + 1}. {preset.name}/{preset.type} ({preset.yield_mt:.3f} MT)"


def effect_line(name: str, tier: EffectTier) -> str:
    return (
        f"{name:<15}| "
        f"Severe: {format_distance(tier.severe_m):<10} ({tier.severe_area_km2:.2f} km²) | "
        f"Moderate: {format_distance(tier.moderate_m):<10} ({tier.moderate_area_km2:.2f} km²) | "
        f"Light: {format_distance(tier.light_m):<10} ({tier.light_area_km2:.2f} km²)"
    )


def optimal_heights_block(oh: OptimalHeights) -> str:
    return (
        "Optimal Heights Analysis:\n"
        f"Thermal effects:     {int(oh.thermal_m)}m\n"
        f"Blast effects:       {int(oh.blast_m)}m\n"
        f"Combined optimum:    {int(oh.combined_m)}m\n"
    )


def fallout_block(fallout: FalloutFootprint, wind_speed_kmh: float) -> str:
    return (
        f"Fallout Data | Wind Speed: {wind_speed_kmh:>3g} km/h | "
        f"Max Distance: {fallout.max_downwind_km:>5.2f} km\n"
        f"Width: {fallout.max_width_km:.2f} km | "
        f"Angle: {fallout.angle_deg:.1f}° | "
        f"Fallout Zone: {fallout.dangerous_zone_area_km2:.2f} km²"
    )


def casualty_block(city_name: str, c: CasualtyEstimate) -> str:
    lines = [
        f"Estimated Casualties in {city_name}:",
        "=" * 37,
        f"Fatalities: {c.deaths:.0f}",
        f"Severe Injuries: {c.severe_injuries:.0f}",
        f"Light Injuries: {c.light_injuries:.0f}",
        f"Total Casualties: {c.total_casualties:.0f}",
        f"Long-Term Deaths (1 Year): {c.long_term_deaths_1y:.0f}",
        f"Long-Term Deaths (5 Years): {c.long_term_deaths_5y:.0f}",
        f"Long-Term Deaths (10 Years): {c.long_term_deaths_10y:.0f}",
        f"Long-Term Deaths (20 Years): {c.long_term_deaths_20y:.0f}",
    ]
    return "\n".join(lines)


def render_results(scenario: Scenario, results: ScenarioResults) -> str:
    weapon = f"Weapon Data | Yield: {scenario.yield_mt:>6g} MT | Type: "
    if scenario.is_airburst:
        weapon += f"Air burst | Height: {scenario.height_m:.0f}m"
    else:
        weapon += "Ground burst"
    parts = [
        "Calculated Effects:",
        rule("="),
        weapon,
        rule(),
        effect_line("Thermal", results.thermal),
        rule(),
        effect_line("Blast", results.blast),
        rule(),
        effect_line("Radiation", results.radiation),
        rule(),
        fallout_block(results.fallout, scenario.wind_speed_kmh),
        rule(),
        "",
        casualty_block(scenario.city.name, results.casualties),
        rule("="),
    ]
    return "\n".join(parts)
