"""
houses.py
=========
House occupancy, strength and classical house rulers.

Strength is by occupancy count only:
    3+ planets → Strong, 2 → Moderate, 1 → Active, 0 → Quiet
"""

from typing import List, Optional

from .chart import BirthChart
from .dignity import dignity_of
from .zodiac import SIGN_RULERS, SIGN_SYMBOLS

HOUSE_NAMES = {
    1: "Self & Identity",
    2: "Resources & Values",
    3: "Communication & Siblings",
    4: "Home & Family",
    5: "Creativity & Children",
    6: "Health & Service",
    7: "Partnerships",
    8: "Transformation",
    9: "Philosophy & Travel",
    10: "Career & Reputation",
    11: "Friends & Hopes",
    12: "Spirituality & Hidden",
}

STRENGTH_LEVELS = ["Strong", "Moderate", "Active", "Quiet"]


def house_name(number: int) -> str:
    return HOUSE_NAMES.get(number, f"House {number}")


def planets_in_house(chart: BirthChart, number: int) -> List[str]:
    return [p.name for p in chart.planets if p.house == number]


def house_strength(planet_count: int) -> str:
    if planet_count >= 3:
        return "Strong"
    if planet_count == 2:
        return "Moderate"
    if planet_count == 1:
        return "Active"
    return "Quiet"


def analyze_houses(chart: BirthChart) -> dict:
    houses = []
    distribution = {level: 0 for level in STRENGTH_LEVELS}
    for number in range(1, 13):
        house = chart.house(number)
        occupants = planets_in_house(chart, number)
        strength = house_strength(len(occupants))
        distribution[strength] += 1
        houses.append({
            "number": number,
            "name": house_name(number),
            "sign": house.sign if house else None,
            "planets": occupants,
            "strength": strength,
        })
    return {"houses": houses, "distribution": distribution}


# ---------------------------------------------------------------------------
# House rulers
# ---------------------------------------------------------------------------

def house_ruler(chart: BirthChart, number: int) -> Optional[dict]:
    house = chart.house(number)
    if house is None or not house.sign:
        return None
    ruler = SIGN_RULERS.get(house.sign)
    if ruler is None:
        return None
    return {
        "sign": house.sign,
        "ruler": ruler,
        "planet": chart.planet(ruler),
    }


def ruler_condition(ruler: Optional[dict]) -> str:
    if ruler is None:
        return "—"
    planet = ruler["planet"]
    if planet is None:
        return "Not Found"
    return dignity_of(planet.name, planet.sign).value


def house_rulers(chart: BirthChart) -> List[dict]:
    rows = []
    for number in range(1, 13):
        ruler = house_ruler(chart, number)
        planet = ruler["planet"] if ruler else None
        rows.append({
            "house": number,
            "name": house_name(number),
            "sign": ruler["sign"] if ruler else None,
            "sign_symbol": SIGN_SYMBOLS.get(ruler["sign"]) if ruler else None,
            "ruler": ruler["ruler"] if ruler else None,
            "ruler_sign": planet.sign if planet else None,
            "ruler_house": planet.house if planet else None,
            "condition": ruler_condition(ruler),
        })
    return rows
