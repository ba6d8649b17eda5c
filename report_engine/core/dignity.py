"""
dignity.py
==========
Essential dignities of the seven classical planets.

Priority when a sign appears under more than one heading:
    Domicile > Exaltation > Detriment > Fall
(e.g. Mercury in Virgo is Domicile, not Exaltation.)
"""

from enum import Enum
from typing import List

from .chart import BirthChart
from .zodiac import format_degree


class Dignity(str, Enum):
    DOMICILE = "Domicile"
    EXALTATION = "Exaltation"
    DETRIMENT = "Detriment"
    FALL = "Fall"
    NEUTRAL = "Neutral"


CLASSICAL_PLANETS = ["Sun", "Moon", "Mercury", "Venus", "Mars", "Jupiter", "Saturn"]

PLANET_SYMBOLS = {
    "Sun": "☉", "Moon": "☽", "Mercury": "☿", "Venus": "♀",
    "Mars": "♂", "Jupiter": "♃", "Saturn": "♄",
}

DIGNITIES = {
    "Sun":     {"domicile": ["Leo"],                    "exaltation": "Aries",
                "detriment": ["Aquarius"],              "fall": "Libra"},
    "Moon":    {"domicile": ["Cancer"],                 "exaltation": "Taurus",
                "detriment": ["Capricorn"],             "fall": "Scorpio"},
    "Mercury": {"domicile": ["Gemini", "Virgo"],        "exaltation": "Virgo",
                "detriment": ["Sagittarius", "Pisces"], "fall": "Pisces"},
    "Venus":   {"domicile": ["Taurus", "Libra"],        "exaltation": "Pisces",
                "detriment": ["Scorpio", "Aries"],      "fall": "Virgo"},
    "Mars":    {"domicile": ["Aries", "Scorpio"],       "exaltation": "Capricorn",
                "detriment": ["Libra", "Taurus"],       "fall": "Cancer"},
    "Jupiter": {"domicile": ["Sagittarius", "Pisces"],  "exaltation": "Cancer",
                "detriment": ["Gemini", "Virgo"],       "fall": "Capricorn"},
    "Saturn":  {"domicile": ["Capricorn", "Aquarius"],  "exaltation": "Libra",
                "detriment": ["Cancer", "Leo"],         "fall": "Aries"},
}


def dignity_of(planet: str, sign: str) -> Dignity:
    table = DIGNITIES.get(planet)
    if table is None:
        return Dignity.NEUTRAL
    if sign in table["domicile"]:
        return Dignity.DOMICILE
    if sign == table["exaltation"]:
        return Dignity.EXALTATION
    if sign in table["detriment"]:
        return Dignity.DETRIMENT
    if sign == table["fall"]:
        return Dignity.FALL
    return Dignity.NEUTRAL


def classical_positions(chart: BirthChart) -> List[dict]:
    """Classical planets present in the chart, in traditional order."""
    rows = []
    for name in CLASSICAL_PLANETS:
        planet = chart.planet(name)
        if planet is None:
            continue
        rows.append({
            "planet": name,
            "symbol": PLANET_SYMBOLS[name],
            "sign": planet.sign,
            "degree_formatted": format_degree(planet.absolute_longitude),
            "house": planet.house,
            "dignity": dignity_of(name, planet.sign).value,
        })
    return rows
