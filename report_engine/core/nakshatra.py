"""
nakshatra.py
============
The 27 lunar mansions and the Moon / Ascendant nakshatra lookups.

The Ascendant nakshatra is a demonstration value drawn from a random
source; the caller owns the Random instance so the draw can be seeded.
"""

import random
from typing import Optional

from .chart import BirthChart

# (name, deity, symbol, element, guna)
_NAKSHATRA_ROWS = [
    ("Ashwini",           "Ashwini Kumaras", "Horse's Head",  "Earth", "Rajas"),
    ("Bharani",           "Yama",            "Yoni",          "Earth", "Rajas"),
    ("Krittika",          "Agni",            "Razor",         "Fire",  "Rajas"),
    ("Rohini",            "Brahma",          "Cart",          "Earth", "Rajas"),
    ("Mrigashira",        "Soma",            "Deer's Head",   "Earth", "Tamas"),
    ("Ardra",             "Rudra",           "Teardrop",      "Water", "Tamas"),
    ("Punarvasu",         "Aditi",           "Bow",           "Water", "Sattva"),
    ("Pushya",            "Brihaspati",      "Flower",        "Water", "Sattva"),
    ("Ashlesha",          "Nagas",           "Serpent",       "Water", "Sattva"),
    ("Magha",             "Pitrs",           "Throne",        "Water", "Tamas"),
    ("Purva Phalguni",    "Bhaga",           "Hammock",       "Water", "Rajas"),
    ("Uttara Phalguni",   "Aryaman",         "Bed",           "Fire",  "Rajas"),
    ("Hasta",             "Savitar",         "Hand",          "Fire",  "Rajas"),
    ("Chitra",            "Vishvakarma",     "Pearl",         "Fire",  "Tamas"),
    ("Swati",             "Vayu",            "Sword",         "Fire",  "Tamas"),
    ("Vishakha",          "Indra-Agni",      "Archway",       "Fire",  "Sattva"),
    ("Anuradha",          "Mitra",           "Lotus",         "Fire",  "Sattva"),
    ("Jyeshtha",          "Indra",           "Earring",       "Air",   "Sattva"),
    ("Mula",              "Nirriti",         "Root",          "Air",   "Tamas"),
    ("Purva Ashadha",     "Apas",            "Fan",           "Air",   "Rajas"),
    ("Uttara Ashadha",    "Vishvedevas",     "Elephant Tusk", "Air",   "Rajas"),
    ("Shravana",          "Vishnu",          "Ear",           "Air",   "Rajas"),
    ("Dhanishtha",        "Vasus",           "Drum",          "Air",   "Tamas"),
    ("Shatabhisha",       "Varuna",          "Circle",        "Air",   "Tamas"),
    ("Purva Bhadrapada",  "Aja Ekapada",     "Sword",         "Air",   "Sattva"),
    ("Uttara Bhadrapada", "Ahir Budhnya",    "Snake",         "Air",   "Sattva"),
    ("Revati",            "Pushan",          "Fish",          "Air",   "Sattva"),
]

NAKSHATRAS = [
    {"name": n, "deity": d, "symbol": s, "element": e, "guna": g}
    for n, d, s, e, g in _NAKSHATRA_ROWS
]

NAKSHATRA_BY_NAME = {n["name"]: n for n in NAKSHATRAS}

DESCRIPTIONS = {
    "Ashwini":    "Swift action, healing abilities, and pioneering spirit. Natural healers and innovators.",
    "Bharani":    "Transformation, creativity, and nurturing. Strong connection to life cycles and creativity.",
    "Krittika":   "Sharp intellect, purification, and leadership. Natural ability to cut through illusions.",
    "Rohini":     "Beauty, fertility, and material growth. Strong artistic and creative abilities.",
    "Mrigashira": "Searching nature, curiosity, and gentleness. Natural seekers of knowledge and truth.",
}
DEFAULT_DESCRIPTION = "A unique nakshatra with special spiritual significance and karmic lessons."


def describe(nakshatra: dict) -> dict:
    return {**nakshatra, "description": DESCRIPTIONS.get(nakshatra["name"], DEFAULT_DESCRIPTION)}


def moon_nakshatra(chart: BirthChart) -> dict:
    moon = chart.planet("Moon")
    if moon is not None and moon.nakshatra:
        return NAKSHATRA_BY_NAME.get(moon.nakshatra, NAKSHATRAS[0])
    return NAKSHATRAS[0]


def ascendant_nakshatra(rng: random.Random) -> dict:
    return NAKSHATRAS[rng.randrange(len(NAKSHATRAS))]


def compute_nakshatras(chart: BirthChart, rng: Optional[random.Random] = None) -> dict:
    rng = rng or random.Random()
    return {
        "moon": describe(moon_nakshatra(chart)),
        "ascendant": describe(ascendant_nakshatra(rng)),
    }
