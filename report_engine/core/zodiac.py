"""
zodiac.py
=========
Static zodiac tables: signs, elements, modalities, classical rulers.

Every lookup is total: an unrecognised sign yields an explicit fallback
("Unknown", "Aries") rather than None.
"""

import math
from typing import Dict, List

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SIGNS = ["Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
         "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces"]

SIGN_ELEMENTS = {
    "Aries": "Fire",   "Leo": "Fire",       "Sagittarius": "Fire",
    "Taurus": "Earth", "Virgo": "Earth",    "Capricorn": "Earth",
    "Gemini": "Air",   "Libra": "Air",      "Aquarius": "Air",
    "Cancer": "Water", "Scorpio": "Water",  "Pisces": "Water",
}

SIGN_MODALITIES = {
    "Aries": "Cardinal", "Cancer": "Cardinal", "Libra": "Cardinal", "Capricorn": "Cardinal",
    "Taurus": "Fixed",   "Leo": "Fixed",       "Scorpio": "Fixed",  "Aquarius": "Fixed",
    "Gemini": "Mutable", "Virgo": "Mutable",   "Sagittarius": "Mutable", "Pisces": "Mutable",
}

# Classical (pre-modern) rulerships
SIGN_RULERS = {
    "Aries": "Mars",  "Taurus": "Venus",  "Gemini": "Mercury",
    "Cancer": "Moon", "Leo": "Sun",       "Virgo": "Mercury",
    "Libra": "Venus", "Scorpio": "Mars",  "Sagittarius": "Jupiter",
    "Capricorn": "Saturn", "Aquarius": "Saturn", "Pisces": "Jupiter",
}

SIGN_SYMBOLS = {
    "Aries": "♈", "Taurus": "♉", "Gemini": "♊", "Cancer": "♋",
    "Leo": "♌", "Virgo": "♍", "Libra": "♎", "Scorpio": "♏",
    "Sagittarius": "♐", "Capricorn": "♑", "Aquarius": "♒", "Pisces": "♓",
}

ELEMENTS = ["Fire", "Earth", "Air", "Water"]
MODALITIES = ["Cardinal", "Fixed", "Mutable"]

ELEMENT_DESCRIPTIONS = {
    "Fire":  "Passionate, energetic, and action-oriented. Fire signs are natural leaders who inspire others.",
    "Earth": "Practical, grounded, and reliable. Earth signs build solid foundations and value stability.",
    "Air":   "Intellectual, communicative, and social. Air signs excel at ideas and connecting with others.",
    "Water": "Emotional, intuitive, and empathetic. Water signs are deeply feeling and psychically sensitive.",
}


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def element_of(sign: str) -> str:
    return SIGN_ELEMENTS.get(sign, "Unknown")


def modality_of(sign: str) -> str:
    return SIGN_MODALITIES.get(sign, "Unknown")


def ruler_of(sign: str):
    return SIGN_RULERS.get(sign)


def normalize_degrees(x: float) -> float:
    """Normalize an angle into [0, 360)."""
    x = x % 360.0
    # -1e-15 % 360 rounds to 360.0 in floating point
    return 0.0 if x >= 360.0 else x


def sign_from_longitude(longitude: float) -> str:
    return SIGNS[int(normalize_degrees(longitude) // 30)]


def house_from_longitude(longitude: float) -> int:
    """Whole-sign house counted from 0° Aries (not cusp based)."""
    return int(normalize_degrees(longitude) // 30) + 1


def format_degree(longitude: float) -> str:
    """Position within its sign as D°MM'."""
    lon = normalize_degrees(longitude)
    d = int(lon % 30)
    m = int(math.floor((lon % 1) * 60))
    return f"{d}°{m:02d}'"


# ---------------------------------------------------------------------------
# Elemental balance
# ---------------------------------------------------------------------------

def _dominant(counts: Dict[str, int]) -> str:
    # Later entries win ties
    best = None
    for name, count in counts.items():
        if best is None or count >= counts[best]:
            best = name
    return best


def elemental_balance(planets: List) -> dict:
    """
    Count planets per element and modality.

    Args:
        planets: iterable of objects with a ``sign`` attribute

    Returns:
        dict with element/modality counts and the dominant of each
    """
    elements = {e: 0 for e in ELEMENTS}
    modalities = {m: 0 for m in MODALITIES}

    for planet in planets:
        if not planet.sign:
            continue
        element = element_of(planet.sign)
        modality = modality_of(planet.sign)
        if element in elements:
            elements[element] += 1
        if modality in modalities:
            modalities[modality] += 1

    dominant_element = _dominant(elements)
    return {
        "elements": elements,
        "modalities": modalities,
        "dominant_element": dominant_element,
        "dominant_element_description": ELEMENT_DESCRIPTIONS[dominant_element],
        "dominant_modality": _dominant(modalities),
        "total_planets": len(planets),
    }
