"""
feng_shui.py
============
Kua number (Ming Gua) and the East/West group direction profiles.

Algorithm:
    digit = digit-sum of the last two digits of the birth year, reduced to 1 digit
    male:   kua = 11 - digit      (5 becomes 2)
    female: kua = 4 + digit       (5 becomes 8)
    kua > 9 → kua - 9

5 is never produced, so KUA_PROFILES carries eight entries.
"""

import copy
from typing import List

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_EAST_UNFAVORABLE = ["West", "Northwest", "Southwest", "Northeast"]
_WEST_UNFAVORABLE = ["North", "South", "East", "Southeast"]

KUA_PROFILES = {
    1: {
        "element": "Water", "group": "East",
        "favorable": ["North", "South", "East", "Southeast"],
        "unfavorable": _EAST_UNFAVORABLE,
        "best_direction": "North",
        "colors": ["Blue", "Black", "White"],
        "personality": "Calm, intuitive, and adaptable",
    },
    2: {
        "element": "Earth", "group": "West",
        "favorable": ["Southwest", "Northwest", "West", "Northeast"],
        "unfavorable": _WEST_UNFAVORABLE,
        "best_direction": "Southwest",
        "colors": ["Yellow", "Brown", "Beige"],
        "personality": "Practical, nurturing, and stable",
    },
    3: {
        "element": "Wood", "group": "East",
        "favorable": ["East", "Southeast", "North", "South"],
        "unfavorable": _EAST_UNFAVORABLE,
        "best_direction": "East",
        "colors": ["Green", "Brown", "Blue"],
        "personality": "Dynamic, ambitious, and growth-oriented",
    },
    4: {
        "element": "Wood", "group": "East",
        "favorable": ["Southeast", "East", "South", "North"],
        "unfavorable": _EAST_UNFAVORABLE,
        "best_direction": "Southeast",
        "colors": ["Green", "Brown", "Blue"],
        "personality": "Creative, flexible, and communicative",
    },
    6: {
        "element": "Metal", "group": "West",
        "favorable": ["Northwest", "Southwest", "Northeast", "West"],
        "unfavorable": _WEST_UNFAVORABLE,
        "best_direction": "Northwest",
        "colors": ["White", "Gold", "Silver"],
        "personality": "Organized, disciplined, and authoritative",
    },
    7: {
        "element": "Metal", "group": "West",
        "favorable": ["West", "Northeast", "Southwest", "Northwest"],
        "unfavorable": _WEST_UNFAVORABLE,
        "best_direction": "West",
        "colors": ["White", "Gold", "Silver"],
        "personality": "Charming, sociable, and artistic",
    },
    8: {
        "element": "Earth", "group": "West",
        "favorable": ["Northeast", "West", "Northwest", "Southwest"],
        "unfavorable": _WEST_UNFAVORABLE,
        "best_direction": "Northeast",
        "colors": ["Yellow", "Brown", "Beige"],
        "personality": "Ambitious, determined, and success-oriented",
    },
    9: {
        "element": "Fire", "group": "East",
        "favorable": ["South", "North", "Southeast", "East"],
        "unfavorable": _EAST_UNFAVORABLE,
        "best_direction": "South",
        "colors": ["Red", "Orange", "Pink"],
        "personality": "Passionate, intelligent, and charismatic",
    },
}

ELEMENT_TIPS = {
    "Water": ["Add water features like fountains or aquariums",
              "Use flowing, curved shapes in decor",
              "Incorporate mirrors to reflect energy",
              "Choose dark blue and black colors"],
    "Wood":  ["Add plants and fresh flowers",
              "Use wooden furniture and bamboo",
              "Choose green and brown colors",
              "Display vertical, columnar shapes"],
    "Fire":  ["Use candles and bright lighting",
              "Add triangular and pointed shapes",
              "Choose red, orange, and pink colors",
              "Display certificates and awards"],
    "Earth": ["Use ceramic and clay objects",
              "Add square and rectangular shapes",
              "Choose yellow, brown, and beige colors",
              "Display crystals and stones"],
    "Metal": ["Use metal objects and wind chimes",
              "Add circular and oval shapes",
              "Choose white, gold, and silver colors",
              "Keep spaces organized and minimal"],
}


# ---------------------------------------------------------------------------
# Kua number
# ---------------------------------------------------------------------------

def reduce_digits(n: int) -> int:
    """Repeated digit sum down to a single digit (0–9)."""
    n = abs(n)
    while n > 9:
        n = sum(int(c) for c in str(n))
    return n


def kua_number(year: int, is_male: bool = True) -> int:
    digit = reduce_digits(year % 100)
    if is_male:
        kua = 11 - digit
        if kua == 5:
            return 2
    else:
        kua = 4 + digit
        if kua == 5:
            return 8
    return kua - 9 if kua > 9 else kua


def kua_profile(number: int) -> dict:
    """Copy of the profile for a Kua number; unknown numbers use Kua 1."""
    return copy.deepcopy(KUA_PROFILES.get(number, KUA_PROFILES[1]))


def room_guidance(profile: dict) -> dict:
    best = profile["best_direction"]
    office = profile["favorable"][1]
    kitchen = profile["favorable"][2]
    return {
        "bedroom": {
            "direction": best,
            "tips": [f"Face {best.lower()} when sleeping",
                     "Use colors that support your element",
                     "Keep the room clutter-free",
                     "Position bed away from the door"],
        },
        "office": {
            "direction": office,
            "tips": [f"Face {office.lower()} when working",
                     "Place desk in command position",
                     "Use your favorable colors in decor",
                     "Add plants for growth energy"],
        },
        "kitchen": {
            "direction": kitchen,
            "tips": ["Keep stove clean and in good condition",
                     "Avoid placing stove opposite the sink",
                     "Use warm, nourishing colors",
                     "Ensure good ventilation"],
        },
    }


def compute_feng_shui(year: int, is_male: bool = True,
                      gender_supplied: bool = True) -> dict:
    """
    Kua number with its direction profile and room-by-room guidance.

    Args:
        year: birth year
        is_male: gender used by the Kua formula
        gender_supplied: False when is_male is only the default

    Returns:
        dict with kua_number, profile, room_guidance, element_tips
    """
    number = kua_number(year, is_male)
    profile = kua_profile(number)
    return {
        "kua_number": number,
        "gender": "male" if is_male else "female",
        "assumed_gender": not gender_supplied,
        "profile": profile,
        "room_guidance": room_guidance(profile),
        "element_tips": ELEMENT_TIPS.get(profile["element"], []),
    }


def favorable_directions(year: int, is_male: bool = True) -> List[str]:
    return kua_profile(kua_number(year, is_male))["favorable"]
