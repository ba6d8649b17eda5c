"""
dasha.py
========
Sample Mahadasha timeline for the Vedic report.

This is the fixed display sequence, not a Moon-based Vimshottari
computation: the periods start at age 0 with Venus and run for the
classical Vimshottari lengths.

Sequence: Venus (20) → Sun (6) → Moon (10) → Mars (7) → Rahu (18)
          → Jupiter (16) → Saturn (19) → Mercury (17) → Ketu (7)
"""

from datetime import date
from typing import List

from .time_lords import current_age

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# (planet, start_age, duration, element, nature)
MAHADASHAS = [
    ("Venus",   0,   20, "Water", "Benefic"),
    ("Sun",     20,  6,  "Fire",  "Malefic"),
    ("Moon",    26,  10, "Water", "Benefic"),
    ("Mars",    36,  7,  "Fire",  "Malefic"),
    ("Rahu",    43,  18, "Air",   "Malefic"),
    ("Jupiter", 61,  16, "Ether", "Benefic"),
    ("Saturn",  77,  19, "Air",   "Malefic"),
    ("Mercury", 96,  17, "Earth", "Benefic"),
    ("Ketu",    113, 7,  "Fire",  "Malefic"),
]

SUB_DASHA_ORDER = ["Sun", "Moon", "Mars", "Mercury", "Jupiter",
                   "Venus", "Saturn", "Rahu", "Ketu"]

DASHA_DESCRIPTIONS = {
    "Sun":     "Period of leadership, authority, and self-expression. Focus on career advancement and personal recognition.",
    "Moon":    "Time of emotional growth, intuition, and nurturing. Emphasis on home, family, and inner development.",
    "Mars":    "Period of action, courage, and competition. Energy for new ventures and overcoming obstacles.",
    "Mercury": "Time of communication, learning, and intellectual pursuits. Favorable for education and business.",
    "Jupiter": "Period of wisdom, spirituality, and expansion. Growth in knowledge, wealth, and spiritual understanding.",
    "Venus":   "Time of love, beauty, and creativity. Focus on relationships, arts, and material comforts.",
    "Saturn":  "Period of discipline, hard work, and karmic lessons. Time for building solid foundations.",
    "Rahu":    "Time of material ambition and worldly desires. Period of rapid changes and unconventional paths.",
    "Ketu":    "Period of spiritual awakening and detachment. Focus on inner growth and letting go of material attachments.",
}
DEFAULT_DESCRIPTION = "A significant period of personal growth and karmic experiences."


def _period(index: int) -> dict:
    planet, start, duration, element, nature = MAHADASHAS[index]
    return {
        "planet": planet,
        "start_age": start,
        "end_age": start + duration,
        "duration": duration,
        "element": element,
        "nature": nature,
        "description": DASHA_DESCRIPTIONS.get(planet, DEFAULT_DESCRIPTION),
    }


def _current_index(age: int) -> int:
    for i, (_, start, duration, _, _) in enumerate(MAHADASHAS):
        if start <= age < start + duration:
            return i
    return 0


def current_mahadasha(age: int) -> dict:
    return _period(_current_index(age))


def next_mahadasha(age: int) -> dict:
    return _period((_current_index(age) + 1) % len(MAHADASHAS))


def sub_dashas(planet: str) -> List[str]:
    """Nine sub-periods rotated to begin with the given planet."""
    start = SUB_DASHA_ORDER.index(planet) if planet in SUB_DASHA_ORDER else 0
    return [SUB_DASHA_ORDER[(start + i) % 9] for i in range(9)]


def compute_dasha(birth_date: date, now: date) -> dict:
    age = current_age(birth_date, now)
    current = current_mahadasha(age)
    return {
        "age": age,
        "current": current,
        "next": next_mahadasha(age),
        "sub_dashas": sub_dashas(current["planet"]),
        "timeline": [_period(i) for i in range(len(MAHADASHAS))],
    }
