"""
time_lords.py
=============
Hellenistic time-lord systems keyed by current age.

  - Decennial Lords:    fixed planetary periods (Mars 0–15 ... Saturn 87–117)
  - Annual Profections: house = (age mod 12) + 1, ruled by that house's lord
  - Zodiacal Releasing: variable-length sign periods (208-year cycle)
                        starting from the Lot of Fortune's sign

"Now" is always passed in; nothing here reads the clock.
"""

from datetime import date, datetime
from typing import Union

DAYS_PER_YEAR = 365.25

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# (planet, start_age, end_age)
DECENNIAL_SEQUENCE = [
    ("Mars",    0,  15),
    ("Sun",     15, 34),
    ("Venus",   34, 42),
    ("Mercury", 42, 62),
    ("Moon",    62, 87),
    ("Saturn",  87, 117),
]

PROFECTION_RULERS = {
    1: "Mars",    2: "Venus",   3: "Mercury", 4: "Moon",
    5: "Sun",     6: "Mercury", 7: "Venus",   8: "Mars",
    9: "Jupiter", 10: "Saturn", 11: "Saturn", 12: "Jupiter",
}

HOUSE_THEMES = {
    1: "Self, Identity, New Beginnings",
    2: "Resources, Values, Self-Worth",
    3: "Communication, Learning, Siblings",
    4: "Home, Family, Roots",
    5: "Creativity, Children, Romance",
    6: "Health, Work, Daily Routine",
    7: "Partnerships, Marriage, Others",
    8: "Transformation, Shared Resources",
    9: "Philosophy, Travel, Higher Learning",
    10: "Career, Reputation, Public Life",
    11: "Friends, Groups, Hopes & Dreams",
    12: "Spirituality, Subconscious, Endings",
}

# (sign, planet, years); indexed from Cancer
RELEASING_SEQUENCE = [
    ("Cancer",      "Moon",    25),
    ("Leo",         "Sun",     19),
    ("Virgo",       "Mercury", 20),
    ("Libra",       "Venus",   8),
    ("Scorpio",     "Mars",    15),
    ("Sagittarius", "Jupiter", 12),
    ("Capricorn",   "Saturn",  27),
    ("Aquarius",    "Saturn",  27),
    ("Pisces",      "Jupiter", 12),
    ("Aries",       "Mars",    15),
    ("Taurus",      "Venus",   8),
    ("Gemini",      "Mercury", 20),
]

RELEASING_TOTAL_YEARS = sum(years for _, _, years in RELEASING_SEQUENCE)  # 208

# Placeholder Lot of Fortune position until the lot is computed from the chart
DEFAULT_FORTUNE_LONGITUDE = 120.0


# ---------------------------------------------------------------------------
# Age
# ---------------------------------------------------------------------------

def _as_date(value: Union[date, datetime]) -> date:
    return value.date() if isinstance(value, datetime) else value


def current_age(birth_date: Union[date, datetime], now: Union[date, datetime]) -> int:
    """Completed years between birth and now, in 365.25-day years."""
    days = (_as_date(now) - _as_date(birth_date)).days
    return max(0, int(days // DAYS_PER_YEAR))


# ---------------------------------------------------------------------------
# Decennial Lords
# ---------------------------------------------------------------------------

def decennial_lord(age: int) -> dict:
    for planet, start, end in DECENNIAL_SEQUENCE:
        if start <= age < end:
            return {
                "planet": planet,
                "years": end - start,
                "age_range": f"{start}-{end}",
                "start_age": start,
                "end_age": end,
                "years_in_period": age - start,
                "years_remaining": end - age,
                "is_fallback": False,
            }

    # Past the last bracket: first lord, no elapsed/remaining count
    planet, start, end = DECENNIAL_SEQUENCE[0]
    return {
        "planet": planet,
        "years": end - start,
        "age_range": f"{start}-{end}",
        "start_age": start,
        "end_age": end,
        "years_in_period": 0,
        "years_remaining": 0,
        "is_fallback": True,
    }


# ---------------------------------------------------------------------------
# Annual Profections
# ---------------------------------------------------------------------------

def annual_profection(age: int) -> dict:
    house = (age % 12) + 1
    return {
        "house": house,
        "ruler": PROFECTION_RULERS[house],
        "theme": HOUSE_THEMES[house],
    }


# ---------------------------------------------------------------------------
# Zodiacal Releasing
# ---------------------------------------------------------------------------

def zodiacal_releasing(age: int,
                       fortune_longitude: float = DEFAULT_FORTUNE_LONGITUDE) -> dict:
    """
    Find the releasing period containing the given age.

    The sequence is rotated to start at index floor(fortune / 30) and the
    periods are accumulated until the age falls inside one of them.
    """
    start_index = int((fortune_longitude % 360.0) // 30)
    elapsed = 0

    for i in range(len(RELEASING_SEQUENCE)):
        sign, planet, years = RELEASING_SEQUENCE[(start_index + i) % 12]
        if elapsed <= age < elapsed + years:
            return {
                "sign": sign,
                "planet": planet,
                "years": years,
                "start_age": elapsed,
                "end_age": elapsed + years,
                "years_in_period": age - elapsed,
                "years_remaining": elapsed + years - age,
                "is_fallback": False,
            }
        elapsed += years

    sign, planet, years = RELEASING_SEQUENCE[0]
    return {
        "sign": sign,
        "planet": planet,
        "years": years,
        "start_age": None,
        "end_age": None,
        "years_in_period": 0,
        "years_remaining": 0,
        "is_fallback": True,
    }


def compute_time_lords(birth_date: Union[date, datetime],
                       now: Union[date, datetime],
                       fortune_longitude: float = DEFAULT_FORTUNE_LONGITUDE) -> dict:
    age = current_age(birth_date, now)
    return {
        "age": age,
        "as_of": _as_date(now).isoformat(),
        "decennial_lord": decennial_lord(age),
        "annual_profection": annual_profection(age),
        "zodiacal_releasing": zodiacal_releasing(age, fortune_longitude),
    }
