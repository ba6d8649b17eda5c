"""
lots.py
=======
Hellenistic Lots (Arabic Parts).

A lot formula such as "Ascendant + Moon - Sun" is parsed once into a tuple
of signed terms and then evaluated against a chart:

    Lot = sum(sign_i * position(operand_i))  normalised to [0, 360)

Operand resolution:
  - "Ascendant"            → 0°  (no real ascendant is available yet)
  - a planet in the chart  → its absolute longitude
  - anything else          → 0°  (e.g. "Fortune", "Spirit"); reported in
                                  `unresolved` but never an error

Day/night sect: the chart is diurnal when the Sun sits in houses 1–6.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .chart import BirthChart
from .zodiac import normalize_degrees, sign_from_longitude, house_from_longitude

ASCENDANT = "Ascendant"
ASCENDANT_LONGITUDE = 0.0


# ---------------------------------------------------------------------------
# Formula AST
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LotTerm:
    sign: int          # +1 or -1
    operand: str


@dataclass(frozen=True)
class LotFormula:
    text: str
    terms: Tuple[LotTerm, ...]


@dataclass(frozen=True)
class LotDefinition:
    name: str
    greek: str
    day: str
    night: str
    meaning: str
    keywords: Tuple[str, ...] = ()


def parse_formula(text: str) -> LotFormula:
    """Whitespace tokenizer; '+'/'-' set the sign applied to following operands."""
    terms = []
    sign = 1
    for token in text.split():
        if token == "+":
            sign = 1
        elif token == "-":
            sign = -1
        else:
            terms.append(LotTerm(sign, token))
    return LotFormula(text, tuple(terms))


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

def resolve_operand(operand: str, chart: BirthChart) -> Tuple[float, bool]:
    """Return (longitude, resolved)."""
    if operand == ASCENDANT:
        return ASCENDANT_LONGITUDE, True
    planet = chart.planet(operand)
    if planet is None:
        return 0.0, False
    return planet.absolute_longitude, True


def evaluate_formula(formula: LotFormula, chart: BirthChart) -> Tuple[float, List[str]]:
    """
    Evaluate a parsed formula.

    Returns:
        (longitude in [0, 360), list of operands that resolved to nothing)
    """
    total = 0.0
    unresolved = []
    for term in formula.terms:
        value, ok = resolve_operand(term.operand, chart)
        if not ok:
            unresolved.append(term.operand)
        total += term.sign * value
    return normalize_degrees(total), unresolved


def is_day_chart(chart: BirthChart) -> bool:
    sun = chart.planet("Sun")
    if sun is None:
        return True
    return (sun.house or 1) <= 6


def calculate_lot(lot: LotDefinition, chart: BirthChart, day_chart: bool = True) -> dict:
    text = lot.day if day_chart else lot.night
    longitude, unresolved = evaluate_formula(parse_formula(text), chart)
    return {
        "name": lot.name,
        "greek": lot.greek,
        "formula": text,
        "longitude": round(longitude, 4),
        "sign": sign_from_longitude(longitude),
        "degree": int(longitude % 30),
        "minute": int((longitude % 1) * 60),
        "house": house_from_longitude(longitude),
        "meaning": lot.meaning,
        "keywords": list(lot.keywords),
        "unresolved": unresolved,
    }


# ---------------------------------------------------------------------------
# Classical lots
# ---------------------------------------------------------------------------

CLASSICAL_LOTS = [
    LotDefinition(
        "Lot of Fortune", "Κλῆρος Τύχης",
        day="Ascendant + Moon - Sun", night="Ascendant + Sun - Moon",
        meaning="Material fortune, body, and life circumstances",
        keywords=("Wealth", "Health", "Material Success", "Life Force"),
    ),
    LotDefinition(
        "Lot of Spirit", "Κλῆρος Δαίμονος",
        day="Ascendant + Sun - Moon", night="Ascendant + Moon - Sun",
        meaning="Spiritual nature, character, and higher aspirations",
        keywords=("Character", "Spirituality", "Higher Mind", "Reputation"),
    ),
    LotDefinition(
        "Lot of Love", "Κλῆρος Ἔρωτος",
        day="Ascendant + Venus - Sun", night="Ascendant + Venus - Sun",
        meaning="Romantic relationships and emotional connections",
        keywords=("Romance", "Relationships", "Attraction", "Partnerships"),
    ),
    LotDefinition(
        "Lot of Necessity", "Κλῆρος Ἀνάγκης",
        day="Ascendant + Fortune - Mercury", night="Ascendant + Fortune - Mercury",
        meaning="Constraints, limitations, and karmic obligations",
        keywords=("Karma", "Limitations", "Obligations", "Destiny"),
    ),
    LotDefinition(
        "Lot of Courage", "Κλῆρος Ἀνδρείας",
        day="Ascendant + Fortune - Mars", night="Ascendant + Fortune - Mars",
        meaning="Bravery, action, and assertiveness",
        keywords=("Courage", "Action", "Strength", "Initiative"),
    ),
    LotDefinition(
        "Lot of Victory", "Κλῆρος Νίκης",
        day="Ascendant + Jupiter - Spirit", night="Ascendant + Jupiter - Spirit",
        meaning="Success, achievement, and triumph over obstacles",
        keywords=("Success", "Victory", "Achievement", "Recognition"),
    ),
]


def compute_lots(chart: BirthChart) -> dict:
    day_chart = is_day_chart(chart)
    return {
        "is_day_chart": day_chart,
        "sect": "Diurnal Chart (Day Birth)" if day_chart else "Nocturnal Chart (Night Birth)",
        "lots": [calculate_lot(lot, chart, day_chart) for lot in CLASSICAL_LOTS],
    }
