"""
aspects.py
==========
Classification of the aspects supplied with a chart.
"""

from typing import Iterable, List

from .chart import Aspect, BirthChart

MAJOR_ASPECTS = ["conjunction", "opposition", "trine", "square", "sextile"]

HARMONIOUS = {"trine", "sextile", "conjunction"}
CHALLENGING = {"square", "opposition"}
NEUTRAL = {"quincunx"}

ASPECT_SYMBOLS = {
    "conjunction": "☌", "opposition": "☍", "trine": "△",
    "square": "□", "sextile": "⚹", "quincunx": "⚻",
}

MAX_MAJOR_ASPECTS = 12


def aspect_nature(aspect: str) -> str:
    name = (aspect or "").lower()
    if name in HARMONIOUS:
        return "Harmonious"
    if name in CHALLENGING:
        return "Challenging"
    if name in NEUTRAL:
        return "Neutral"
    return "Mixed"


def major_aspects(aspects: Iterable[Aspect], limit: int = MAX_MAJOR_ASPECTS) -> List[Aspect]:
    majors = [a for a in aspects if (a.aspect or "").lower() in MAJOR_ASPECTS]
    return majors[:limit]


def analyze_aspects(chart: BirthChart) -> dict:
    majors = major_aspects(chart.aspects)
    distribution = {}
    for name in MAJOR_ASPECTS:
        count = sum(1 for a in majors if a.aspect.lower() == name)
        distribution[name] = {
            "count": count,
            "percentage": round(count / len(majors) * 100) if majors else 0,
        }
    return {
        "major_aspects": [
            {
                "planet1": a.planet1,
                "planet2": a.planet2,
                "aspect": a.aspect,
                "symbol": ASPECT_SYMBOLS.get(a.aspect.lower(), "◯"),
                "orb": round(a.orb, 1),
                "nature": aspect_nature(a.aspect),
            }
            for a in majors
        ],
        "distribution": distribution,
    }
