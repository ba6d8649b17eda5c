"""
five_elements.py
================
Five-element (Wu Xing, 五行) correspondences and cycles.

Generative: Wood → Fire → Earth → Metal → Water → Wood
Destructive: Wood → Earth → Water → Fire → Metal → Wood
"""

from typing import Optional

ELEMENTS = [
    {
        "name": "Wood", "chinese": "木", "pinyin": "Mù",
        "season": "Spring", "direction": "East",
        "organ": "Liver", "emotion": "Anger", "virtue": "Kindness",
        "characteristics": ["Growth and expansion", "Creativity and flexibility",
                            "Planning and vision", "Compassion and generosity"],
    },
    {
        "name": "Fire", "chinese": "火", "pinyin": "Huǒ",
        "season": "Summer", "direction": "South",
        "organ": "Heart", "emotion": "Joy", "virtue": "Propriety",
        "characteristics": ["Energy and enthusiasm", "Leadership and charisma",
                            "Communication and expression", "Passion and warmth"],
    },
    {
        "name": "Earth", "chinese": "土", "pinyin": "Tǔ",
        "season": "Late Summer", "direction": "Center",
        "organ": "Spleen", "emotion": "Worry", "virtue": "Trustworthiness",
        "characteristics": ["Stability and grounding", "Nurturing and supportive",
                            "Practical and reliable", "Harmonizing and balancing"],
    },
    {
        "name": "Metal", "chinese": "金", "pinyin": "Jīn",
        "season": "Autumn", "direction": "West",
        "organ": "Lungs", "emotion": "Grief", "virtue": "Righteousness",
        "characteristics": ["Structure and organization", "Precision and clarity",
                            "Discipline and focus", "Justice and integrity"],
    },
    {
        "name": "Water", "chinese": "水", "pinyin": "Shuǐ",
        "season": "Winter", "direction": "North",
        "organ": "Kidneys", "emotion": "Fear", "virtue": "Wisdom",
        "characteristics": ["Adaptability and flow", "Intuition and depth",
                            "Persistence and endurance", "Mystery and transformation"],
    },
]

ELEMENT_BY_NAME = {e["name"]: e for e in ELEMENTS}

GENERATIVE_CYCLE = [
    ("Wood",  "Fire",  "Wood feeds Fire"),
    ("Fire",  "Earth", "Fire creates Earth (ash)"),
    ("Earth", "Metal", "Earth bears Metal"),
    ("Metal", "Water", "Metal collects Water"),
    ("Water", "Wood",  "Water nourishes Wood"),
]

DESTRUCTIVE_CYCLE = [
    ("Wood",  "Earth", "Wood depletes Earth"),
    ("Earth", "Water", "Earth absorbs Water"),
    ("Water", "Fire",  "Water extinguishes Fire"),
    ("Fire",  "Metal", "Fire melts Metal"),
    ("Metal", "Wood",  "Metal cuts Wood"),
]


def personal_element(year: int) -> dict:
    return ELEMENTS[(year % 10) % 5]


def _find(cycle, element: str, match_to: bool) -> Optional[str]:
    for src, dst, _ in cycle:
        if (dst if match_to else src) == element:
            return src if match_to else dst
    return None


def element_relationships(element: str) -> dict:
    """Supporting (feeds it), supported (it feeds) and conflicting (it controls)."""
    return {
        "supporting": _find(GENERATIVE_CYCLE, element, match_to=True),
        "supported": _find(GENERATIVE_CYCLE, element, match_to=False),
        "conflicting": _find(DESTRUCTIVE_CYCLE, element, match_to=False),
    }


def compute_elemental_cycle(year: int) -> dict:
    element = personal_element(year)
    return {
        "personal_element": element,
        "relationships": element_relationships(element["name"]),
        "generative_cycle": [
            {"from": a, "to": b, "relationship": r} for a, b, r in GENERATIVE_CYCLE
        ],
        "destructive_cycle": [
            {"from": a, "to": b, "relationship": r} for a, b, r in DESTRUCTIVE_CYCLE
        ],
    }
