"""
report.py
=========
Report assembler.

Selects the astrology system from the report type, lists the sections
shown for that system (premium sections only for premium reports), runs
the calculators behind each section and splits the report content into
titled sections.

Usage:
    from datetime import date
    from report_engine.tools.report import generate_report

    output = generate_report(
        report={"report_type": "chinese_premium", "is_premium": True,
                "content": "**Overview** ..."},
        chart={"birth_date": "1990-07-15", "birth_time": None, "chart_data": {...}},
        now=date(2026, 1, 1),
    )
"""

import random
from datetime import date, datetime
from typing import List, Optional, Union

from ..core.aspects import analyze_aspects
from ..core.animal_signs import animal_signs
from ..core.chart import AstrologyReport, BirthChart
from ..core.dasha import compute_dasha
from ..core.dignity import classical_positions
from ..core.feng_shui import compute_feng_shui
from ..core.five_elements import compute_elemental_cycle
from ..core.four_pillars import compute_four_pillars
from ..core.houses import analyze_houses, house_rulers
from ..core.lots import compute_lots
from ..core.nakshatra import compute_nakshatras
from ..core.time_lords import DEFAULT_FORTUNE_LONGITUDE, compute_time_lords
from ..core.zodiac import elemental_balance, format_degree

# ---------------------------------------------------------------------------
# Systems and sections
# ---------------------------------------------------------------------------

SYSTEMS = ["vedic", "chinese", "hellenistic"]
DEFAULT_SYSTEM = "western"

SYSTEM_TITLES = {
    "western": "Astrological Analysis",
    "vedic": "Jyotish Analysis",
    "chinese": "Chinese Astrology Insights",
    "hellenistic": "Classical Interpretation",
}

# (section id, premium only)
SYSTEM_SECTIONS = {
    "western": [
        ("header", False), ("birth-info", False), ("chart", False),
        ("planetary-positions", False), ("aspects", False), ("houses", False),
        ("elemental", False), ("content", False), ("footer", False),
    ],
    "vedic": [
        ("header", False), ("birth-info", False), ("vedic-chart", False),
        ("nakshatra", False), ("dasha", True), ("yoga", True),
        ("remedies", False), ("content", False), ("footer", False),
    ],
    "chinese": [
        ("header", False), ("birth-info", False), ("four-pillars", False),
        ("elemental-cycle", False), ("animal-signs", False), ("feng-shui", True),
        ("content", False), ("footer", False),
    ],
    "hellenistic": [
        ("header", False), ("birth-info", False), ("hellenistic-chart", False),
        ("planetary-rulers", False), ("lots", True), ("time-analysis", True),
        ("content", False), ("footer", False),
    ],
}


def report_system(report_type: str) -> str:
    report_type = report_type or ""
    for system in SYSTEMS:
        if system in report_type:
            return system
    return DEFAULT_SYSTEM


def report_sections(system: str, is_premium: bool) -> List[str]:
    sections = SYSTEM_SECTIONS.get(system, SYSTEM_SECTIONS[DEFAULT_SYSTEM])
    return [sid for sid, premium in sections if is_premium or not premium]


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------

def format_content(content: str) -> List[dict]:
    """
    Split "**Title** text **Title** text" content into titled sections.

    Pieces between "**" markers are taken pairwise (title, text) after
    blank pieces are dropped; a pair missing either half is discarded.
    """
    pieces = [p for p in (content or "").split("**") if p.strip()]
    sections = []
    for i in range(0, len(pieces), 2):
        title = pieces[i].strip()
        text = pieces[i + 1].strip() if i + 1 < len(pieces) else ""
        if title and text:
            sections.append({
                "title": title,
                "text": text,
                "paragraphs": [line.strip() for line in text.split("\n") if line.strip()],
            })
    return sections


# ---------------------------------------------------------------------------
# Section calculators
# ---------------------------------------------------------------------------

def _planet_rows(chart: BirthChart) -> List[dict]:
    return [
        {
            "name": p.name,
            "sign": p.sign,
            "degree_formatted": format_degree(p.absolute_longitude),
            "house": p.house,
            "nakshatra": p.nakshatra,
        }
        for p in chart.planets
    ]


def _birth_info(chart: BirthChart) -> dict:
    location = chart.birth_location
    return {
        "birth_date": chart.birth_date.isoformat(),
        "birth_time": chart.birth_time.strftime("%H:%M") if chart.birth_time else None,
        "location": {
            "city": location.city,
            "country": location.country,
            "latitude": location.latitude,
            "longitude": location.longitude,
            "timezone": location.timezone,
        } if location else None,
    }


def _calculate_section(section: str, chart: BirthChart, now: date,
                       is_male: bool, gender_supplied: bool,
                       rng: random.Random, fortune_longitude: float):
    year = chart.birth_date.year

    if section == "birth-info":
        return _birth_info(chart)
    if section == "planetary-positions":
        return _planet_rows(chart)
    if section == "aspects":
        return analyze_aspects(chart)
    if section == "houses":
        return analyze_houses(chart)
    if section == "elemental":
        return elemental_balance(chart.planets)
    if section == "nakshatra":
        return compute_nakshatras(chart, rng)
    if section == "dasha":
        return compute_dasha(chart.birth_date, now)
    if section == "four-pillars":
        return compute_four_pillars(chart.birth_date, chart.birth_hour)
    if section == "elemental-cycle":
        return compute_elemental_cycle(year)
    if section == "animal-signs":
        return animal_signs(year)
    if section == "feng-shui":
        return compute_feng_shui(year, is_male, gender_supplied)
    if section == "hellenistic-chart":
        return classical_positions(chart)
    if section == "planetary-rulers":
        return house_rulers(chart)
    if section == "lots":
        return compute_lots(chart)
    if section == "time-analysis":
        return compute_time_lords(chart.birth_date, now, fortune_longitude)
    return None


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------

def generate_report(
    report: Union[AstrologyReport, dict],
    chart: Union[BirthChart, dict],
    now: Optional[Union[date, datetime]] = None,
    is_male: Optional[bool] = None,
    rng: Optional[random.Random] = None,
    fortune_longitude: float = DEFAULT_FORTUNE_LONGITUDE,
    default_is_male: bool = True,
) -> dict:
    """
    Generate all calculated sections for a report.

    Args:
        report: AstrologyReport or its dict form
        chart: BirthChart or its upstream dict form
        now: reference date for age-based periods (defaults to today)
        is_male: gender for the Kua number; None means not supplied
        default_is_male: gender assumed when is_male is None
        rng: random source for the demonstration Ascendant nakshatra
        fortune_longitude: Lot of Fortune position used by zodiacal releasing

    Returns:
        dict with meta, system, sections (id + calculation) and content
    """
    if isinstance(report, dict):
        report = AstrologyReport.from_dict(report)
    if isinstance(chart, dict):
        chart = BirthChart.from_dict(chart)
    if now is None:
        now = date.today()
    if isinstance(now, datetime):
        now = now.date()

    gender_supplied = is_male is not None
    is_male = default_is_male if is_male is None else is_male
    rng = rng or random.Random()

    system = report_system(report.report_type)
    section_ids = report_sections(system, report.is_premium)

    sections = []
    calculations = {}
    for section in section_ids:
        data = _calculate_section(section, chart, now, is_male, gender_supplied,
                                  rng, fortune_longitude)
        sections.append({"id": section, "calculated": data is not None})
        if data is not None:
            calculations[section] = data

    return {
        "meta": {
            "title": report.title,
            "report_type": report.report_type,
            "is_premium": report.is_premium,
            "edition": "Premium Analysis" if report.is_premium else "Standard Report",
            "as_of": now.isoformat(),
        },
        "system": system,
        "system_title": SYSTEM_TITLES[system],
        "sections": sections,
        "calculations": calculations,
        "content": format_content(report.content),
    }
