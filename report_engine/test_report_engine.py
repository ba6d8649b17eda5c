"""
test_report_engine.py
=====================
Canonical test suite for the Report Engine.

Test vectors cover one report per astrology system:
  - Chinese premium (unknown birth time, assumed gender)
  - Chinese premium, female native
  - Hellenistic premium and standard (premium gating)
  - Vedic premium (nakshatra + mahadasha)
  - Western (aspects, houses, elemental balance)
  - Empty chart, very old native (fallback paths)

Unit checks cover the calculators directly.

Run with: python -m pytest report_engine/ -v
Or:        python report_engine/test_report_engine.py
"""

import sys
import os
import random
from datetime import date, datetime

import pytest

# Allow running from project root
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), ".."))

from report_engine import generate_report, format_content, report_system
from report_engine.core.animal_signs import animal_signs
from report_engine.core.chart import BirthChart
from report_engine.core.dasha import compute_dasha
from report_engine.core.dignity import Dignity, dignity_of, classical_positions
from report_engine.core.feng_shui import (
    kua_number, kua_profile, reduce_digits, compute_feng_shui, KUA_PROFILES
)
from report_engine.core.five_elements import compute_elemental_cycle
from report_engine.core.four_pillars import (
    compute_four_pillars, year_pillar, HEAVENLY_STEMS, EARTHLY_BRANCHES
)
from report_engine.core.houses import analyze_houses, house_rulers
from report_engine.core.aspects import analyze_aspects, aspect_nature
from report_engine.core.lots import parse_formula, compute_lots, LotTerm
from report_engine.core.nakshatra import compute_nakshatras, NAKSHATRAS
from report_engine.core.time_lords import (
    current_age, decennial_lord, annual_profection, zodiacal_releasing,
    DECENNIAL_SEQUENCE,
)
from report_engine.core.zodiac import (
    element_of, modality_of, normalize_degrees, elemental_balance, format_degree
)


NOW = date(2026, 1, 1)
ANGLE_TOLERANCE_DEG = 1e-9


# ---------------------------------------------------------------------------
# Sample chart
# ---------------------------------------------------------------------------
# Whole-sign houses from Aries; positions are fixed, not ephemeris output.

SIGN_ORDER = ["Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
              "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces"]

SAMPLE_CHART = {
    "birth_date": "1990-07-15",
    "birth_time": None,
    "birth_location": {
        "latitude": 19.0760, "longitude": 72.8777,
        "timezone": "Asia/Kolkata", "city": "Mumbai", "country": "India",
    },
    "chart_data": {
        "planets": [
            {"name": "Sun",     "sign": "Cancer",    "degree": 22, "minute": 30, "house": 4},
            {"name": "Moon",    "sign": "Taurus",    "degree": 10, "house": 2, "nakshatra": "Rohini"},
            {"name": "Mercury", "sign": "Leo",       "degree": 5,  "house": 5},
            {"name": "Venus",   "sign": "Gemini",    "degree": 28, "house": 3},
            {"name": "Mars",    "sign": "Aries",     "degree": 14, "house": 1},
            {"name": "Jupiter", "sign": "Cancer",    "degree": 8,  "house": 4},
            {"name": "Saturn",  "sign": "Capricorn", "degree": 21, "house": 10},
        ],
        "houses": [{"number": i + 1, "sign": s} for i, s in enumerate(SIGN_ORDER)],
        "aspects": [
            {"planet1": "Sun",     "planet2": "Jupiter", "aspect": "conjunction", "orb": 4.5},
            {"planet1": "Moon",    "planet2": "Saturn",  "aspect": "trine",       "orb": 11.0},
            {"planet1": "Mars",    "planet2": "Saturn",  "aspect": "square",      "orb": 7.0},
            {"planet1": "Sun",     "planet2": "Mars",    "aspect": "square",      "orb": 8.5},
            {"planet1": "Mercury", "planet2": "Saturn",  "aspect": "quincunx",    "orb": 1.0},
        ],
    },
}

SAMPLE_CONTENT = (
    "**Overview**\nA cardinal chart with a strong water emphasis.\n"
    "Saturn and Mars dignified.**Career**Structured ambition pays off.**Empty**  "
)


# ---------------------------------------------------------------------------
# Test Vectors
# ---------------------------------------------------------------------------
# Format: {id, description, input, expected}
# expected["values"] maps dotted paths into the report output to exact values.

TEST_VECTORS = [
    {
        "id": "TV-01",
        "description": "Chinese premium — 1990-07-15, no birth time, gender not given",
        "input": {
            "report": {"report_type": "chinese_premium", "is_premium": True,
                       "content": SAMPLE_CONTENT},
            "chart": {"birth_date": "1990-07-15", "birth_time": None},
        },
        "expected": {
            "system": "chinese",
            "sections": ["header", "birth-info", "four-pillars", "elemental-cycle",
                         "animal-signs", "feng-shui", "content", "footer"],
            "values": {
                "calculations.four-pillars.0.name": "Hour",
                "calculations.four-pillars.0.branch_romanized": "Wu",
                "calculations.four-pillars.0.stem_romanized": "Xin",
                "calculations.four-pillars.1.stem_romanized": "Xin",
                "calculations.four-pillars.1.animal": "Goat",
                "calculations.four-pillars.2.stem_romanized": "Geng",
                "calculations.four-pillars.3.stem": "庚",
                "calculations.four-pillars.3.branch": "午",
                "calculations.four-pillars.3.animal_chinese": "马",
                "calculations.four-pillars.3.element": "Metal",
                "calculations.elemental-cycle.personal_element.name": "Wood",
                "calculations.animal-signs.name": "Horse",
                "calculations.animal-signs.element": "Fire",
                "calculations.feng-shui.kua_number": 2,
                "calculations.feng-shui.assumed_gender": True,
                "system_title": "Chinese Astrology Insights",
                "meta.edition": "Premium Analysis",
            },
        },
    },
    {
        "id": "TV-02",
        "description": "Chinese premium — female native, 1991",
        "input": {
            "report": {"report_type": "chinese_premium", "is_premium": True},
            "chart": {"birth_date": "1991-03-02", "birth_time": "08:45"},
            "is_male": False,
        },
        "expected": {
            "system": "chinese",
            "sections": ["header", "birth-info", "four-pillars", "elemental-cycle",
                         "animal-signs", "feng-shui", "content", "footer"],
            "values": {
                "calculations.four-pillars.3.stem_romanized": "Xin",
                "calculations.four-pillars.3.animal": "Goat",
                "calculations.four-pillars.0.branch_romanized": "Chen",
                "calculations.elemental-cycle.personal_element.name": "Fire",
                "calculations.animal-signs.name": "Goat",
                "calculations.feng-shui.kua_number": 8,
                "calculations.feng-shui.gender": "female",
                "calculations.feng-shui.assumed_gender": False,
                "calculations.feng-shui.profile.group": "West",
            },
        },
    },
    {
        "id": "TV-03",
        "description": "Hellenistic premium — sample chart, age 35",
        "input": {
            "report": {"report_type": "hellenistic_premium", "is_premium": True},
            "chart": SAMPLE_CHART,
        },
        "expected": {
            "system": "hellenistic",
            "sections": ["header", "birth-info", "hellenistic-chart", "planetary-rulers",
                         "lots", "time-analysis", "content", "footer"],
            "values": {
                "calculations.time-analysis.age": 35,
                "calculations.time-analysis.decennial_lord.planet": "Venus",
                "calculations.time-analysis.decennial_lord.years_remaining": 7,
                "calculations.time-analysis.annual_profection.house": 12,
                "calculations.time-analysis.annual_profection.ruler": "Jupiter",
                "calculations.time-analysis.zodiacal_releasing.sign": "Capricorn",
                "calculations.time-analysis.zodiacal_releasing.start_age": 27,
                "calculations.time-analysis.zodiacal_releasing.years_remaining": 19,
                "calculations.lots.is_day_chart": True,
                "calculations.lots.lots.0.sign": "Capricorn",
                "calculations.lots.lots.0.degree": 17,
                "calculations.lots.lots.0.minute": 30,
                "calculations.lots.lots.0.house": 10,
                "calculations.lots.lots.1.sign": "Gemini",
                "calculations.hellenistic-chart.1.dignity": "Exaltation",
                "calculations.hellenistic-chart.4.dignity": "Domicile",
                "calculations.planetary-rulers.0.ruler": "Mars",
                "calculations.planetary-rulers.0.condition": "Domicile",
            },
        },
    },
    {
        "id": "TV-04",
        "description": "Hellenistic standard — premium sections withheld",
        "input": {
            "report": {"report_type": "hellenistic", "is_premium": False},
            "chart": SAMPLE_CHART,
        },
        "expected": {
            "system": "hellenistic",
            "sections": ["header", "birth-info", "hellenistic-chart", "planetary-rulers",
                         "content", "footer"],
            "values": {
                "meta.edition": "Standard Report",
                "system_title": "Classical Interpretation",
            },
        },
    },
    {
        "id": "TV-05",
        "description": "Vedic premium — Moon in Rohini, Moon mahadasha",
        "input": {
            "report": {"report_type": "vedic_premium", "is_premium": True},
            "chart": SAMPLE_CHART,
        },
        "expected": {
            "system": "vedic",
            "sections": ["header", "birth-info", "vedic-chart", "nakshatra", "dasha",
                         "yoga", "remedies", "content", "footer"],
            "values": {
                "calculations.nakshatra.moon.name": "Rohini",
                "calculations.nakshatra.moon.deity": "Brahma",
                "calculations.dasha.current.planet": "Moon",
                "calculations.dasha.next.planet": "Mars",
                "calculations.dasha.sub_dashas.0": "Moon",
                "system_title": "Jyotish Analysis",
            },
        },
    },
    {
        "id": "TV-06",
        "description": "Western — aspects, house emphasis and elemental balance",
        "input": {
            "report": {"report_type": "natal", "is_premium": False,
                       "content": SAMPLE_CONTENT},
            "chart": SAMPLE_CHART,
        },
        "expected": {
            "system": "western",
            "sections": ["header", "birth-info", "chart", "planetary-positions", "aspects",
                         "houses", "elemental", "content", "footer"],
            "values": {
                "calculations.elemental.dominant_element": "Water",
                "calculations.elemental.dominant_modality": "Cardinal",
                "calculations.elemental.elements.Fire": 2,
                "calculations.aspects.distribution.square.count": 2,
                "calculations.aspects.distribution.square.percentage": 50,
                "calculations.houses.houses.3.strength": "Moderate",
                "calculations.houses.distribution.Quiet": 6,
                "calculations.planetary-positions.0.degree_formatted": "22°30'",
                "calculations.birth-info.location.city": "Mumbai",
                "content.0.title": "Overview",
                "content.1.text": "Structured ambition pays off.",
                "system_title": "Astrological Analysis",
            },
        },
    },
    {
        "id": "TV-07",
        "description": "Empty chart data, native born 1900 — fallback paths",
        "input": {
            "report": {"report_type": "hellenistic_premium", "is_premium": True},
            "chart": {"birth_date": "1900-01-01", "chart_data": None},
        },
        "expected": {
            "system": "hellenistic",
            "sections": ["header", "birth-info", "hellenistic-chart", "planetary-rulers",
                         "lots", "time-analysis", "content", "footer"],
            "values": {
                "calculations.time-analysis.age": 125,
                "calculations.time-analysis.decennial_lord.planet": "Mars",
                "calculations.time-analysis.decennial_lord.is_fallback": True,
                "calculations.time-analysis.annual_profection.house": 6,
                "calculations.time-analysis.zodiacal_releasing.sign": "Gemini",
                "calculations.lots.is_day_chart": True,
                "calculations.lots.lots.0.sign": "Aries",
                "calculations.lots.lots.0.unresolved": ["Moon", "Sun"],
                "calculations.hellenistic-chart": [],
                "calculations.planetary-rulers.0.condition": "—",
            },
        },
    },
]


# ---------------------------------------------------------------------------
# Test Runner
# ---------------------------------------------------------------------------

class TestResult:
    __test__ = False

    def __init__(self, test_id, description):
        self.test_id = test_id
        self.description = description
        self.passed = []
        self.failed = []
        self.computed = {}

    def assert_equal(self, label, actual, expected):
        if actual == expected:
            self.passed.append(f"✓ {label}: {actual!r}")
        else:
            self.failed.append(f"✗ {label}: got {actual!r}, expected {expected!r}")

    def assert_in(self, label, actual, options):
        if actual in options:
            self.passed.append(f"✓ {label}: {actual!r} (in allowed set)")
        else:
            self.failed.append(f"✗ {label}: got {actual!r}, not in {options}")

    def assert_numeric_close(self, label, actual, expected, tolerance):
        diff = abs(actual - expected)
        if diff <= tolerance:
            self.passed.append(f"✓ {label}: {actual:.4f} (Δ={diff:.4f}°)")
        else:
            self.failed.append(f"✗ {label}: {actual:.4f} vs expected {expected:.4f} (Δ={diff:.4f}° > tol {tolerance}°)")

    def assert_true(self, label, condition, details=""):
        if condition:
            self.passed.append(f"✓ {label}{': ' + details if details else ''}")
        else:
            self.failed.append(f"✗ {label}{': ' + details if details else ''}")

    def assert_raises(self, label, exc_type, fn, *args):
        try:
            fn(*args)
        except exc_type as e:
            self.passed.append(f"✓ {label}: raised {type(e).__name__}")
            return
        self.failed.append(f"✗ {label}: {exc_type.__name__} not raised")

    @property
    def ok(self):
        return len(self.failed) == 0

    def summary(self):
        status = "PASS" if self.ok else "FAIL"
        lines = [f"\n[{status}] {self.test_id}: {self.description}"]
        for p in self.passed:
            lines.append(f"       {p}")
        for f in self.failed:
            lines.append(f"       {f}")
        return "\n".join(lines)


_MISSING = object()


def _lookup(data, path: str):
    """Resolve a dotted path such as 'calculations.lots.lots.0.sign'."""
    node = data
    for key in path.split("."):
        if isinstance(node, list):
            try:
                node = node[int(key)]
            except (ValueError, IndexError):
                return _MISSING
        elif isinstance(node, dict) and key in node:
            node = node[key]
        else:
            return _MISSING
    return node


def run_test_vector(tv: dict) -> TestResult:
    result = TestResult(tv["id"], tv["description"])
    inp = tv["input"]
    exp = tv["expected"]

    try:
        output = generate_report(
            report=inp["report"],
            chart=inp["chart"],
            now=NOW,
            is_male=inp.get("is_male"),
            rng=random.Random(7),
        )
    except Exception as e:
        result.failed.append(f"✗ EXCEPTION: {e}")
        return result

    result.computed = {"system": output["system"], "sections": len(output["sections"])}

    result.assert_equal("system", output["system"], exp["system"])
    result.assert_equal("sections", [s["id"] for s in output["sections"]], exp["sections"])

    for path, expected in exp.get("values", {}).items():
        actual = _lookup(output, path)
        if actual is _MISSING:
            result.failed.append(f"✗ {path}: missing from output")
        else:
            result.assert_equal(path, actual, expected)

    # Every premium section is present only for premium reports
    premium_ids = {"dasha", "yoga", "feng-shui", "lots", "time-analysis"}
    shown = {s["id"] for s in output["sections"]}
    if not output["meta"]["is_premium"]:
        result.assert_true("no premium sections", not (premium_ids & shown))

    return result


# ---------------------------------------------------------------------------
# Unit checks
# ---------------------------------------------------------------------------

def check_year_pillar_indices():
    """Year stem/branch indices follow (Y-4) mod 10 / mod 12 for every year."""
    result = TestResult("PIL-01", "Year pillar indices across 1800–2100")
    bad = []
    for year in range(1800, 2101):
        p = year_pillar(year)
        if (p["stem_index"] != (year - 4) % 10
                or p["branch_index"] != (year - 4) % 12
                or p["stem"] != HEAVENLY_STEMS[p["stem_index"]]
                or p["branch"] != EARTHLY_BRANCHES[p["branch_index"]]):
            bad.append(year)
    result.assert_true("all years consistent", not bad, f"mismatches: {bad[:5]}" if bad else "301 years")
    return result


def check_four_pillars_1990():
    """1990-07-15 with unknown time: indices 6/6 for the year pillar, noon hour."""
    result = TestResult("PIL-02", "Four pillars for 1990-07-15, noon default")
    chart = BirthChart.from_dict({"birth_date": "1990-07-15"})
    pillars = compute_four_pillars(chart.birth_date, chart.birth_hour)
    hour, day, month, year = pillars

    result.assert_equal("pillar order", [p["name"] for p in pillars], ["Hour", "Day", "Month", "Year"])
    result.assert_equal("year stem index", year["stem_index"], 6)
    result.assert_equal("year branch index", year["branch_index"], 6)
    result.assert_equal("year stem", year["stem_romanized"], "Geng")
    result.assert_equal("year animal", year["animal"], "Horse")
    result.assert_equal("year element", year["element"], "Metal")
    result.assert_equal("month stem index", month["stem_index"], 6)
    result.assert_equal("month branch index", month["branch_index"], 6)
    result.assert_equal("day stem index", day["stem_index"], 33067 % 10)
    result.assert_equal("day branch index", day["branch_index"], 33067 % 12)
    result.assert_equal("hour stem index", hour["stem_index"], (12 + 15) % 10)
    result.assert_equal("hour branch index", hour["branch_index"], 6)
    result.assert_true("element only on year pillar",
                       all("element" not in p for p in (hour, day, month)))
    result.assert_equal("deterministic", compute_four_pillars(chart.birth_date, 12), pillars)
    return result


def check_decennial_brackets():
    result = TestResult("TL-01", "Decennial lord brackets and fallback")
    for age in range(0, 140):
        lord = decennial_lord(age)
        matches = [p for p, s, e in DECENNIAL_SEQUENCE if s <= age < e]
        if age < 117:
            if len(matches) != 1 or lord["planet"] != matches[0] or lord["is_fallback"]:
                result.failed.append(f"✗ age {age}: {lord['planet']} vs {matches}")
        elif not (lord["is_fallback"] and lord["planet"] == "Mars"):
            result.failed.append(f"✗ age {age}: expected fallback, got {lord['planet']}")
    result.assert_equal("age 35 lord", decennial_lord(35)["planet"], "Venus")
    result.assert_equal("age 35 elapsed", decennial_lord(35)["years_in_period"], 1)
    result.assert_equal("age 116 lord", decennial_lord(116)["planet"], "Saturn")
    result.assert_equal("age 117 remaining", decennial_lord(117)["years_remaining"], 0)
    return result


def check_profection_cycle():
    result = TestResult("TL-02", "Annual profection cycles 1→12→1")
    result.assert_equal("house(0)", annual_profection(0)["house"], 1)
    result.assert_equal("house(11)", annual_profection(11)["house"], 12)
    result.assert_equal("house(12)", annual_profection(12)["house"], 1)
    result.assert_equal("ruler(0)", annual_profection(0)["ruler"], "Mars")
    result.assert_true("house = age mod 12 + 1",
                       all(annual_profection(a)["house"] == a % 12 + 1 for a in range(200)))
    return result


def check_zodiacal_releasing():
    result = TestResult("TL-03", "Zodiacal releasing from Lot of Fortune at 120°")
    zr = zodiacal_releasing(0, 120.0)
    result.assert_equal("age 0 sign", zr["sign"], "Scorpio")
    result.assert_equal("age 0 end", zr["end_age"], 15)
    zr = zodiacal_releasing(35, 120.0)
    result.assert_equal("age 35 sign", zr["sign"], "Capricorn")
    result.assert_equal("age 35 start", zr["start_age"], 27)
    result.assert_equal("age 35 end", zr["end_age"], 54)
    result.assert_equal("fortune 0° starts at Cancer", zodiacal_releasing(0, 0.0)["sign"], "Cancer")
    result.assert_equal("fortune 359° starts at Gemini", zodiacal_releasing(0, 359.0)["sign"], "Gemini")

    fallback = zodiacal_releasing(208, 120.0)
    result.assert_true("age 208 falls back", fallback["is_fallback"])
    result.assert_equal("fallback sign", fallback["sign"], "Cancer")
    result.assert_equal("fallback start", fallback["start_age"], None)
    result.assert_equal("fallback keys", set(fallback), set(zr))
    return result


def check_current_age():
    result = TestResult("TL-04", "Age in completed 365.25-day years")
    result.assert_equal("35 at 2026-01-01", current_age(date(1990, 7, 15), NOW), 35)
    result.assert_equal("day before first birthday", current_age(date(2000, 2, 29), date(2001, 2, 28)), 0)
    result.assert_equal("now before birth", current_age(date(2030, 1, 1), NOW), 0)
    result.assert_equal("datetime accepted", current_age(datetime(1990, 7, 15, 9), datetime(2026, 1, 1, 18)), 35)
    return result


def check_kua_numbers():
    result = TestResult("KUA-01", "Kua number reduction and range")
    allowed = {1, 2, 3, 4, 6, 7, 8, 9}
    for year in range(1900, 2100):
        for is_male in (True, False):
            kua = kua_number(year, is_male)
            if kua not in allowed:
                result.failed.append(f"✗ {year} male={is_male}: {kua}")
    for n in range(0, 200):
        once = reduce_digits(n)
        if once > 9 or reduce_digits(once) != once:
            result.failed.append(f"✗ reduce_digits({n}) = {once}")

    result.assert_equal("1990 male", kua_number(1990, True), 2)
    result.assert_equal("1990 female", kua_number(1990, False), 4)
    result.assert_equal("1985 male", kua_number(1985, True), 7)
    result.assert_equal("1986 male", kua_number(1986, True), 6)
    result.assert_equal("1987 male (5 → 2)", kua_number(1987, True), 2)
    result.assert_equal("1991 female (5 → 8)", kua_number(1991, False), 8)
    result.assert_equal("1987 female (10 → 1)", kua_number(1987, False), 1)
    return result


def check_feng_shui_rooms():
    result = TestResult("KUA-02", "Room guidance from the Kua profile")
    fs = compute_feng_shui(1990, True, gender_supplied=False)
    rooms = fs["room_guidance"]
    result.assert_equal("bedroom", rooms["bedroom"]["direction"], "Southwest")
    result.assert_equal("office", rooms["office"]["direction"], "Northwest")
    result.assert_equal("kitchen", rooms["kitchen"]["direction"], "West")
    result.assert_true("assumed gender flagged", fs["assumed_gender"])
    result.assert_equal("element tips", len(fs["element_tips"]), 4)

    profile = kua_profile(2)
    profile["unfavorable"].append("Nowhere")
    profile["group"] = "Changed"
    result.assert_equal("static unfavorable list", KUA_PROFILES[2]["unfavorable"],
                        ["North", "South", "East", "Southeast"])
    result.assert_equal("static group", KUA_PROFILES[2]["group"], "West")
    result.assert_equal("shared West list", kua_profile(6)["unfavorable"],
                        ["North", "South", "East", "Southeast"])
    return result


def check_animal_signs():
    result = TestResult("ANM-01", "Animal sign of the birth year and its pairings")
    horse = animal_signs(1990)
    result.assert_equal("1990 animal", horse["name"], "Horse")
    result.assert_equal("1990 matches year branch", horse["name"], year_pillar(1990)["animal"])
    result.assert_equal("compatible", [a["name"] for a in horse["compatible"]],
                        ["Tiger", "Goat", "Dog"])
    result.assert_equal("incompatible", [a["name"] for a in horse["incompatible"]],
                        ["Rat", "Ox", "Rabbit"])
    result.assert_equal("1984 animal", animal_signs(1984)["name"], "Rat")
    result.assert_equal("1900 animal", animal_signs(1900)["name"], "Rat")
    result.assert_equal("1925 element", animal_signs(1925)["element"], "Earth")
    for year in range(1900, 1912):
        sign = animal_signs(year)
        if sign["name"] != year_pillar(year)["animal"]:
            result.failed.append(f"✗ {year}: {sign['name']} vs {year_pillar(year)['animal']}")

    horse["traits"].append("Changed")
    result.assert_true("table untouched by callers", "Changed" not in animal_signs(1990)["traits"])
    return result


def check_degree_normalization():
    result = TestResult("DEG-01", "Degree normalisation into [0, 360)")
    result.assert_numeric_close("-45", normalize_degrees(-45), 315, ANGLE_TOLERANCE_DEG)
    result.assert_numeric_close("400", normalize_degrees(400), 40, ANGLE_TOLERANCE_DEG)
    result.assert_numeric_close("360", normalize_degrees(360), 0, ANGLE_TOLERANCE_DEG)
    result.assert_numeric_close("-720.5", normalize_degrees(-720.5), 359.5, ANGLE_TOLERANCE_DEG)
    values = [normalize_degrees(x / 7.0) for x in range(-5000, 5000, 13)] + [normalize_degrees(-1e-15)]
    result.assert_true("all in range", all(0 <= v < 360 for v in values))
    result.assert_equal("format 287.5°", format_degree(287.5), "17°30'")
    return result


def check_dignities():
    result = TestResult("DIG-01", "Essential dignity lookup")
    expected = {
        "Leo": Dignity.DOMICILE,
        "Aries": Dignity.EXALTATION,
        "Aquarius": Dignity.DETRIMENT,
        "Libra": Dignity.FALL,
        "Gemini": Dignity.NEUTRAL,
    }
    for sign, dignity in expected.items():
        result.assert_equal(f"Sun in {sign}", dignity_of("Sun", sign), dignity)
    result.assert_equal("Sun in Leo value", dignity_of("Sun", "Leo").value, "Domicile")
    result.assert_equal("Mercury in Virgo", dignity_of("Mercury", "Virgo"), Dignity.DOMICILE)
    result.assert_equal("Mars in Taurus", dignity_of("Mars", "Taurus"), Dignity.DETRIMENT)
    result.assert_equal("Pluto in Scorpio", dignity_of("Pluto", "Scorpio"), Dignity.NEUTRAL)

    chart = BirthChart.from_dict(SAMPLE_CHART)
    rows = classical_positions(chart)
    result.assert_equal("classical order", [r["planet"] for r in rows],
                        ["Sun", "Moon", "Mercury", "Venus", "Mars", "Jupiter", "Saturn"])
    result.assert_equal("Jupiter in Cancer", rows[5]["dignity"], "Exaltation")
    return result


def check_house_rulers():
    result = TestResult("DIG-02", "House rulers and their condition")
    chart = BirthChart.from_dict(SAMPLE_CHART)
    rulers = house_rulers(chart)
    result.assert_equal("12 rows", len(rulers), 12)
    result.assert_equal("house 4 ruler", rulers[3]["ruler"], "Moon")
    result.assert_equal("house 4 condition", rulers[3]["condition"], "Exaltation")
    result.assert_equal("house 2 condition", rulers[1]["condition"], "Neutral")

    no_saturn = dict(SAMPLE_CHART, chart_data=dict(
        SAMPLE_CHART["chart_data"],
        planets=[p for p in SAMPLE_CHART["chart_data"]["planets"] if p["name"] != "Saturn"],
    ))
    rulers = house_rulers(BirthChart.from_dict(no_saturn))
    result.assert_equal("missing ruler", rulers[9]["condition"], "Not Found")
    return result


def check_elements():
    result = TestResult("ELM-01", "Sign element and modality lookup")
    result.assert_equal("Scorpio element", element_of("Scorpio"), "Water")
    result.assert_equal("Scorpio modality", modality_of("Scorpio"), "Fixed")
    result.assert_equal("Capricorn element", element_of("Capricorn"), "Earth")
    result.assert_equal("Capricorn modality", modality_of("Capricorn"), "Cardinal")
    result.assert_equal("unknown sign", element_of("Ophiuchus"), "Unknown")

    empty = elemental_balance([])
    result.assert_equal("empty total", empty["total_planets"], 0)
    result.assert_equal("empty dominant (later wins)", empty["dominant_element"], "Water")

    chart = BirthChart.from_dict(SAMPLE_CHART)
    balance = elemental_balance(chart.planets)
    result.assert_equal("elements", balance["elements"], {"Fire": 2, "Earth": 2, "Air": 1, "Water": 2})
    result.assert_equal("tie goes to Water", balance["dominant_element"], "Water")
    result.assert_equal("modalities", balance["modalities"], {"Cardinal": 4, "Fixed": 2, "Mutable": 1})
    return result


def check_elemental_cycle():
    result = TestResult("ELM-02", "Chinese five-element cycle")
    cycle = compute_elemental_cycle(1990)
    result.assert_equal("1990 element", cycle["personal_element"]["name"], "Wood")
    result.assert_equal("supporting", cycle["relationships"]["supporting"], "Water")
    result.assert_equal("supported", cycle["relationships"]["supported"], "Fire")
    result.assert_equal("conflicting", cycle["relationships"]["conflicting"], "Earth")
    result.assert_equal("1993 element", compute_elemental_cycle(1993)["personal_element"]["name"], "Metal")
    return result


def check_lots():
    result = TestResult("LOT-01", "Lot formulas: parsing, sect, unresolved operands")
    formula = parse_formula("Ascendant + Moon - Sun")
    result.assert_equal("terms", formula.terms,
                        (LotTerm(1, "Ascendant"), LotTerm(1, "Moon"), LotTerm(-1, "Sun")))
    result.assert_equal("leading operand is added", parse_formula("Moon - Sun").terms[0], LotTerm(1, "Moon"))

    chart = BirthChart.from_dict(SAMPLE_CHART)
    lots = compute_lots(chart)
    by_name = {l["name"]: l for l in lots["lots"]}
    result.assert_equal("six lots", len(lots["lots"]), 6)
    result.assert_numeric_close("Fortune", by_name["Lot of Fortune"]["longitude"], 287.5, ANGLE_TOLERANCE_DEG)
    result.assert_numeric_close("Spirit", by_name["Lot of Spirit"]["longitude"], 72.5, ANGLE_TOLERANCE_DEG)
    result.assert_numeric_close("Love", by_name["Lot of Love"]["longitude"], 335.5, ANGLE_TOLERANCE_DEG)
    result.assert_numeric_close("Necessity", by_name["Lot of Necessity"]["longitude"], 235.0, ANGLE_TOLERANCE_DEG)
    result.assert_equal("Necessity unresolved", by_name["Lot of Necessity"]["unresolved"], ["Fortune"])
    result.assert_equal("Victory unresolved", by_name["Lot of Victory"]["unresolved"], ["Spirit"])
    result.assert_equal("Victory sign", by_name["Lot of Victory"]["sign"], "Cancer")

    night = dict(SAMPLE_CHART, chart_data=dict(
        SAMPLE_CHART["chart_data"],
        planets=[dict(p, house=7) if p["name"] == "Sun" else p
                 for p in SAMPLE_CHART["chart_data"]["planets"]],
    ))
    night_lots = compute_lots(BirthChart.from_dict(night))
    result.assert_true("Sun in 7th is nocturnal", not night_lots["is_day_chart"])
    result.assert_numeric_close("night Fortune", night_lots["lots"][0]["longitude"], 72.5, ANGLE_TOLERANCE_DEG)
    result.assert_true("input chart untouched",
                       SAMPLE_CHART["chart_data"]["planets"][0]["house"] == 4)
    return result


def check_aspects_and_houses():
    result = TestResult("ASP-01", "Aspect classification and house emphasis")
    chart = BirthChart.from_dict(SAMPLE_CHART)
    aspects = analyze_aspects(chart)
    result.assert_equal("major count", len(aspects["major_aspects"]), 4)
    result.assert_equal("trine nature", aspect_nature("Trine"), "Harmonious")
    result.assert_equal("square nature", aspect_nature("square"), "Challenging")
    result.assert_equal("quincunx nature", aspect_nature("quincunx"), "Neutral")
    result.assert_equal("unknown nature", aspect_nature("semi-square"), "Mixed")

    many = BirthChart.from_dict({"birth_date": "1990-07-15", "chart_data": {
        "aspects": [{"planet1": "Sun", "planet2": "Moon", "aspect": "trine", "orb": 1}] * 20}})
    result.assert_equal("capped at 12", len(analyze_aspects(many)["major_aspects"]), 12)

    houses = analyze_houses(chart)
    result.assert_equal("house 1", houses["houses"][0]["strength"], "Active")
    result.assert_equal("distribution", houses["distribution"],
                        {"Strong": 0, "Moderate": 1, "Active": 5, "Quiet": 6})
    return result


def check_nakshatra_and_dasha():
    result = TestResult("VED-01", "Nakshatra lookup and sample mahadasha")
    chart = BirthChart.from_dict(SAMPLE_CHART)
    first = compute_nakshatras(chart, random.Random(42))
    second = compute_nakshatras(chart, random.Random(42))
    result.assert_equal("moon nakshatra", first["moon"]["name"], "Rohini")
    result.assert_equal("seeded ascendant repeats", first["ascendant"], second["ascendant"])
    result.assert_in("ascendant in table", first["ascendant"]["name"], [n["name"] for n in NAKSHATRAS])

    no_moon = BirthChart.from_dict({"birth_date": "1990-07-15"})
    result.assert_equal("fallback Ashwini", compute_nakshatras(no_moon)["moon"]["name"], "Ashwini")

    dasha = compute_dasha(date(1990, 7, 15), NOW)
    result.assert_equal("current", dasha["current"]["planet"], "Moon")
    result.assert_equal("sub-dashas", dasha["sub_dashas"],
                        ["Moon", "Mars", "Mercury", "Jupiter", "Venus", "Saturn", "Rahu", "Ketu", "Sun"])
    late = compute_dasha(date(1880, 1, 1), NOW)
    result.assert_equal("past sequence → Venus", late["current"]["planet"], "Venus")
    result.assert_equal("next wraps", compute_dasha(date(1911, 1, 1), NOW)["next"]["planet"], "Venus")
    return result


def check_report_assembly():
    result = TestResult("RPT-01", "Report system selection and content splitting")
    result.assert_equal("vedic", report_system("vedic_premium"), "vedic")
    result.assert_equal("chinese", report_system("chinese"), "chinese")
    result.assert_equal("hellenistic", report_system("full_hellenistic"), "hellenistic")
    result.assert_equal("default", report_system("natal"), "western")
    result.assert_equal("empty", report_system(""), "western")

    sections = format_content(SAMPLE_CONTENT)
    result.assert_equal("pairs kept", [s["title"] for s in sections], ["Overview", "Career"])
    result.assert_equal("paragraphs", sections[0]["paragraphs"],
                        ["A cardinal chart with a strong water emphasis.", "Saturn and Mars dignified."])
    result.assert_equal("no content", format_content(""), [])
    return result


def check_chart_parsing():
    result = TestResult("CHT-01", "Birth chart parsing")
    chart = BirthChart.from_dict({"birth_date": "1990-07-15", "birth_time": "08:45"})
    result.assert_equal("hour", chart.birth_hour, 8)
    result.assert_equal("no planets", chart.planets, [])
    result.assert_equal("noon default", BirthChart.from_dict({"birth_date": "1990-07-15"}).birth_hour, 12)
    result.assert_raises("bad date", ValueError, BirthChart.from_dict, {"birth_date": "15/07/1990"})
    result.assert_raises("missing date", ValueError, BirthChart.from_dict, {})

    sun = BirthChart.from_dict(SAMPLE_CHART).planet("Sun")
    result.assert_numeric_close("Sun longitude", sun.absolute_longitude, 112.5, ANGLE_TOLERANCE_DEG)

    loose = BirthChart.from_dict({
        "birth_date": "1990-07-15",
        "chart_data": {
            "planets": [
                {"name": "Sun", "sign": "Cancer", "degree": "22", "house": "7"},
                {"name": "Moon", "sign": "Taurus", "longitude": "45.5", "house": ""},
                {"name": "Mars", "sign": "Aries", "degree": "n/a", "house": "seventh"},
            ],
            "houses": [{"number": "7", "sign": "Libra"}],
        },
    })
    result.assert_equal("string house", loose.planet("Sun").house, 7)
    result.assert_numeric_close("string degree", loose.planet("Sun").degree, 22, ANGLE_TOLERANCE_DEG)
    result.assert_numeric_close("string longitude", loose.planet("Moon").absolute_longitude,
                                45.5, ANGLE_TOLERANCE_DEG)
    result.assert_equal("blank house", loose.planet("Moon").house, None)
    result.assert_equal("unparseable house", loose.planet("Mars").house, None)
    result.assert_equal("unparseable degree", loose.planet("Mars").degree, 0.0)
    result.assert_equal("string house number", loose.house(7).sign, "Libra")
    result.assert_equal("planet found in house", analyze_houses(loose)["houses"][6]["planets"], ["Sun"])
    result.assert_equal("night chart from string house", compute_lots(loose)["is_day_chart"], False)
    return result


UNIT_CHECKS = [
    check_year_pillar_indices,
    check_four_pillars_1990,
    check_decennial_brackets,
    check_profection_cycle,
    check_zodiacal_releasing,
    check_current_age,
    check_kua_numbers,
    check_feng_shui_rooms,
    check_animal_signs,
    check_degree_normalization,
    check_dignities,
    check_house_rulers,
    check_elements,
    check_elemental_cycle,
    check_lots,
    check_aspects_and_houses,
    check_nakshatra_and_dasha,
    check_report_assembly,
    check_chart_parsing,
]


# ---------------------------------------------------------------------------
# pytest entry points
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("tv", TEST_VECTORS, ids=[tv["id"] for tv in TEST_VECTORS])
def test_vector(tv):
    result = run_test_vector(tv)
    assert result.ok, result.summary()


@pytest.mark.parametrize("check", UNIT_CHECKS, ids=[c.__name__ for c in UNIT_CHECKS])
def test_unit(check):
    result = check()
    assert result.ok, result.summary()


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

def generate_test_report(results: list) -> str:
    """Generate a QA verification report."""
    total = len(results)
    passed = sum(1 for r in results if r.ok)
    failed = total - passed

    lines = [
        "=" * 70,
        "REPORT ENGINE — TEST VERIFICATION REPORT",
        f"Date: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
        f"Total: {total}  |  Passed: {passed}  |  Failed: {failed}",
        "=" * 70,
    ]
    for r in results:
        lines.append(r.summary())
    lines.append("\n" + "=" * 70)
    lines.append(f"RESULT: {'ALL TESTS PASSED ✓' if failed == 0 else f'{failed} TEST(S) FAILED ✗'}")
    lines.append("=" * 70)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main():
    print("Running Report Engine Test Suite...")
    print("=" * 70)

    all_results = []

    print(f"\nRunning {len(TEST_VECTORS)} canonical test vectors...")
    for tv in TEST_VECTORS:
        result = run_test_vector(tv)
        all_results.append(result)
        status = "✓ PASS" if result.ok else "✗ FAIL"
        print(f"  {status}  {tv['id']}: {tv['description'][:55]}")

    print("\nRunning unit checks...")
    for check in UNIT_CHECKS:
        result = check()
        all_results.append(result)
        status = "✓ PASS" if result.ok else "✗ FAIL"
        print(f"  {status}  {result.test_id}: {result.description[:55]}")

    print(generate_test_report(all_results))

    failed = sum(1 for r in all_results if not r.ok)
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
