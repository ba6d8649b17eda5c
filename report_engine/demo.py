"""
demo.py
=======
Demonstration of the Report Engine.
Run: python demo.py

Generates Hellenistic, Chinese and Vedic premium reports for one sample
chart and prints the calculated sections.
"""

import sys
import os
import random
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from report_engine import generate_report


SAMPLE_CHART = {
    "birth_date": "1990-07-15",
    "birth_time": None,
    "birth_location": {"latitude": 19.0760, "longitude": 72.8777,
                       "timezone": "Asia/Kolkata", "city": "Mumbai", "country": "India"},
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
        "houses": [
            {"number": i + 1, "sign": s} for i, s in enumerate(
                ["Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo", "Libra",
                 "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces"])
        ],
        "aspects": [],
    },
}


def print_section(title: str):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def format_dignity_table(rows: list) -> str:
    lines = [f"{'Planet':<10} {'Sign':<13} {'Degree':<9} {'House':<6} {'Dignity':<10}"]
    lines.append("─" * 52)
    for r in rows:
        lines.append(
            f"{r['planet']:<10} {r['sign']:<13} {r['degree_formatted']:<9} "
            f"H{r['house'] or '?':<5} {r['dignity']}"
        )
    return "\n".join(lines)


def run_demo():
    today = date(2026, 1, 1)
    rng = random.Random(1)

    print("=" * 60)
    print("   REPORT ENGINE — SAMPLE REPORTS")
    print("=" * 60)
    print(f"\n  Birth Date  : {SAMPLE_CHART['birth_date']} (time unknown, noon used)")
    print(f"  Location    : Mumbai, India")
    print(f"  As of       : {today.isoformat()}")

    # ── Hellenistic ──
    out = generate_report({"report_type": "hellenistic_premium", "is_premium": True},
                          SAMPLE_CHART, now=today, rng=rng)
    calc = out["calculations"]

    print_section("CLASSICAL PLANETS & DIGNITIES")
    print(format_dignity_table(calc["hellenistic-chart"]))

    print_section("HELLENISTIC LOTS")
    print(f"  {calc['lots']['sect']}")
    for lot in calc["lots"]["lots"]:
        missing = f"  (unresolved: {', '.join(lot['unresolved'])})" if lot["unresolved"] else ""
        print(f"  {lot['name']:<18} {lot['degree']:>2}°{lot['minute']:02d}' {lot['sign']:<12} H{lot['house']}{missing}")

    print_section("TIME LORDS")
    tl = calc["time-analysis"]
    dec, prof, zr = tl["decennial_lord"], tl["annual_profection"], tl["zodiacal_releasing"]
    print(f"  Age               : {tl['age']}")
    print(f"  Decennial Lord    : {dec['planet']} ({dec['age_range']}), {dec['years_remaining']} years left")
    print(f"  Profected House   : {prof['house']} ({prof['theme']}), ruled by {prof['ruler']}")
    print(f"  Zodiacal Releasing: {zr['sign']} / {zr['planet']}  (age {zr['start_age']} → {zr['end_age']})")

    # ── Chinese ──
    out = generate_report({"report_type": "chinese_premium", "is_premium": True},
                          SAMPLE_CHART, now=today, rng=rng)
    calc = out["calculations"]

    print_section("FOUR PILLARS")
    print(f"  {'Pillar':<7} {'Stem':<10} {'Branch':<10} {'Animal':<8}")
    print(f"  {'─'*7} {'─'*10} {'─'*10} {'─'*8}")
    for p in calc["four-pillars"]:
        print(f"  {p['name']:<7} {p['stem']} {p['stem_romanized']:<8} "
              f"{p['branch']} {p['branch_romanized']:<8} {p['animal']:<8}")

    animal = calc["animal-signs"]
    print_section("ANIMAL SIGN")
    print(f"  {animal['name']} ({animal['element']})  ·  Traits: {', '.join(animal['traits'])}")
    print(f"  Compatible   : {', '.join(a['name'] for a in animal['compatible'])}")
    print(f"  Challenging  : {', '.join(a['name'] for a in animal['incompatible'])}")

    fs = calc["feng-shui"]
    print_section("FENG SHUI")
    assumed = " (gender assumed)" if fs["assumed_gender"] else ""
    print(f"  Kua Number : {fs['kua_number']}{assumed}")
    print(f"  Group      : {fs['profile']['group']}  ·  Element: {fs['profile']['element']}")
    print(f"  Favorable  : {', '.join(fs['profile']['favorable'])}")

    # ── Vedic ──
    out = generate_report({"report_type": "vedic_premium", "is_premium": True},
                          SAMPLE_CHART, now=today, rng=rng)
    calc = out["calculations"]

    print_section("NAKSHATRA & MAHADASHA")
    print(f"  Moon Nakshatra : {calc['nakshatra']['moon']['name']}")
    print(f"  Current Dasha  : {calc['dasha']['current']['planet']}"
          f"  (age {calc['dasha']['current']['start_age']} → {calc['dasha']['current']['end_age']})")
    print(f"  Next Dasha     : {calc['dasha']['next']['planet']}")

    print("\n")


if __name__ == "__main__":
    run_demo()
