"""
pdf_report.py
=============
Renders a generated astrology report (see report_engine.generate_report)
to a printable PDF.
Uses ReportLab for PDF generation.
"""

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.lib.colors import HexColor
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, HRFlowable
)
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from xml.sax.saxutils import escape
import io
from datetime import datetime

# ── Color palette ──────────────────────────────────────────────
VOID      = HexColor("#0B0B0F")
GOLD      = HexColor("#C9A96E")
SURFACE   = HexColor("#1E1C28")
MUTED     = HexColor("#6E6A7C")
VIOLET    = HexColor("#7B6FA0")
WHITE     = HexColor("#FFFFFF")

ROW_BACKGROUNDS = [HexColor("#FAFAFA"), WHITE]
GRID_COLOR = HexColor("#DDDDDD")

SECTION_TITLES = {
    "planetary-positions": "PLANETARY POSITIONS",
    "aspects":             "MAJOR ASPECTS",
    "houses":              "HOUSE EMPHASIS",
    "elemental":           "ELEMENTAL BALANCE",
    "nakshatra":           "NAKSHATRAS",
    "dasha":               "MAHADASHA TIMELINE",
    "four-pillars":        "FOUR PILLARS OF DESTINY",
    "elemental-cycle":     "FIVE ELEMENT CYCLE",
    "animal-signs":        "ANIMAL SIGN",
    "feng-shui":           "FENG SHUI · KUA NUMBER",
    "hellenistic-chart":   "CLASSICAL PLANETS & DIGNITIES",
    "planetary-rulers":    "HOUSE RULERS",
    "lots":                "HELLENISTIC LOTS",
    "time-analysis":       "TIME LORDS",
}


def _grid_table(header, rows, col_widths):
    """Header row on SURFACE/GOLD, zebra body rows."""
    table = Table(header + rows, colWidths=col_widths, repeatRows=1)
    table.setStyle(TableStyle([
        ("FONTNAME",    (0,0), (-1,0),  "Helvetica-Bold"),
        ("FONTNAME",    (0,1), (-1,-1), "Helvetica"),
        ("FONTSIZE",    (0,0), (-1,-1), 8.5),
        ("BACKGROUND",  (0,0), (-1,0),  SURFACE),
        ("TEXTCOLOR",   (0,0), (-1,0),  GOLD),
        ("ROWBACKGROUNDS",(0,1),(-1,-1), ROW_BACKGROUNDS),
        ("GRID",        (0,0), (-1,-1), 0.3, GRID_COLOR),
        ("TOPPADDING",  (0,0), (-1,-1), 5),
        ("BOTTOMPADDING",(0,0),(-1,-1), 5),
        ("LEFTPADDING", (0,0), (-1,-1), 6),
    ]))
    return table


def _label_table(rows, col_widths):
    """Label/value pairs; labels in the even columns."""
    table = Table(rows, colWidths=col_widths)
    style = [
        ("FONTNAME",    (0,0), (-1,-1), "Helvetica"),
        ("FONTSIZE",    (0,0), (-1,-1), 8.5),
        ("ROWBACKGROUNDS", (0,0), (-1,-1), ROW_BACKGROUNDS),
        ("GRID",        (0,0), (-1,-1), 0.3, GRID_COLOR),
        ("TOPPADDING",  (0,0), (-1,-1), 5),
        ("BOTTOMPADDING",(0,0),(-1,-1), 5),
        ("LEFTPADDING", (0,0), (-1,-1), 6),
    ]
    for col in range(0, len(col_widths), 2):
        style.append(("FONTNAME",  (col,0), (col,-1), "Helvetica-Bold"))
        style.append(("TEXTCOLOR", (col,0), (col,-1), MUTED))
    table.setStyle(TableStyle(style))
    return table


def _dash(value) -> str:
    return "—" if value is None or value == "" else str(value)


# ── Section renderers ──────────────────────────────────────────
# Each returns a list of flowables for one calculated section.

def _planetary_positions(data, body_style):
    header = [["Planet", "Sign", "Degree", "House", "Nakshatra"]]
    rows = [[p["name"], _dash(p["sign"]), p["degree_formatted"],
             _dash(p["house"]), _dash(p["nakshatra"])] for p in data]
    return [_grid_table(header, rows, [3.4*cm, 3.4*cm, 3*cm, 2.2*cm, 5*cm])]


def _aspects(data, body_style):
    header = [["Planet", "Aspect", "Planet", "Orb", "Nature"]]
    rows = [[a["planet1"], a["aspect"].title(), a["planet2"], f"{a['orb']}°", a["nature"]]
            for a in data["major_aspects"]]
    if not rows:
        return [Paragraph("No major aspects in this chart.", body_style)]
    return [_grid_table(header, rows, [3.4*cm, 3.4*cm, 3.4*cm, 2.4*cm, 4.4*cm])]


def _houses(data, body_style):
    header = [["House", "Name", "Sign", "Planets", "Emphasis"]]
    rows = [[str(h["number"]), h["name"], _dash(h["sign"]),
             ", ".join(h["planets"]) or "—", h["strength"]] for h in data["houses"]]
    return [_grid_table(header, rows, [1.6*cm, 4.4*cm, 3*cm, 5*cm, 3*cm])]


def _elemental(data, body_style):
    rows = [[name, str(count)] for name, count in data["elements"].items()]
    rows += [[name, str(count)] for name, count in data["modalities"].items()]
    return [
        _grid_table([["Element / Modality", "Planets"]], rows, [8.5*cm, 8.5*cm]),
        Spacer(1, 0.2*cm),
        Paragraph(
            f"<b>Dominant:</b> {data['dominant_element']} · {data['dominant_modality']}. "
            f"{data['dominant_element_description']}",
            body_style,
        ),
    ]


def _nakshatra(data, body_style):
    header = [["Placement", "Nakshatra", "Deity", "Symbol", "Guna"]]
    rows = []
    for label, key in (("Moon", "moon"), ("Ascendant", "ascendant")):
        n = data[key]
        rows.append([label, n["name"], n["deity"], n["symbol"], n["guna"]])
    return [
        _grid_table(header, rows, [3*cm, 3.8*cm, 3.8*cm, 3.4*cm, 3*cm]),
        Spacer(1, 0.2*cm),
        Paragraph(data["moon"]["description"], body_style),
    ]


def _dasha(data, body_style):
    cur, nxt = data["current"], data["next"]
    story = [
        Paragraph(
            f"<b>Active Mahadasha:</b> {cur['planet']} (age {cur['start_age']} → "
            f"{cur['end_age']}) · <b>Next:</b> {nxt['planet']}",
            body_style,
        ),
        Paragraph(f"<b>Sub-periods:</b> {' → '.join(data['sub_dashas'])}", body_style),
        Spacer(1, 0.2*cm),
    ]
    header = [["Mahadasha Lord", "Start Age", "End Age", "Duration (yrs)", "Nature"]]
    rows = [[p["planet"], str(p["start_age"]), str(p["end_age"]),
             str(p["duration"]), p["nature"]] for p in data["timeline"]]
    story.append(_grid_table(header, rows, [4*cm, 3*cm, 3*cm, 3.5*cm, 3.5*cm]))
    return story


def _four_pillars(data, body_style):
    header = [["Pillar", "Stem", "Branch", "Animal", "Meaning"]]
    rows = [[p["name"], p["stem_romanized"], p["branch_romanized"], p["animal"],
             Paragraph(p["meaning"], body_style)]
            for p in data]
    year = data[-1]
    return [
        _grid_table(header, rows, [2*cm, 2*cm, 2.2*cm, 2.2*cm, 8.6*cm]),
        Spacer(1, 0.2*cm),
        Paragraph(f"<b>Year element:</b> {year['element']}", body_style),
    ]


def _elemental_cycle(data, body_style):
    element = data["personal_element"]
    rel = data["relationships"]
    return [
        Paragraph(
            f"<b>Personal element:</b> {element['name']} · "
            f"{element['season']} · {element['direction']}",
            body_style,
        ),
        Paragraph(
            f"<b>Supported by:</b> {_dash(rel['supporting'])} · "
            f"<b>Supports:</b> {_dash(rel['supported'])} · "
            f"<b>Controls:</b> {_dash(rel['conflicting'])}",
            body_style,
        ),
    ]


def _animal_signs(data, body_style):
    rows = [
        ["Animal", data["name"], "Birth Year", str(data["birth_year"])],
        ["Element", data["element"], "Lucky Numbers", ", ".join(str(n) for n in data["lucky_numbers"])],
        ["Compatible", ", ".join(a["name"] for a in data["compatible"]) or "—",
         "Challenging", ", ".join(a["name"] for a in data["incompatible"]) or "—"],
    ]
    return [
        _label_table(rows, [3*cm, 5.5*cm, 3*cm, 5.5*cm]),
        Spacer(1, 0.2*cm),
        Paragraph(f"<b>Traits:</b> {', '.join(data['traits'])}", body_style),
        Paragraph(f"<b>Strengths:</b> {'; '.join(data['strengths'])}", body_style),
        Paragraph(f"<b>Careers:</b> {', '.join(data['careers'])}", body_style),
    ]


def _feng_shui(data, body_style):
    profile = data["profile"]
    gender = data["gender"] + (" (assumed)" if data["assumed_gender"] else "")
    rows = [
        ["Kua Number", str(data["kua_number"]), "Group", profile["group"]],
        ["Element", profile["element"], "Gender", gender],
        ["Best Direction", profile["best_direction"], "Colors", ", ".join(profile["colors"])],
        ["Favorable", ", ".join(profile["favorable"]), "Unfavorable", ", ".join(profile["unfavorable"])],
    ]
    story = [_label_table(rows, [3*cm, 5.5*cm, 3*cm, 5.5*cm]), Spacer(1, 0.2*cm)]
    for room, guide in data["room_guidance"].items():
        story.append(Paragraph(f"<b>{room.title()}</b> ({guide['direction']}): "
                               f"{'; '.join(guide['tips'])}", body_style))
    return story


def _hellenistic_chart(data, body_style):
    header = [["Planet", "Sign", "Degree", "House", "Dignity"]]
    rows = [[p["planet"], p["sign"], p["degree_formatted"], _dash(p["house"]), p["dignity"]]
            for p in data]
    return [_grid_table(header, rows, [3.4*cm, 3.4*cm, 3.4*cm, 2.4*cm, 4.4*cm])]


def _planetary_rulers(data, body_style):
    header = [["House", "Sign", "Ruler", "Ruler In", "Condition"]]
    rows = [[f"{r['house']} · {r['name']}", _dash(r["sign"]), _dash(r["ruler"]),
             _dash(r["ruler_sign"]), r["condition"]] for r in data]
    return [_grid_table(header, rows, [5*cm, 3*cm, 3*cm, 3*cm, 3*cm])]


def _lots(data, body_style):
    header = [["Lot", "Formula", "Position", "House"]]
    rows = [[l["name"], l["formula"], f"{l['degree']}°{l['minute']:02d}' {l['sign']}", str(l["house"])]
            for l in data["lots"]]
    return [
        Paragraph(f"<b>Sect:</b> {data['sect']}", body_style),
        Spacer(1, 0.2*cm),
        _grid_table(header, rows, [4*cm, 6*cm, 4.6*cm, 2.4*cm]),
    ]


def _time_analysis(data, body_style):
    dec = data["decennial_lord"]
    prof = data["annual_profection"]
    zr = data["zodiacal_releasing"]
    zr_range = ("—" if zr["start_age"] is None
                else f"age {zr['start_age']} → {zr['end_age']}")
    rows = [
        ["Current Age", str(data["age"]), "As Of", data["as_of"]],
        ["Decennial Lord", f"{dec['planet']} ({dec['age_range']})",
         "Years Remaining", str(dec["years_remaining"])],
        ["Profected House", f"{prof['house']} · {prof['ruler']}", "Theme", prof["theme"]],
        ["Releasing Sign", f"{zr['sign']} · {zr['planet']}", "Period", zr_range],
    ]
    return [_label_table(rows, [3.4*cm, 5*cm, 3.4*cm, 5.2*cm])]


SECTION_RENDERERS = {
    "planetary-positions": _planetary_positions,
    "aspects":             _aspects,
    "houses":              _houses,
    "elemental":           _elemental,
    "nakshatra":           _nakshatra,
    "dasha":               _dasha,
    "four-pillars":        _four_pillars,
    "elemental-cycle":     _elemental_cycle,
    "animal-signs":        _animal_signs,
    "feng-shui":           _feng_shui,
    "hellenistic-chart":   _hellenistic_chart,
    "planetary-rulers":    _planetary_rulers,
    "lots":                _lots,
    "time-analysis":       _time_analysis,
}


def generate_pdf_report(report: dict, name: str = "Native") -> bytes:
    """
    Generate a PDF from the output of generate_report().
    Returns PDF as bytes.
    """
    buffer = io.BytesIO()
    meta = report.get("meta", {})
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=2*cm, leftMargin=2*cm,
        topMargin=2*cm, bottomMargin=2*cm,
        title=f"{report.get('system_title', 'Astrology Report')} — {name}",
        author="Astral Report Engine",
    )

    styles = getSampleStyleSheet()
    story = []

    # ── Custom styles ──────────────────────────────────────────
    title_style = ParagraphStyle(
        "Title", parent=styles["Normal"],
        fontSize=26, fontName="Helvetica",
        textColor=VOID, alignment=TA_CENTER,
        spaceAfter=6, leading=30,
    )
    subtitle_style = ParagraphStyle(
        "Subtitle", parent=styles["Normal"],
        fontSize=11, fontName="Helvetica",
        textColor=MUTED, alignment=TA_CENTER,
        spaceAfter=20,
    )
    heading_style = ParagraphStyle(
        "Heading", parent=styles["Normal"],
        fontSize=12, fontName="Helvetica-Bold",
        textColor=VIOLET, spaceBefore=10, spaceAfter=4,
    )
    body_style = ParagraphStyle(
        "Body", parent=styles["Normal"],
        fontSize=9, fontName="Helvetica",
        textColor=VOID, spaceAfter=4,
        leading=14,
    )
    disclaimer_style = ParagraphStyle(
        "Disclaimer", parent=styles["Normal"],
        fontSize=7, fontName="Helvetica-Oblique",
        textColor=MUTED, alignment=TA_CENTER,
        spaceBefore=20,
    )

    def gold_bar(text):
        return Table(
            [[Paragraph(text, ParagraphStyle("GoldBar", parent=styles["Normal"],
                fontSize=11, fontName="Helvetica-Bold",
                textColor=WHITE, alignment=TA_LEFT))]],
            colWidths=[17*cm],
            style=TableStyle([
                ("BACKGROUND", (0,0), (-1,-1), VOID),
                ("TOPPADDING",    (0,0), (-1,-1), 8),
                ("BOTTOMPADDING", (0,0), (-1,-1), 8),
                ("LEFTPADDING",   (0,0), (-1,-1), 12),
                ("RIGHTPADDING",  (0,0), (-1,-1), 12),
            ])
        )

    # ── HEADER ────────────────────────────────────────────────
    story.append(Paragraph(escape(meta.get("title") or report.get("system_title", "")), title_style))
    story.append(Paragraph(
        f"{report.get('system_title', '')} · {meta.get('edition', '')}", subtitle_style
    ))
    story.append(HRFlowable(width="100%", thickness=0.5, color=GOLD))
    story.append(Spacer(1, 0.4*cm))

    calculations = report.get("calculations", {})

    # ── BIRTH DETAILS ─────────────────────────────────────────
    info = calculations.get("birth-info")
    if info:
        story.append(gold_bar("BIRTH DETAILS"))
        story.append(Spacer(1, 0.3*cm))
        location = info.get("location") or {}
        place = ", ".join(x for x in (location.get("city"), location.get("country")) if x)
        details_data = [
            ["Name", name, "Date", info["birth_date"]],
            ["Time", _dash(info.get("birth_time")), "Place", _dash(place)],
            ["Latitude", _dash(location.get("latitude")),
             "Longitude", _dash(location.get("longitude"))],
        ]
        story.append(_label_table(details_data, [3.5*cm, 5*cm, 3.5*cm, 5*cm]))
        story.append(Spacer(1, 0.5*cm))

    # ── CALCULATED SECTIONS ───────────────────────────────────
    for section in report.get("sections", []):
        renderer = SECTION_RENDERERS.get(section["id"])
        data = calculations.get(section["id"])
        if renderer is None or data is None:
            continue
        story.append(gold_bar(SECTION_TITLES[section["id"]]))
        story.append(Spacer(1, 0.3*cm))
        story.extend(renderer(data, body_style))
        story.append(Spacer(1, 0.5*cm))

    # ── INTERPRETATION ────────────────────────────────────────
    content = report.get("content", [])
    if content:
        story.append(gold_bar(report.get("system_title", "INTERPRETATION").upper()))
        story.append(Spacer(1, 0.3*cm))
        for block in content:
            story.append(Paragraph(escape(block["title"]), heading_style))
            for paragraph in block["paragraphs"]:
                story.append(Paragraph(escape(paragraph), body_style))

    # ── FOOTER DISCLAIMER ─────────────────────────────────────
    story.append(HRFlowable(width="100%", thickness=0.5, color=GOLD))
    story.append(Paragraph(
        f"Generated by Astral Report Engine · {datetime.now().strftime('%d %B %Y')}",
        disclaimer_style
    ))
    story.append(Paragraph(
        "This report is produced algorithmically for informational purposes only. "
        "Positions are taken from the supplied chart; period and lot calculations "
        "use simplified traditional tables.",
        disclaimer_style
    ))

    # ── BUILD PDF ─────────────────────────────────────────────
    doc.build(story)
    buffer.seek(0)
    return buffer.read()
