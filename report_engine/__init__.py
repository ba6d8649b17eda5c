"""
Report Engine
=============
Table-driven calculations behind the astrology report pages: four
pillars, Kua number, Hellenistic time lords, lots, dignities, nakshatras.

Quick start:
    from datetime import date
    from report_engine import generate_report

    output = generate_report(
        report={"report_type": "hellenistic", "is_premium": True},
        chart={"birth_date": "1990-07-15", "chart_data": {"planets": [...]}},
        now=date(2026, 1, 1),
    )
"""

from .tools.report import generate_report, report_system, format_content

__version__ = "1.0.0"
__all__ = ["generate_report", "report_system", "format_content"]
