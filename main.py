"""
Astral Report Engine — FastAPI Backend
======================================
Endpoints:
  POST /api/report        — Full report: system, sections, calculations, content
  POST /api/four-pillars  — Chinese Four Pillars (BaZi)
  POST /api/kua           — Feng Shui Kua number + directions
  POST /api/time-lords    — Decennials, profections, zodiacal releasing
  POST /api/lots          — Hellenistic lots for a chart
  POST /api/dignity       — Classical positions with essential dignity
  POST /api/elements      — Elemental balance + Chinese element cycle
  POST /api/pdf           — PDF report
  GET  /api/health        — Health check
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime
import io
import random

import structlog

from report_engine import generate_report
from report_engine.core.chart import BirthChart
from report_engine.core.dignity import classical_positions
from report_engine.core.feng_shui import compute_feng_shui
from report_engine.core.five_elements import compute_elemental_cycle
from report_engine.core.four_pillars import compute_four_pillars
from report_engine.core.houses import house_rulers
from report_engine.core.lots import compute_lots
from report_engine.core.time_lords import compute_time_lords
from report_engine.core.zodiac import elemental_balance
from logging_setup import setup_logging
from pdf_report import generate_pdf_report
from settings import get_settings

settings = get_settings()
setup_logging(settings.log_level, settings.log_json)
log = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Report calculations: Four Pillars, Feng Shui, Hellenistic time lords, lots and dignities",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Models ─────────────────────────────────────────────

class ChartRequest(BaseModel):
    chart: dict = Field(..., description="Upstream birth chart: birth_date, birth_time, chart_data")


class ReportRequest(BaseModel):
    report:            dict
    chart:             dict
    is_male:           Optional[bool] = None
    fortune_longitude: Optional[float] = Field(None, ge=0, lt=360)
    today_date:        Optional[str] = Field(None,
                          description="Reference date YYYY-MM-DD for age-based periods")


class FourPillarsRequest(BaseModel):
    birth_date: str = Field(..., description="YYYY-MM-DD")
    birth_time: Optional[str] = Field(None, description="HH:MM; noon when unknown")


class KuaRequest(BaseModel):
    year:    int            = Field(..., ge=1800, le=2100)
    is_male: Optional[bool] = None


class TimeLordsRequest(BaseModel):
    birth_date:        str = Field(..., description="YYYY-MM-DD")
    fortune_longitude: Optional[float] = Field(None, ge=0, lt=360)
    today_date:        Optional[str] = Field(None,
                          description="Reference date YYYY-MM-DD")


class PDFRequest(ReportRequest):
    name: Optional[str] = "Native"


# ── Utilities ──────────────────────────────────────────────────

def _parse_date(date_str: Optional[str]) -> date:
    if date_str:
        try:
            return datetime.strptime(date_str, "%Y-%m-%d").date()
        except ValueError:
            log.warning("today_date_unparseable", today_date=date_str)
    return date.today()


def _rng() -> random.Random:
    return random.Random(settings.nakshatra_seed)


def _fortune(value: Optional[float]) -> float:
    return settings.fortune_longitude if value is None else value


def _build_report(data: ReportRequest) -> dict:
    return generate_report(
        report=data.report,
        chart=data.chart,
        now=_parse_date(data.today_date),
        is_male=data.is_male,
        rng=_rng(),
        fortune_longitude=_fortune(data.fortune_longitude),
        default_is_male=settings.default_is_male,
    )


# ── Endpoints ──────────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "endpoints": [
            "POST /api/report",
            "POST /api/four-pillars",
            "POST /api/kua",
            "POST /api/time-lords",
            "POST /api/lots",
            "POST /api/dignity",
            "POST /api/elements",
            "POST /api/pdf",
        ],
    }


@app.post("/api/report")
def report_endpoint(data: ReportRequest):
    """
    Generate every calculated section for a report.

    The astrology system comes from report.report_type (vedic, chinese,
    hellenistic, otherwise western); premium-only sections are included
    when report.is_premium is true.
    """
    try:
        output = _build_report(data)
        log.info("report_generated", system=output["system"],
                 sections=len(output["sections"]), premium=output["meta"]["is_premium"])
        return {"success": True, "report": output}
    except Exception as e:
        log.error("report_failed", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/four-pillars")
def four_pillars_endpoint(data: FourPillarsRequest):
    try:
        chart = BirthChart.from_dict({"birth_date": data.birth_date,
                                      "birth_time": data.birth_time})
        pillars = compute_four_pillars(chart.birth_date, chart.birth_hour)
        return {"success": True, "pillars": pillars}
    except Exception as e:
        log.error("four_pillars_failed", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/kua")
def kua_endpoint(data: KuaRequest):
    try:
        is_male = settings.default_is_male if data.is_male is None else data.is_male
        feng_shui = compute_feng_shui(data.year, is_male, data.is_male is not None)
        return {"success": True, "feng_shui": feng_shui}
    except Exception as e:
        log.error("kua_failed", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/time-lords")
def time_lords_endpoint(data: TimeLordsRequest):
    try:
        chart = BirthChart.from_dict({"birth_date": data.birth_date})
        time_lords = compute_time_lords(
            chart.birth_date,
            _parse_date(data.today_date),
            _fortune(data.fortune_longitude),
        )
        return {"success": True, "time_lords": time_lords}
    except Exception as e:
        log.error("time_lords_failed", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/lots")
def lots_endpoint(data: ChartRequest):
    try:
        chart = BirthChart.from_dict(data.chart)
        return {"success": True, "lots": compute_lots(chart)}
    except Exception as e:
        log.error("lots_failed", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/dignity")
def dignity_endpoint(data: ChartRequest):
    try:
        chart = BirthChart.from_dict(data.chart)
        return {
            "success": True,
            "positions": classical_positions(chart),
            "house_rulers": house_rulers(chart),
        }
    except Exception as e:
        log.error("dignity_failed", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/elements")
def elements_endpoint(data: ChartRequest):
    try:
        chart = BirthChart.from_dict(data.chart)
        return {
            "success": True,
            "balance": elemental_balance(chart.planets),
            "cycle": compute_elemental_cycle(chart.birth_date.year),
        }
    except Exception as e:
        log.error("elements_failed", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/pdf")
def pdf_endpoint(data: PDFRequest):
    try:
        output = _build_report(data)
        pdf_bytes = generate_pdf_report(output, data.name)
        log.info("pdf_generated", system=output["system"], size=len(pdf_bytes))
        return StreamingResponse(
            io.BytesIO(pdf_bytes),
            media_type="application/pdf",
            headers={
                "Content-Disposition": f"attachment; filename=report_{data.name}.pdf"
            },
        )
    except Exception as e:
        log.error("pdf_failed", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))
