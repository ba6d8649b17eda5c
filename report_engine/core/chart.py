"""
chart.py
========
Birth chart and report input model.

A BirthChart is produced upstream (the chart provider computes planets,
houses and aspects); every calculator in this package only reads it.

Upstream JSON shape:
    {
      "birth_date": "1990-07-15",
      "birth_time": "14:30" | null,
      "birth_location": {"latitude", "longitude", "timezone", "city", "country"} | null,
      "chart_data": {"planets": [...], "houses": [...], "aspects": [...]}
    }
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import List, Optional

from .zodiac import SIGNS, normalize_degrees


# ---------------------------------------------------------------------------
# Chart components
# ---------------------------------------------------------------------------

def _to_float(value) -> Optional[float]:
    """Numeric field from upstream JSON; None when missing or unparseable."""
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _to_int(value) -> Optional[int]:
    number = _to_float(value)
    return int(number) if number is not None else None


@dataclass(frozen=True)
class Planet:
    name: str
    sign: str
    degree: float = 0.0
    minute: float = 0.0
    second: float = 0.0
    house: Optional[int] = None
    nakshatra: Optional[str] = None
    longitude: Optional[float] = None   # absolute ecliptic degree, if supplied

    @property
    def absolute_longitude(self) -> float:
        """Absolute longitude 0–360; derived from sign + degree when not given."""
        if self.longitude is not None:
            return normalize_degrees(self.longitude)
        sign_index = SIGNS.index(self.sign) if self.sign in SIGNS else 0
        return normalize_degrees(
            sign_index * 30 + self.degree + self.minute / 60.0 + self.second / 3600.0
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Planet":
        return cls(
            name=data.get("name", ""),
            sign=data.get("sign", ""),
            degree=_to_float(data.get("degree")) or 0.0,
            minute=_to_float(data.get("minute")) or 0.0,
            second=_to_float(data.get("second")) or 0.0,
            house=_to_int(data.get("house")),
            nakshatra=data.get("nakshatra"),
            longitude=_to_float(data.get("longitude")),
        )


@dataclass(frozen=True)
class House:
    number: int
    sign: str

    @classmethod
    def from_dict(cls, data: dict) -> "House":
        return cls(number=_to_int(data.get("number")) or 0, sign=data.get("sign", ""))


@dataclass(frozen=True)
class Aspect:
    planet1: str
    planet2: str
    aspect: str
    orb: float = 0.0

    @classmethod
    def from_dict(cls, data: dict) -> "Aspect":
        return cls(
            planet1=data.get("planet1", ""),
            planet2=data.get("planet2", ""),
            aspect=data.get("aspect", ""),
            orb=float(data.get("orb") or 0),
        )


@dataclass(frozen=True)
class BirthLocation:
    latitude: float
    longitude: float
    timezone: str = "UTC"
    city: str = ""
    country: str = ""


# ---------------------------------------------------------------------------
# Birth chart
# ---------------------------------------------------------------------------

def _parse_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        raise ValueError("birth_date is required")
    try:
        return datetime.strptime(str(value)[:10], "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"Invalid birth_date: {value!r}. Expected YYYY-MM-DD")


def _parse_time(value) -> Optional[time]:
    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value
    parts = str(value).split(":")
    try:
        hour = int(parts[0])
        minute = int(parts[1]) if len(parts) > 1 else 0
        second = int(float(parts[2])) if len(parts) > 2 else 0
        return time(hour % 24, minute, second)
    except ValueError:
        raise ValueError(f"Invalid birth_time: {value!r}. Expected HH:MM[:SS]")


@dataclass
class BirthChart:
    birth_date: date
    birth_time: Optional[time] = None
    birth_location: Optional[BirthLocation] = None
    planets: List[Planet] = field(default_factory=list)
    houses: List[House] = field(default_factory=list)
    aspects: List[Aspect] = field(default_factory=list)

    @property
    def birth_hour(self) -> int:
        """Hour of birth; 12 (noon) when the birth time is unknown."""
        return self.birth_time.hour if self.birth_time else 12

    def planet(self, name: str) -> Optional[Planet]:
        for p in self.planets:
            if p.name == name:
                return p
        return None

    def house(self, number: int) -> Optional[House]:
        for h in self.houses:
            if h.number == number:
                return h
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "BirthChart":
        location = data.get("birth_location")
        if isinstance(location, dict):
            location = BirthLocation(
                latitude=float(location.get("latitude", 0.0)),
                longitude=float(location.get("longitude", 0.0)),
                timezone=location.get("timezone", "UTC"),
                city=location.get("city", ""),
                country=location.get("country", ""),
            )
        else:
            location = None

        chart_data = data.get("chart_data") or {}
        return cls(
            birth_date=_parse_date(data.get("birth_date")),
            birth_time=_parse_time(data.get("birth_time")),
            birth_location=location,
            planets=[Planet.from_dict(p) for p in chart_data.get("planets") or []],
            houses=[House.from_dict(h) for h in chart_data.get("houses") or []],
            aspects=[Aspect.from_dict(a) for a in chart_data.get("aspects") or []],
        )


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AstrologyReport:
    report_type: str
    content: str = ""
    is_premium: bool = False
    title: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "AstrologyReport":
        return cls(
            report_type=data.get("report_type") or "western",
            content=data.get("content") or "",
            is_premium=bool(data.get("is_premium", False)),
            title=data.get("title") or "",
        )
