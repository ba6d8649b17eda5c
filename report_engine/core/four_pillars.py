"""
four_pillars.py
===============
Four Pillars of Destiny (BaZi, 四柱八字) from a birth date and hour.

Each pillar pairs one of the 10 Heavenly Stems with one of the 12 Earthly
Branches (and its animal).

    Year:   stem (year - 4) mod 10,         branch (year - 4) mod 12
    Month:  stem (year*12 + month - 1) mod 10, branch (month - 1) mod 12
    Day:    stem days_since(1900-01-01) mod 10, branch ... mod 12
    Hour:   stem (hour + day) mod 10,       branch floor(hour / 2) mod 12

Month and hour pillars are the simplified product formulas: no solar-term
month boundaries and no five-rat hour-stem table. Changing them would
change every displayed chart.
"""

from datetime import date
from typing import List

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

HEAVENLY_STEMS = ["甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸"]
HEAVENLY_STEMS_ROMANIZED = ["Jia", "Yi", "Bing", "Ding", "Wu",
                            "Ji", "Geng", "Xin", "Ren", "Gui"]

EARTHLY_BRANCHES = ["子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥"]
EARTHLY_BRANCHES_ROMANIZED = ["Zi", "Chou", "Yin", "Mao", "Chen", "Si",
                              "Wu", "Wei", "Shen", "You", "Xu", "Hai"]

ANIMALS = ["Rat", "Ox", "Tiger", "Rabbit", "Dragon", "Snake",
           "Horse", "Goat", "Monkey", "Rooster", "Dog", "Pig"]
ANIMALS_CHINESE = ["鼠", "牛", "虎", "兔", "龙", "蛇", "马", "羊", "猴", "鸡", "狗", "猪"]

ELEMENTS = ["Wood", "Fire", "Earth", "Metal", "Water"]
ELEMENTS_CHINESE = ["木", "火", "土", "金", "水"]

DAY_EPOCH = date(1900, 1, 1)

PILLAR_MEANINGS = {
    "Year":  "Represents ancestors, early life, and foundational energy",
    "Month": "Represents parents, career, and middle-age period",
    "Day":   "Represents self, spouse, and core personality",
    "Hour":  "Represents children, later life, and future prospects",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _pillar(stem_index: int, branch_index: int) -> dict:
    stem_index %= 10
    branch_index %= 12
    return {
        "stem_index": stem_index,
        "branch_index": branch_index,
        "stem": HEAVENLY_STEMS[stem_index],
        "stem_romanized": HEAVENLY_STEMS_ROMANIZED[stem_index],
        "branch": EARTHLY_BRANCHES[branch_index],
        "branch_romanized": EARTHLY_BRANCHES_ROMANIZED[branch_index],
        "animal": ANIMALS[branch_index],
        "animal_chinese": ANIMALS_CHINESE[branch_index],
    }


# ---------------------------------------------------------------------------
# Pillars
# ---------------------------------------------------------------------------

def year_pillar(year: int) -> dict:
    stem_index = (year - 4) % 10
    pillar = _pillar(stem_index, (year - 4) % 12)
    element_index = stem_index // 2
    pillar["element"] = ELEMENTS[element_index]
    pillar["element_chinese"] = ELEMENTS_CHINESE[element_index]
    return pillar


def month_pillar(year: int, month: int) -> dict:
    return _pillar((year * 12 + month - 1) % 10, (month - 1) % 12)


def day_pillar(birth_date: date) -> dict:
    days_since_epoch = (birth_date - DAY_EPOCH).days
    return _pillar(days_since_epoch % 10, days_since_epoch % 12)


def hour_pillar(hour: int, day: int) -> dict:
    return _pillar((hour + day) % 10, (hour // 2) % 12)


def compute_four_pillars(birth_date: date, hour: int = 12) -> List[dict]:
    """
    Compute the four pillars, ordered Hour, Day, Month, Year as they are
    traditionally written right-to-left.

    Args:
        birth_date: Gregorian birth date
        hour: local birth hour 0–23 (noon when the birth time is unknown)

    Returns:
        List of four pillar dicts; only the Year pillar carries an element.
    """
    pillars = [
        ("Hour",  "时", "2-hour period", hour_pillar(hour, birth_date.day)),
        ("Day",   "日", "Daily cycle",   day_pillar(birth_date)),
        ("Month", "月", "Monthly cycle", month_pillar(birth_date.year, birth_date.month)),
        ("Year",  "年", "Yearly cycle",  year_pillar(birth_date.year)),
    ]
    result = []
    for name, chinese, period, pillar in pillars:
        result.append({
            "name": name,
            "chinese": chinese,
            "period": period,
            "meaning": PILLAR_MEANINGS[name],
            **pillar,
        })
    return result
