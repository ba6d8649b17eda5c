# Report Engine - Core modules
from .chart import AstrologyReport, BirthChart, Planet, House, Aspect
from .zodiac import element_of, modality_of, normalize_degrees, elemental_balance
from .four_pillars import compute_four_pillars
from .animal_signs import animal_signs
from .five_elements import compute_elemental_cycle
from .feng_shui import kua_number, compute_feng_shui
from .time_lords import compute_time_lords, current_age
from .lots import parse_formula, evaluate_formula, compute_lots
from .dignity import Dignity, dignity_of

__all__ = [
    "AstrologyReport", "BirthChart", "Planet", "House", "Aspect",
    "element_of", "modality_of", "normalize_degrees", "elemental_balance",
    "compute_four_pillars",
    "animal_signs",
    "compute_elemental_cycle",
    "kua_number", "compute_feng_shui",
    "compute_time_lords", "current_age",
    "parse_formula", "evaluate_formula", "compute_lots",
    "Dignity", "dignity_of",
]
