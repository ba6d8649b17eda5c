"""
animal_signs.py
===============
Chinese zodiac animal of the birth year with its traits and the animals
it pairs well or badly with.

The animal follows the year branch: index = (year - 4) % 12, as in
four_pillars.year_pillar. Elements here are the fixed animal elements,
not the stem element of the year pillar.
"""

from typing import List

from .four_pillars import ANIMALS

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

ANIMAL_SIGNS = [
    {
        "name": "Rat", "chinese": "鼠", "element": "Water",
        "traits": ["Intelligent", "Adaptable", "Charming", "Ambitious", "Quick-witted"],
        "strengths": ["Excellent problem-solving skills", "Strong survival instincts",
                      "Natural leadership abilities", "Good with money and resources"],
        "weaknesses": ["Can be overly critical", "Sometimes selfish",
                       "Prone to anxiety", "May be too cautious"],
        "compatibility": ["Dragon", "Monkey", "Ox"],
        "incompatibility": ["Horse", "Rooster"],
        "lucky_numbers": [2, 3],
        "lucky_colors": ["Blue", "Gold", "Green"],
        "careers": ["Business", "Finance", "Research", "Writing", "Politics"],
    },
    {
        "name": "Ox", "chinese": "牛", "element": "Earth",
        "traits": ["Reliable", "Patient", "Hardworking", "Honest", "Methodical"],
        "strengths": ["Strong work ethic", "Dependable and trustworthy",
                      "Excellent at planning", "Natural perseverance"],
        "weaknesses": ["Can be stubborn", "Slow to adapt to change",
                       "Sometimes inflexible", "May be overly conservative"],
        "compatibility": ["Rat", "Snake", "Rooster"],
        "incompatibility": ["Tiger", "Dragon", "Horse", "Goat"],
        "lucky_numbers": [1, 9],
        "lucky_colors": ["Red", "Blue", "Purple"],
        "careers": ["Agriculture", "Engineering", "Architecture", "Banking", "Real Estate"],
    },
    {
        "name": "Tiger", "chinese": "虎", "element": "Wood",
        "traits": ["Brave", "Competitive", "Unpredictable", "Independent", "Charismatic"],
        "strengths": ["Natural leadership", "Courageous and bold",
                      "Highly energetic", "Protective of others"],
        "weaknesses": ["Can be impulsive", "Sometimes aggressive",
                       "Prone to mood swings", "May be overly confident"],
        "compatibility": ["Horse", "Dog"],
        "incompatibility": ["Ox", "Snake", "Monkey"],
        "lucky_numbers": [1, 3, 4],
        "lucky_colors": ["Orange", "Gray", "White"],
        "careers": ["Military", "Sports", "Adventure Tourism",
                    "Emergency Services", "Entertainment"],
    },
    {
        "name": "Rabbit", "chinese": "兔", "element": "Wood",
        "traits": ["Gentle", "Elegant", "Cautious", "Kind", "Artistic"],
        "strengths": ["Diplomatic and tactful", "Refined taste",
                      "Good listener", "Calm under pressure"],
        "weaknesses": ["Avoids confrontation", "Can be indecisive",
                       "Sometimes aloof", "Overly sensitive to criticism"],
        "compatibility": ["Goat", "Pig", "Dog"],
        "incompatibility": ["Rooster", "Dragon", "Rat"],
        "lucky_numbers": [3, 4, 6],
        "lucky_colors": ["Red", "Pink", "Purple", "Blue"],
        "careers": ["Design", "Diplomacy", "Counseling", "Medicine", "Literature"],
    },
    {
        "name": "Dragon", "chinese": "龙", "element": "Earth",
        "traits": ["Confident", "Energetic", "Ambitious", "Passionate", "Visionary"],
        "strengths": ["Inspiring presence", "Bold decision making",
                      "Generous with others", "Strong sense of purpose"],
        "weaknesses": ["Can be arrogant", "Impatient with delays",
                       "Demands too much", "Dislikes taking advice"],
        "compatibility": ["Rat", "Monkey", "Rooster"],
        "incompatibility": ["Ox", "Rabbit", "Dog"],
        "lucky_numbers": [1, 6, 7],
        "lucky_colors": ["Gold", "Silver", "Gray"],
        "careers": ["Management", "Law", "Architecture", "Entrepreneurship", "Politics"],
    },
    {
        "name": "Snake", "chinese": "蛇", "element": "Fire",
        "traits": ["Wise", "Intuitive", "Graceful", "Discreet", "Analytical"],
        "strengths": ["Deep thinker", "Calm and composed",
                      "Sharp intuition", "Determined once committed"],
        "weaknesses": ["Can be secretive", "Sometimes jealous",
                       "Slow to trust", "May hold grudges"],
        "compatibility": ["Ox", "Monkey", "Rooster"],
        "incompatibility": ["Tiger", "Pig"],
        "lucky_numbers": [2, 8, 9],
        "lucky_colors": ["Black", "Red", "Yellow"],
        "careers": ["Science", "Psychology", "Investigation", "Philosophy", "Finance"],
    },
    {
        "name": "Horse", "chinese": "马", "element": "Fire",
        "traits": ["Energetic", "Free-spirited", "Warm-hearted", "Sociable", "Active"],
        "strengths": ["Quick learner", "Enthusiastic and upbeat",
                      "Hard worker when inspired", "Good communicator"],
        "weaknesses": ["Can be restless", "Impatient with details",
                       "Sometimes self-centered", "Struggles with routine"],
        "compatibility": ["Tiger", "Goat", "Dog"],
        "incompatibility": ["Rat", "Ox", "Rabbit"],
        "lucky_numbers": [2, 3, 7],
        "lucky_colors": ["Yellow", "Green", "Purple"],
        "careers": ["Travel", "Journalism", "Sales", "Sports", "Performing Arts"],
    },
    {
        "name": "Goat", "chinese": "羊", "element": "Earth",
        "traits": ["Calm", "Creative", "Compassionate", "Gentle", "Thoughtful"],
        "strengths": ["Strong artistic sense", "Caring and supportive",
                      "Peace-making nature", "Resilient in hard times"],
        "weaknesses": ["Can be pessimistic", "Sometimes indecisive",
                       "Dislikes pressure", "May rely on others"],
        "compatibility": ["Rabbit", "Horse", "Pig"],
        "incompatibility": ["Ox", "Rat", "Dog"],
        "lucky_numbers": [2, 7],
        "lucky_colors": ["Brown", "Red", "Purple"],
        "careers": ["Art", "Music", "Teaching", "Healing", "Gardening"],
    },
    {
        "name": "Monkey", "chinese": "猴", "element": "Metal",
        "traits": ["Clever", "Curious", "Playful", "Inventive", "Versatile"],
        "strengths": ["Quick problem solver", "Excellent memory",
                      "Adapts to any situation", "Lively sense of humor"],
        "weaknesses": ["Can be mischievous", "Easily bored",
                       "Sometimes manipulative", "May lack follow-through"],
        "compatibility": ["Rat", "Dragon", "Snake"],
        "incompatibility": ["Tiger", "Pig"],
        "lucky_numbers": [4, 9],
        "lucky_colors": ["White", "Blue", "Gold"],
        "careers": ["Technology", "Trading", "Engineering", "Media", "Invention"],
    },
    {
        "name": "Rooster", "chinese": "鸡", "element": "Metal",
        "traits": ["Observant", "Hardworking", "Courageous", "Confident", "Precise"],
        "strengths": ["Meticulous organizer", "Honest and direct",
                      "Reliable under pressure", "High standards"],
        "weaknesses": ["Can be critical", "Sometimes boastful",
                       "Perfectionist tendencies", "Blunt in speech"],
        "compatibility": ["Ox", "Dragon", "Snake"],
        "incompatibility": ["Rat", "Rabbit", "Dog"],
        "lucky_numbers": [5, 7, 8],
        "lucky_colors": ["Gold", "Brown", "Yellow"],
        "careers": ["Accounting", "Administration", "Surgery", "Military", "Journalism"],
    },
    {
        "name": "Dog", "chinese": "狗", "element": "Earth",
        "traits": ["Loyal", "Honest", "Responsible", "Just", "Protective"],
        "strengths": ["Faithful friend", "Strong sense of fairness",
                      "Dependable partner", "Sincere and direct"],
        "weaknesses": ["Can be anxious", "Sometimes stubborn",
                       "Quick to judge", "May worry too much"],
        "compatibility": ["Tiger", "Rabbit", "Horse"],
        "incompatibility": ["Dragon", "Goat", "Rooster"],
        "lucky_numbers": [3, 4, 9],
        "lucky_colors": ["Green", "Red", "Purple"],
        "careers": ["Law", "Social Work", "Nursing", "Policing", "Education"],
    },
    {
        "name": "Pig", "chinese": "猪", "element": "Water",
        "traits": ["Generous", "Compassionate", "Diligent", "Easygoing", "Sincere"],
        "strengths": ["Warm and tolerant", "Enjoys helping others",
                      "Persistent worker", "Optimistic outlook"],
        "weaknesses": ["Can be naive", "Sometimes overindulgent",
                       "Too trusting", "Avoids conflict"],
        "compatibility": ["Tiger", "Rabbit", "Goat"],
        "incompatibility": ["Snake", "Monkey"],
        "lucky_numbers": [2, 5, 8],
        "lucky_colors": ["Yellow", "Gray", "Brown"],
        "careers": ["Hospitality", "Charity", "Healthcare", "Retail", "Entertainment"],
    },
]


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def animal_index(year: int) -> int:
    return (year - 4) % 12


def _summary(sign: dict) -> dict:
    return {"name": sign["name"], "chinese": sign["chinese"], "element": sign["element"]}


def _matching(names: List[str]) -> List[dict]:
    # Table order, not the order the names are listed in
    return [_summary(s) for s in ANIMAL_SIGNS if s["name"] in names]


def animal_signs(year: int) -> dict:
    """
    Animal sign analysis for a birth year.

    Falls back to the first entry (Rat) if the branch animal has no table
    entry.
    """
    name = ANIMALS[animal_index(year)]
    sign = next((s for s in ANIMAL_SIGNS if s["name"] == name), ANIMAL_SIGNS[0])
    return {
        "birth_year": year,
        "name": sign["name"],
        "chinese": sign["chinese"],
        "element": sign["element"],
        "traits": list(sign["traits"]),
        "strengths": list(sign["strengths"]),
        "weaknesses": list(sign["weaknesses"]),
        "lucky_numbers": list(sign["lucky_numbers"]),
        "lucky_colors": list(sign["lucky_colors"]),
        "careers": list(sign["careers"]),
        "compatible": _matching(sign["compatibility"]),
        "incompatible": _matching(sign["incompatibility"]),
    }
