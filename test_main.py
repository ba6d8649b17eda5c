"""API tests for the FastAPI backend."""

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

CHART = {
    "birth_date": "1990-07-15",
    "birth_time": None,
    "birth_location": {"latitude": 19.076, "longitude": 72.8777,
                       "city": "Mumbai", "country": "India"},
    "chart_data": {
        "planets": [
            {"name": "Sun",    "sign": "Cancer",    "degree": 22, "minute": 30, "house": 4},
            {"name": "Moon",   "sign": "Taurus",    "degree": 10, "house": 2, "nakshatra": "Rohini"},
            {"name": "Mars",   "sign": "Aries",     "degree": 14, "house": 1},
            {"name": "Saturn", "sign": "Capricorn", "degree": 21, "house": 10},
        ],
        "houses": [{"number": 1, "sign": "Aries"}, {"number": 10, "sign": "Capricorn"}],
        "aspects": [{"planet1": "Mars", "planet2": "Saturn", "aspect": "square", "orb": 7}],
    },
}


def test_health_lists_endpoints():
    r = client.get("/api/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert "POST /api/report" in body["endpoints"]


def test_report_hellenistic_premium():
    payload = {
        "report": {"report_type": "hellenistic_premium", "is_premium": True,
                   "content": "**Overview**Strong angular Mars."},
        "chart": CHART,
        "today_date": "2026-01-01",
    }
    r = client.post("/api/report", json=payload)
    assert r.status_code == 200
    report = r.json()["report"]
    assert report["system"] == "hellenistic"
    assert report["calculations"]["time-analysis"]["age"] == 35
    assert report["calculations"]["time-analysis"]["zodiacal_releasing"]["sign"] == "Capricorn"
    assert report["content"][0]["title"] == "Overview"


def test_report_standard_has_no_premium_sections():
    payload = {"report": {"report_type": "vedic", "is_premium": False}, "chart": CHART}
    r = client.post("/api/report", json=payload)
    assert r.status_code == 200
    ids = [s["id"] for s in r.json()["report"]["sections"]]
    assert "dasha" not in ids
    assert "nakshatra" in ids


def test_report_bad_birth_date_is_400():
    payload = {"report": {"report_type": "western"}, "chart": {"birth_date": "not-a-date"}}
    r = client.post("/api/report", json=payload)
    assert r.status_code == 400
    assert "birth_date" in r.json()["detail"]


def test_unparseable_today_date_falls_back():
    payload = {"birth_date": "1990-07-15", "today_date": "yesterday"}
    r = client.post("/api/time-lords", json=payload)
    assert r.status_code == 200
    assert r.json()["time_lords"]["age"] >= 35


def test_four_pillars_noon_default():
    r = client.post("/api/four-pillars", json={"birth_date": "1990-07-15"})
    assert r.status_code == 200
    hour, _, _, year = r.json()["pillars"]
    assert hour["branch_romanized"] == "Wu"
    assert year["stem_romanized"] == "Geng"
    assert year["animal"] == "Horse"


def test_kua_gender():
    r = client.post("/api/kua", json={"year": 1990})
    assert r.status_code == 200
    assert r.json()["feng_shui"]["kua_number"] == 2
    assert r.json()["feng_shui"]["assumed_gender"] is True

    r = client.post("/api/kua", json={"year": 1990, "is_male": False})
    assert r.json()["feng_shui"]["kua_number"] == 4


def test_kua_year_out_of_range_is_422():
    r = client.post("/api/kua", json={"year": 1700})
    assert r.status_code == 422


def test_time_lords_custom_fortune():
    payload = {"birth_date": "1990-07-15", "today_date": "2026-01-01", "fortune_longitude": 0}
    r = client.post("/api/time-lords", json=payload)
    assert r.status_code == 200
    tl = r.json()["time_lords"]
    assert tl["annual_profection"]["house"] == 12
    # Cancer 0-25, Leo 25-44
    assert tl["zodiacal_releasing"]["sign"] == "Leo"


def test_lots():
    r = client.post("/api/lots", json={"chart": CHART})
    assert r.status_code == 200
    lots = r.json()["lots"]
    assert lots["is_day_chart"] is True
    assert lots["lots"][0]["sign"] == "Capricorn"


def test_dignity():
    r = client.post("/api/dignity", json={"chart": CHART})
    assert r.status_code == 200
    positions = {p["planet"]: p["dignity"] for p in r.json()["positions"]}
    assert positions == {"Sun": "Neutral", "Moon": "Exaltation",
                         "Mars": "Domicile", "Saturn": "Domicile"}
    rulers = r.json()["house_rulers"]
    assert rulers[0]["condition"] == "Domicile"
    assert rulers[1]["condition"] == "—"


def test_elements():
    r = client.post("/api/elements", json={"chart": CHART})
    assert r.status_code == 200
    body = r.json()
    assert body["balance"]["dominant_modality"] == "Cardinal"
    assert body["cycle"]["personal_element"]["name"] == "Wood"


def test_pdf():
    payload = {
        "report": {"report_type": "chinese_premium", "is_premium": True,
                   "title": "Sample", "content": "**Overview**Horse year & Metal element."},
        "chart": CHART,
        "today_date": "2026-01-01",
        "name": "Sample",
    }
    r = client.post("/api/pdf", json=payload)
    assert r.status_code == 200
    assert r.headers["content-type"] == "application/pdf"
    assert r.content.startswith(b"%PDF")


def test_report_animal_signs_calculated():
    payload = {"report": {"report_type": "chinese", "is_premium": False}, "chart": CHART}
    r = client.post("/api/report", json=payload)
    assert r.status_code == 200
    report = r.json()["report"]
    sections = {s["id"]: s["calculated"] for s in report["sections"]}
    assert sections["animal-signs"] is True
    animal = report["calculations"]["animal-signs"]
    assert animal["name"] == "Horse"
    assert [a["name"] for a in animal["compatible"]] == ["Tiger", "Goat", "Dog"]


def test_string_house_from_upstream():
    chart = dict(CHART, chart_data={
        "planets": [{"name": "Sun", "sign": "Cancer", "degree": "22", "house": "7"}],
        "houses": [],
        "aspects": [],
    })
    r = client.post("/api/lots", json={"chart": chart})
    assert r.status_code == 200
    assert r.json()["lots"]["is_day_chart"] is False


def test_pdf_title_with_markup_characters():
    payload = {
        "report": {"report_type": "chinese_premium", "is_premium": True,
                   "title": "Love & <Fate>", "content": "**Overview**Fire & Metal."},
        "chart": CHART,
        "today_date": "2026-01-01",
        "name": "Sample",
    }
    r = client.post("/api/pdf", json=payload)
    assert r.status_code == 200
    assert r.content.startswith(b"%PDF")
