from fastapi.testclient import TestClient
from company_data.main import app

client = TestClient(app)

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_convert_end_to_end():
    raw = b"ISIN,Name\nUS0001|US0002,Zeta Corp\n,Orphan Inc\nUS0003,Alpha LLC\n"

    files = {"file": ("companies.csv", raw, "text/csv")}
    r = client.post("/convert", files=files)
    assert r.status_code == 200

    data = r.json()
    assert data["records"] == [
        {"ISIN": "US0003", "Name": "Alpha LLC"},
        {"ISIN": "US0001", "Name": "Zeta Corp"},
    ]
    assert data["artifact"]["filename"] == "COMPANY_DATA.js"
    assert data["artifact"]["content"].startswith("COMPANY_DATA = [\n")
    assert data["artifact"]["content"].endswith("]\n")

    summary = data["report"]["summary"]
    assert summary == {"lines": 3, "records": 2, "skipped": 1}
    assert data["report"]["warnings"] == [
        {"row": 3, "column": "ISIN", "issue": "missing_identifier", "value": "", "action": "skipped"},
    ]

def test_convert_decodes_latin1_upload():
    # Include a Latin-1 character to force non-ASCII handling
    raw = "ISIN,Name\nCA0001,Montréal Holdings\n".encode("latin-1")

    files = {"file": ("companies.csv", raw, "text/csv")}
    r = client.post("/convert", files=files)
    assert r.status_code == 200
    assert r.json()["records"] == [{"ISIN": "CA0001", "Name": "Montréal Holdings"}]

def test_convert_strips_utf8_bom():
    raw = "ISIN,Name\nUS0001,Acme\n".encode("utf-8-sig")

    files = {"file": ("companies.csv", raw, "text/csv")}
    r = client.post("/convert", files=files)
    assert r.status_code == 200
    assert r.json()["records"] == [{"ISIN": "US0001", "Name": "Acme"}]

def test_convert_rejects_non_csv():
    files = {"file": ("companies.txt", b"ISIN,Name\n", "text/plain")}
    r = client.post("/convert", files=files)
    assert r.status_code == 422
    assert r.json()["detail"] == "Only CSV files are supported"

def test_convert_missing_column():
    files = {"file": ("companies.csv", b"Ticker,Name\nACME,Acme\n", "text/csv")}
    r = client.post("/convert", files=files)
    assert r.status_code == 422
    assert "missing: ISIN" in r.json()["detail"]

def test_convert_empty_file():
    files = {"file": ("companies.csv", b"\n  \n", "text/csv")}
    r = client.post("/convert", files=files)
    assert r.status_code == 422
    assert r.json()["detail"] == "CSV file is empty"
