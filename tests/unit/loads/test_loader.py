"""
Unit tests for the load dataset reader.

Every failure mode must degrade to fewer loads, never raise.
"""

import json

from carrier_sales.loads.loader import load_loads, parse_loads


def test_loads_fixture_file(fixtures_dir):
    loads = load_loads(fixtures_dir / "loads.json")
    assert [l.load_id for l in loads] == ["L001", "L002", "L003", "L004", "L005"]
    assert loads[0].origin == "Los Angeles, CA"
    assert loads[0].miles == 372


def test_integer_rates_stay_integers(fixtures_dir):
    loads = load_loads(fixtures_dir / "loads.json")
    assert loads[0].loadboard_rate == 1200
    assert isinstance(loads[0].loadboard_rate, int)


def test_missing_file_gives_empty_list(tmp_path):
    assert load_loads(tmp_path / "does_not_exist.json") == []


def test_invalid_json_gives_empty_list(tmp_path):
    path = tmp_path / "loads.json"
    path.write_text("[{not json", encoding="utf-8")
    assert load_loads(path) == []


def test_non_array_payload_gives_empty_list(tmp_path):
    path = tmp_path / "loads.json"
    path.write_text(json.dumps({"loads": []}), encoding="utf-8")
    assert load_loads(path) == []


def test_invalid_records_are_skipped():
    records = [
        {"load_id": "A", "origin": "X", "destination": "Y", "equipment_type": "Dry Van", "loadboard_rate": 100},
        {"load_id": "B", "origin": "X"},  # missing fields
        {"load_id": "C", "origin": "X", "destination": "Y", "equipment_type": "Reefer", "loadboard_rate": "abc"},
        "not a record",
        {"load_id": "D", "origin": "X", "destination": "Y", "equipment_type": "Flatbed", "loadboard_rate": 300},
    ]
    loads = parse_loads(records)
    assert [l.load_id for l in loads] == ["A", "D"]


def test_negative_rate_is_rejected():
    records = [
        {"load_id": "A", "origin": "X", "destination": "Y", "equipment_type": "Dry Van", "loadboard_rate": -5},
    ]
    assert parse_loads(records) == []


def test_duplicate_ids_keep_first_record():
    records = [
        {"load_id": "A", "origin": "First", "destination": "Y", "equipment_type": "Dry Van", "loadboard_rate": 100},
        {"load_id": "A", "origin": "Second", "destination": "Y", "equipment_type": "Dry Van", "loadboard_rate": 200},
    ]
    loads = parse_loads(records)
    assert len(loads) == 1
    assert loads[0].origin == "First"


def test_empty_array_gives_empty_list(tmp_path):
    path = tmp_path / "loads.json"
    path.write_text("[]", encoding="utf-8")
    assert load_loads(path) == []
