import json

import pytest

import bank


@pytest.fixture
def catalog_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(bank, "_DATA_DIR", tmp_path)
    yield tmp_path
    monkeypatch.undo()
    bank.reload_bank()


def test_builtin_catalog_is_valid_and_non_empty():
    bank.reload_bank()
    for category in bank.categories():
        assert bank.get_static(category), category


def test_get_static_returns_copy():
    qs = bank.get_static("colors")
    qs.clear()
    assert bank.get_static("colors")


def test_unknown_category_is_empty():
    assert bank.get_static("dinosaurs") == []


def test_file_overrides_category_and_skips_bad_rows(catalog_dir):
    rows = [
        {"q": "Which is GREEN?", "a": {"txt": "Leaf", "icon": "🍃"}, "b": {"txt": "Sun", "icon": "☀️"}, "correct": "a"},
        {"q": "Broken"},
    ]
    (catalog_dir / "colors.json").write_text(json.dumps(rows), encoding="utf-8")
    bank.reload_bank()
    assert [q.q for q in bank.get_static("colors")] == ["Which is GREEN?"]


def test_legacy_records_are_converted(catalog_dir):
    legacy = {
        "id": 9,
        "question": "How many Apples?",
        "display": "🍎🍎",
        "options": [
            {"id": "a", "label": "2", "isCorrect": True, "text": "Two"},
            {"id": "b", "label": "5", "isCorrect": False, "text": "Five"},
        ],
    }
    lines = ["# legacy export", json.dumps(legacy), "{not json"]
    (catalog_dir / "shapes.jsonl").write_text("\n".join(lines), encoding="utf-8")
    bank.reload_bank()
    (q,) = bank.get_static("shapes")
    assert q.q == "How many Apples?"
    assert q.correct == "a"
    assert q.a.icon == "2" and q.b.txt == "Five"
    assert q.display == "🍎🍎"
