# bank.py: the fixed built-in catalog, validated once and served read-only.

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError

from questions import STATIC_CATALOG
from schemas.questions import Question

log = logging.getLogger(__name__)

_BASE = Path(__file__).resolve().parent
_DATA_DIR = _BASE / "data" / "catalog"  # optional per-category overrides: <category>.json[l]


def _iter_jsonl(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        for line in f:
            s = line.strip()
            if not s or s.startswith("#") or s.startswith("//"):
                continue
            try:
                yield json.loads(s)
            except json.JSONDecodeError:
                log.warning("skipping malformed line in %s", p.name)
                continue


def _iter_json(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError:
            log.warning("catalog file %s is not valid JSON; ignoring", p.name)
            data = []
    if isinstance(data, list):
        yield from data


def _from_legacy(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Older catalog records look like
      {"question": ..., "display"?: ..., "options": [{"id", "label", "text", "isCorrect"}, ...]}
    Convert them to the wire shape; anything else passes through untouched.
    """
    if "q" in raw or "question" not in raw:
        return raw
    opts = {o.get("id"): o for o in raw.get("options") or [] if isinstance(o, dict)}
    out: Dict[str, Any] = {"q": raw["question"]}
    for side in ("a", "b"):
        o = opts.get(side)
        if o is None:
            return raw  # let validation reject it
        out[side] = {"txt": o.get("text", ""), "icon": o.get("label", "")}
        if o.get("isCorrect"):
            out["correct"] = side
    for extra in ("display", "speakText", "pattern"):
        if extra in raw:
            out[extra] = raw[extra]
    return out


def _validate(rows: Iterable[Dict[str, Any]], category: str) -> List[Question]:
    out: List[Question] = []
    for raw in rows:
        if not isinstance(raw, dict):
            continue
        try:
            out.append(Question.model_validate(_from_legacy(raw)))
        except ValidationError:
            log.warning("skipping invalid catalog record in %r", category)
            continue
    return out


class QuestionBank:
    _catalog: Dict[str, List[Question]] = {}

    @classmethod
    def load(cls) -> Dict[str, List[Question]]:
        if not cls._catalog:
            cls.reload()
        return cls._catalog

    @classmethod
    def reload(cls) -> int:
        catalog: Dict[str, List[Question]] = {
            category: _validate(rows, category) for category, rows in STATIC_CATALOG.items()
        }

        # Files under data/catalog replace the built-in list for their category
        if _DATA_DIR.exists():
            for p in sorted(_DATA_DIR.iterdir()):
                if not p.is_file():
                    continue
                suf = p.suffix.lower()
                if suf == ".jsonl":
                    source = _iter_jsonl(p)
                elif suf == ".json":
                    source = _iter_json(p)
                else:
                    continue
                loaded = _validate(source, p.stem)
                if loaded:
                    catalog[p.stem] = loaded

        cls._catalog = catalog
        return sum(len(v) for v in catalog.values())


# Public API
def get_static(category: str) -> List[Question]:
    """Return a copy of the static list for a category ([] if unknown)."""
    return list(QuestionBank.load().get(category, []))


def categories() -> List[str]:
    return sorted(QuestionBank.load())


def reload_bank() -> int:
    return QuestionBank.reload()
