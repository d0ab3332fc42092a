"""English/Chinese vocabulary pairs and the CSV/JSON loaders."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .errors import InvalidVocabularyError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VocabPair:
    en: str
    zh: str

    def to_dict(self) -> dict[str, str]:
        return {"en": self.en, "zh": self.zh}


DEFAULT_VOCAB: tuple[VocabPair, ...] = (
    VocabPair("hello", "你好"),
    VocabPair("thank you", "谢谢"),
    VocabPair("goodbye", "再见"),
    VocabPair("please", "请"),
    VocabPair("sorry", "对不起"),
    VocabPair("apple", "苹果"),
    VocabPair("water", "水"),
    VocabPair("teacher", "老师"),
    VocabPair("student", "学生"),
    VocabPair("book", "书"),
    VocabPair("cat", "猫"),
    VocabPair("dog", "狗"),
    VocabPair("blue", "蓝色"),
    VocabPair("red", "红色"),
    VocabPair("green", "绿色"),
)

_LINE_SPLIT = re.compile(r"\r?\n")


def validate_vocabulary(pairs: Iterable[Any]) -> tuple[VocabPair, ...]:
    """
    Freeze ``pairs`` into a tuple of VocabPair.

    Accepts VocabPair instances or ``{"en": ..., "zh": ...}`` mappings.
    Raises InvalidVocabularyError when the result is empty or an entry
    lacks a non-empty ``en``/``zh`` string.
    """
    if pairs is None:
        raise InvalidVocabularyError("vocabulary is missing")
    out: list[VocabPair] = []
    for i, item in enumerate(pairs):
        if isinstance(item, VocabPair):
            en, zh = item.en, item.zh
        elif isinstance(item, dict):
            en, zh = item.get("en"), item.get("zh")
        else:
            raise InvalidVocabularyError(f"entry {i} is not a vocabulary pair: {item!r}")
        if not isinstance(en, str) or not isinstance(zh, str) or not en or not zh:
            raise InvalidVocabularyError(f"entry {i} needs non-empty 'en' and 'zh' strings: {item!r}")
        out.append(item if isinstance(item, VocabPair) else VocabPair(en, zh))
    if not out:
        raise InvalidVocabularyError("vocabulary is empty")
    return tuple(out)


def parse_csv(text: str) -> list[VocabPair]:
    """One ``english, chinese`` pair per line; incomplete lines are skipped."""
    out: list[VocabPair] = []
    for raw in _LINE_SPLIT.split(text):
        line = raw.strip()
        if not line:
            continue
        fields = [f.strip() for f in line.split(",")]
        en = fields[0]
        zh = fields[1] if len(fields) > 1 else ""
        if en and zh:
            out.append(VocabPair(en, zh))
    return out


def parse_json(text: str) -> list[VocabPair]:
    """A JSON array of ``{"en", "zh"}`` objects; other shapes yield nothing."""
    data = json.loads(text)
    out: list[VocabPair] = []
    if not isinstance(data, list):
        return out
    for item in data:
        if not isinstance(item, dict):
            continue
        en, zh = item.get("en"), item.get("zh")
        if en and zh:
            out.append(VocabPair(str(en), str(zh)))
    return out


def load_vocabulary(path: str | Path) -> tuple[VocabPair, ...]:
    """Read a ``.json`` or CSV vocabulary file and validate the result."""
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    pairs = parse_json(text) if p.suffix.lower() == ".json" else parse_csv(text)
    if not pairs:
        raise InvalidVocabularyError(
            f"no valid vocab found in {p.name}; use CSV 'english, chinese' or a JSON array of {{'en','zh'}}"
        )
    logger.info(f"Loaded {len(pairs)} vocabulary pairs from {p}")
    return validate_vocabulary(pairs)
