# src/wordlookup/core/entry.py
"""
Lexical data model for a WordsAPI response.

A WordRecord holds the word, its pronunciations and one LexicalEntry per sense.
Relation lists are None when the response has no such key, which is not the
same thing as an empty list.
"""

import json
from dataclasses import dataclass


UNKNOWN_POS = "unknown"

# JSON key for each relation list on a result object
RELATION_KEYS = {
    "antonyms": "antonyms",
    "synonyms": "synonyms",
    "type_of": "typeOf",
    "has_types": "hasTypes",
    "part_of": "partOf",
}


class ParseError(ValueError):
    pass


@dataclass(frozen=True)
class LexicalEntry:
    definition: str
    part_of_speech: str = UNKNOWN_POS
    antonyms: tuple[str, ...] | None = None
    synonyms: tuple[str, ...] | None = None
    type_of: tuple[str, ...] | None = None     # hypernyms
    has_types: tuple[str, ...] | None = None   # hyponyms
    part_of: tuple[str, ...] | None = None     # holonyms


@dataclass(frozen=True)
class WordRecord:
    word: str
    pronunciation: dict[str, str] | None = None
    results: tuple[LexicalEntry, ...] = ()

    def pronounce(self, variant: str = "all") -> str:
        if not self.pronunciation:
            return ""
        return self.pronunciation.get(variant, "")


def _string_list(value, field: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ParseError(f"{field} must be a list of strings")
    return tuple(value)


def _pronunciation(value) -> dict[str, str] | None:
    if value is None:
        return None
    # some words come back with a bare string instead of a mapping
    if isinstance(value, str):
        return {"all": value}
    if not isinstance(value, dict):
        raise ParseError("pronunciation must be an object or a string")
    return {k: v for k, v in value.items() if isinstance(v, str)}


def _entry(data, index: int) -> LexicalEntry:
    if not isinstance(data, dict):
        raise ParseError(f"results[{index}] is not an object")

    definition = data.get("definition")
    if not isinstance(definition, str):
        raise ParseError(f"results[{index}] has no definition")

    pos = data.get("partOfSpeech")
    if not isinstance(pos, str) or not pos:
        pos = UNKNOWN_POS

    relations = {
        attr: _string_list(data.get(key), f"results[{index}].{key}")
        for attr, key in RELATION_KEYS.items()
    }
    return LexicalEntry(definition=definition, part_of_speech=pos, **relations)


def parse(word_json: str) -> WordRecord:
    """Parse a WordsAPI response body. Raises ParseError on a malformed payload."""
    try:
        data = json.loads(word_json)
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("top level is not an object")

    word = data.get("word")
    if not isinstance(word, str):
        raise ParseError("missing word")

    results = data.get("results")
    if results is None:
        results = []
    if not isinstance(results, list):
        raise ParseError("results must be a list")

    return WordRecord(
        word=word,
        pronunciation=_pronunciation(data.get("pronunciation")),
        results=tuple(_entry(r, i) for i, r in enumerate(results)),
    )
