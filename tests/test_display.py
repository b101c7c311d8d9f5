# tests/test_display.py
"""Tests for raw and structured rendering."""

import argparse
import json

import pytest

from wordlookup.core.display import DisplayOptions, render
from wordlookup.core.entry import ParseError


HAPPY = '{"word":"happy","pronunciation":{"all":"ˈhæpi"},"results":[{"definition":"feeling pleasure","partOfSpeech":"adjective"}]}'

TREE = json.dumps({
    "word": "tree",
    "pronunciation": {"all": "tri"},
    "results": [
        {
            "definition": "a tall perennial woody plant",
            "partOfSpeech": "noun",
            "synonyms": [],
            "typeOf": ["woody plant", "ligneous plant"],
            "hasTypes": ["oak", "elm"],
            "partOf": ["forest"],
        },
        {
            "definition": "force a person or an animal into a position",
            "partOfSpeech": "verb",
            "antonyms": ["release"],
        },
    ],
})


def test_structured_minimal():
    assert render(HAPPY, DisplayOptions()) == "happy |ˈhæpi|\n(adjective) feeling pleasure"


def test_missing_antonyms_render_none():
    out = render(HAPPY, DisplayOptions(antonym=True))
    assert out.splitlines()[-1] == "   antonyms: (None)"


def test_empty_list_is_not_none():
    lines = render(TREE, DisplayOptions(synonym=True)).splitlines()
    assert lines[2] == "   synonyms: "
    assert lines[-1] == "   synonyms: (None)"


def test_values_comma_joined():
    lines = render(TREE, DisplayOptions(hyponym=True)).splitlines()
    assert lines[2] == "   hyponyms: oak, elm"


def test_show_all_fixed_order():
    out = render(TREE, DisplayOptions(show_all=True))
    assert out == "\n".join([
        "tree |tri|",
        "(noun) a tall perennial woody plant",
        "   antonyms: (None)",
        "   synonyms: ",
        "   hypernyms: woody plant, ligneous plant",
        "   hyponyms: oak, elm",
        "   holonyms: forest",
        "",
        "(verb) force a person or an animal into a position",
        "   antonyms: release",
        "   synonyms: (None)",
        "   hypernyms: (None)",
        "   hyponyms: (None)",
        "   holonyms: (None)",
    ])


def test_flags_independent():
    out = render(TREE, DisplayOptions(antonym=True, holonym=True))
    assert "synonyms" not in out
    assert "hypernyms" not in out
    assert "   holonyms: forest" in out
    assert "   antonyms: release" in out


def test_no_pronunciation():
    out = render('{"word":"x","results":[{"definition":"d"}]}', DisplayOptions())
    assert out == "x ||\n(unknown) d"


def test_raw_is_verbatim():
    assert render(HAPPY, DisplayOptions(raw_json=True)) == HAPPY


def test_raw_accepts_malformed():
    assert render("{not json", DisplayOptions(raw_json=True)) == "{not json"


def test_structured_rejects_malformed():
    with pytest.raises(ParseError):
        render("{not json", DisplayOptions())


def test_options_from_args():
    args = argparse.Namespace(
        antonym=True, synonym=False, hypernym=False, hyponym=False, holonym=True,
        all=False, json=True, verbose=True,
    )
    options = DisplayOptions.from_args(args)

    assert options == DisplayOptions(antonym=True, holonym=True, raw_json=True, verbose=True)
    assert options.wants("antonym")
    assert not options.wants("synonym")
    assert DisplayOptions(show_all=True).wants("synonym")
