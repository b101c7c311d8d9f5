# src/wordlookup/core/display.py
"""
Rendering of a looked-up word.

Raw mode returns the JSON untouched. Structured mode parses it and prints:

    happy |ˈhæpi|
    (adjective) feeling pleasure
       antonyms: unhappy
"""

from dataclasses import dataclass

from wordlookup.core.entry import LexicalEntry, WordRecord, parse


NONE_MARKER = "(None)"

# (label, option flag, LexicalEntry attribute) in display order
RELATIONS = (
    ("antonyms", "antonym", "antonyms"),
    ("synonyms", "synonym", "synonyms"),
    ("hypernyms", "hypernym", "type_of"),
    ("hyponyms", "hyponym", "has_types"),
    ("holonyms", "holonym", "part_of"),
)


@dataclass(frozen=True)
class DisplayOptions:
    antonym: bool = False
    synonym: bool = False
    hypernym: bool = False
    hyponym: bool = False
    holonym: bool = False
    show_all: bool = False
    raw_json: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args) -> "DisplayOptions":
        return cls(
            antonym=args.antonym,
            synonym=args.synonym,
            hypernym=args.hypernym,
            hyponym=args.hyponym,
            holonym=args.holonym,
            show_all=args.all,
            raw_json=args.json,
            verbose=args.verbose,
        )

    def wants(self, flag: str) -> bool:
        return self.show_all or getattr(self, flag)


def relation_line(label: str, values: tuple[str, ...] | None) -> str:
    if values is None:
        return f"   {label}: {NONE_MARKER}"
    return f"   {label}: {', '.join(values)}"


def render_entry(entry: LexicalEntry, options: DisplayOptions) -> list[str]:
    lines = [f"({entry.part_of_speech}) {entry.definition}"]
    for label, flag, attr in RELATIONS:
        if options.wants(flag):
            lines.append(relation_line(label, getattr(entry, attr)))
    return lines


def render_record(record: WordRecord, options: DisplayOptions) -> str:
    lines = [f"{record.word} |{record.pronounce('all')}|"]
    for i, entry in enumerate(record.results):
        if i > 0:
            lines.append("")
        lines.extend(render_entry(entry, options))
    return "\n".join(lines)


def render(word_json: str, options: DisplayOptions) -> str:
    """Render word_json per options. ParseError only in structured mode."""
    if options.raw_json:
        return word_json
    return render_record(parse(word_json), options)
