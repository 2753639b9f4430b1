from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import regex as re

from morphstem.core.errors import GrammemError, PartOfSpeechError
from morphstem.core.grammems.tables import FACT_CODES, PART_OF_SPEECH_CODES, Fact, PartOfSpeech

TAG_SEPARATOR_RE = re.compile(r"[=,]")


@dataclass(frozen=True)
class Grammem:
    part_of_speech: PartOfSpeech
    facts: tuple[Fact, ...] = ()
    facts_raw: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.facts) != len(self.facts_raw):
            raise ValueError("facts и facts_raw должны иметь одинаковую длину")

    def get(self, category: type[Enum]) -> Fact | None:
        """Return the first fact of ``category`` (e.g. ``Case``), if any."""
        for fact in self.facts:
            if isinstance(fact, category):
                return fact
        return None

    def feats(self) -> dict[str, str]:
        out: dict[str, str] = {}
        for fact in self.facts:
            key = fact_category(fact)
            # Other may carry several markers at once (persn, famn, ...).
            out[key] = f"{out[key]},{fact.value}" if key in out else fact.value
        return out


def fact_category(fact: Fact) -> str:
    return type(fact).__name__


def split_tag(tag: str) -> list[str]:
    return [part for part in TAG_SEPARATOR_RE.split(tag) if part]


def decode_part_of_speech(code: str) -> PartOfSpeech:
    try:
        return PART_OF_SPEECH_CODES[code]
    except KeyError:
        raise PartOfSpeechError(code) from None


def decode_fact(code: str) -> Fact:
    try:
        return FACT_CODES[code]
    except KeyError:
        raise GrammemError(code) from None


def decode_grammem(tag: str) -> Grammem:
    """Decode a mystem tag string such as ``"S,persn,famn=nom,sg"``.

    The first segment is the part of speech, the rest are facts in the order
    mystem emitted them. Unknown codes raise instead of being dropped.
    """
    segments = split_tag(tag)
    if not segments:
        raise PartOfSpeechError(tag)
    pos = decode_part_of_speech(segments[0])
    raw = tuple(segments[1:])
    return Grammem(part_of_speech=pos, facts=tuple(decode_fact(code) for code in raw), facts_raw=raw)
