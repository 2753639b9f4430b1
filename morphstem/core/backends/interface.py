from __future__ import annotations

from dataclasses import dataclass, field

from morphstem.core.grammems.decoder import Grammem


@dataclass(frozen=True)
class Candidate:
    lemma: str
    grammem: Grammem
    weight: float = 1.0


@dataclass(frozen=True)
class TokenResult:
    text: str
    candidates: tuple[Candidate, ...] = ()

    def best(self) -> Candidate | None:
        if not self.candidates:
            return None
        return max(self.candidates, key=lambda c: c.weight)


@dataclass
class Token:
    text: str
    lemma: str
    pos: str
    feats: dict[str, str]
    start: int
    end: int


@dataclass
class Sentence:
    text: str
    start: int
    end: int


@dataclass
class AnalysisResult:
    backend: str
    tokens: list[Token]
    sentences: list[Sentence]
    warnings: list[str] = field(default_factory=list)


class Backend:
    name = "base"

    def analyze(self, text: str) -> AnalysisResult:
        raise NotImplementedError
