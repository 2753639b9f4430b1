from __future__ import annotations

from razdel import sentenize

from morphstem.core.backends.interface import AnalysisResult, Backend, Sentence, Token, TokenResult
from morphstem.core.grammems.tables import MYSTEM_POS_TO_UPOS
from morphstem.core.process.session import AnalysisMode, MystemSession
from morphstem.core.protocol.codec import decode_response, encode_request


class MyStem:
    """Morphological analysis through one long-lived mystem process.

    Requests from several threads are serialised by the session, so one
    instance per thread is the way to analyse in parallel.
    """

    def __init__(
        self,
        executable: str | None = None,
        mode: AnalysisMode = AnalysisMode.WEIGHTED,
        strict: bool = True,
    ) -> None:
        self.strict = strict
        self.session = MystemSession(executable, mode)
        self.warnings: list[str] = []

    def stemming(self, text: str) -> list[TokenResult]:
        """Return one TokenResult per token mystem found in ``text``.

        Raises ProcessSpawnError if a dead worker cannot be restarted,
        WorkerIOError if a restarted worker still refuses the request and,
        in strict mode, PartOfSpeechError/GrammemError on unknown tags.
        """
        self.warnings = []
        line = self.session.exchange(encode_request(text))
        return decode_response(line, strict=self.strict, warnings=self.warnings)

    def terminate(self) -> None:
        self.session.terminate()

    def __enter__(self) -> MyStem:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.terminate()


class MystemBackend(Backend):
    name = "mystem"

    def __init__(self, stem: MyStem | None = None) -> None:
        self.stem = stem or MyStem(strict=False)

    def analyze(self, text: str) -> AnalysisResult:
        results = self.stem.stemming(text)
        warnings = list(self.stem.warnings)
        tokens: list[Token] = []
        cursor = 0
        for res in results:
            start = text.find(res.text, cursor)
            if start < 0:
                # sanitizing glued the token across removed characters ("из-за" -> "изза")
                warnings.append(f"Токен {res.text!r} не найден в исходном тексте")
                start = end = cursor
            else:
                end = start + len(res.text)
                cursor = end
            best = res.best()
            if best is None:
                tokens.append(Token(res.text, res.text.lower(), "X", {}, start, end))
                continue
            feats = best.grammem.feats()
            feats["mystem"] = ",".join((best.grammem.part_of_speech.value, *best.grammem.facts_raw))
            pos = MYSTEM_POS_TO_UPOS.get(best.grammem.part_of_speech, "X")
            tokens.append(Token(res.text, best.lemma, pos, feats, start, end))
        sents = [Sentence(s.text, s.start, s.stop) for s in sentenize(text)]
        return AnalysisResult(backend=self.name, tokens=tokens, sentences=sents, warnings=warnings)
