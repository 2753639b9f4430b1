from __future__ import annotations

import json
import logging
from typing import Any

from morphstem.core.backends.interface import Candidate, TokenResult
from morphstem.core.errors import AppError, ResponseDecodeError
from morphstem.core.grammems.decoder import decode_grammem
from morphstem.core.preprocess.normalize import sanitize_text

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT = 1.0


def encode_request(text: str) -> str:
    return sanitize_text(text)


def _parse_envelope(line: str | bytes) -> list[dict[str, Any]]:
    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ResponseDecodeError(f"Ответ mystem не в UTF-8: {line[:80]!r}") from exc
    try:
        payload = json.loads(line)
    except ValueError as exc:
        raise ResponseDecodeError(f"Ответ mystem не является JSON: {line[:80]!r}") from exc
    if not isinstance(payload, list):
        raise ResponseDecodeError("Ответ mystem должен быть массивом токенов")
    for item in payload:
        if not isinstance(item, dict) or not isinstance(item.get("text"), str):
            raise ResponseDecodeError(f"Некорректный токен в ответе mystem: {item!r}")
        analysis = item.get("analysis", [])
        if not isinstance(analysis, list):
            raise ResponseDecodeError(f"Поле analysis должно быть массивом: {analysis!r}")
        for entry in analysis:
            if not isinstance(entry, dict):
                raise ResponseDecodeError(f"Некорректный разбор в ответе mystem: {entry!r}")
            if not isinstance(entry.get("lex"), str) or not isinstance(entry.get("gr"), str):
                raise ResponseDecodeError(f"Разбор без lex/gr: {entry!r}")
    return payload


def _weight(entry: dict[str, Any]) -> float:
    wt = entry.get("wt")
    # bool is an int subclass; mystem never sends one as a weight
    if isinstance(wt, (int, float)) and not isinstance(wt, bool):
        return float(wt)
    return DEFAULT_WEIGHT


def expand_alternatives(tag: str) -> list[str]:
    """Split a grouped tag like ``"A=(abl,sg,m|abl,sg,n)"`` into one tag per variant."""
    head, sep, tail = tag.partition("=")
    if "|" not in tail:
        return [tag]
    return [f"{head}{sep}{alt}" for alt in tail.strip("()").split("|")]


def decode_candidates(entry: dict[str, Any]) -> list[Candidate]:
    weight = _weight(entry)
    return [
        Candidate(lemma=entry["lex"], grammem=decode_grammem(tag), weight=weight)
        for tag in expand_alternatives(entry["gr"])
    ]


def decode_response(line: str | bytes, *, strict: bool = True, warnings: list[str] | None = None) -> list[TokenResult]:
    """Decode one mystem JSON response line.

    A malformed envelope yields ``[]``. Unknown tag codes raise in strict
    mode; otherwise the offending candidate is dropped and a message is
    appended to ``warnings``.
    """
    try:
        tokens = _parse_envelope(line)
    except ResponseDecodeError as exc:
        logger.debug("Пропущен некорректный ответ mystem: %s", exc)
        return []

    results: list[TokenResult] = []
    for item in tokens:
        candidates: list[Candidate] = []
        for entry in item.get("analysis", []):
            try:
                candidates.extend(decode_candidates(entry))
            except AppError as exc:
                if strict:
                    raise
                message = f"{item['text']}: разбор {entry['gr']!r} отброшен ({exc})"
                logger.warning("%s", message)
                if warnings is not None:
                    warnings.append(message)
        results.append(TokenResult(text=item["text"], candidates=tuple(candidates)))
    return results
