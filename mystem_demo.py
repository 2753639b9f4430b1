#!/usr/bin/env python3
"""Print the lemma of every word of a Russian sentence using mystem."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from morphstem.core.backends.mystem_backend import MyStem
from morphstem.core.errors import AppError
from morphstem.core.grammems.tables import PART_OF_SPEECH_RU
from morphstem.core.process.session import AnalysisMode
from morphstem.core.reporting.exporters import export_json

DEFAULT_TEXT = "Связался с лучшим - подохни как все."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("text", nargs="?", default=DEFAULT_TEXT, help="Текст для анализа")
    parser.add_argument("--mystem", default=None, help="Путь к mystem (по умолчанию $MYSTEM_BIN или mystem)")
    parser.add_argument("--single", action="store_true", help="Только лучший разбор (mystem -d)")
    parser.add_argument("--lenient", action="store_true", help="Отбрасывать разборы с неизвестными граммемами")
    parser.add_argument("--json", type=Path, default=None, help="Сохранить результат в JSON")
    parser.add_argument("--debug", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    mode = AnalysisMode.DISAMBIGUATED if args.single else AnalysisMode.WEIGHTED
    try:
        with MyStem(args.mystem, mode=mode, strict=not args.lenient) as stem:
            results = stem.stemming(args.text)
    except AppError as exc:
        print(f"ОШИБКА: {exc}", file=sys.stderr)
        return 1

    for res in results:
        for c in res.candidates:
            label = PART_OF_SPEECH_RU[c.grammem.part_of_speech]
            print(f"{c.lemma} is a lexeme of {res.text} ({label}, {c.weight:.3f})")
    if args.json is not None:
        export_json(results, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
