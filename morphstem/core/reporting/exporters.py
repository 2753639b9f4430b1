import csv
import json
from pathlib import Path
from typing import Any

from morphstem.core.backends.interface import TokenResult

CSV_FIELDS = ["text", "lemma", "pos", "facts", "weight"]


def results_to_dicts(results: list[TokenResult]) -> list[dict[str, Any]]:
    return [
        {
            "text": res.text,
            "analysis": [
                {
                    "lex": c.lemma,
                    "pos": c.grammem.part_of_speech.value,
                    "facts": list(c.grammem.facts_raw),
                    "wt": c.weight,
                }
                for c in res.candidates
            ],
        }
        for res in results
    ]


def export_json(results: list[TokenResult], path: Path) -> None:
    path.write_text(json.dumps(results_to_dicts(results), ensure_ascii=False, indent=2), encoding="utf-8")


def export_candidates_csv(results: list[TokenResult], path: Path) -> None:
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for res in results:
            for c in res.candidates:
                writer.writerow(
                    {
                        "text": res.text,
                        "lemma": c.lemma,
                        "pos": c.grammem.part_of_speech.value,
                        "facts": ",".join(c.grammem.facts_raw),
                        "weight": c.weight,
                    }
                )
