"""A leaderboard of band scores kept in a CSV file."""

from __future__ import annotations

import csv
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from .binheap import Heap

DEFAULT_SCORES_PATH = Path("allscores.csv")

PathLike = Union[str, Path]

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ScoreEntry:
    """One band's final score."""

    band_name: str
    score: int

    def __lt__(self, other: "ScoreEntry") -> bool:
        """Higher scores order first."""
        return self.score > other.score


def get_all(path: PathLike = DEFAULT_SCORES_PATH) -> List[ScoreEntry]:
    """Read every valid entry from the scores file.

    Rows with fewer than two fields or a non-integer score are skipped. A file
    whose rows have differing numbers of fields raises ValueError.
    """
    with open(path, newline="", encoding="utf-8") as file:
        try:
            rows = [row for row in csv.reader(file) if row]
        except csv.Error as exc:
            raise ValueError(f"malformed scores file {path}: {exc}") from exc

    if rows:
        width = len(rows[0])
        for line, row in enumerate(rows, start=1):
            if len(row) != width:
                raise ValueError(
                    f"record {line} of {path} has {len(row)} fields, expected {width}"
                )

    entries = []
    for row in rows:
        if len(row) < 2 or not _INTEGER.fullmatch(row[1]):
            continue
        entries.append(ScoreEntry(band_name=row[0], score=int(row[1])))
    return entries


def get_top(n: int, path: PathLike = DEFAULT_SCORES_PATH) -> List[ScoreEntry]:
    """Return the ``n`` highest-scoring entries, best first."""
    scores = get_all(path)
    heap = Heap(scores)
    return [heap.pop() for _ in range(min(n, len(scores)))]


def _csv_field(value: str) -> str:
    needs_quotes = value == "\\." or any(c in value for c in ',"\r\n') or value[:1].isspace()
    if not needs_quotes:
        return value
    return '"' + value.replace('"', '""') + '"'


def persist(entry: ScoreEntry, path: PathLike = DEFAULT_SCORES_PATH) -> None:
    """Append ``entry`` to the scores file, creating it if needed."""
    record = ",".join(_csv_field(v) for v in (entry.band_name, str(entry.score))) + "\n"
    with open(path, "ab+") as file:
        file.seek(0, 2)
        if file.tell() > 0:
            file.seek(-1, 2)
            if file.read(1) != b"\n":
                file.seek(0, 2)
                file.write(b"\n")
        file.seek(0, 2)
        file.write(record.encode("utf-8"))