"""High score table and its binary save file.

The save file holds an unsigned 64-bit little-endian record count followed by
score and line count pairs in the same encoding.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Union

MAX_RECORDS = 10

_WORD = struct.Struct("<Q")
_RECORD = struct.Struct("<QQ")

PathLike = Union[str, Path]


@dataclass
class ScoreRecord:
    score: int
    lines: int
    is_new: bool = False


class HighScores:
    """The best scores, highest first, at most ten."""

    def __init__(self):
        self.records: list[ScoreRecord] = []

    def add_new_score(self, score: int, lines: int) -> None:
        """Insert a freshly played score, marking it as the new one."""
        for record in self.records:
            record.is_new = False
        self.records.append(ScoreRecord(score, lines, True))
        self.records.sort(key=lambda record: record.score, reverse=True)
        del self.records[MAX_RECORDS:]

    def add_saved_score(self, score: int, lines: int) -> None:
        """Append a score read back from storage."""
        if len(self.records) >= MAX_RECORDS:
            raise ValueError("invalid amount of records")
        self.records.append(ScoreRecord(score, lines, False))


def load_scores(path: PathLike) -> HighScores:
    """Read a save file; a count of zero or above ten yields an empty table."""
    data = Path(path).read_bytes()
    scores = HighScores()
    if len(data) < _WORD.size:
        raise ValueError("save file is too short")
    (count,) = _WORD.unpack_from(data)
    if count == 0 or count > MAX_RECORDS:
        return scores
    end = _WORD.size + count * _RECORD.size
    if len(data) < end:
        raise ValueError("save file is truncated")
    for score, lines in _RECORD.iter_unpack(data[_WORD.size:end]):
        scores.add_saved_score(score, lines)
    return scores


def save_scores(scores: HighScores, folder: PathLike, filename: str) -> Path:
    """Write the table into folder/filename, creating folders; return the path."""
    directory = Path(folder)
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / filename
    payload = bytearray(_WORD.pack(len(scores.records)))
    for record in scores.records:
        payload += _RECORD.pack(record.score, record.lines)
    target.write_bytes(bytes(payload))
    return target