"""Best score per breed, kept in a small text file."""

from __future__ import annotations

import os
import re
from pathlib import Path

_ENTRIES = (
    ("greyCat", "Grey Cat Highscore:"),
    ("pinkCat", "Pink Cat Highscore:"),
    ("shibaInu", "Shiba Inu Highscore:"),
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_score(line: str) -> int:
    match = _LEADING_INT.match(line)
    if match is None:
        raise ValueError(f"not a score: {line!r}")
    return int(match.group(1))


class Highscore:
    """Reads the high-score file on creation and rewrites it on every update.

    The file holds a label line followed by a score line for the grey cat,
    the pink cat and the shiba inu, in that order.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        lines = self.path.read_text(encoding="utf-8").split("\n")
        self._text: dict[str, str] = {}
        self._best: dict[str, int] = {}
        for index, (breed, _label) in enumerate(_ENTRIES):
            line_number = 2 * index + 1
            if line_number >= len(lines):
                raise ValueError(f"{self.path}: missing score for {breed}")
            line = lines[line_number]
            self._best[breed] = _parse_score(line)
            self._text[breed] = line

    def add_highscore(self, score: int, breed: str) -> bool:
        """Record a score for a breed; return True if it is a new best."""
        improved = breed in self._best and score > self._best[breed]
        if improved:
            self._best[breed] = score
            self._text[breed] = str(score)
        self._save()
        return improved

    def score_text(self, breed: str) -> str:
        """The best score for a breed as it is shown on the menu."""
        return self._text[breed]

    def _save(self) -> None:
        lines = []
        for breed, label in _ENTRIES:
            lines.append(label)
            lines.append(str(self._best[breed]))
        self.path.write_text("\n".join(lines) + "\n", encoding="utf-8")