from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

DigitColumn = Tuple[int, ...]


@dataclass(frozen=True, slots=True)
class SlidePlan:
    """Per-column frame sequences for one slide transition.

    ``columns`` are ordered most significant first; each column lists the
    digits it scrolls through, oldest first.
    """
    columns: Tuple[DigitColumn, ...]
    negative: bool = False
    radix_index: Optional[int] = None  # insert the radix before this column
    direction: str = "up"
    precision: int = 0

    @property
    def first_digits(self) -> str:
        return "".join(str(col[0]) for col in self.columns)

    @property
    def last_digits(self) -> str:
        return "".join(str(col[-1]) for col in self.columns)

    def __len__(self) -> int:
        return len(self.columns)
