from dataclasses import dataclass
from typing import Tuple

from odometer.constants import CLASS_FIRST_VALUE, CLASS_LAST_VALUE

DIGIT = "digit"
SPACER = "spacer"


@dataclass(frozen=True, slots=True)
class Token:
    """One renderable cell of an odometer: a digit column or a spacer mark."""
    kind: str
    text: str
    classes: Tuple[str, ...] = ()
    frames: Tuple[int, ...] = ()  # digit ribbon, oldest first

    @property
    def is_digit(self) -> bool:
        return self.kind == DIGIT

    @property
    def is_static(self) -> bool:
        return len(self.frames) <= 1


def static_digit(char: str) -> Token:
    # In a static render every value element is both the first and the last one.
    return Token(
        kind=DIGIT,
        text=char,
        classes=(CLASS_FIRST_VALUE, CLASS_LAST_VALUE),
        frames=(int(char),) if char.isdigit() else (),
    )


def spacer(char: str, *classes: str) -> Token:
    return Token(kind=SPACER, text=char, classes=tuple(classes))
