"""Continuation signal returned by visitor callbacks."""
from enum import Enum
from typing import Any


class Control(Enum):
    CONTINUE = "continue"
    BREAK = "break"


def should_break(signal: Any) -> bool:
    """
    Interpret a visitor's return value. `None` and `Control.CONTINUE` mean
    keep going, `Control.BREAK` means stop. Anything else is rejected so
    that a visitor returning e.g. `False` does not silently continue.
    """
    if signal is None or signal is Control.CONTINUE:
        return False
    if signal is Control.BREAK:
        return True
    raise TypeError(
        f"Visitor must return None or a Control member, not {signal!r}"
    )
