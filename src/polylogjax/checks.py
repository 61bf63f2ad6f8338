from __future__ import annotations

import numbers
from typing import Any


def _check(cond, msg: str, *args) -> None:
    if not bool(cond):
        raise ValueError(msg.format(*args))


def check_in_set(val: Any, allowed: tuple, label: str) -> None:
    _check(val in allowed, "{}: expected one of {}, got {}", label, allowed, val)


def check_integer(val: Any, label: str) -> None:
    _check(
        isinstance(val, numbers.Integral) and not isinstance(val, bool),
        "{}: expected an integer, got {!r}",
        label,
        val,
    )


__all__ = ["check_in_set", "check_integer"]
