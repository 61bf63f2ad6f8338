from __future__ import annotations

import jax
import jax.numpy as jnp

from . import checks
from .dilog import li2
from .hexalog import li6
from .pentalog import li5
from .tetralog import li4
from .trilog import li3

jax.config.update("jax_enable_x64", True)

ORDERS = (2, 3, 4, 5, 6)

_BY_ORDER = {
    2: li2,
    3: li3,
    4: li4,
    5: li5,
    6: li6,
}


def polylog(n: int, z: jax.Array) -> jax.Array:
    checks.check_integer(n, "polylog_wrappers.order")
    checks.check_in_set(n, ORDERS, "polylog_wrappers.order")
    return _BY_ORDER[n](jnp.asarray(z))


__all__ = ["ORDERS", "polylog"]
