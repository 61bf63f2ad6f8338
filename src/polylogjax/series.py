from __future__ import annotations

from typing import Sequence

import jax
import jax.numpy as jnp

jax.config.update("jax_enable_x64", True)


def horner(coeffs: Sequence, x: jax.Array) -> jax.Array:
    acc = coeffs[-1]
    for c in reversed(coeffs[:-1]):
        acc = c + x * acc
    return acc


def clenshaw(coeffs: Sequence[float], h: jax.Array) -> tuple[jax.Array, jax.Array]:
    # Chebyshev sum in T_k(h); returns (b0, b2) of the final step
    alfa = h + h
    b0 = jnp.zeros_like(h)
    b1 = jnp.zeros_like(h)
    b2 = jnp.zeros_like(h)
    for c in reversed(coeffs):
        b0 = c + alfa * b1 - b2
        b2 = b1
        b1 = b0
    return b0, b2


__all__ = ["horner", "clenshaw"]
