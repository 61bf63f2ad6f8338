from __future__ import annotations

import jax
from jax import lax
import jax.numpy as jnp

jax.config.update("jax_enable_x64", True)


@jax.jit
def cln(z: jax.Array) -> jax.Array:
    z = jnp.asarray(z, dtype=jnp.complex128)
    # -0.0 == 0.0, so both signs of zero end up as +0.0
    re = jnp.where(jnp.real(z) == 0.0, 0.0, jnp.real(z))
    im = jnp.where(jnp.imag(z) == 0.0, 0.0, jnp.imag(z))
    return lax.complex(0.5 * jnp.log(re * re + im * im), jnp.arctan2(im, re))


@jax.jit
def cln1p(z: jax.Array) -> jax.Array:
    z = jnp.asarray(z, dtype=jnp.complex128)
    re = jnp.real(z)
    im = jnp.where(jnp.imag(z) == 0.0, 0.0, jnp.imag(z))
    # |1 + z|^2 - 1 without forming 1 + z
    return lax.complex(0.5 * jnp.log1p(re * (2.0 + re) + im * im), jnp.arctan2(im, 1.0 + re))


__all__ = ["cln", "cln1p"]
