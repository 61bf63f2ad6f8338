from __future__ import annotations

import jax
from jax import lax
import jax.numpy as jnp

from .complex_log import cln1p
from .series import clenshaw, horner

jax.config.update("jax_enable_x64", True)

_PI = 3.141592653589793
_PI2 = _PI * _PI
_PI3 = _PI2 / 3.0
_PI6 = _PI2 / 6.0
_EPS = float(jnp.finfo(jnp.float64).eps)

# Chebyshev expansion on [0, 1] (CERNLIB C332, Luke 1975 p. 67)
_CHEBYSHEV = (
    0.42996693560813697, 0.40975987533077105,
    -0.01858843665014592, 0.00145751084062268, -0.00014304184442340,
    0.00001588415541880, -0.00000190784959387, 0.00000024195180854,
    -0.00000003193341274, 0.00000000434545063, -0.00000000060578480,
    0.00000000008612098, -0.00000000001244332, 0.00000000000182256,
    -0.00000000000027007, 0.00000000000004042, -0.00000000000000610,
    0.00000000000000093, -0.00000000000000014, 0.00000000000000002,
)

# B_2n / (2n + 1)!, with the leading -1/4 and 1/36 of the u^2, u^3 terms
_BERNOULLI = (
    -1.0 / 4.0,
    1.0 / 36.0,
    -1.0 / 3600.0,
    1.0 / 211680.0,
    -1.0 / 10886400.0,
    1.0 / 526901760.0,
    -4.064761645144226e-11,
    8.921691020456453e-13,
    -1.993929586072108e-14,
    4.518980029619918e-16,
)


@jax.jit
def li2_real(x: jax.Array) -> jax.Array:
    x = jnp.asarray(x, dtype=jnp.float64)
    t = -x
    lmt = jnp.log(-t)
    l1t = jnp.log(1.0 + t)
    l1i = jnp.log(1.0 + 1.0 / t)
    lt = jnp.log(t)

    r1 = t <= -2.0
    r2 = t < -1.0
    r3 = t <= -0.5
    r4 = t < 0.0
    r5 = t <= 1.0

    y = jnp.where(
        r1,
        -1.0 / (1.0 + t),
        jnp.where(
            r2,
            -1.0 - t,
            jnp.where(r3, -(1.0 + t) / t, jnp.where(r4, -t / (1.0 + t), jnp.where(r5, t, 1.0 / t))),
        ),
    )
    s = jnp.where(r1, 1.0, jnp.where(r2, -1.0, jnp.where(r3, 1.0, jnp.where(r4, -1.0, jnp.where(r5, 1.0, -1.0)))))
    a = jnp.where(
        r1,
        -_PI3 + 0.5 * (lmt * lmt - l1i * l1i),
        jnp.where(
            r2,
            -_PI6 + lmt * (lmt + l1i),
            jnp.where(
                r3,
                -_PI6 + lmt * (-0.5 * lmt + l1t),
                jnp.where(r4, 0.5 * l1t * l1t, jnp.where(r5, 0.0, _PI6 + 0.5 * lt * lt)),
            ),
        ),
    )

    h = y + y - 1.0
    b0, b2 = clenshaw(_CHEBYSHEV, h)
    out = -(s * (b0 - h * b2) + a)
    out = jnp.where(x == 0.0, 0.0, out)
    return jnp.where(x == 1.0, _PI6, jnp.where(x == -1.0, -_PI2 / 12.0, out))


@jax.jit
def li2_complex(z: jax.Array) -> jax.Array:
    z = jnp.asarray(z, dtype=jnp.complex128)
    rz = jnp.real(z)
    iz = jnp.imag(z)
    nz = rz * rz + iz * iz

    # above the cut for rz > 1
    on_axis = lax.complex(li2_real(rz), jnp.where(rz > 1.0, -_PI * jnp.log(rz), 0.0))

    invert = jnp.where(rz <= 0.5, nz > 1.0, nz > 2.0 * rz)
    reflect = (rz > 0.5) & ~invert

    lmz = jnp.log(-z)
    lz = -jnp.log(z)
    cy = jnp.where(invert, -0.5 * (lmz * lmz), jnp.where(reflect, lz * jnp.log(1.0 - z), 0.0))
    cz = jnp.where(invert, -jnp.log(1.0 - 1.0 / z), jnp.where(reflect, lz, -cln1p(-z)))
    jsgn = jnp.where(invert | reflect, -1.0, 1.0)
    ipi12 = jnp.where(invert, -2.0, jnp.where(reflect, 2.0, 0.0))

    cz2 = cz * cz
    total = cz + cz2 * (_BERNOULLI[0] + cz * horner(_BERNOULLI[1:], cz2))
    out = jsgn * total + cy + ipi12 * _PI * _PI / 12.0

    return jnp.where(iz == 0.0, on_axis, jnp.where(nz < _EPS, z, out))


def li2(z: jax.Array) -> jax.Array:
    z = jnp.asarray(z)
    if jnp.iscomplexobj(z):
        return li2_complex(z)
    return li2_real(z)


__all__ = [
    "li2_real",
    "li2_complex",
    "li2",
]
