from __future__ import annotations

import jax
from jax import lax
import jax.numpy as jnp

from .complex_log import cln, cln1p
from .series import horner

jax.config.update("jax_enable_x64", True)

_PI = 3.141592653589793
_PI2 = _PI * _PI
_PI4 = _PI2 * _PI2
_Z4 = 1.082323233711138
_Z5 = 1.036927755143370
_C2 = 0.6010284515797971
_C3 = 0.2741556778080377
_C5 = -1.0 / 240.0

_LOG_SERIES = (
    -1.157407407407407e-04, 2.066798941798942e-07,
    -1.093544413650234e-09, 8.698648744945041e-12,
    -8.689958786158883e-14, 1.008125408021881e-15,
    -1.301600580715519e-17,
)

_LOG1M_SERIES = (
    1.0, -15.0 / 32.0,
    1.395318930041152e-01, -2.863377700617284e-02,
    4.031741255144033e-03, -3.398501800411523e-04,
    4.544518462161767e-06, 2.391680804856901e-06,
    -1.276269260012275e-07, -3.162898430650593e-08,
    3.284811844533519e-09, 4.761371399566057e-10,
    -8.084689817190984e-11, -7.238764858773721e-12,
    1.943976011517397e-12, 1.025697840597724e-13,
    -4.618055100988483e-14, -1.153585719647058e-15,
    1.090354540133339e-15,
)


@jax.jit
def li5(z: jax.Array) -> jax.Array:
    z = jnp.asarray(z, dtype=jnp.complex128)
    rz = jnp.real(z)
    iz = jnp.imag(z)
    pz = jnp.arctan2(iz, rz)
    lnz = jnp.log(jnp.abs(z))

    u = lax.complex(lnz, pz)
    u2 = u * u
    c4 = (25.0 / 12.0 - cln(-u)) / 24.0
    near_one = _Z5 + u * _Z4 + u2 * (_C2 + u * _C3 + u2 * (c4 + u * _C5 + u2 * horner(_LOG_SERIES, u2)))

    inside = lnz <= 0.0
    lmz = lax.complex(lnz, jnp.where(pz > 0.0, pz - _PI, pz + _PI))
    lmz2 = lmz * lmz
    rest = jnp.where(inside, 0.0, -lmz * (7.0 / 360.0 * _PI4 + lmz2 * (_PI2 / 36.0 + lmz2 / 120.0)))
    v = jnp.where(inside, -cln1p(-z), -cln(1.0 - 1.0 / z))
    far = rest + v * horner(_LOG1M_SERIES, v)

    out = jnp.where(lnz * lnz + pz * pz < 1.0, near_one, far)
    real_axis = iz == 0.0
    out = jnp.where(real_axis & (rz == -1.0), -15.0 / 16.0 * _Z5, out)
    out = jnp.where(real_axis & (rz == 1.0), _Z5, out)
    return jnp.where(real_axis & (rz == 0.0), 0.0, out)


__all__ = ["li5"]
