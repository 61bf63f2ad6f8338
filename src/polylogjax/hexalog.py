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
_PI6 = _PI4 * _PI2
_Z5 = 1.036927755143370
_Z6 = 1.017343061984449
_C2 = 0.5411616168555691
_C3 = 0.2003428171932657
_C4 = 0.06853891945200943
_C6 = -1.0 / 1440.0

_LOG_SERIES = (
    -1.653439153439153e-05, 2.296443268665491e-08,
    -9.941312851365762e-11, 6.691268265342339e-13,
    -5.793305857439255e-15, 5.930149458952243e-17,
    -6.850529372186941e-19,
)

_LOG1M_SERIES = (
    1.0, -31.0 / 64.0,
    1.524134087791495e-01, -3.436555587705761e-02,
    5.717479723936900e-03, -6.818045374657064e-04,
    4.996036194873450e-05, -4.916605119603905e-07,
    -3.063297516130216e-07, 1.441459927084909e-08,
    3.727243823092410e-09, -3.730086734548761e-10,
    -5.124652681608583e-11, 9.054193095663668e-12,
    6.738188261551252e-13, -2.121583115030314e-13,
    -6.840881171901170e-15, 4.869117846200558e-15,
    -4.843987849987251e-18, -1.102710484910749e-16,
)


@jax.jit
def li6(z: jax.Array) -> jax.Array:
    z = jnp.asarray(z, dtype=jnp.complex128)
    rz = jnp.real(z)
    iz = jnp.imag(z)
    pz = jnp.arctan2(iz, rz)
    lnz = jnp.log(jnp.abs(z))

    u = lax.complex(lnz, pz)
    u2 = u * u
    c5 = (137.0 / 60.0 - cln(-u)) / 120.0
    near_one = _Z6 + u * _Z5 + u2 * (
        _C2 + u * _C3 + u2 * (_C4 + u * c5 + u2 * (_C6 + u * horner(_LOG_SERIES, u2)))
    )

    inside = lnz <= 0.0
    lmz = lax.complex(lnz, jnp.where(pz > 0.0, pz - _PI, pz + _PI))
    lmz2 = lmz * lmz
    rest = jnp.where(
        inside,
        0.0,
        -31.0 / 15120.0 * _PI6 + lmz2 * (-7.0 / 720.0 * _PI4 + lmz2 * (-_PI2 / 144.0 - lmz2 / 720.0)),
    )
    v = jnp.where(inside, -cln1p(-z), -cln(1.0 - 1.0 / z))
    sgn = jnp.where(inside, 1.0, -1.0)
    far = rest + sgn * (v * horner(_LOG1M_SERIES, v))

    out = jnp.where(lnz * lnz + pz * pz < 1.0, near_one, far)
    real_axis = iz == 0.0
    out = jnp.where(real_axis & (rz == -1.0), -31.0 / 32.0 * _Z6, out)
    out = jnp.where(real_axis & (rz == 1.0), _Z6, out)
    return jnp.where(real_axis & (rz == 0.0), 0.0, out)


__all__ = ["li6"]
