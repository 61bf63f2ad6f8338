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
_Z3 = 1.202056903159594
_Z4 = 1.082323233711138
_C2 = 0.8224670334241132
_C4 = -1.0 / 48.0

_LOG_SERIES = (
    -6.944444444444444e-04, 1.653439153439153e-06,
    -1.093544413650234e-08, 1.043837849393405e-10,
    -1.216594230062244e-12, 1.613000652835010e-14,
    -2.342881045287934e-16,
)

_LOG1M_SERIES = (
    1.0, -7.0 / 16.0,
    1.165123456790123e-01, -1.982060185185185e-02,
    1.927932098765432e-03, -3.105709876543209e-05,
    -1.562400911485783e-05, 8.485123546773206e-07,
    2.290961660318971e-07, -2.183261421852691e-08,
    -3.882824879172015e-09, 5.446292103220332e-10,
    6.960805210682725e-11, -1.337573768644521e-11,
    -1.278485268526657e-12, 3.260562858024892e-13,
    2.364757116861825e-14, -7.923135122031161e-15,
)


@jax.jit
def li4(z: jax.Array) -> jax.Array:
    z = jnp.asarray(z, dtype=jnp.complex128)
    rz = jnp.real(z)
    iz = jnp.imag(z)
    pz = jnp.arctan2(iz, rz)
    lnz = jnp.log(jnp.abs(z))

    # |log(z)| < 1
    u = lax.complex(lnz, pz)
    u2 = u * u
    c3 = (11.0 / 6.0 - cln(-u)) / 6.0
    near_one = _Z4 + u2 * (_C2 + u2 * _C4) + u * horner((_Z3, c3) + _LOG_SERIES, u2)

    inside = lnz <= 0.0
    lmz = lax.complex(lnz, jnp.where(pz > 0.0, pz - _PI, pz + _PI))
    lmz2 = lmz * lmz
    rest = jnp.where(inside, 0.0, 1.0 / 360.0 * (-7.0 * _PI4 + lmz2 * (-30.0 * _PI2 - 15.0 * lmz2)))
    v = jnp.where(inside, -cln1p(-z), -cln(1.0 - 1.0 / z))
    sgn = jnp.where(inside, 1.0, -1.0)
    far = rest + sgn * (v * horner(_LOG1M_SERIES, v))

    out = jnp.where(lnz * lnz + pz * pz < 1.0, near_one, far)
    real_axis = iz == 0.0
    out = jnp.where(real_axis & (rz == -1.0), -7.0 / 8.0 * _Z4, out)
    out = jnp.where(real_axis & (rz == 1.0), _Z4, out)
    return jnp.where(real_axis & (rz == 0.0), 0.0, out)


__all__ = ["li4"]
