from __future__ import annotations

import jax
from jax import lax
import jax.numpy as jnp

from .complex_log import cln, cln1p
from .series import horner

jax.config.update("jax_enable_x64", True)

_PI = 3.141592653589793
_PI2 = _PI * _PI
_Z2 = 1.644934066848226
_Z3 = 1.202056903159594

# zeta(1 - 2k) / (2k + 2)!, k = 1..7
_LOG_SERIES = (
    -3.472222222222222e-03, 1.157407407407407e-05,
    -9.841899722852104e-08, 1.148221634332745e-09,
    -1.581572499080916e-11, 2.419500979252515e-13,
    -3.982897776989488e-15,
)

# coefficients of Li3 in powers of -log(1 - z)
_LOG1M_SERIES = (
    1.0, -3.0 / 8.0, 17.0 / 216.0, -5.0 / 576.0,
    1.296296296296296e-04, 8.101851851851852e-05,
    -3.419357160853760e-06, -1.328656462585034e-06,
    8.660871756109851e-08, 2.526087595532040e-08,
    -2.144694468364065e-09, -5.140110622012979e-10,
    5.249582114600830e-11, 1.088775440663632e-11,
    -1.277939609449369e-12, -2.369824177308745e-13,
    3.104357887965462e-14, 5.261758629912506e-15,
    -7.538479549949265e-16, -1.186232257775229e-16,
)


@jax.jit
def li3(z: jax.Array) -> jax.Array:
    z = jnp.asarray(z, dtype=jnp.complex128)
    rz = jnp.real(z)
    iz = jnp.imag(z)
    pz = jnp.arctan2(iz, rz)
    lnz = jnp.log(jnp.abs(z))

    u = lax.complex(lnz, pz)
    u2 = u * u
    c0 = _Z3 + u * (_Z2 - u2 / 12.0)
    c1 = (1.5 - cln(-u)) / 2.0
    near_one = c0 + u2 * horner((c1,) + _LOG_SERIES, u2)

    inside = lnz <= 0.0
    lmz = lax.complex(lnz, jnp.where(pz > 0.0, pz - _PI, pz + _PI))
    rest = jnp.where(inside, 0.0, -lmz * (lmz * lmz + _PI2) / 6.0)
    v = jnp.where(inside, -cln1p(-z), -cln(1.0 - 1.0 / z))
    far = rest + v * horner(_LOG1M_SERIES, v)

    out = jnp.where(lnz * lnz + pz * pz < 1.0, near_one, far)
    real_axis = iz == 0.0
    out = jnp.where(real_axis & (rz == -1.0), -0.75 * _Z3, out)
    out = jnp.where(real_axis & (rz == 1.0), _Z3, out)
    return jnp.where(real_axis & (rz == 0.0), 0.0, out)


__all__ = ["li3"]
