import math

import jax.numpy as jnp
import numpy as np

from polylogjax import pentalog

from tests._test_checks import _check, _check_close

_Z5 = 1.036927755143370


def test_special_values():
    eps = 1e-15
    _check_close(pentalog.li5(0j), 0j, eps)
    _check_close(pentalog.li5(1.0 + 0j), _Z5, eps)
    _check_close(pentalog.li5(-1.0 + 0j), -15.0 / 16.0 * _Z5, eps)
    _check_close(pentalog.li5(0.5 + 0j), 0.5084005792422687, eps)


def _inversion_rhs(z):
    # Li5(z) - Li5(1/z) = -7 pi^4/360 log(-z) - pi^2/36 log(-z)^3 - log(-z)^5/120
    lmz = jnp.log(-z)
    pi2 = math.pi ** 2
    return -7.0 * pi2 * pi2 / 360.0 * lmz - pi2 / 36.0 * lmz ** 3 - lmz ** 5 / 120.0


def test_inversion_identity():
    z = jnp.array([0.3 + 0.4j, -2.0 + 0.5j, 4.0 - 3.0j, 0.1 - 0.9j, -7.0 - 0.1j])
    _check_close(pentalog.li5(z) - pentalog.li5(1.0 / z), _inversion_rhs(z), 1e-14)


def test_large_argument():
    z = jnp.array([2e154 + 1e154j, -3e160 + 0j, 1e200j])
    out = pentalog.li5(z)
    _check(bool(jnp.all(jnp.isfinite(out))))
    _check_close(out, _inversion_rhs(z), 1e-13)


def test_real_axis_above_one():
    x = jnp.array([1.5, 3.0, 20.0])
    out = pentalog.li5(x + 0j)
    np.testing.assert_allclose(np.asarray(jnp.imag(out)), np.asarray(-jnp.pi * jnp.log(x) ** 4 / 24.0), rtol=1e-13)


def test_boundary_of_log_expansion():
    phi = jnp.linspace(-3.1, 3.1, 9)
    w = jnp.exp(1j * phi)
    inner = pentalog.li5(jnp.exp((1.0 - 1e-12) * w))
    outer = pentalog.li5(jnp.exp((1.0 + 1e-12) * w))
    _check(bool(jnp.all(jnp.abs(inner - outer) < 1e-10)))


def test_small_argument():
    z = jnp.array([1e-3 + 2e-3j, -4e-4 + 1e-4j])
    want = sum(z ** k / float(k) ** 5 for k in range(1, 7))
    _check_close(pentalog.li5(z), want, 1e-14)


def test_conjugation_symmetry():
    z = jnp.array([0.3 + 0.4j, -0.8 + 0.1j, 1.5 + 0.2j, -4.0 + 3.0j, 0.9 + 0.3j, -0.4 - 2.5j])
    _check_close(pentalog.li5(jnp.conj(z)), jnp.conj(pentalog.li5(z)), 1e-15)
