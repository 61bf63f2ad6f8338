import math

import jax.numpy as jnp
import numpy as np

from polylogjax import trilog

from tests._test_checks import _check, _check_close

_Z3 = 1.202056903159594
_LN2 = math.log(2.0)


def test_special_values():
    eps = 1e-15
    _check_close(trilog.li3(0j), 0j, eps)
    _check_close(trilog.li3(1.0 + 0j), _Z3, eps)
    _check_close(trilog.li3(-1.0 + 0j), -0.75 * _Z3, eps)
    half = 7.0 / 8.0 * _Z3 - math.pi ** 2 / 12.0 * _LN2 + _LN2 ** 3 / 6.0
    _check_close(trilog.li3(0.5 + 0j), half, eps)


def test_real_axis_below_one_is_real():
    x = jnp.array([0.05, 0.3, 0.5, 0.8, 0.99])
    _check(bool(jnp.all(jnp.imag(trilog.li3(x + 0j)) == 0.0)))


def test_real_axis_above_one():
    x = jnp.array([1.5, 3.0, 20.0])
    out = trilog.li3(x + 0j)
    np.testing.assert_allclose(np.asarray(jnp.imag(out)), np.asarray(-jnp.pi * jnp.log(x) ** 2 / 2.0), rtol=1e-13)


def _inversion_rhs(z):
    # Li3(z) - Li3(1/z) = -pi^2/6 log(-z) - log(-z)^3/6
    lmz = jnp.log(-z)
    return -math.pi ** 2 / 6.0 * lmz - lmz ** 3 / 6.0


def test_inversion_identity():
    z = jnp.array([0.3 + 0.4j, -2.0 + 0.5j, 4.0 - 3.0j, 0.1 - 0.9j, 1.1 + 0.2j])
    _check_close(trilog.li3(z) - trilog.li3(1.0 / z), _inversion_rhs(z), 1e-14)


def test_large_argument():
    z = jnp.array([2e154 + 1e154j, -3e160 + 0j, 1e200j, -1e300 - 1e300j])
    out = trilog.li3(z)
    _check(bool(jnp.all(jnp.isfinite(out))))
    _check_close(out, _inversion_rhs(z), 1e-13)


def test_boundary_of_log_expansion():
    phi = jnp.array([0.2, 0.9, 1.7, 2.5, -1.1, -3.0])
    w = jnp.exp(1j * phi)
    inner = trilog.li3(jnp.exp((1.0 - 1e-12) * w))
    outer = trilog.li3(jnp.exp((1.0 + 1e-12) * w))
    _check(bool(jnp.all(jnp.abs(inner - outer) < 1e-10)))


def test_conjugation_symmetry():
    z = jnp.array([0.3 + 0.4j, -0.8 + 0.1j, 1.5 + 0.2j, -4.0 + 3.0j, 0.9 + 0.3j])
    _check_close(trilog.li3(jnp.conj(z)), jnp.conj(trilog.li3(z)), 1e-15)
