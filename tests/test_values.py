import jax.numpy as jnp
import pytest

from polylogjax import polylog

from tests._polylog_data import read_data_file
from tests._test_checks import _check, _check_close

_TOL = 1e-14


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
def test_reference_values(n):
    z, want = read_data_file(f"Li{n}.txt")
    _check(z.size > 0)
    got = polylog(n, jnp.asarray(z))
    _check_close(got, want, _TOL, f"Li{n}")


def test_real_dilog_reference_values():
    z, want = read_data_file("Li2.txt")
    on_axis = z.imag == 0.0
    got = polylog(2, jnp.asarray(z.real[on_axis]))
    _check(got.dtype == jnp.float64)
    _check_close(got, want.real[on_axis], _TOL, "Li2 real")
