from __future__ import annotations

import argparse

import jax.numpy as jnp
import numpy as np

import mpmath as mp

from polylogjax import ORDERS, polylog


def _sample(rng: np.random.Generator, n: int, radius: float) -> np.ndarray:
    r = np.exp(rng.uniform(-radius, radius, size=n))
    t = rng.uniform(-np.pi, np.pi, size=n)
    return r * np.exp(1j * t)


def _mp_eval(order: int, zs: np.ndarray) -> np.ndarray:
    return np.array([complex(mp.polylog(order, mp.mpc(z.real, z.imag))) for z in zs], dtype=np.complex128)


def _errors(got: np.ndarray, want: np.ndarray) -> np.ndarray:
    return np.abs(got - want) / (1.0 + np.abs(want))


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--samples", type=int, default=2000)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--dps", type=int, default=40)
    parser.add_argument("--radius", type=float, default=4.0)
    parser.add_argument("--orders", type=int, nargs="+", default=list(ORDERS))
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)
    mp.mp.dps = args.dps
    zs = _sample(rng, args.samples, args.radius)

    print(f"samples={args.samples} dps={args.dps} |log|z|| <= {args.radius}")
    print("relative error |got - want| / (1 + |want|):")
    for order in args.orders:
        got = np.asarray(polylog(order, jnp.asarray(zs)))
        err = _errors(got, _mp_eval(order, zs))
        worst = int(np.argmax(err))
        print(f"Li{order}  max={err.max():.3e} mean={err.mean():.3e} worst_z={zs[worst]:.17g}")

    xs = np.linspace(-np.exp(args.radius), 1.0, args.samples)
    got = np.asarray(polylog(2, jnp.asarray(xs)))
    want = np.array([float(mp.polylog(2, mp.mpf(x))) for x in xs])
    err = np.abs(got - want) / (1.0 + np.abs(want))
    print(f"Li2 real max={err.max():.3e} mean={err.mean():.3e}")


if __name__ == "__main__":
    main()
