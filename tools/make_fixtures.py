from __future__ import annotations

import argparse
from pathlib import Path

import mpmath as mp

from polylogjax import ORDERS

_DEFAULT_OUT = Path(__file__).resolve().parents[1] / "tests" / "data"


def _read_points(path: Path) -> list[tuple[float, float]]:
    points = []
    for line in path.read_text(encoding="ascii").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        re_s, im_s = line.split()
        points.append((float(re_s), float(im_s)))
    return points


def _fmt(x: mp.mpf) -> str:
    v = float(x)
    return repr(v) if v != 0.0 else "0.0"


def _li(order: int, re: float, im: float) -> mp.mpc:
    # real arguments beyond the branch point are continued from above the cut
    if im == 0.0 and re > 1.0:
        lx = mp.log(re)
        val = mp.polylog(order, mp.mpf(re))
        return mp.mpc(mp.re(val), -mp.pi * lx ** (order - 1) / mp.factorial(order - 1))
    return mp.polylog(order, mp.mpc(re, im))


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("points", type=str)
    parser.add_argument("--out-dir", type=str, default=str(_DEFAULT_OUT))
    parser.add_argument("--dps", type=int, default=45)
    parser.add_argument("--orders", type=int, nargs="+", default=list(ORDERS))
    args = parser.parse_args()

    mp.mp.dps = args.dps
    points = _read_points(Path(args.points))
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    for order in args.orders:
        lines = [f"# Li{order}(z) at {args.dps} digits: re(z) im(z) re(Li) im(Li)"]
        for re, im in points:
            val = _li(order, re, im)
            lines.append(f"{re!r} {im!r} {_fmt(mp.re(val))} {_fmt(mp.im(val))}")
        path = out_dir / f"Li{order}.txt"
        path.write_text("\n".join(lines) + "\n", encoding="ascii")
        print(f"wrote {len(points)} points to {path}")


if __name__ == "__main__":
    main()
