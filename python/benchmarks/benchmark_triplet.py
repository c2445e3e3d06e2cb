import argparse
import time
from typing import Any, Callable, Dict, List, Optional

import numpy as np
import scipy.sparse as sp

# ---------- Builders ----------


def build_dense(m: int, n: int, density: float, seed: int, dtype: np.dtype) -> np.ndarray:
    rs = np.random.RandomState(seed)
    data_rvs = lambda s: rs.standard_normal(s).astype(dtype)
    return sp.random(m, n, density=density, format="coo", random_state=rs, data_rvs=data_rvs).toarray()


# ---------- Timing helpers ----------


def time_op(fn: Callable[[], Any], warmup: int, repeat: int) -> List[float]:
    for _ in range(warmup):
        fn()
    times: List[float] = []
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def summarize(name: str, times: List[float], items: float) -> Optional[Dict[str, float]]:
    if not times:
        return None
    arr = np.array(times, dtype=np.float64)
    return {
        "name": name,
        "min_ms": float(arr.min() * 1e3),
        "median_ms": float(np.median(arr) * 1e3),
        "mean_ms": float(arr.mean() * 1e3),
        "mitems": float((items / arr.min()) / 1e6) if items > 0 else 0.0,
    }


# ---------- Ops per backend ----------


class Backend:
    SCIPY = "scipy"
    TRIPLA = "tripla"


def run_encode_scipy(M: np.ndarray) -> sp.coo_matrix:
    return sp.coo_matrix(M)


def run_encode_tripla(M: np.ndarray):
    from tripla import encode

    return encode(M)


def run_transpose_scipy(A: sp.coo_matrix) -> sp.coo_matrix:
    return A.transpose()


def run_transpose_tripla(T, sort: bool):
    from tripla import transpose

    return transpose(T, sort=sort)


def validate(T, A: sp.coo_matrix, what: str) -> None:
    if not (
        np.array_equal(T.row, A.row)
        and np.array_equal(T.col, A.col)
        and np.array_equal(T.data, A.data)
    ):
        raise AssertionError(f"Validation failed: tripla {what} vs scipy")


def main():
    p = argparse.ArgumentParser(description="Benchmark triplet encode/transpose against SciPy COO")
    p.add_argument("--m", type=int, default=2000)
    p.add_argument("--n", type=int, default=2000)
    p.add_argument("--density", type=float, default=0.01)
    p.add_argument("--dtype", choices=["float32", "float64"], default="float64")
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--warmup", type=int, default=2)
    p.add_argument("--repeat", type=int, default=10)
    p.add_argument(
        "--ops",
        type=str,
        default="encode,transpose,transpose_sorted",
        help="comma separated subset of encode,transpose,transpose_sorted",
    )
    p.add_argument("--no-scipy", action="store_true")
    p.add_argument("--validate", action="store_true")
    args = p.parse_args()

    dtype = np.float32 if args.dtype == "float32" else np.float64
    wanted = {s.strip() for s in args.ops.split(",") if s.strip()}

    M = build_dense(args.m, args.n, args.density, args.seed, dtype)
    A_scipy = run_encode_scipy(M)
    T = run_encode_tripla(M)
    nnz = T.nnz
    results: List[Optional[Dict[str, float]]] = []

    if "encode" in wanted:
        cells = float(args.m * args.n)
        if not args.no_scipy:
            times = time_op(lambda: run_encode_scipy(M), args.warmup, args.repeat)
            results.append(summarize(Backend.SCIPY + ":encode", times, cells))
        times = time_op(lambda: run_encode_tripla(M), args.warmup, args.repeat)
        results.append(summarize(Backend.TRIPLA + ":encode", times, cells))
        if args.validate:
            validate(T, A_scipy, "encode")

    if "transpose" in wanted:
        if not args.no_scipy:
            times = time_op(lambda: run_transpose_scipy(A_scipy), args.warmup, args.repeat)
            results.append(summarize(Backend.SCIPY + ":transpose", times, float(nnz)))
        times = time_op(lambda: run_transpose_tripla(T, False), args.warmup, args.repeat)
        results.append(summarize(Backend.TRIPLA + ":transpose", times, float(nnz)))
        if args.validate:
            # scipy's COO transpose is also a positional index swap
            validate(run_transpose_tripla(T, False), run_transpose_scipy(A_scipy), "transpose")

    if "transpose_sorted" in wanted:
        times = time_op(lambda: run_transpose_tripla(T, True), args.warmup, args.repeat)
        results.append(summarize(Backend.TRIPLA + ":transpose_sorted", times, float(nnz)))
        if args.validate:
            validate(run_transpose_tripla(T, True), sp.coo_matrix(M.T), "transpose_sorted")

    # ---- print summary ----
    print(
        f"Triplet Benchmarks: m={args.m} n={args.n} density={args.density} dtype={args.dtype} nnz={nnz}"
    )
    for r in results:
        if not r:
            continue
        print(
            f"{r['name']:>24}: min {r['min_ms']:.3f} ms | median {r['median_ms']:.3f} ms | mean {r['mean_ms']:.3f} ms | {r['mitems']:.2f} M items/s"
        )


if __name__ == "__main__":
    main()
