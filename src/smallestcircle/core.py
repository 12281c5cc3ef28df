from __future__ import annotations

import os
from typing import Sequence

import numpy as np
from joblib import Parallel, delayed

from .geometry import Circle, as_points, is_in_circle
from .solvers import make_circle_one_point

N_CPU = max(1, os.cpu_count() or 1)

SeedLike = int | np.random.SeedSequence | np.random.Generator | None


def make_circle(
    points: Sequence[Sequence[float]] | np.ndarray,
    *,
    rng: SeedLike = None,
    verbose: bool = False,
) -> Circle | None:
    """Return the smallest circle enclosing ``points``, or ``None`` when empty.

    The points are processed in a random order; whenever a point falls outside
    the current circle, the circle is rebuilt over the prefix seen so far with
    that point on its boundary. Expected running time is linear.
    """
    pts = as_points(points)
    n = pts.shape[0]
    if n == 0:
        return None
    shuffled = pts.copy()
    np.random.default_rng(rng).shuffle(shuffled)

    c: Circle | None = None
    n_anchor = 0
    for i, p in enumerate(shuffled.tolist()):
        if c is None or not is_in_circle(c, p):
            c = make_circle_one_point(shuffled[: i + 1], p)
            n_anchor += 1
    if verbose:
        print(f"Points: {n}, re-anchorings: {n_anchor}")
    return c


def _default_n_jobs() -> int:
    value = os.environ.get("SMALLESTCIRCLE_N_JOBS")
    if value is None:
        return N_CPU
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"SMALLESTCIRCLE_N_JOBS must be an integer, got {value!r}") from exc


def make_circle_trials(
    points: Sequence[Sequence[float]] | np.ndarray,
    n_trials: int = 4,
    *,
    n_jobs: int | None = None,
    seed: SeedLike = None,
    verbose: bool = False,
) -> Circle | None:
    """Run independent shuffles of :func:`make_circle` and keep the smallest result.

    ``seed`` takes the same values as the ``rng`` argument of :func:`make_circle`;
    a ``Generator`` is consumed once to seed the per-trial sequences.
    """
    if n_trials < 1:
        raise ValueError("n_trials must be at least 1")
    pts = as_points(points)
    if pts.shape[0] == 0:
        return None
    if n_jobs is None:
        n_jobs = _default_n_jobs()
    if isinstance(seed, np.random.SeedSequence):
        seq = seed
    elif isinstance(seed, np.random.Generator):
        seq = np.random.SeedSequence(int(seed.integers(2**63)))
    else:
        seq = np.random.SeedSequence(seed)
    circles = Parallel(n_jobs=min(n_jobs, n_trials), prefer="processes")(
        delayed(make_circle)(pts, rng=child) for child in seq.spawn(n_trials)
    )
    best = circles[0]
    for c in circles[1:]:
        if c.r < best.r:
            best = c
    if verbose:
        spread = max(c.r for c in circles) - best.r
        print(f"Trials: {n_trials}, radius spread: {spread:.3e}")
    return best


def minimum_enclosing_disk(points_sub: np.ndarray) -> tuple[np.ndarray, float]:
    """Return the centre and the squared radius of the smallest enclosing circle."""
    pts = as_points(points_sub)
    if pts.shape[0] == 0:
        raise ValueError("minimum_enclosing_disk expects at least one point")
    c = make_circle(pts)
    return np.array([c.x, c.y], dtype=np.float64), c.r * c.r
