"""Small demonstration of the smallest enclosing circle."""

from __future__ import annotations

import numpy as np

from smallestcircle import make_circle, make_circle_trials


def make_dataset(seed: int = 0) -> np.ndarray:
    rng = np.random.default_rng(seed)
    blobs = []
    centers = [(-4, -4), (0, 0), (5, 4)]
    for cx, cy in centers:
        blobs.append(rng.normal(loc=(cx, cy), scale=0.7, size=(80, 2)))
    return np.vstack(blobs)


def main() -> None:
    data = make_dataset()
    circle = make_circle(data, rng=0, verbose=True)
    print(f"Centre: ({circle.x:.6f}, {circle.y:.6f}), radius: {circle.r:.6f}")

    # Independent shuffles land on the same circle.
    best = make_circle_trials(data, n_trials=4, seed=0, verbose=True)
    print(f"Best of 4 trials: ({best.x:.6f}, {best.y:.6f}), radius: {best.r:.6f}")


if __name__ == "__main__":
    main()
