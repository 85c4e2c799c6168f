"""Stability: one-pass vs naive running variance on offset data"""

import logging
from collections import defaultdict
from typing import Dict, List, Sequence
import numpy as np
import pandas as pd
import plotly.express as px

from online_stats import Accumulator

logger = logging.getLogger(__name__)


class NaiveStats:
    """Running variance from the sum of squares.

    Loses precision when the mean is large relative to the spread.
    """

    def __init__(self):
        self.n = 0
        self.sum = 0.0
        self.sum_sq = 0.0

    def update(self, x: float) -> None:
        self.n += 1
        self.sum += x
        self.sum_sq += x * x

    @property
    def var(self) -> float:
        if self.n > 1:
            return (self.sum_sq - self.sum ** 2 / self.n) / (self.n - 1)
        else:
            return float("nan")


def two_pass_variance(xs: Sequence[float]) -> float:
    """Classical two-pass sample variance."""
    if len(xs) < 2:
        return float("nan")
    return float(np.var(np.asarray(xs, dtype=np.float64), ddof=1))


def relative_error(estimate: float, reference: float) -> float:
    return abs(estimate - reference) / abs(reference)


def evaluate(
    offsets: Sequence[float], num_samples: int, spread: float, rng: np.random.Generator
) -> Dict[str, List[float]]:
    errors = defaultdict(list)
    for offset in offsets:
        xs = rng.normal(offset, spread, size=num_samples)
        welford = Accumulator()
        naive = NaiveStats()
        for x in xs:
            welford.add_value(x)
            naive.update(float(x))
        reference = two_pass_variance(xs)
        errors["welford"].append(relative_error(welford.variance, reference))
        errors["naive"].append(relative_error(naive.var, reference))
        logger.debug("offset=%g welford=%s naive=%s", offset, welford, naive.var)
    return dict(errors)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    num_trials = 10
    num_samples = 10000
    spread = 1.0
    offsets = [10.0 ** k for k in range(0, 11)]

    rng = np.random.default_rng()
    trials = defaultdict(list)
    for trial in range(num_trials):
        logger.info("trial %d/%d", trial + 1, num_trials)
        for name, errs in evaluate(offsets, num_samples, spread, rng).items():
            trials[name].append(errs)

    avgs = {name: np.mean(x, 0) for name, x in trials.items()}

    d = pd.DataFrame(avgs)
    d["offset"] = offsets
    d = d.melt(id_vars="offset", var_name="method", value_name="relative_error")
    logger.info("mean relative variance error:\n%s", d.to_string(index=False))
    fig = px.line(d, x="offset", y="relative_error", color="method",
                  log_x=True, log_y=True,
                  title=f"Relative variance error by mean offset (average of {num_trials} trials).")
    fig.show()
    fig.write_image("stability.png")
