## running mean & variance

import numpy as np


class Accumulator:
    """Running count, mean, sample variance and standard deviation.

    Uses Welford's one-pass update, which avoids the cancellation error of
    the naive sum-of-squares formula. Observations are not stored.

    Welford
    Note on a Method for Calculating Corrected Sums of Squares and Products
    https://en.wikipedia.org/wiki/Algorithms_for_calculating_variance#Welford's_online_algorithm

    Undefined results are NaN, never exceptions.
    """

    def __init__(self):
        self._n = 0
        self._mean = 0.0
        self._m2 = 0.0

    def add_value(self, x: float) -> None:
        """Update stats for new observation."""
        x = _as_float(x)
        self._n += 1
        delta = x - self._mean
        self._mean += delta / self._n
        self._m2 += (self._n - 1) / self._n * delta * delta

    @property
    def count(self) -> int:
        return self._n

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def m2(self) -> float:
        """Sum of squared deviations from the mean, i.e. variance * (n - 1)."""
        return self._m2

    @property
    def variance(self) -> float:
        if self._n > 1:
            return self._m2 / (self._n - 1)
        else:
            return float("nan")

    @property
    def stddev(self) -> float:
        return self.variance ** 0.5

    def zscore(self, x: float) -> float:
        """Number of standard deviations x lies from the mean."""
        return _divide(_as_float(x) - self._mean, self.stddev)

    @staticmethod
    def percent_difference(x: float, y: float) -> float:
        """Difference relative to the larger of the two values."""
        x, y = _as_float(x), _as_float(y)
        if x > y:
            return _divide(x - y, x)
        return _divide(y - x, y)

    def __str__(self):
        return f"n = {self._n}, mean = {self._mean}, stddev = {self.stddev}"

    def __repr__(self):
        return f"<Accumulator n={self._n} mean={self._mean} std={self.stddev}>"


def _as_float(x) -> float:
    """float(x), with ints beyond the float64 range mapped to +-inf."""
    try:
        return float(x)
    except OverflowError:
        return float("inf") if x > 0 else float("-inf")


def _divide(num: float, den: float) -> float:
    """IEEE 754 division: x/0 is +-inf, 0/0 is nan."""
    with np.errstate(all="ignore"):
        return float(np.float64(num) / np.float64(den))
