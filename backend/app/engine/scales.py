"""
Linear scales and "nice" tick generation.

Ticks are spaced at 1, 2 or 5 times a power of ten, picked so that roughly
`count` ticks cover [start, stop]. The same step drives domain niceness,
bin thresholds and axis ticks, so all three line up on identical values.

Ticks below 1 are produced as (integer / power of ten) rather than
(integer * step) to avoid values like 0.30000000000000004.
"""

import math
from typing import Sequence

# Error thresholds for switching to the next coarser step factor
_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def _tick_spec(start: float, stop: float, count: float) -> tuple[int, int, float]:
    """Return (i1, i2, inc); a negative inc means ticks are i / -inc."""
    if not count > 0:
        return 0, -1, math.nan
    step = (stop - start) / count
    if not math.isfinite(step) or step <= 0:
        return 0, -1, math.nan

    power = math.floor(math.log10(step))
    error = step / 10.0 ** power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1

    if power < 0:
        inc = 10.0 ** -power / factor
        i1 = _round_half_up(start * inc)
        i2 = _round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = 10.0 ** power * factor
        i1 = _round_half_up(start / inc)
        i2 = _round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1

    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return i1, i2, inc


def tick_increment(start: float, stop: float, count: float) -> float:
    """
    Step between nice ticks for start <= stop.

    Positive results are the step itself; negative results are the
    negated reciprocal of a sub-unit step (-10 means 0.1). NaN when no
    step exists (empty or degenerate interval).
    """
    return _tick_spec(float(start), float(stop), float(count))[2]


def tick_step(start: float, stop: float, count: float) -> float:
    """Signed step between nice ticks, as a plain number."""
    start, stop = float(start), float(stop)
    reverse = stop < start
    inc = tick_increment(stop, start, count) if reverse else tick_increment(start, stop, count)
    step = 1.0 / -inc if inc < 0 else inc
    return -step if reverse else step


def ticks(start: float, stop: float, count: float) -> list[float]:
    """Nice round values spanning [start, stop], about `count` of them."""
    start, stop, count = float(start), float(stop), float(count)
    if not count > 0:
        return []
    if start == stop:
        return [start]

    reverse = stop < start
    if reverse:
        i1, i2, inc = _tick_spec(stop, start, count)
    else:
        i1, i2, inc = _tick_spec(start, stop, count)
    if not i2 >= i1:
        return []

    n = i2 - i1 + 1
    if inc < 0:
        values = [(i1 + i) / -inc for i in range(n)]
    else:
        values = [(i1 + i) * inc for i in range(n)]
    if reverse:
        values.reverse()
    return values


def _precision_fixed(step: float) -> int:
    """Decimal places needed to tell ticks `step` apart."""
    step = abs(step)
    if step == 0 or not math.isfinite(step):
        return 0
    return max(0, -math.floor(math.log10(step)))


class LinearScale:
    """Continuous linear map from a two-value domain onto a two-value range."""

    def __init__(
        self,
        domain: Sequence[float] = (0.0, 1.0),
        range: Sequence[float] = (0.0, 1.0),
    ):
        self.domain = [float(domain[0]), float(domain[1])]
        self.range = [float(range[0]), float(range[1])]

    def __call__(self, x: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        span = d1 - d0
        # A collapsed domain maps everything to the middle of the range
        t = (float(x) - d0) / span if span else 0.5
        return r0 * (1 - t) + r1 * t

    def invert(self, y: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        span = r1 - r0
        t = (float(y) - r0) / span if span else 0.5
        return d0 * (1 - t) + d1 * t

    def nice(self, count: int = 10) -> "LinearScale":
        """
        Extend the domain so both ends fall on round tick values.

        Re-derives the step from the widened domain until it stops
        changing (at most 10 passes). A domain with no usable step
        (e.g. min == max) is left alone.
        """
        d0, d1 = self.domain
        reverse = d1 < d0
        start, stop = (d1, d0) if reverse else (d0, d1)

        prestep = None
        for _ in range(10):
            step = tick_increment(start, stop, count)
            if step == prestep:
                self.domain = [stop, start] if reverse else [start, stop]
                return self
            elif step > 0:
                start = math.floor(start / step) * step
                stop = math.ceil(stop / step) * step
            elif step < 0:
                start = math.ceil(start * step) / step
                stop = math.floor(stop * step) / step
            else:
                break
            prestep = step
        return self

    def ticks(self, count: int = 10) -> list[float]:
        return ticks(self.domain[0], self.domain[1], count)

    def tick_format(self, count: int = 10):
        """Formatter for this scale's ticks: fixed precision, comma grouping."""
        step = tick_step(self.domain[0], self.domain[1], count)
        # No step on a collapsed domain: print the value's own digits
        spec = f",.{_precision_fixed(step)}f" if math.isfinite(step) else ",.12g"

        def fmt(value: float) -> str:
            text = f"{value:{spec}}"
            if text.startswith("-"):
                # Drop the sign from negative zero, use a true minus otherwise
                if float(value) == 0 or all(c in "-0.," for c in text):
                    return text[1:]
                return "−" + text[1:]
            return text

        return fmt

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range})"
