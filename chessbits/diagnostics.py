"""Run-time debug statistics, engine identification and path helpers."""

from __future__ import annotations

import datetime
import math
import os
import threading
from dataclasses import dataclass, field

VERSION = "dev"
ENGINE_NAME = "chessbits"
MAX_DEBUG_SLOTS = 32


def _fmt(x: float) -> str:
    """Format a float the way a default-configured text stream would."""
    return format(x, ".6g")


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def _div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a)
    return a / b


@dataclass
class _Hit:
    total: int = 0
    hits: int = 0


@dataclass
class _Mean:
    total: int = 0
    sum: int = 0


@dataclass
class _Stdev:
    total: int = 0
    sum: int = 0
    sum_sq: int = 0


@dataclass
class _Correl:
    total: int = 0
    sum1: int = 0
    sum1_sq: int = 0
    sum2: int = 0
    sum2_sq: int = 0
    sum_prod: int = 0


@dataclass
class DebugStats:
    """Thread-safe collectors for hit rates, means, deviations and correlations."""

    slots: int = MAX_DEBUG_SLOTS
    _hit: list = field(init=False, repr=False)
    _mean: list = field(init=False, repr=False)
    _stdev: list = field(init=False, repr=False)
    _correl: list = field(init=False, repr=False)
    _lock: threading.Lock = field(init=False, repr=False, default_factory=threading.Lock)

    def __post_init__(self) -> None:
        self._hit = [_Hit() for _ in range(self.slots)]
        self._mean = [_Mean() for _ in range(self.slots)]
        self._stdev = [_Stdev() for _ in range(self.slots)]
        self._correl = [_Correl() for _ in range(self.slots)]

    def _check(self, slot: int) -> None:
        if not 0 <= slot < self.slots:
            raise IndexError(f"debug slot {slot} out of range 0..{self.slots - 1}")

    def hit_on(self, cond: bool, slot: int = 0) -> None:
        """Count one event in the slot, and one hit if cond is true."""
        self._check(slot)
        with self._lock:
            entry = self._hit[slot]
            entry.total += 1
            if cond:
                entry.hits += 1

    def mean_of(self, value: int, slot: int = 0) -> None:
        """Add a value to the running mean of the slot."""
        self._check(slot)
        with self._lock:
            entry = self._mean[slot]
            entry.total += 1
            entry.sum += value

    def stdev_of(self, value: int, slot: int = 0) -> None:
        """Add a value to the standard deviation of the slot."""
        self._check(slot)
        with self._lock:
            entry = self._stdev[slot]
            entry.total += 1
            entry.sum += value
            entry.sum_sq += value * value

    def correl_of(self, value1: int, value2: int, slot: int = 0) -> None:
        """Add a pair of values to the correlation of the slot."""
        self._check(slot)
        with self._lock:
            entry = self._correl[slot]
            entry.total += 1
            entry.sum1 += value1
            entry.sum1_sq += value1 * value1
            entry.sum2 += value2
            entry.sum2_sq += value2 * value2
            entry.sum_prod += value1 * value2

    def report(self) -> str:
        """Return one line per used slot, hits first, then means, stdevs, correlations."""
        lines: list[str] = []
        with self._lock:
            for i, h in enumerate(self._hit):
                if h.total:
                    rate = 100.0 * h.hits / h.total
                    lines.append(
                        f"Hit #{i}: Total {h.total} Hits {h.hits} Hit Rate (%) {_fmt(rate)}"
                    )
            for i, m in enumerate(self._mean):
                if m.total:
                    lines.append(f"Mean #{i}: Total {m.total} Mean {_fmt(m.sum / m.total)}")
            for i, s in enumerate(self._stdev):
                if s.total:
                    n = s.total
                    r = _sqrt(s.sum_sq / n - (s.sum / n) ** 2)
                    lines.append(f"Stdev #{i}: Total {n} Stdev {_fmt(r)}")
            for i, c in enumerate(self._correl):
                if c.total:
                    n = c.total
                    e1, e2 = c.sum1 / n, c.sum2 / n
                    num = c.sum_prod / n - e1 * e2
                    den = _sqrt(c.sum1_sq / n - e1 * e1) * _sqrt(c.sum2_sq / n - e2 * e2)
                    lines.append(f"Correl. #{i}: Total {n} Coefficient {_fmt(_div(num, den))}")
        return "".join(line + "\n" for line in lines)


def engine_info(to_uci: bool = False) -> str:
    """Return the engine's name and version, with the author line in UCI form if asked."""
    text = f"{ENGINE_NAME} {VERSION}"
    if VERSION == "dev":
        text += "-" + datetime.date.today().strftime("%Y%m%d") + "-nogit"
    text += "\nid author " if to_uci else " by "
    return text + f"the {ENGINE_NAME} developers"


def binary_directory(argv0: str, working_directory: str) -> str:
    """Return the directory of the executable named by argv0, ending in a separator."""
    sep = os.sep
    pos = max(argv0.rfind("\\"), argv0.rfind("/"))
    directory = "." + sep if pos < 0 else argv0[: pos + 1]
    if directory.startswith("." + sep):
        directory = working_directory + directory[1:]
    return directory