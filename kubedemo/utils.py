import math
import random
import re
import time
from datetime import datetime, timezone
from typing import Optional

DEFAULT_BURN_MS = 100
MIN_BURN_MS = 0
MAX_BURN_MS = 10_000

_LEADING_INT = re.compile(r"\s*([+-]?)0*([0-9]+)")
# Digit runs longer than this are past any clamp bound.
_MAX_DIGITS = len(str(MAX_BURN_MS))


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse the leading integer of ``value``.

    Surrounding whitespace and a sign are accepted, trailing characters are
    ignored (``"250ms"`` gives 250, ``"3.7"`` gives 3). Only ASCII digits count.
    Returns ``None`` when there are no leading digits. Values too long to be
    a burn duration saturate to ``MAX_BURN_MS`` with their sign.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    sign, digits = match.groups()
    if len(digits) > _MAX_DIGITS:
        number = MAX_BURN_MS
    else:
        number = int(digits)
    return -number if sign == "-" else number


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def burn_duration(raw: Optional[str]) -> int:
    ms = parse_int(raw)
    if ms is None:
        ms = DEFAULT_BURN_MS
    return clamp(ms, MIN_BURN_MS, MAX_BURN_MS)


def burn_cpu(ms: int) -> float:
    """Spin on the calling thread for ``ms`` milliseconds.

    The loop keeps the CPU busy instead of sleeping. The accumulated value is
    returned so the work is observable.
    """
    acc = 0.0
    deadline = time.perf_counter() + ms / 1000
    while time.perf_counter() < deadline:
        acc += math.sqrt(random.random())
    return acc
