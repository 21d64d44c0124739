import logging
from collections import namedtuple

import numpy as np

from map_range.numeric import resolve_type, check_overflow_policy, is_integer_dtype, integer_step, trunc_div, \
    is_float_type, as_int, cast, ieee_div, is_finite

logger = logging.getLogger(__name__)


class Range(namedtuple('Range', ('start', 'end'))):
    """Half-open interval [start, end). Bounds may be descending."""
    __slots__ = ()

    @classmethod
    def of(cls, bounds):
        if isinstance(bounds, cls):
            return bounds
        if isinstance(bounds, range):
            return cls(bounds.start, bounds.stop)
        bounds = tuple(bounds)
        if len(bounds) != 2:
            raise ValueError("Range must have exactly two bounds!")
        return cls(*bounds)

    @property
    def width(self):
        return self.end - self.start


def map_range(value, source, target, overflow="widen"):
    """Linearly remap value from the source range onto the target range.

    result = (value - s0) * (t1 - t0) / (s1 - s0) + t0

    Integer types divide toward zero, floating-point types follow IEEE 754 and
    other real types use their own operators. Nothing is clamped: a value
    outside the source range lands proportionally outside the target range.

    Args:
        value: the number to remap
        source: (s0, s1) range on which value resides
        target: (t0, t1) range onto which it is projected
        overflow: "widen", "wrap" or "checked", only used by numpy fixed-width integers

    Raises:
        ZeroDivisionError: the source range is empty and the type is integral
        OverflowError: a fixed-width integer result (or, with "checked", any
            intermediate) does not fit the type
        TypeError: a float value or bound is mixed with a numpy integer type

    Examples
        0 == map_range(5, (0, 10), (-10, 10))
        5 == map_range(10, (0, 5), (-5, 0))
        0.75 == map_range(0.5, (-1.0, 1.0), (0.0, 1.0))

    """
    check_overflow_policy(overflow)
    s0, s1 = Range.of(source)
    t0, t1 = Range.of(target)
    dtype = resolve_type(value, s0, s1, t0, t1)
    return _map(dtype, overflow, value, s0, s1, t0, t1)


def _map(dtype, overflow, value, s0, s1, t0, t1):
    if dtype is int:
        return trunc_div((value - s0) * (t1 - t0), s1 - s0) + t0
    if dtype is float:
        value, s0, s1, t0, t1 = (float(x) for x in (value, s0, s1, t0, t1))
        return ieee_div((value - s0) * (t1 - t0), s1 - s0) + t0
    if dtype is None:
        return (value - s0) * (t1 - t0) / (s1 - s0) + t0
    if is_integer_dtype(dtype):
        return _map_fixed_width(dtype, overflow, value, s0, s1, t0, t1)
    return _map_float_dtype(dtype, value, s0, s1, t0, t1)


def _map_fixed_width(dtype, overflow, value, s0, s1, t0, t1):
    # Value and bounds must be integers representable in the type, whatever the policy
    value, s0, s1, t0, t1 = (int(cast(as_int(x), dtype)) for x in (value, s0, s1, t0, t1))

    def step(x):
        return integer_step(x, dtype, overflow)

    offset = step(value - s0)
    product = step(offset * step(t1 - t0))
    quotient = step(trunc_div(product, step(s1 - s0)))
    return cast(step(quotient + t0), dtype)


def _map_float_dtype(dtype, value, s0, s1, t0, t1):
    value, s0, s1, t0, t1 = (dtype.type(x) for x in (value, s0, s1, t0, t1))
    with np.errstate(all="ignore"):
        return (value - s0) * (t1 - t0) / (s1 - s0) + t0


def checked_map_range(value, source, target):
    """Checked version of map_range.

    Returns None instead of failing when the source range is empty, when any
    intermediate step leaves a fixed-width integer type, or when a
    floating-point result is not finite.

    Examples
        None == checked_map_range(np.uint32(10), (0, 5), (5, 2))
        8 == checked_map_range(np.uint32(10), (0, 5), (2, 5))

    """
    s0, s1 = Range.of(source)
    t0, t1 = Range.of(target)
    dtype = resolve_type(value, s0, s1, t0, t1)

    try:
        result = _map(dtype, "checked", value, s0, s1, t0, t1)
    except (OverflowError, ZeroDivisionError) as e:
        logger.debug("Checked mapping of {} from {} to {} failed: {}".format(value, source, target, e))
        return None

    if is_float_type(dtype) and not is_finite(result):
        logger.debug("Checked mapping of {} from {} to {} is not finite".format(value, source, target))
        return None
    return result
