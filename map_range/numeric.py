import numbers
import operator

import numpy as np


OVERFLOW_POLICIES = ("widen", "wrap", "checked")


def check_overflow_policy(overflow):
    if overflow not in OVERFLOW_POLICIES:
        raise ValueError("Unknown overflow policy!")
    return overflow


##########################################
### Resolve the numeric type of a call ###
##########################################
def resolve_type(*scalars):
    """Numeric type shared by the scalars of one mapping.

    Returns a numpy dtype when any scalar is a numpy scalar, ``int`` when all
    of them are integral, ``float`` when any of them is a float, and ``None``
    for other real types, which are mapped with their own operators.
    """
    np_dtypes = [s.dtype for s in scalars if isinstance(s, np.generic)]
    if np_dtypes:
        dtype = np.result_type(*np_dtypes)
        if not (is_integer_dtype(dtype) or np.issubdtype(dtype, np.floating)):
            raise TypeError("Unsupported numeric type {}!".format(dtype))
        return dtype
    if all(isinstance(s, numbers.Integral) for s in scalars):
        return int
    if any(isinstance(s, float) for s in scalars):
        return float
    return None


def to_python(x):
    return x.item() if isinstance(x, np.generic) else x


def is_integer_dtype(dtype):
    return isinstance(dtype, np.dtype) and np.issubdtype(dtype, np.integer)


def is_float_type(dtype):
    return dtype is float or (isinstance(dtype, np.dtype) and np.issubdtype(dtype, np.floating))


##########################
### Integer arithmetic ###
##########################
def trunc_div(a, b):
    """Integer division rounding toward zero.

    Examples
        3 == trunc_div(7, 2)
        -3 == trunc_div(-7, 2)

    """
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def fits(x, dtype):
    info = np.iinfo(dtype)
    return info.min <= x <= info.max


def cast(x, dtype):
    if not fits(x, dtype):
        raise OverflowError("{} does not fit {}".format(x, dtype))
    return dtype.type(x)


def wrap(x, dtype):
    # two's complement wraparound
    info = np.iinfo(dtype)
    return (x - info.min) % (1 << info.bits) + info.min


def as_int(x):
    # floats are not silently truncated into an integer range
    return operator.index(x)


def integer_step(x, dtype, overflow):
    if overflow == "wrap":
        return wrap(x, dtype)
    if overflow == "checked" and not fits(x, dtype):
        raise OverflowError("{} does not fit {}".format(x, dtype))
    return x


#################################
### Floating-point arithmetic ###
#################################
def ieee_div(a, b):
    """Float division with IEEE 754 semantics: x/0 is +-inf and 0/0 is nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(a) / np.float64(b))


def is_finite(x):
    return bool(np.isfinite(x))
