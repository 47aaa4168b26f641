# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Common functions for fixed-column text formats.

All numeric parsing and formatting is independent of the process
locale: Only ``'.'`` is accepted as decimal separator.
"""

__name__ = "molstream.structure.io"
__author__ = "The molstream contributors"
__all__ = [
    "number_of_integer_digits",
    "parse_fixed_int",
    "parse_fixed_float",
]

import re
import numpy as np

# Leading spaces are tolerated, trailing characters are not
_FIXED_INT_PATTERN = re.compile(r"^ *[0-9]+$")
_FIXED_FLOAT_PATTERN = re.compile(
    r"^ *[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)? *$"
)


def number_of_integer_digits(values):
    """
    Get the maximum number of characters needed to represent the
    pre-decimal positions of the given numeric values.

    Parameters
    ----------
    values : ndarray, dtype=float
        The values to be checked.

    Returns
    -------
    n_digits : int
        The maximum number of characters needed to represent the
        pre-decimal positions of the given numeric values.
        This includes the minus sign of negative values.
    """
    if len(values) == 0:
        return 0
    values = np.trunc(values).astype(int, copy=False)
    n_digits = 0
    n_digits = max(n_digits, len(str(np.min(values))))
    n_digits = max(n_digits, len(str(np.max(values))))
    return n_digits


def parse_fixed_int(field):
    """
    Parse a fixed-width field containing a non-negative integer.

    The integer must occupy the field until its last character,
    only leading spaces are allowed.

    Parameters
    ----------
    field : str
        The field, cut out of a line.

    Returns
    -------
    value : int or None
        The parsed integer, or ``None`` if the field is not a valid
        right-justified non-negative integer.

    Examples
    --------

    >>> print(parse_fixed_int("  7"))
    7
    >>> print(parse_fixed_int("7  "))
    None
    """
    if _FIXED_INT_PATTERN.match(field) is None:
        return None
    return int(field)


def parse_fixed_float(field):
    """
    Parse a fixed-width field containing a decimal number.

    Parameters
    ----------
    field : str
        The field, cut out of a line.
        Surrounding spaces are ignored.

    Returns
    -------
    value : float or None
        The parsed number, or ``None`` if the field is not a valid
        decimal number.

    Examples
    --------

    >>> print(parse_fixed_float("   -1.2500"))
    -1.25
    >>> print(parse_fixed_float("   -1,2500"))
    None
    """
    if _FIXED_FLOAT_PATTERN.match(field) is None:
        return None
    return float(field)
