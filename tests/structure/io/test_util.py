# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import numpy as np
import pytest
from molstream.structure.io.util import (
    number_of_integer_digits,
    parse_fixed_float,
    parse_fixed_int,
)


@pytest.mark.parametrize(
    "field, ref_value",
    [
        ("  1", 1),
        (" 12", 12),
        ("123", 123),
        ("  0", 0),
        ("1  ", None),
        (" 1 ", None),
        ("   ", None),
        ("", None),
        (" -1", None),
        ("  +", None),
        ("abc", None),
        (" 1a", None),
        ("\t 1", None),
    ],
)
def test_parse_fixed_int(field, ref_value):
    """
    Only right-justified non-negative integers that occupy the field
    up to its last character are accepted.
    """
    assert parse_fixed_int(field) == ref_value


@pytest.mark.parametrize(
    "field, ref_value",
    [
        ("    0.0000", 0.0),
        ("   -1.2500", -1.25),
        ("   12.5   ", 12.5),
        ("       +3.", 3.0),
        ("      .125", 0.125),
        ("    1.0e-2", 0.01),
        ("    1,2500", None),
        ("          ", None),
        ("       nan", None),
        ("       inf", None),
        ("     1_000", None),
        ("   1.0abc ", None),
        ("  - 1.0000", None),
    ],
)
def test_parse_fixed_float(field, ref_value):
    """
    Only plain decimal numbers with ``'.'`` as decimal separator are
    accepted.
    """
    assert parse_fixed_float(field) == ref_value


@pytest.mark.parametrize(
    "values, ref_digits",
    [
        ([], 0),
        ([0.5, 1.5], 1),
        ([-1.5, 2.0], 2),
        ([99999.9], 5),
        ([-9999.9, 10.0], 5),
        ([-99999.9], 6),
        ([123456.0], 6),
    ],
)
def test_number_of_integer_digits(values, ref_digits):
    assert number_of_integer_digits(np.array(values, dtype=float)) == ref_digits
