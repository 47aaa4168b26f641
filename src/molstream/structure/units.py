# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Conversion between the internal length unit (*bohr*, atomic units)
and *Angstrom*, the length unit used by most structure file formats.
"""

__name__ = "molstream.structure"
__author__ = "The molstream contributors"
__all__ = [
    "ANGSTROM_PER_BOHR",
    "BOHR_PER_ANGSTROM",
    "bohr_to_angstrom",
    "angstrom_to_bohr",
]

import numpy as np

# CODATA 2018
ANGSTROM_PER_BOHR = 0.529177210903
BOHR_PER_ANGSTROM = 1 / ANGSTROM_PER_BOHR


def bohr_to_angstrom(value):
    """
    Convert lengths or positions from *bohr* to *Angstrom*.

    Parameters
    ----------
    value : float or ndarray, dtype=float
        The value(s) in *bohr*.

    Returns
    -------
    value : float or ndarray, dtype=float
        The value(s) in *Angstrom*.
    """
    return np.asarray(value, dtype=np.float64) * ANGSTROM_PER_BOHR


def angstrom_to_bohr(value):
    """
    Convert lengths or positions from *Angstrom* to *bohr*.

    Parameters
    ----------
    value : float or ndarray, dtype=float
        The value(s) in *Angstrom*.

    Returns
    -------
    value : float or ndarray, dtype=float
        The value(s) in *bohr*.
    """
    return np.asarray(value, dtype=np.float64) * BOHR_PER_ANGSTROM
