# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Discretization of continuous bond orders into the bond types
representable in *MDL* connection tables.
"""

__name__ = "molstream.structure.io.mol"
__author__ = "The molstream contributors"
__all__ = [
    "MIN_BONDED_ORDER",
    "MAX_BONDED_ORDER",
    "is_bonded",
    "discretize_bond_order",
    "is_emitted",
    "count_valences",
    "emitted_bonds",
]

import math
import numpy as np

# Half-open window [MIN_BONDED_ORDER, MAX_BONDED_ORDER)
# of bond orders that count towards the valence of an atom
MIN_BONDED_ORDER = 0.5
MAX_BONDED_ORDER = 3.5
# Bond types 1, 2 and 3 (single, double, triple) can be written
_EMITTED_BOND_TYPES = (1, 2, 3)


def is_bonded(order):
    """
    Check whether a bond order counts as bond for the valence of the
    two involved atoms.

    Parameters
    ----------
    order : float
        The continuous bond order.

    Returns
    -------
    bonded : bool
        True, if the order is in the range ``[0.5, 3.5)``.
    """
    return MIN_BONDED_ORDER <= order < MAX_BONDED_ORDER


def discretize_bond_order(order):
    """
    Round a continuous bond order to the nearest integer.

    Ties are rounded away from zero, in contrast to Python's
    :func:`round()`, which rounds ties to the nearest even number.

    Parameters
    ----------
    order : float
        The continuous bond order.

    Returns
    -------
    bond_type : int
        The rounded bond order.

    Examples
    --------

    >>> print(discretize_bond_order(2.5))
    3
    >>> print(discretize_bond_order(1.49))
    1
    """
    fraction, integer = math.modf(abs(order))
    rounded = int(integer) + (1 if fraction >= 0.5 else 0)
    return int(math.copysign(rounded, order))


def is_emitted(order):
    """
    Check whether a bond order is written as explicit bond into the
    bond block.

    Parameters
    ----------
    order : float
        The continuous bond order.

    Returns
    -------
    emitted : bool
        True, if the rounded order is a single, double or triple bond.
    """
    return discretize_bond_order(order) in _EMITTED_BOND_TYPES


def count_valences(atom_count, bond_orders=None):
    """
    Count the number of bonded neighbors of each atom.

    A pair of atoms is bonded, if :func:`is_bonded()` is true for its
    bond order.

    Parameters
    ----------
    atom_count : int
        The number of atoms.
    bond_orders : BondOrderCollection, optional
        The bond orders.
        If omitted, all valences are zero.

    Returns
    -------
    valences : ndarray, dtype=int, shape=(n,)
        The number of bonded neighbors for each atom.
    """
    valences = np.zeros(atom_count, dtype=int)
    if bond_orders is None:
        return valences
    for i, j, order in bond_orders.items():
        if is_bonded(order):
            valences[i] += 1
            valences[j] += 1
    return valences


def emitted_bonds(bond_orders=None):
    """
    Get the bonds that are written into the bond block.

    Parameters
    ----------
    bond_orders : BondOrderCollection, optional
        The bond orders.
        If omitted, no bonds are emitted.

    Returns
    -------
    bonds : list of tuple(int, int, int)
        The 0-based atom indices ``i < j`` and the discretized bond type
        for each bond that passes :func:`is_emitted()`, in ascending
        order of the atom indices.
    """
    if bond_orders is None:
        return []
    return [
        (i, j, discretize_bond_order(order))
        for i, j, order in bond_orders.items()
        if is_emitted(order)
    ]
