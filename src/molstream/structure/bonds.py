# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains the :class:`BondOrderCollection`, a sparse table
of bond orders between the atoms of a molecule.
"""

__name__ = "molstream.structure"
__author__ = "The molstream contributors"
__all__ = ["BondOrderCollection"]

import math
import numbers
import numpy as np
from molstream.copyable import Copyable


class BondOrderCollection(Copyable):
    """
    A sparse, symmetric table of bond orders between pairs of atoms.

    The order of a bond is a non-negative real number, e.g. ``1`` for a
    single bond or ``1.5`` for an aromatic bond.
    Pairs without an entry implicitly have a bond order of ``0``.
    The table is always sized to a number of atoms, so that only atom
    indices in the range ``[0, atom_count)`` are valid.

    ``(i, j)`` and ``(j, i)`` denote the same bond.
    Internally each bond is stored only once with ``i < j``.

    Parameters
    ----------
    atom_count : int, optional
        The number of atoms the table refers to.

    Examples
    --------

    >>> bond_orders = BondOrderCollection(3)
    >>> bond_orders.set_order(1, 0, 1.0)
    >>> bond_orders.set_order(1, 2, 2.0)
    >>> print(bond_orders.get_order(0, 1))
    1.0
    >>> print(bond_orders.as_array())
    [[0. 1. 1.]
     [1. 2. 2.]]
    """

    def __init__(self, atom_count=0):
        if atom_count < 0:
            raise ValueError("The number of atoms must not be negative")
        self._atom_count = atom_count
        self._orders = {}

    def get_atom_count(self):
        """
        Get the number of atoms the table refers to.

        Returns
        -------
        atom_count : int
            The number of atoms.
        """
        return self._atom_count

    def get_bond_count(self):
        """
        Get the number of atom pairs with a nonzero bond order.

        Returns
        -------
        bond_count : int
            The number of bonds.
        """
        return len(self._orders)

    def resize(self, atom_count):
        """
        Change the number of atoms the table refers to.

        Bonds involving atoms that are out of range after shrinking the
        table are removed.

        Parameters
        ----------
        atom_count : int
            The new number of atoms.
        """
        if atom_count < 0:
            raise ValueError("The number of atoms must not be negative")
        self._orders = {
            (i, j): order
            for (i, j), order in self._orders.items()
            if j < atom_count
        }
        self._atom_count = atom_count

    def get_order(self, atom_index1, atom_index2):
        """
        Get the bond order between two atoms.

        Parameters
        ----------
        atom_index1, atom_index2 : int
            The indices of the two atoms.

        Returns
        -------
        order : float
            The bond order; ``0.0`` if the atoms are not bonded.
        """
        key = self._to_key(atom_index1, atom_index2)
        return self._orders.get(key, 0.0)

    def set_order(self, atom_index1, atom_index2, order):
        """
        Set the bond order between two atoms.

        Parameters
        ----------
        atom_index1, atom_index2 : int
            The indices of the two atoms.
            The order of the indices is irrelevant.
        order : float
            The finite, non-negative bond order.
            An order of ``0`` removes the bond.
        """
        key = self._to_key(atom_index1, atom_index2)
        order = float(order)
        if not math.isfinite(order) or order < 0:
            raise ValueError(
                f"Bond order must be finite and non-negative, but got {order}"
            )
        if order == 0:
            self._orders.pop(key, None)
        else:
            self._orders[key] = order

    def remove_order(self, atom_index1, atom_index2):
        """
        Remove the bond between two atoms, if existing.

        Parameters
        ----------
        atom_index1, atom_index2 : int
            The indices of the two atoms.
        """
        self._orders.pop(self._to_key(atom_index1, atom_index2), None)

    def items(self):
        """
        Iterate over all bonds.

        Yields
        ------
        atom_index1, atom_index2 : int
            The indices of the bonded atoms, where
            ``atom_index1 < atom_index2``.
        order : float
            The bond order.
            The bonds are yielded in ascending order of the
            atom indices.
        """
        for (i, j) in sorted(self._orders):
            yield i, j, self._orders[(i, j)]

    def as_array(self):
        """
        Obtain all bonds as array.

        Returns
        -------
        bonds : ndarray, dtype=float, shape=(n,3)
            Each row contains the two atom indices (``i < j``) and the
            bond order.
            The rows are sorted by the atom indices.
        """
        return np.array(list(self.items()), dtype=np.float64).reshape(-1, 3)

    def _to_key(self, atom_index1, atom_index2):
        for index in (atom_index1, atom_index2):
            if not isinstance(index, numbers.Integral):
                raise TypeError(
                    f"Index must be integer, not '{type(index).__name__}'"
                )
            if index < 0 or index >= self._atom_count:
                raise IndexError(
                    f"Index {index} is out of range "
                    f"for a table with {self._atom_count} atoms"
                )
        if atom_index1 == atom_index2:
            raise ValueError("An atom cannot be bonded to itself")
        i, j = int(atom_index1), int(atom_index2)
        return (i, j) if i < j else (j, i)

    def __copy_create__(self):
        return BondOrderCollection(self._atom_count)

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone._orders = dict(self._orders)

    def __iter__(self):
        return self.items()

    def __len__(self):
        return len(self._orders)

    def __eq__(self, item):
        if not isinstance(item, BondOrderCollection):
            return False
        return self._atom_count == item._atom_count and self._orders == item._orders

    def __str__(self):
        return "\n".join(f"{i:>5d}{j:>5d}{order:>8.3f}" for i, j, order in self.items())
