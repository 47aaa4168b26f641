# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains the :class:`AtomCollection`, the container for
element identities and positions of the atoms of a molecule.
"""

__name__ = "molstream.structure"
__author__ = "The molstream contributors"
__all__ = ["AtomCollection", "collection"]

import numbers
import numpy as np
from molstream.copyable import Copyable
from molstream.structure.info.elements import Element, symbol

_ELEMENT_VALUES = frozenset(int(element) for element in Element)


class AtomCollection(Copyable):
    """
    An ordered collection of atoms, each described by its element and
    its position.

    The index of an atom is its sole identity.
    The number of atoms is fixed at construction.

    Parameters
    ----------
    length : int
        The fixed number of atoms in the collection.
        Initially, each atom has the unset element code ``0`` and is
        placed at the origin.

    Attributes
    ----------
    element : ndarray, dtype=int
        The :class:`Element` of each atom, stored as its integer value.
    coord : ndarray, dtype=float, shape=(n,3)
        The position of each atom in *bohr*.

    Examples
    --------

    >>> atoms = AtomCollection(2)
    >>> atoms.set_element(0, Element.H)
    >>> atoms.set_element(1, Element.Cl)
    >>> atoms.set_position(1, [2.4, 0.0, 0.0])
    >>> print(atoms)
    H       0.000    0.000    0.000
    Cl      2.400    0.000    0.000
    """

    def __init__(self, length):
        if length < 0:
            raise ValueError("The number of atoms must not be negative")
        self._array_length = length
        self._element = np.zeros(length, dtype=np.int32)
        self._coord = np.zeros((length, 3), dtype=np.float64)

    def array_length(self):
        """
        Get the number of atoms.

        Returns
        -------
        length : int
            Number of atoms in the collection.
        """
        return self._array_length

    @property
    def element(self):
        return self._element

    @element.setter
    def element(self, value):
        value = np.asarray(value)
        if value.ndim != 1:
            raise ValueError("A 1-dimensional array of elements is expected")
        if len(value) != self._array_length:
            raise IndexError(
                f"Expected array length {self._array_length}, but got {len(value)}"
            )
        if not np.issubdtype(value.dtype, np.integer):
            raise TypeError("Elements must be given as 'Element' values")
        self._element = value.astype(np.int32, copy=False)

    @property
    def coord(self):
        return self._coord

    @coord.setter
    def coord(self, value):
        if not isinstance(value, np.ndarray):
            raise TypeError("Value must be ndarray of floats")
        if value.ndim != 2:
            raise ValueError("A 2-dimensional ndarray is expected")
        if value.shape[0] != self._array_length:
            raise IndexError(
                f"Expected array length {self._array_length}, "
                f"but got {value.shape[0]}"
            )
        if value.shape[1] != 3:
            raise TypeError("Expected 3 coordinates for each atom")
        self._coord = value.astype(np.float64, copy=False)

    def get_element(self, index):
        """
        Get the element of an atom.

        Parameters
        ----------
        index : int
            The atom index.

        Returns
        -------
        element : Element
            The element of the atom.
        """
        self._check_index(index)
        return Element(self._element[index])

    def set_element(self, index, element):
        """
        Set the element of an atom.

        Parameters
        ----------
        index : int
            The atom index.
        element : Element
            The new element of the atom.
        """
        self._check_index(index)
        self._element[index] = Element(element)

    def get_position(self, index):
        """
        Get the position of an atom.

        Parameters
        ----------
        index : int
            The atom index.

        Returns
        -------
        position : ndarray, dtype=float, shape=(3,)
            The position in *bohr*.
            This is a copy, modifying it does not alter the collection.
        """
        self._check_index(index)
        return self._coord[index].copy()

    def set_position(self, index, position):
        """
        Set the position of an atom.

        Parameters
        ----------
        index : int
            The atom index.
        position : array-like, dtype=float, shape=(3,)
            The new position in *bohr*.
        """
        self._check_index(index)
        position = np.asarray(position, dtype=np.float64)
        if position.shape != (3,):
            raise ValueError("Expected 3 coordinates for the atom")
        self._coord[index] = position

    def _check_index(self, index):
        if not isinstance(index, numbers.Integral):
            raise TypeError(f"Index must be integer, not '{type(index).__name__}'")
        if index < 0 or index >= self._array_length:
            raise IndexError(
                f"Index {index} is out of range "
                f"for a collection with {self._array_length} atoms"
            )

    def __copy_create__(self):
        return AtomCollection(self._array_length)

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone._element = self._element.copy()
        clone._coord = self._coord.copy()

    def __len__(self):
        return self._array_length

    def __iter__(self):
        """
        Iterate over the atoms as pairs of element and position.
        """
        for i in range(self._array_length):
            yield Element(self._element[i]), self._coord[i].copy()

    def __eq__(self, item):
        if not isinstance(item, AtomCollection):
            return False
        if self._array_length != item._array_length:
            return False
        return np.array_equal(self._element, item._element) and np.array_equal(
            self._coord, item._coord
        )

    def __str__(self):
        lines = []
        for element_code, (x, y, z) in zip(self._element, self._coord):
            sym = symbol(element_code) if element_code in _ELEMENT_VALUES else "?"
            lines.append(f"{sym:3} {x:>9.3f}{y:>9.3f}{z:>9.3f}")
        return "\n".join(lines)


def collection(elements, positions):
    """
    Create an :class:`AtomCollection` from elements and positions.

    Parameters
    ----------
    elements : iterable object of Element
        The element of each atom.
    positions : array-like, dtype=float, shape=(n,3)
        The position of each atom in *bohr*.

    Returns
    -------
    atoms : AtomCollection
        The new collection.

    Examples
    --------

    >>> atoms = collection([Element.O, Element.H], [[0, 0, 0], [1.8, 0, 0]])
    >>> print(len(atoms))
    2
    """
    elements = [Element(element) for element in elements]
    positions = np.asarray(positions, dtype=np.float64)
    if positions.ndim == 1 and len(positions) == 0:
        positions = positions.reshape(0, 3)
    atoms = AtomCollection(len(elements))
    atoms.element = np.array(elements, dtype=np.int32)
    atoms.coord = positions
    return atoms
