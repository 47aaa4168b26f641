# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for handling molecular structures.

A molecule is described by two objects:

An :class:`AtomCollection` contains the element and the position of each
atom.
The element is stored as :class:`Element`, the positions are a
*(n x 3)* *NumPy* float :class:`ndarray`.
The index of an atom is its sole identity.

A :class:`BondOrderCollection` is a sparse table that assigns a
real-valued bond order to pairs of atom indices.
Pairs without an entry are not bonded.

The universal length unit in this package is *bohr* (atomic units).
Conversion to and from Å is available via :func:`bohr_to_angstrom()`
and :func:`angstrom_to_bohr()`, file formats handle the conversion
themselves.
"""

__name__ = "molstream.structure"
__author__ = "The molstream contributors"

from .atoms import *
from .bonds import *
from .error import *
from .units import *
