# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for reading and writing structure related data.

Currently the ``V2000`` variant of the MOL format is supported, which
stores the elements and positions of the atoms of a small molecule
together with its bonds.
Files can be handled either via the format specific :class:`File`
classes in the respective subpackage, or via the format name based
:func:`read_structure()` and :func:`write_structure()`.
"""

__name__ = "molstream.structure.io"
__author__ = "The molstream contributors"

from .general import *
