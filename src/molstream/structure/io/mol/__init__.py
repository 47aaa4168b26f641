# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The MOL format is used to depict atom positions and bonds for small
molecules.
This subpackage is used for reading and writing an
:class:`AtomCollection` and a :class:`BondOrderCollection` in the
``V2000`` variant of this format.
"""

__name__ = "molstream.structure.io.mol"
__author__ = "The molstream contributors"

from .bondorder import *
from .convert import *
from .ctab import *
from .header import *
from .mol import *
