# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for obtaining chemical information about atoms,
currently the translation between element symbols and
:class:`Element` identities.
"""

__name__ = "molstream.structure.info"
__author__ = "The molstream contributors"

from .elements import *
