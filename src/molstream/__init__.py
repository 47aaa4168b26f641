# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *molstream*.
It provides the file base classes and the error types shared by the
subpackages.
The actual structure handling is found in :mod:`molstream.structure`.
"""

__version__ = "0.1.0"
__name__ = "molstream"
__author__ = "The molstream contributors"

from .copyable import *
from .file import *
