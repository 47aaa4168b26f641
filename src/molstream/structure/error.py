# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains all possible errors and warnings of the
`structure` subpackage.
"""

__name__ = "molstream.structure"
__author__ = "The molstream contributors"
__all__ = ["BadStructureError", "UnknownVersionWarning"]


class BadStructureError(Exception):
    """
    Indicates that a structure is not suitable for a certain operation,
    e.g. because it cannot be represented in the requested file format.
    """

    pass


class UnknownVersionWarning(Warning):
    """
    Indicates that a file declares a format version that is not
    recognized, so that its content is not parsed.
    """

    pass
