# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains convenience functions for reading and writing
structures by format name, without the need to manually instantiate a
:class:`File` object.
"""

__name__ = "molstream.structure.io"
__author__ = "The molstream contributors"
__all__ = [
    "SupportType",
    "supported_formats",
    "is_format_supported",
    "read_structure",
    "write_structure",
]

import datetime
from enum import Enum
from molstream.file import FormatUnsupportedError


class SupportType(Enum):
    """
    The operations a file format supports.
    """

    READ = "read"
    WRITE = "write"
    READ_WRITE = "read_write"


_SUPPORTED_FORMATS = {"mol": SupportType.READ_WRITE}


def supported_formats():
    """
    Get the names of all supported file formats.

    Returns
    -------
    formats : dict (str -> SupportType)
        Maps each format name to the supported operations.
    """
    return dict(_SUPPORTED_FORMATS)


def is_format_supported(format, operation=SupportType.READ_WRITE):
    """
    Check whether a file format supports the given operation.

    Parameters
    ----------
    format : str
        The format name, e.g. ``"mol"``.
    operation : SupportType, optional
        The requested operation.
        By default, both reading and writing must be supported.

    Returns
    -------
    supported : bool
        True, if the format supports the operation.
    """
    support = _SUPPORTED_FORMATS.get(format)
    if support is None:
        return False
    return support == SupportType.READ_WRITE or support == operation


def read_structure(file, format="mol", strict_version=False):
    """
    Read atoms and bonds from a structure file.

    Parameters
    ----------
    file : file-like object or str
        The file to be read, opened in text mode.
        Alternatively a file path can be supplied.
    format : str, optional
        The name of the file format.
        Only ``"mol"`` is supported.
    strict_version : bool, optional
        If set to true, an unknown format version raises a
        :class:`FormatMismatchError` instead of giving an empty
        structure.

    Returns
    -------
    atoms : AtomCollection
        The atoms, positions are in *bohr*.
    bond_orders : BondOrderCollection
        The bond orders, sized to the number of atoms.

    Raises
    ------
    FormatUnsupportedError
        If the `format` is not supported.
        In this case the `file` is not accessed.
    FormatMismatchError
        If the file content is malformed.
    NotImplementedError
        If the file uses an unsupported variant of the format.
    """
    match format:
        case "mol":
            from molstream.structure.io.mol import MOLFile

            mol_file = MOLFile.read(file)
            return mol_file.get_structure(strict_version)
        case unknown_format:
            raise FormatUnsupportedError(f"Unknown file format '{unknown_format}'")


def write_structure(file, atoms, bond_orders=None, format="mol", header=None):
    """
    Write atoms and optionally bonds to a structure file.

    Parameters
    ----------
    file : file-like object or str
        The file to be written to, opened in text mode.
        Alternatively a file path can be supplied.
    atoms : AtomCollection
        The atoms to be written.
    bond_orders : BondOrderCollection, optional
        The bond orders to be written.
        If omitted, no bonds are written.
    format : str, optional
        The name of the file format.
        Only ``"mol"`` is supported.
    header : Header, optional
        The header of the MOL file.
        By default, a header for an unnamed molecule with the current
        time is written.

    Raises
    ------
    FormatUnsupportedError
        If the `format` is not supported.
        In this case the `file` is not accessed.
    """
    match format:
        case "mol":
            from molstream.structure.io.mol import MOLFile

            mol_file = MOLFile()
            mol_file.header = _mol_header() if header is None else header
            mol_file.set_structure(atoms, bond_orders)
            mol_file.write(file)
        case unknown_format:
            raise FormatUnsupportedError(f"Unknown file format '{unknown_format}'")


def _mol_header():
    from molstream.structure.io.mol import Header

    return Header(
        mol_name="Unnamed Molecule",
        initials="##",
        program="molstrm",
        time=datetime.datetime.now(),
        dimensions="3D",
    )
