# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Functions for parsing and writing an :class:`AtomCollection` and a
:class:`BondOrderCollection` from/to *MDL* connection tables (Ctab).
"""

__name__ = "molstream.structure.io.mol"
__author__ = "The molstream contributors"
__all__ = ["read_structure_from_ctab", "write_structure_to_ctab"]

import warnings
import numpy as np
from molstream.file import FormatMismatchError
from molstream.structure.atoms import AtomCollection
from molstream.structure.bonds import BondOrderCollection
from molstream.structure.error import BadStructureError, UnknownVersionWarning
from molstream.structure.info.elements import (
    Element,
    ElementSymbolNotFoundError,
    element_for_symbol,
    symbol,
)
from molstream.structure.io.mol.bondorder import count_valences, emitted_bonds
from molstream.structure.io.mol.header import find_counts_line
from molstream.structure.io.util import (
    number_of_integer_digits,
    parse_fixed_float,
    parse_fixed_int,
)
from molstream.structure.units import angstrom_to_bohr, bohr_to_angstrom

# Bond types in the bond block that are read as bond order
READ_BOND_TYPES = (1, 2, 3)
# The x, y, z columns and the element symbol must be present
MIN_ATOM_LINE_LENGTH = 34
# The two atom indices and the bond type must be present
MIN_BOND_LINE_LENGTH = 9
# 'mmm' field of the counts line: number of additional properties
N_PROPERTIES = 999
TERMINATOR_LINE = "M END"

_ELEMENT_VALUES = frozenset(int(element) for element in Element)


def read_structure_from_ctab(ctab_lines, strict_version=False):
    """
    Parse a *MDL* connection table (Ctab) to obtain an
    :class:`AtomCollection` and a :class:`BondOrderCollection`.

    Parameters
    ----------
    ctab_lines : iterable object of str
        The lines following the header of the file.
        Lines before the first valid *counts* line are ignored.
    strict_version : bool, optional
        By default, a file with an unknown version token in the
        *counts* line is read as empty structure and a
        :class:`UnknownVersionWarning` is issued.
        If set to true, a :class:`FormatMismatchError` is raised
        instead.

    Returns
    -------
    atoms : AtomCollection
        The atoms, positions are converted into *bohr*.
    bond_orders : BondOrderCollection
        The bonds, sized to the number of atoms.
        Only bond types 1, 2 and 3 are read, other bond types are
        ignored.

    Raises
    ------
    FormatMismatchError
        If no *counts* line is found or the atom or bond block is
        malformed.
    NotImplementedError
        If the table is in ``V3000`` format.
    """
    lines = iter(ctab_lines)
    atom_count, bond_count, version = find_counts_line(lines)

    match version:
        case "V2000":
            pass
        case "V3000":
            raise NotImplementedError("V3000 MOL format is not supported")
        case unknown_version:
            if strict_version:
                raise FormatMismatchError(f"Unknown CTAB version '{unknown_version}'")
            warnings.warn(
                f"Unknown CTAB version '{unknown_version}', "
                f"the structure is read as empty",
                UnknownVersionWarning,
            )
            return AtomCollection(0), BondOrderCollection(0)

    atoms = _read_atom_block(lines, atom_count)
    bond_orders = _read_bond_block(lines, atom_count, bond_count)
    return atoms, bond_orders


def write_structure_to_ctab(atoms, bond_orders=None):
    """
    Convert an :class:`AtomCollection` and optionally a
    :class:`BondOrderCollection` into a ``V2000`` *MDL* connection table
    (Ctab).

    Continuous bond orders are rounded to the nearest integer and
    only single, double and triple bonds are written.
    The valence column of the atom block counts the bonds with an order
    in the range ``[0.5, 3.5)``.

    Parameters
    ----------
    atoms : AtomCollection
        The atoms to be written, positions are converted into Å.
    bond_orders : BondOrderCollection, optional
        The bond orders, sized to the number of atoms.
        If omitted, no bonds are written.

    Returns
    -------
    ctab_lines : list of str
        The lines containing the *ctab*.
        The lines begin with the *counts* line and end with the
        terminator line.
    """
    atom_count = atoms.array_length()
    if bond_orders is not None and bond_orders.get_atom_count() != atom_count:
        raise BadStructureError(
            f"Bond table refers to {bond_orders.get_atom_count()} atoms, "
            f"but {atom_count} atoms are given"
        )
    if np.isnan(atoms.coord).any():
        raise BadStructureError("Input AtomCollection has NaN coordinates")
    for element_code in np.unique(atoms.element):
        if int(element_code) not in _ELEMENT_VALUES:
            raise BadStructureError(f"Invalid element code {element_code}")

    bonds = emitted_bonds(bond_orders)
    valences = count_valences(atom_count, bond_orders)
    if not _is_v2000_compatible(atom_count, len(bonds)):
        raise ValueError(
            "The given number of atoms or bonds is too large for V2000 format"
        )

    # Check the digits of the values as they are written
    coord = np.round(bohr_to_angstrom(atoms.coord), 4)
    for i, coord_name in enumerate(["x", "y", "z"]):
        n_coord_digits = number_of_integer_digits(coord[:, i])
        if n_coord_digits > 5:
            raise BadStructureError(
                f"5 pre-decimal columns for {coord_name}-coordinates are "
                f"available, but the structure would require {n_coord_digits}"
            )

    counts_line = (
        f"{atom_count:>3d}{len(bonds):>3d}"
        + f"{0:>3d}" * 8
        + f"{N_PROPERTIES:>3d}"
        + f"{'V2000':>6}"
    )

    atom_lines = [
        f"{coord[i, 0]:>10.4f}"
        f"{coord[i, 1]:>10.4f}"
        f"{coord[i, 2]:>10.4f}"
        f" {symbol(atoms.element[i]):>3}"
        f"{0:>2d}"  # Mass difference -> unused
        + f"{0:>3d}" * 4  # Charge, stereo parity, H count, stereo care
        + f"{valences[i]:>3d}"
        + f"{0:>3d}" * 6  # More unused fields
        for i in range(atom_count)
    ]

    bond_lines = [
        f"{i + 1:>3d}{j + 1:>3d}{bond_type:>3d}" + f"{0:>3d}" * 5
        for i, j, bond_type in bonds
    ]

    return [counts_line] + atom_lines + bond_lines + [TERMINATOR_LINE]


def _read_atom_block(lines, atom_count):
    atoms = AtomCollection(atom_count)
    for i in range(atom_count):
        line = _next_line(lines, "atom", i, atom_count)
        if len(line) < MIN_ATOM_LINE_LENGTH:
            raise FormatMismatchError(
                f"Atom line {i + 1} has {len(line)} characters, "
                f"but at least {MIN_ATOM_LINE_LENGTH} are required"
            )

        coord = [parse_fixed_float(line[start : start + 10]) for start in (0, 10, 20)]
        if any(c is None for c in coord):
            raise FormatMismatchError(f"Atom line {i + 1} has invalid coordinates")

        element_symbol = line[31:34].replace(" ", "")
        # Symbols are looked up as first letter upper case, rest lower case
        element_symbol = element_symbol[:1].upper() + element_symbol[1:].lower()
        try:
            element = element_for_symbol(element_symbol)
        except ElementSymbolNotFoundError as e:
            raise FormatMismatchError(
                f"Atom line {i + 1} has unknown element '{element_symbol}'"
            ) from e

        atoms.element[i] = element
        atoms.coord[i] = angstrom_to_bohr(coord)
    return atoms


def _read_bond_block(lines, atom_count, bond_count):
    bond_orders = BondOrderCollection(atom_count)
    for i in range(bond_count):
        line = _next_line(lines, "bond", i, bond_count)
        if len(line) < MIN_BOND_LINE_LENGTH:
            raise FormatMismatchError(
                f"Bond line {i + 1} has {len(line)} characters, "
                f"but at least {MIN_BOND_LINE_LENGTH} are required"
            )

        fields = [parse_fixed_int(line[start : start + 3]) for start in (0, 3, 6)]
        if any(field is None for field in fields):
            raise FormatMismatchError(f"Bond line {i + 1} has invalid fields")
        # MOL atom indices are 1-based
        atom_number1, atom_number2, bond_type = fields
        for atom_number in (atom_number1, atom_number2):
            if atom_number < 1 or atom_number > atom_count:
                raise FormatMismatchError(
                    f"Bond line {i + 1} refers to atom {atom_number}, "
                    f"but the file contains {atom_count} atoms"
                )
        if atom_number1 == atom_number2:
            raise FormatMismatchError(
                f"Bond line {i + 1} bonds atom {atom_number1} to itself"
            )

        # Other bond types (e.g. aromatic or 'any') have no bond order
        if bond_type in READ_BOND_TYPES:
            bond_orders.set_order(atom_number1 - 1, atom_number2 - 1, bond_type)
    return bond_orders


def _next_line(lines, block_name, index, count):
    line = next(lines, None)
    if line is None:
        raise FormatMismatchError(
            f"Expected {count} {block_name} lines, but the file ends after {index}"
        )
    return line


def _is_v2000_compatible(n_atoms, n_bonds):
    # The format uses a maximum of 3 digits for the atom and bond count
    return n_atoms < 1000 and n_bonds < 1000
