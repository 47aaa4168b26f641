# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "molstream.structure.io.mol"
__author__ = "The molstream contributors"
__all__ = ["get_structure", "set_structure"]

from molstream.structure.io.mol.mol import MOLFile


def get_structure(mol_file, strict_version=False):
    """
    Get the atoms and bonds from the MOL file.

    This function is a thin wrapper around
    :meth:`MOLFile.get_structure()`.

    Parameters
    ----------
    mol_file : MOLFile
        The file.
    strict_version : bool, optional
        If set to true, an unknown version token in the *counts* line
        raises a :class:`FormatMismatchError`.

    Returns
    -------
    atoms : AtomCollection
        The atoms, positions are in *bohr*.
    bond_orders : BondOrderCollection
        The bond orders, sized to the number of atoms.
    """
    _check_type(mol_file)
    return mol_file.get_structure(strict_version)


def set_structure(mol_file, atoms, bond_orders=None):
    """
    Set the atoms and bonds for the MOL file.

    This function is a thin wrapper around
    :meth:`MOLFile.set_structure()`.

    Parameters
    ----------
    mol_file : MOLFile
        The MOL file.
    atoms : AtomCollection
        The atoms to be saved into this file.
    bond_orders : BondOrderCollection, optional
        The bond orders to be saved into this file.
    """
    _check_type(mol_file)
    mol_file.set_structure(atoms, bond_orders)


def _check_type(file):
    if not isinstance(file, MOLFile):
        raise TypeError(f"Unsupported file type '{type(file).__name__}'")
