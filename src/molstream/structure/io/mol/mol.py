# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "molstream.structure.io.mol"
__author__ = "The molstream contributors"
__all__ = ["MOLFile"]

from molstream.file import TextFile
from molstream.structure.io.mol.ctab import (
    read_structure_from_ctab,
    write_structure_to_ctab,
)
from molstream.structure.io.mol.header import N_HEADER, Header, read_header_lines


class MOLFile(TextFile):
    """
    This class represents a file in MOL format (``V2000``), that is used
    to store structure information for small molecules.

    Only the element, the position and the bonds of each atom are
    read from the file.
    Other atom properties, such as charges or stereo flags, are ignored
    when reading and written as zero.
    Bond orders are written as single, double or triple bonds, i.e.
    continuous bond orders are not preserved.

    Attributes
    ----------
    header : Header
        The header of the MOL file.

    Examples
    --------

    >>> import io
    >>> from molstream.structure import BondOrderCollection, collection
    >>> from molstream.structure.info import Element
    >>> atoms = collection([Element.H, Element.H], [[0, 0, 0], [1.4, 0, 0]])
    >>> bond_orders = BondOrderCollection(2)
    >>> bond_orders.set_order(0, 1, 1.0)
    >>> mol_file = MOLFile()
    >>> mol_file.header = Header(mol_name="Hydrogen")
    >>> mol_file.set_structure(atoms, bond_orders)
    >>> print(mol_file)
    Hydrogen
    <BLANKLINE>
    <BLANKLINE>
      2  1  0  0  0  0  0  0  0  0999 V2000
        0.0000    0.0000    0.0000   H 0  0  0  0  0  1  0  0  0  0  0  0
        0.7408    0.0000    0.0000   H 0  0  0  0  0  1  0  0  0  0  0  0
      1  2  1  0  0  0  0  0
    M END
    """

    def __init__(self):
        super().__init__()
        # empty header lines
        self.lines = [""] * N_HEADER
        self._header = None

    @classmethod
    def read(cls, file):
        mol_file = super().read(file)
        mol_file._header = None
        return mol_file

    @property
    def header(self):
        if self._header is None:
            self._header = Header.deserialize("\n".join(self.lines[0:N_HEADER]) + "\n")
        return self._header

    @header.setter
    def header(self, header):
        self._header = header
        self.lines[0:N_HEADER] = self._header.serialize().splitlines()

    def get_structure(self, strict_version=False):
        """
        Get the atoms and bonds from the MOL file.

        Parameters
        ----------
        strict_version : bool, optional
            If set to true, an unknown version token in the *counts*
            line raises a :class:`FormatMismatchError`, instead of
            giving an empty structure and a warning.

        Returns
        -------
        atoms : AtomCollection
            The atoms, positions are in *bohr*.
        bond_orders : BondOrderCollection
            The bond orders, sized to the number of atoms.

        Raises
        ------
        FormatMismatchError
            If the file is malformed.
        NotImplementedError
            If the file is in ``V3000`` format.
        """
        lines = iter(self.lines)
        read_header_lines(lines)
        return read_structure_from_ctab(lines, strict_version)

    def set_structure(self, atoms, bond_orders=None):
        """
        Set the atoms and bonds for the file.

        Parameters
        ----------
        atoms : AtomCollection
            The atoms to be saved into this file.
        bond_orders : BondOrderCollection, optional
            The bond orders to be saved into this file.
            If omitted, the file contains no bonds.
        """
        self.lines = self.lines[:N_HEADER] + write_structure_to_ctab(
            atoms, bond_orders
        )
