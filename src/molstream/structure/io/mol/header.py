# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "molstream.structure.io.mol"
__author__ = "The molstream contributors"
__all__ = ["Header", "read_header_lines", "find_counts_line"]

import datetime
import warnings
from dataclasses import dataclass
from molstream.file import FormatMismatchError
from molstream.structure.io.util import parse_fixed_int

_DATE_FORMAT = "%m%d%y%H%M"
# Number of header lines
N_HEADER = 3
# A counts line consists of eleven 3-character fields
# followed by the version token
MIN_COUNTS_LINE_LENGTH = 38
VERSION_OFFSET = 33


@dataclass
class Header:
    """
    The header of a MOL file.

    Parameters
    ----------
    mol_name : str, optional
        The name of the molecule.
    initials : str, optional
        The author's initials. Maximum length is 2.
    program : str, optional
        The program name. Maximum length is 8.
    time : datetime or date, optional
        The time of file creation.
    dimensions : str, optional
        Dimensional codes. Maximum length is 2.
    scaling_factors : str, optional
        Scaling factors. Maximum length is 12.
    energy : str, optional
        Energy from modeling program. Maximum length is 12.
    registry_number : str, optional
        MDL registry number. Maximum length is 6.
    comments : str, optional
        Additional comments.

    Attributes
    ----------
    mol_name, initials, program, time, dimensions, scaling_factors, energy, registry_number, comments
        Same as the parameters.
    """

    mol_name: ... = ""
    initials: ... = ""
    program: ... = ""
    time: ... = None
    dimensions: ... = ""
    scaling_factors: ... = ""
    energy: ... = ""
    registry_number: ... = ""
    comments: ... = ""

    @staticmethod
    def deserialize(text):
        lines = text.splitlines()
        # Missing header lines are treated as empty
        lines += [""] * (N_HEADER - len(lines))

        mol_name = lines[0].strip()
        initials = lines[1][0:2].strip()
        program = lines[1][2:10].strip()
        time_string = lines[1][10:20]
        if time_string.strip() == "":
            time = None
        else:
            try:
                time = datetime.datetime.strptime(time_string, _DATE_FORMAT)
            except ValueError:
                warnings.warn(f"Invalid time format '{time_string}' in file header")
                time = None
        dimensions = lines[1][20:22].strip()
        scaling_factors = lines[1][22:34].strip()
        energy = lines[1][34:46].strip()
        registry_number = lines[1][46:52].strip()

        comments = lines[2].strip()

        return Header(
            mol_name,
            initials,
            program,
            time,
            dimensions,
            scaling_factors,
            energy,
            registry_number,
            comments,
        )

    def serialize(self):
        text = ""

        if self.time is None:
            time_str = ""
        else:
            time_str = self.time.strftime(_DATE_FORMAT)

        if len(self.mol_name) > 80:
            raise ValueError("Molecule name must not exceed 80 characters")
        text += str(self.mol_name) + "\n"
        # Fixed columns -> minimum and maximum length is the same
        # Shorter values are padded, longer values are truncated
        program_line = (
            f"{self.initials:>2.2}"
            f"{self.program:>8.8}"
            f"{time_str:>10.10}"
            f"{self.dimensions:>2.2}"
            f"{self.scaling_factors:>12.12}"
            f"{self.energy:>12.12}"
            f"{self.registry_number:>6.6}"
        )
        text += program_line.rstrip() + "\n"
        text += str(self.comments) + "\n"
        return text

    def __str__(self):
        return self.serialize()


def read_header_lines(lines):
    """
    Consume the header lines from an iterator over the lines of a MOL
    file.

    The content of the header lines is not validated.

    Parameters
    ----------
    lines : iterator of str
        The lines of the file.
        The iterator is advanced past the header.

    Returns
    -------
    header_lines : list of str
        The three header lines.

    Raises
    ------
    FormatMismatchError
        If the file ends before the header is complete.
    """
    header_lines = []
    for _ in range(N_HEADER):
        line = next(lines, None)
        if line is None:
            raise FormatMismatchError(
                f"Expected {N_HEADER} header lines, "
                f"but the file ends after {len(header_lines)}"
            )
        header_lines.append(line)
    return header_lines


def find_counts_line(lines):
    """
    Find the *counts* line in an iterator over the lines of a MOL file
    that is positioned after the header.

    Lines are skipped until a line is found that is at least 38
    characters long and starts with two 3-character non-negative
    integer fields.

    Parameters
    ----------
    lines : iterator of str
        The lines of the file.
        The iterator is advanced past the counts line.

    Returns
    -------
    atom_count, bond_count : int
        The number of atoms and bonds declared in the counts line.
    version : str
        The version token of the counts line, with all spaces removed.

    Raises
    ------
    FormatMismatchError
        If the file ends before a valid counts line is found.
    """
    for line in lines:
        if len(line) < MIN_COUNTS_LINE_LENGTH:
            continue
        atom_count = parse_fixed_int(line[0:3])
        bond_count = parse_fixed_int(line[3:6])
        if atom_count is None or bond_count is None:
            continue
        return atom_count, bond_count, line[VERSION_OFFSET:].replace(" ", "")
    raise FormatMismatchError("The file contains no valid counts line")
