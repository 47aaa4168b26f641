# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "molstream.structure.info"
__author__ = "The molstream contributors"
__all__ = [
    "Element",
    "ElementSymbolNotFoundError",
    "symbol",
    "element_for_symbol",
    "atomic_number",
    "mass_number",
]

import re
from enum import IntEnum

# fmt: off
_SYMBOLS = [
    "H",                                                                                "He",
    "Li", "Be",                                                   "B",  "C",  "N",  "O",  "F",  "Ne",
    "Na", "Mg",                                                   "Al", "Si", "P",  "S",  "Cl", "Ar",
    "K",  "Ca", "Sc", "Ti", "V",  "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn", "Ga", "Ge", "As", "Se", "Br", "Kr",
    "Rb", "Sr", "Y",  "Zr", "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd", "In", "Sn", "Sb", "Te", "I",  "Xe",
    "Cs", "Ba",
    "La", "Ce", "Pr", "Nd", "Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho", "Er", "Tm", "Yb", "Lu",
                "Hf", "Ta", "W",  "Re", "Os", "Ir", "Pt", "Au", "Hg", "Tl", "Pb", "Bi", "Po", "At", "Rn",
    "Fr", "Ra",
    "Ac", "Th", "Pa", "U",  "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es", "Fm", "Md", "No", "Lr",
                "Rf", "Db", "Sg", "Bh", "Hs", "Mt", "Ds", "Rg", "Cn", "Nh", "Fl", "Mc", "Lv", "Ts", "Og",
]
# fmt: on

# Isotopes are encoded as 'mass number * _ISOTOPE_OFFSET + atomic number'
_ISOTOPE_OFFSET = 1000

Element = IntEnum(
    "Element",
    [(sym, z) for z, sym in enumerate(_SYMBOLS, start=1)]
    + [("D", 2 * _ISOTOPE_OFFSET + 1), ("T", 3 * _ISOTOPE_OFFSET + 1)],
    module=__name__,
)
Element.__doc__ = """
    The identity of a chemical element.

    The value of an element without explicit isotope is its atomic
    number.
    The hydrogen isotopes *deuterium* (``Element.D``) and *tritium*
    (``Element.T``) are distinct elements, as they have a dedicated
    symbol.

    Examples
    --------

    >>> print(int(Element.C))
    6
    >>> print(Element.Cl.name)
    Cl
    """

# Isotope notation that is accepted additionally to the plain symbols,
# e.g. '2H' or 'H2' for deuterium
_HYDROGEN_ISOTOPES = {1: Element.H, 2: Element.D, 3: Element.T}
_ISOTOPE_PATTERN = re.compile(r"^(?:([0-9]+)H|H([0-9]+))$")


class ElementSymbolNotFoundError(KeyError):
    """
    Indicates that a string is not a known element symbol.
    """

    def __init__(self, symbol):
        super().__init__(f"'{symbol}' is not a known element")
        self.symbol = symbol


def symbol(element):
    """
    Get the symbol of an element.

    Parameters
    ----------
    element : Element or int
        The element.

    Returns
    -------
    symbol : str
        The element symbol, with the first letter in upper case and the
        remaining letters in lower case.

    Raises
    ------
    ValueError
        If `element` does not correspond to an :class:`Element`.

    Examples
    --------

    >>> print(symbol(Element.Cl))
    Cl
    """
    return Element(element).name


def element_for_symbol(sym):
    """
    Get the element corresponding to the given symbol.

    The lookup is case-sensitive: The first letter must be upper case,
    all remaining letters must be lower case.
    For hydrogen, the mass number may be prefixed or suffixed
    (e.g. ``'2H'`` or ``'H2'`` for deuterium).

    Parameters
    ----------
    sym : str
        The element symbol.

    Returns
    -------
    element : Element
        The element.

    Raises
    ------
    ElementSymbolNotFoundError
        If the symbol is unknown.

    Examples
    --------

    >>> print(repr(element_for_symbol("Na")))
    <Element.Na: 11>
    >>> print(repr(element_for_symbol("2H")))
    <Element.D: 2001>
    """
    element = Element.__members__.get(sym)
    if element is not None:
        return element
    match = _ISOTOPE_PATTERN.match(sym)
    if match is not None:
        mass = int(match.group(1) or match.group(2))
        element = _HYDROGEN_ISOTOPES.get(mass)
        if element is not None:
            return element
    raise ElementSymbolNotFoundError(sym)


def atomic_number(element):
    """
    Get the atomic number of an element.

    Parameters
    ----------
    element : Element or int
        The element.

    Returns
    -------
    z : int
        The atomic number.
    """
    return int(Element(element)) % _ISOTOPE_OFFSET


def mass_number(element):
    """
    Get the mass number of an element, if it denotes a specific isotope.

    Parameters
    ----------
    element : Element or int
        The element.

    Returns
    -------
    a : int
        The mass number, or 0 if the element does not denote a specific
        isotope.
    """
    return int(Element(element)) // _ISOTOPE_OFFSET
