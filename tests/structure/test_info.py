# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
import molstream.structure.info as info
from molstream.structure.info import Element


def test_element_count():
    """
    All elements up to Oganesson and the hydrogen isotopes are available.
    """
    assert len(Element) == 118 + 2
    assert int(Element.Og) == 118


@pytest.mark.parametrize("element", list(Element))
def test_symbol_conversion(element):
    """
    Converting an element into its symbol and back gives the same
    element.
    """
    assert info.element_for_symbol(info.symbol(element)) == element


@pytest.mark.parametrize(
    "symbol, ref_element",
    [
        ("H", Element.H),
        ("C", Element.C),
        ("Cl", Element.Cl),
        ("Fe", Element.Fe),
        ("D", Element.D),
        ("T", Element.T),
        ("1H", Element.H),
        ("H1", Element.H),
        ("2H", Element.D),
        ("H2", Element.D),
        ("3H", Element.T),
    ],
)
def test_element_for_symbol(symbol, ref_element):
    assert info.element_for_symbol(symbol) == ref_element


@pytest.mark.parametrize("symbol", ["Xx", "", "CL", "cl", "4H", "H4", "2C", " C"])
def test_unknown_symbol(symbol):
    """
    Unknown symbols raise an error instead of giving a default element.
    """
    with pytest.raises(info.ElementSymbolNotFoundError):
        info.element_for_symbol(symbol)


def test_error_is_key_error():
    with pytest.raises(KeyError):
        info.element_for_symbol("Xx")


@pytest.mark.parametrize(
    "element, ref_z, ref_a",
    [
        (Element.H, 1, 0),
        (Element.D, 1, 2),
        (Element.T, 1, 3),
        (Element.C, 6, 0),
        (Element.U, 92, 0),
    ],
)
def test_atomic_and_mass_number(element, ref_z, ref_a):
    assert info.atomic_number(element) == ref_z
    assert info.mass_number(element) == ref_a


def test_symbol_of_integer():
    assert info.symbol(17) == "Cl"
    with pytest.raises(ValueError):
        info.symbol(0)
