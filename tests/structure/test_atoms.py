# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import numpy as np
import pytest
import molstream.structure as struc
from molstream.structure.info import Element


@pytest.fixture
def atoms():
    return struc.collection(
        [Element.O, Element.H, Element.H],
        [[0.0, 0.0, 0.0], [1.8, 0.0, 0.0], [-0.45, 1.74, 0.0]],
    )


def test_creation():
    """
    A new collection has the given length, unset elements and all
    atoms at the origin.
    """
    atoms = struc.AtomCollection(4)
    assert atoms.array_length() == 4
    assert len(atoms) == 4
    assert atoms.element.tolist() == [0] * 4
    assert atoms.coord.shape == (4, 3)
    assert np.all(atoms.coord == 0)


def test_invalid_creation():
    with pytest.raises(ValueError):
        struc.AtomCollection(-1)


def test_collection(atoms):
    """
    Check the content of a collection created from elements and
    positions.
    """
    assert len(atoms) == 3
    assert atoms.get_element(0) == Element.O
    assert atoms.get_element(2) == Element.H
    assert atoms.get_position(1).tolist() == [1.8, 0.0, 0.0]
    assert atoms.coord.dtype == np.float64


def test_empty_collection():
    atoms = struc.collection([], [])
    assert len(atoms) == 0
    assert atoms.coord.shape == (0, 3)


def test_element_and_position_access(atoms):
    atoms.set_element(1, Element.D)
    atoms.set_position(1, [1.0, 2.0, 3.0])
    assert atoms.get_element(1) == Element.D
    assert atoms.get_position(1).tolist() == [1.0, 2.0, 3.0]
    # The returned position is a copy
    position = atoms.get_position(1)
    position[0] = 100
    assert atoms.get_position(1)[0] == 1.0


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_invalid_index(atoms, index):
    with pytest.raises(IndexError):
        atoms.get_element(index)
    with pytest.raises(IndexError):
        atoms.set_position(index, [0, 0, 0])


def test_invalid_element(atoms):
    with pytest.raises(ValueError):
        atoms.set_element(0, 500)


def test_invalid_position(atoms):
    with pytest.raises(ValueError):
        atoms.set_position(0, [0, 0])


def test_coord_setter(atoms):
    """
    Check that the coordinates can only be replaced by an array with
    matching shape.
    """
    with pytest.raises(TypeError):
        atoms.coord = [[0, 0, 0]] * 3
    with pytest.raises(ValueError):
        atoms.coord = np.zeros(9)
    with pytest.raises(IndexError):
        atoms.coord = np.zeros((2, 3))
    with pytest.raises(TypeError):
        atoms.coord = np.zeros((3, 2))
    atoms.coord = np.ones((3, 3), dtype=np.float32)
    assert atoms.coord.dtype == np.float64


def test_element_setter(atoms):
    with pytest.raises(IndexError):
        atoms.element = [Element.C]
    with pytest.raises(TypeError):
        atoms.element = np.array(["C", "H", "H"])
    atoms.element = [Element.C, Element.Cl, Element.Cl]
    assert atoms.get_element(1) == Element.Cl


def test_copy(atoms):
    """
    A copy is equal to the original, but independent of it.
    """
    clone = atoms.copy()
    assert clone == atoms
    clone.set_element(0, Element.S)
    clone.set_position(0, [1.0, 1.0, 1.0])
    assert atoms.get_element(0) == Element.O
    assert atoms.get_position(0).tolist() == [0.0, 0.0, 0.0]
    assert clone != atoms


def test_iteration(atoms):
    elements = [element for element, _ in atoms]
    assert elements == [Element.O, Element.H, Element.H]


def test_str(atoms):
    assert str(atoms).splitlines()[0] == "O       0.000    0.000    0.000"
    assert str(struc.AtomCollection(1)) == "?       0.000    0.000    0.000"


def test_unit_conversion():
    """
    Converting from bohr to Angstrom and back gives the original values.
    """
    assert struc.bohr_to_angstrom(1.0) == pytest.approx(0.529177210903)
    assert struc.angstrom_to_bohr(0.529177210903) == pytest.approx(1.0)
    values = np.array([[-3.2, 0.0, 12.5]])
    assert np.allclose(struc.angstrom_to_bohr(struc.bohr_to_angstrom(values)), values)
