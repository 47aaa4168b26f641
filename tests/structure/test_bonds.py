# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import numpy as np
import pytest
import molstream.structure as struc


@pytest.fixture
def bond_orders():
    """
    A toy :class:`BondOrderCollection`.
    """
    bond_orders = struc.BondOrderCollection(5)
    bond_orders.set_order(0, 1, 1.0)
    bond_orders.set_order(3, 1, 2.0)
    bond_orders.set_order(2, 4, 1.5)
    return bond_orders


def test_creation(bond_orders):
    """
    Test creating a :class:`BondOrderCollection` on a known example.
    """
    assert bond_orders.get_atom_count() == 5
    assert bond_orders.get_bond_count() == 3
    assert len(bond_orders) == 3
    assert bond_orders.as_array().tolist() == [
        [0, 1, 1.0],
        [1, 3, 2.0],
        [2, 4, 1.5],
    ]


def test_empty():
    bond_orders = struc.BondOrderCollection()
    assert bond_orders.get_atom_count() == 0
    assert bond_orders.as_array().shape == (0, 3)
    assert list(bond_orders.items()) == []


def test_symmetry(bond_orders):
    """
    The order of the atom indices is irrelevant.
    """
    assert bond_orders.get_order(1, 3) == 2.0
    assert bond_orders.get_order(3, 1) == 2.0
    bond_orders.set_order(1, 0, 3.0)
    assert bond_orders.get_order(0, 1) == 3.0
    assert bond_orders.get_bond_count() == 3


def test_unset_order(bond_orders):
    assert bond_orders.get_order(0, 4) == 0.0


def test_items_are_ordered(bond_orders):
    """
    Bonds are iterated with the lower atom index first and in ascending
    order.
    """
    bond_orders.set_order(4, 0, 1.0)
    assert [(i, j) for i, j, _ in bond_orders] == [(0, 1), (0, 4), (1, 3), (2, 4)]


def test_remove(bond_orders):
    """
    Setting an order of zero or explicit removal deletes a bond.
    """
    bond_orders.set_order(1, 0, 0)
    assert bond_orders.get_bond_count() == 2
    bond_orders.remove_order(4, 2)
    assert bond_orders.get_bond_count() == 1
    # Removing a non-existing bond is no error
    bond_orders.remove_order(0, 4)
    assert bond_orders.get_bond_count() == 1


@pytest.mark.parametrize("index", [-1, 5, 100])
def test_invalid_index(bond_orders, index):
    with pytest.raises(IndexError):
        bond_orders.set_order(0, index, 1.0)
    with pytest.raises(IndexError):
        bond_orders.get_order(index, 0)


def test_invalid_bonds(bond_orders):
    with pytest.raises(ValueError):
        bond_orders.set_order(2, 2, 1.0)
    with pytest.raises(ValueError):
        bond_orders.set_order(0, 2, -1.0)
    with pytest.raises(ValueError):
        bond_orders.set_order(0, 2, np.nan)
    with pytest.raises(ValueError):
        bond_orders.set_order(0, 2, np.inf)
    with pytest.raises(ValueError):
        bond_orders.set_order(0, 2, -np.inf)
    with pytest.raises(TypeError):
        bond_orders.set_order(0.0, 2, 1.0)


def test_resize(bond_orders):
    """
    Shrinking the table removes all bonds to atoms that are out of
    range.
    """
    bond_orders.resize(4)
    assert bond_orders.get_atom_count() == 4
    assert bond_orders.as_array().tolist() == [[0, 1, 1.0], [1, 3, 2.0]]
    bond_orders.resize(10)
    bond_orders.set_order(9, 0, 1.0)
    assert bond_orders.get_bond_count() == 3


def test_copy(bond_orders):
    clone = bond_orders.copy()
    assert clone == bond_orders
    clone.set_order(0, 2, 1.0)
    assert bond_orders.get_order(0, 2) == 0.0
    assert clone != bond_orders


def test_equality():
    a = struc.BondOrderCollection(3)
    b = struc.BondOrderCollection(4)
    assert a != b
    b.resize(3)
    assert a == b
    a.set_order(0, 1, 2)
    b.set_order(1, 0, 2.0)
    assert a == b
