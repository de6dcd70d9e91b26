import itertools
import math

import pytest

from finalg import *
from finalg import groups
from finalg.groups import *


def verify_enumeration(G: Structure):
	assert G.level == Level.GROUP
	assert len(set(G)) == len(G) == G.order
	assert G.elements[0] == G.identity
	for a in G:
		assert a in G
		assert G.operate(a, G.inverse(a)) == G.identity


# permutations

@pytest.mark.parametrize('size', [3, 4])
def test_symmetric_group(size):
	Sn = symmetric(size)
	assert Sn.identity == tuple(range(size))
	assert len(Sn) == math.factorial(size)
	verify_enumeration(Sn)
	for a, b in itertools.pairwise(Sn):
		assert a < b
	for a in Sn:
		assert a == from_cycles(size, *cycles(a))
		assert compose(a, invert(a)) == Sn.identity
		for k in range(-5, 6):
			base = a if k >= 0 else invert(a)
			expected = Sn.identity
			for _ in range(abs(k)):
				expected = compose(expected, base)
			assert Sn.power(a, k) == expected

def test_cycle_helpers():
	assert cycles((1, 2, 0)) == [[0, 1, 2]]
	assert cycles((1, 0, 2)) == [[0, 1], [2]]
	assert cycles((1, 0, 2), fixpoints=False) == [[0, 1]]
	assert from_cycles(3, [0, 1, 2]) == (1, 2, 0)
	assert cycle_type((1, 0, 3, 2, 4)) == (2, 2, 1)
	assert sign((1, 0, 2)) == 1
	assert sign((1, 2, 0)) == 0
	assert format_cycles((1, 0, 3, 2)) == '[0,1][2,3]'
	assert format_cycles((0, 1, 2)) == 'ID'

def test_from_cycles_rejects_bad_input():
	with pytest.raises(ValueError):
		from_cycles(3, [0, 0])
	with pytest.raises(ValueError):
		from_cycles(3, [0, 5])
	with pytest.raises(ValueError):
		from_cycles(3, [0, 1], strict=True)
	assert from_cycles(3, [0, 1], [2], strict=True) == (1, 0, 2)


# catalog

def test_cyclic():
	Z6 = cyclic(6)
	verify_enumeration(Z6)
	assert Z6.elements == (0, 1, 2, 3, 4, 5)
	assert Z6.is_abelian()
	with pytest.raises(ValueError):
		cyclic(0)

def test_alternating():
	assert len(alternating(3)) == 3
	A4 = alternating(4)
	assert len(A4) == 12
	verify_enumeration(A4)
	assert all(sign(p) == 0 for p in A4)

def test_dihedral():
	D4 = dihedral(4)
	verify_enumeration(D4)
	assert len(D4) == 8
	assert not D4.is_abelian()
	# reflections are involutions
	for k in range(4):
		assert D4.inverse((k, 1)) == (k, 1)
	assert len(dihedral(3)) == 6

def test_units():
	U8 = units(8)
	verify_enumeration(U8)
	assert U8.elements == (1, 3, 5, 7)
	assert all(U8.inverse(a) == a for a in U8)
	assert units(1).elements == (0,)
	assert units(7).inverse(3) == 5

def test_direct_product():
	V = direct_product(cyclic(2), cyclic(2))
	verify_enumeration(V)
	assert V.elements == ((0, 0), (0, 1), (1, 0), (1, 1))
	assert V.operate((0, 1), (1, 1)) == (1, 0)
	assert not is_cyclic(V)
	assert is_cyclic(direct_product(cyclic(2), cyclic(3)))
	with pytest.raises(InsufficientStructure):
		direct_product(cyclic(2), semigroup(range(2), max))

def test_semidirect_product_needs_an_action():
	with pytest.raises(NotAssociative):
		semidirect_product(cyclic(3), cyclic(2), lambda h, k: (k + h) % 3)

def test_automatic_names():
	assert groups.Z6 is groups.Z6
	assert len(groups.Z6) == 6
	assert len(groups.S3) == 6
	assert len(groups.A4) == 12
	assert len(groups.D5) == 10
	assert groups.U9.elements == (1, 2, 4, 5, 7, 8)
	with pytest.raises(AttributeError):
		groups.Q8
	with pytest.raises(AttributeError):
		groups.nonexistent
