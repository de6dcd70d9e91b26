import pytest

from finalg import *
from finalg.groups import cyclic, symmetric, dihedral, alternating


E, T01, T12 = (0, 1, 2), (1, 0, 2), (0, 2, 1)
R, R2 = (1, 2, 0), (2, 0, 1)

@pytest.fixture(scope='module')
def Z6():
	return cyclic(6)

@pytest.fixture(scope='module')
def S3():
	return symmetric(3)


# subgroup criterion

def test_subgroup(Z6):
	H = Subgroup(Z6, [3, 0])
	assert H.elements == (0, 3)
	assert len(H) == H.order == 2
	assert 3 in H and 1 not in H
	assert H.parent is Z6
	assert H.identity == 0
	assert H.verify_criterion()
	assert H.verify_finite_criterion()
	assert H.index() == 3
	assert repr(H) == 'Subgroup({0, 3})'

def test_rejected_subsets(Z6):
	with pytest.raises(NotASubgroup) as info:
		Subgroup(Z6, [])
	assert info.value.reason == 'subset is empty'
	with pytest.raises(NotASubgroup) as info:
		Subgroup(Z6, [0, 7])
	assert info.value.witness == 7
	with pytest.raises(NotASubgroup) as info:
		Subgroup(Z6, [0, 1])
	assert info.value.witness == (0, 1)
	with pytest.raises(InsufficientStructure):
		Subgroup(monoid(range(3), lambda a, b: a * b % 3), [1])

def test_equality(Z6):
	assert Subgroup(Z6, [0, 3]) == Subgroup(Z6, [3, 0])
	assert hash(Subgroup(Z6, [0, 3])) == hash(Subgroup(Z6, [3, 0]))
	assert Subgroup(Z6, [0, 3]) != Subgroup(Z6, [0, 2, 4])
	assert Subgroup(Z6, [0, 3]) != Subgroup(cyclic(6), [0, 3])

def test_trivial_and_improper(S3):
	assert trivial_subgroup(S3).elements == (E,)
	assert improper_subgroup(S3).elements == S3.elements
	assert len(trivial_normal_subgroup(S3)) == 1
	assert len(improper_normal_subgroup(S3)) == 6

def test_as_group(S3):
	A3 = Subgroup(S3, [E, R, R2]).as_group()
	assert A3.level == Level.GROUP
	assert A3.order == 3
	assert A3.is_abelian()
	assert is_cyclic(A3)

def test_intersection_and_product(S3):
	H, K = Subgroup(S3, [E, T01]), Subgroup(S3, [E, T12])
	A3 = Subgroup(S3, [E, R, R2])
	assert H.intersection(K) == trivial_subgroup(S3)
	assert len(H.product_set(K)) == 4
	assert not H.is_product_subgroup(K)
	assert A3.product_set(H) == frozenset(S3)
	assert A3.is_product_subgroup(H)
	with pytest.raises(ValueError):
		H.intersection(Subgroup(symmetric(3), [E]))


# normality

def test_normal_subgroup(Z6):
	N = NormalSubgroup(Subgroup(Z6, [0, 3]))
	assert N.elements == (0, 3)
	assert N.verify_normal()
	assert N.verify_normal_via_cosets()
	assert NormalSubgroup(Z6, [0, 2, 4]).index() == 2
	assert is_normal_in_abelian_group(N)

def test_non_normal_subgroup(S3):
	H = Subgroup(S3, [E, T01])
	assert not NormalSubgroup.is_normal(H)
	assert not is_normal_in_abelian_group(H)
	with pytest.raises(NotNormal) as info:
		NormalSubgroup(H)
	g, n = info.value.g, info.value.n
	assert S3.conjugate(g, n) not in H
	with pytest.raises(NotNormal):
		NormalSubgroup(S3, [E, T01])

def test_normality_via_cosets_agrees(S3):
	A3 = NormalSubgroup(S3, [E, R, R2])
	assert A3.verify_normal() and A3.verify_normal_via_cosets()
	for g in S3:
		H = cyclic_subgroup(S3, g)
		if NormalSubgroup.is_normal(H):
			assert NormalSubgroup(H).verify_normal_via_cosets()

def test_normal_subgroup_arguments(Z6):
	with pytest.raises(TypeError):
		NormalSubgroup(Subgroup(Z6, [0]), [0])
	with pytest.raises(TypeError):
		NormalSubgroup(Z6)


# center and centralizers

def test_center():
	D4 = dihedral(4)
	Z = center(D4)
	assert isinstance(Z, NormalSubgroup)
	assert Z.elements == ((0, 0), (2, 0))
	assert not is_centerless(D4)
	assert is_in_center(D4, (2, 0))
	assert not is_in_center(D4, (1, 0))

def test_center_extremes(Z6, S3):
	assert center(Z6) == improper_subgroup(Z6)
	assert is_centerless(S3)
	assert center(S3).elements == (E,)
	assert is_centerless(alternating(4))

def test_centralizer(S3, Z6):
	assert centralizer(S3, T01).elements == (E, T01)
	assert centralizer(S3, E) == improper_subgroup(S3)
	assert centralizer(S3, R).elements == (E, R, R2)
	assert centralizer(Z6, 1) == improper_subgroup(Z6)
	with pytest.raises(ElementNotInDomain):
		centralizer(S3, (0, 1))

def test_commutes(S3):
	assert commutes(S3, R, R2)
	assert not commutes(S3, T01, T12)
	assert not commutes(S3, T01, (0, 1))
