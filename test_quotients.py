import pytest

from finalg import *
from finalg.groups import cyclic, symmetric, dihedral


E, T01 = (0, 1, 2), (1, 0, 2)
A3 = [E, (1, 2, 0), (2, 0, 1)]

@pytest.fixture(scope='module')
def Z6():
	return cyclic(6)

@pytest.fixture(scope='module')
def S3():
	return symmetric(3)


def test_factor_group_of_z6(Z6):
	N = NormalSubgroup(Z6, [0, 3])
	Q = FactorGroup(Z6, N)
	assert len(Q) == Q.order == 3
	assert [c.elements for c in Q] == [(0, 3), (1, 4), (2, 5)]
	assert Q.parent is Z6
	assert Q.normal_subgroup is N
	assert Q.identity == Coset(Z6, N, 3)
	assert repr(Q) == 'FactorGroup({0, 3}, {1, 4}, {2, 5})'

def test_operation_ignores_representatives(Z6):
	N = NormalSubgroup(Z6, [0, 3])
	Q = FactorGroup(Z6, N)
	expected = Q.coset_of(3)
	assert Q.operate(Coset(Z6, N, 1), Coset(Z6, N, 2)) == expected
	assert Q.operate(Coset(Z6, N, 4), Coset(Z6, N, 5)) == expected
	assert Q(Coset(Z6, N, 4), Coset(Z6, N, 2)) == expected
	for A in Q:
		for B in Q:
			for a in A:
				for b in B:
					assert Q.coset_of(Z6.operate(a, b)) == Q.operate(A, B)
	assert Q.is_well_defined()
	assert Q.verify_factor_group()

def test_inverse(Z6):
	Q = FactorGroup(Z6, NormalSubgroup(Z6, [0, 2, 4]))
	assert len(Q) == 2
	for A in Q:
		assert Q.operate(A, Q.inverse(A)) == Q.identity

def test_plain_subgroup_is_promoted(S3):
	Q = FactorGroup(S3, Subgroup(S3, A3))
	assert isinstance(Q.normal_subgroup, NormalSubgroup)
	assert Q.order == 2
	G = Q.as_group()
	assert G.level == Level.GROUP
	assert G.is_abelian()
	assert is_cyclic(G)

def test_non_normal_subgroup_is_rejected(S3):
	with pytest.raises(NotNormal):
		FactorGroup(S3, Subgroup(S3, [E, T01]))

def test_foreign_subgroup(S3):
	with pytest.raises(ValueError):
		FactorGroup(symmetric(3), Subgroup(S3, A3))

def test_foreign_cosets(Z6, S3):
	Q = FactorGroup(Z6, NormalSubgroup(Z6, [0, 3]))
	with pytest.raises(ElementNotInDomain):
		Q.operate(Q.identity, 0)
	with pytest.raises(ElementNotInDomain):
		Q.inverse(Coset(S3, Subgroup(S3, A3), E))
	with pytest.raises(ElementNotInDomain):
		Q.coset_of(6)
	assert 0 not in Q

def test_dihedral_mod_center():
	D4 = dihedral(4)
	Q = FactorGroup(D4, center(D4))
	assert Q.order == 4
	assert Q.verify_factor_group()
	V = Q.as_group()
	assert not is_cyclic(V)
	assert group_exponent(V) == 2
	assert CayleyTable(Q).is_latin_square()
