import pytest

from finalg import *
from finalg.groups import cyclic, symmetric, format_cycles


def test_group_table():
	T = CayleyTable(cyclic(3))
	assert len(T) == 3
	assert T.elements == (0, 1, 2)
	assert T.lookup(2, 2) == 1
	assert T.row(1) == (1, 2, 0)
	assert T.column(2) == (2, 0, 1)
	assert T.is_associative()
	assert T.is_commutative()
	assert T.find_identity() == 0
	assert T.has_cancellation()
	assert T.is_latin_square()

def test_quasigroup_table():
	T = CayleyTable(groupoid(range(3), lambda a, b: (a - b) % 3))
	assert not T.is_associative()
	assert not T.is_commutative()
	assert not T.has_identity()
	with pytest.raises(NoIdentityFound):
		T.find_identity()
	assert T.is_latin_square()

def test_semigroup_table():
	T = CayleyTable(semigroup(range(3), max))
	assert T.find_identity() == 0
	assert not T.has_left_cancellation()
	assert not T.has_right_cancellation()
	assert not T.is_latin_square()

def test_non_abelian_table():
	S3 = symmetric(3)
	T = CayleyTable(S3)
	assert not T.is_commutative()
	assert T.is_associative()
	assert T.find_identity() == S3.identity
	assert T.is_latin_square()

def test_lookup_errors():
	T = CayleyTable(cyclic(3))
	with pytest.raises(ElementNotInDomain) as info:
		T.lookup(0, 3)
	assert info.value.element == 3
	with pytest.raises(ElementNotInDomain) as info:
		T.lookup(4, 1)
	assert info.value.element == 4
	with pytest.raises(ElementNotInDomain):
		T.row(5)

def test_operation_is_evaluated_once_per_pair():
	calls = 0
	def op(a, b):
		nonlocal calls
		calls += 1
		return (a + b) % 4
	G = group(range(4), op, 0, lambda a: -a % 4)
	calls = 0
	T = CayleyTable(G)
	assert calls == 16
	T.is_associative()
	T.is_commutative()
	T.find_identity()
	T.is_latin_square()
	str(T)
	assert calls == 16

def test_format():
	assert str(CayleyTable(cyclic(2))) == (
		'   ∘   0   1\n'
		'   0   0   1\n'
		'   1   1   0\n'
	)
	lines = CayleyTable(symmetric(3)).format(label=format_cycles).splitlines()
	assert len(lines) == 7
	assert lines[0].split() == ['∘', 'ID', '[1,2]', '[0,1]', '[0,1,2]', '[0,2,1]', '[0,2]']
	assert lines[1].split()[0] == 'ID'
	assert len({ len(line) for line in lines }) == 1

def test_format_corner():
	lines = CayleyTable(cyclic(2)).format(corner='+').splitlines()
	assert lines[0].split() == ['+', '0', '1']

def test_factor_group_table():
	Z6 = cyclic(6)
	Q = FactorGroup(Z6, NormalSubgroup(Z6, [0, 3]))
	T = CayleyTable(Q)
	assert T.find_identity() == Q.identity
	assert T.is_latin_square()
	assert T.is_commutative()
	assert str(T).splitlines()[0].split()[1:4] == ['{0,', '3}', '{1,']
