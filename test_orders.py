import logging

import pytest

from finalg import *
from finalg.groups import cyclic, symmetric, dihedral, direct_product


@pytest.fixture(scope='module')
def Z6():
	return cyclic(6)

@pytest.fixture(scope='module', params=['S3', 'D4', 'Z2xZ2', 'Z12'])
def G(request):
	return {
		'S3': lambda: symmetric(3),
		'D4': lambda: dihedral(4),
		'Z2xZ2': lambda: direct_product(cyclic(2), cyclic(2)),
		'Z12': lambda: cyclic(12),
	}[request.param]()


def test_element_orders(Z6):
	assert element_order(Z6, 1) == 6
	assert { a: element_order(Z6, a) for a in Z6 } == { 0: 1, 1: 6, 2: 3, 3: 2, 4: 3, 5: 6 }
	assert finite_order(Z6, 4) == 3
	assert has_finite_order(Z6, 5)
	assert has_order(Z6, 3, 2)
	assert not has_order(Z6, 3, 3)
	assert elements_of_order(Z6, 6) == (1, 5)
	assert elements_of_order(Z6, 4) == ()

def test_identity_power(Z6):
	assert satisfies_identity_power(Z6, 2, 3)
	assert satisfies_identity_power(Z6, 2, 6)
	assert not satisfies_identity_power(Z6, 2, 4)
	assert satisfies_identity_power(Z6, 1, 0)

def test_permutation_orders():
	S3 = symmetric(3)
	assert element_order(S3, (0, 1, 2)) == 1
	assert element_order(S3, (1, 0, 2)) == 2
	assert element_order(S3, (1, 2, 0)) == 3
	assert element_order(dihedral(4), (1, 0)) == 4
	assert element_order(dihedral(4), (1, 1)) == 2

def test_order_errors(Z6):
	with pytest.raises(ElementNotInDomain):
		element_order(Z6, 6)
	with pytest.raises(InsufficientStructure):
		element_order(monoid(range(3), lambda a, b: a * b % 3), 1)

def test_order_properties(G):
	for a in G:
		order = element_order(G, a)
		assert order_via_cyclic_subgroup(G, a) == order
		assert len(G) % order == 0
		assert order_equals_inverse_order(G, a)
		assert order_divides_power(G, a, order)
		assert order_divides_power(G, a, 2 * order)
		for k in range(-3, 8):
			assert order_of_power(G, a, k)

def test_order_divides_power(Z6):
	assert order_divides_power(Z6, 2, 6)
	assert not order_divides_power(Z6, 2, 4)

def test_exponent(Z6):
	assert group_exponent(Z6) == 6
	assert finite_exponent(Z6) == 6
	assert has_exponent(Z6, 6)
	assert group_exponent(symmetric(3)) == 6
	assert group_exponent(dihedral(4)) == 4
	assert group_exponent(direct_product(cyclic(2), cyclic(2))) == 2
	assert group_exponent(cyclic(1)) == 1

def test_exponent_properties(G):
	exponent = group_exponent(G)
	assert exponent_by_definition(G) == exponent
	assert exponent_is_lcm_of_orders(G)
	assert orders_divide_exponent(G)
	assert exponent_divides_order(G)
	assert satisfies_exponent(G, exponent)
	assert satisfies_exponent(G, 2 * exponent)
	assert not any(satisfies_exponent(G, n) for n in range(1, exponent))

def test_orders_are_not_logged_as_missing(Z6, caplog):
	with caplog.at_level(logging.WARNING, logger='finalg.orders'):
		group_exponent(Z6)
	assert not caplog.records
