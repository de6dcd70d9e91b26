'''
element orders and the group exponent.

orders are found by iterating powers of the element, never by number-theoretic
shortcuts. the iteration is bounded by |G|: in a genuine finite group the
identity always recurs within that many steps, so an absent order (None)
means something upstream is broken.
'''

from typing import Optional, Any
import math
import logging

from .errors import ElementNotInDomain, NoFiniteOrder, InsufficientStructure
from .structures import Structure, Level

__all__ = [
	'element_order', 'finite_order', 'has_order', 'has_finite_order',
	'satisfies_identity_power', 'elements_of_order', 'order_via_cyclic_subgroup',
	'order_equals_inverse_order', 'order_divides_power', 'order_of_power',
	'group_exponent', 'finite_exponent', 'exponent_by_definition',
	'satisfies_exponent', 'exponent_divides_order', 'has_exponent',
	'exponent_is_lcm_of_orders', 'orders_divide_exponent',
]

_logger = logging.getLogger(__name__)


def _check_element(G: Structure, a: Any):
	if G.level < Level.GROUP:
		raise InsufficientStructure(Level.GROUP, G.level)
	if a not in G:
		raise ElementNotInDomain(a, 'group')


# ELEMENT ORDER
# -------------

def element_order(G: Structure, a: Any) -> Optional[int]:
	'''
	the order of `a`: the lowest positive `n` with `a ** n = e`.

	returns None if the identity doesn't recur within |G| steps (which can't
	happen in a validated finite group).
	'''
	_check_element(G, a)
	e, op = G.identity, G.operation
	current = a
	for n in range(1, len(G) + 1):
		if current == e:
			return n
		current = op(current, a)
	_logger.warning('no finite order found for %r within %d steps', a, len(G))
	return None

def finite_order(G: Structure, a: Any) -> int:
	''' like `element_order()`, but raises `NoFiniteOrder` instead of returning None '''
	order = element_order(G, a)
	if order is None:
		raise NoFiniteOrder(a)
	return order

def has_finite_order(G: Structure, a: Any) -> bool:
	return element_order(G, a) is not None

def has_order(G: Structure, a: Any, n: int) -> bool:
	return element_order(G, a) == n

def satisfies_identity_power(G: Structure, a: Any, n: int) -> bool:
	''' whether `a ** n = e` '''
	_check_element(G, a)
	return G.power(a, n) == G.identity

def elements_of_order(G: Structure, n: int) -> tuple:
	''' every element of order `n`, in carrier order '''
	return tuple(a for a in G if has_order(G, a, n))

def order_via_cyclic_subgroup(G: Structure, a: Any) -> Optional[int]:
	'''
	computes the order as the size of the cycle `e, a, a², ...` generated by `a`,
	collecting powers until the identity shows up. independent from
	`element_order()`, and must agree with it.
	'''
	_check_element(G, a)
	e, op = G.identity, G.operation
	seen: set = set()
	current = a
	while current not in seen and len(seen) < len(G):
		seen.add(current)
		if current == e:
			return len(seen)
		current = op(current, a)
	return None


# ORDER PROPERTIES
# ----------------

def order_equals_inverse_order(G: Structure, a: Any) -> bool:
	''' checks `ord(a) = ord(a⁻¹)` '''
	order = element_order(G, a)
	return order is not None and order == element_order(G, G.inverse(a))

def order_divides_power(G: Structure, a: Any, n: int) -> bool:
	''' checks that `a ** n = e` implies `ord(a) | n` (False if `a ** n != e`) '''
	if not satisfies_identity_power(G, a, n):
		return False
	order = element_order(G, a)
	return order is not None and n % order == 0

def order_of_power(G: Structure, a: Any, k: int) -> bool:
	''' checks `ord(a ** k) = ord(a) / gcd(ord(a), k)` '''
	order = element_order(G, a)
	if order is None:
		return False
	expected = order // math.gcd(order, k)
	return element_order(G, G.power(a, k)) == expected


# GROUP EXPONENT
# --------------

def group_exponent(G: Structure) -> Optional[int]:
	'''
	the exponent exp(G): the lowest positive `n` with `a ** n = e` for every `a`,
	computed as the lcm of all element orders. None if any order is unknown.
	'''
	orders = [element_order(G, a) for a in G]
	if not orders or None in orders:
		return None
	return math.lcm(*orders)

def finite_exponent(G: Structure) -> int:
	''' like `group_exponent()`, but raises `NoFiniteOrder` for the first element without an order '''
	orders = []
	for a in G:
		orders.append(finite_order(G, a))
	return math.lcm(*orders)

def satisfies_exponent(G: Structure, n: int) -> bool:
	''' whether `a ** n = e` for every element '''
	return all(satisfies_identity_power(G, a, n) for a in G)

def exponent_by_definition(G: Structure) -> Optional[int]:
	'''
	the exponent found straight from its definition, trying `n = 1, 2, ...`
	up to |G| (the exponent always divides |G|).
	'''
	for n in range(1, len(G) + 1):
		if satisfies_exponent(G, n):
			return n
	return None

def exponent_divides_order(G: Structure) -> bool:
	''' checks exp(G) | |G| '''
	exponent = group_exponent(G)
	return exponent is not None and len(G) % exponent == 0

def has_exponent(G: Structure, n: int) -> bool:
	return group_exponent(G) == n

def exponent_is_lcm_of_orders(G: Structure) -> bool:
	''' checks that the lcm of the element orders is the definitional exponent '''
	exponent = group_exponent(G)
	return exponent is not None and exponent == exponent_by_definition(G)

def orders_divide_exponent(G: Structure) -> bool:
	exponent = group_exponent(G)
	if exponent is None:
		return False
	return all(exponent % element_order(G, a) == 0 for a in G)
