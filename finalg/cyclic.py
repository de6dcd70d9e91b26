'''
cyclic groups, generators and Euler's totient.

a group G is cyclic if some element `g` has order |G|, in which case
`G = {e, g, g², ...}`. a cyclic group of order n has exactly φ(n) generators.
'''

from typing import Optional, Iterable, Any
import math
import logging

from .errors import ElementNotInDomain, NoGeneratorFound
from .structures import Structure
from .subgroups import Subgroup
from .orders import element_order, group_exponent

__all__ = [
	'is_generator', 'find_generator', 'require_generator', 'find_all_generators', 'is_cyclic',
	'generate_cyclic_subgroup', 'cyclic_subgroup',
	'unique_subgroup_for_each_divisor', 'exponent_equals_order', 'is_isomorphic_to_zn',
	'euler_phi', 'euler_phi_from_factors', 'euler_phi_prime_power',
	'count_coprime', 'coprimes', 'verify_multiplicative_property', 'verify_count',
	'verify_sum_over_divisors', 'number_of_generators', 'elements_of_order_in_cyclic_group',
]

_logger = logging.getLogger(__name__)


# GENERATORS
# ----------

def is_generator(G: Structure, g: Any) -> bool:
	''' whether `g` belongs to G and has order |G| '''
	if g not in G:
		return False
	return element_order(G, g) == len(G)

def find_generator(G: Structure) -> Optional[Any]:
	''' the first generator in carrier order, or None if G isn't cyclic '''
	for g in G:
		if is_generator(G, g):
			return g
	return None

def require_generator(G: Structure) -> Any:
	''' like `find_generator()`, but raises `NoGeneratorFound` '''
	for g in G:
		if is_generator(G, g):
			return g
	raise NoGeneratorFound()

def find_all_generators(G: Structure) -> tuple:
	generators = tuple(g for g in G if is_generator(G, g))
	_logger.debug('found %d generators in a group of order %d', len(generators), len(G))
	return generators

def is_cyclic(G: Structure) -> bool:
	return any(is_generator(G, g) for g in G)


# CYCLIC SUBGROUPS
# ----------------

def generate_cyclic_subgroup(G: Structure, g: Any) -> tuple:
	'''
	the cyclic subgroup ⟨g⟩, as the tuple of powers `(e, g, g², ..., g^(n-1))`
	where n is the order of `g`.

	if the order is unknown, powers are collected for at most |G| steps,
	stopping when the identity comes back. for a validated finite group that
	branch is never taken.
	'''
	if g not in G:
		raise ElementNotInDomain(g, 'group')
	e, op = G.identity, G.operation
	order = element_order(G, g)
	powers = [e]
	current = g
	if order is None:
		for i in range(len(G)):
			if i > 0 and current == e:
				break
			powers.append(current)
			current = op(current, g)
	else:
		for _ in range(1, order):
			powers.append(current)
			current = op(current, g)
	return tuple(dict.fromkeys(powers))

def cyclic_subgroup(G: Structure, g: Any) -> Subgroup:
	''' ⟨g⟩ as a validated `Subgroup` '''
	return Subgroup(G, generate_cyclic_subgroup(G, g))


# PROPERTIES OF CYCLIC GROUPS
# ---------------------------

def unique_subgroup_for_each_divisor(G: Structure) -> bool:
	'''
	checks that G is cyclic and has exactly one subgroup of order d for every
	divisor d of |G| (generated by any element of order d).
	'''
	if not is_cyclic(G):
		return False
	n = len(G)
	orders = { g: element_order(G, g) for g in G }
	for d in range(1, n + 1):
		if n % d:
			continue
		distinct = { frozenset(generate_cyclic_subgroup(G, g)) for g in G if orders[g] == d }
		if len(distinct) != 1:
			return False
	return True

def exponent_equals_order(G: Structure) -> bool:
	''' checks that G is cyclic and exp(G) = |G| '''
	return is_cyclic(G) and group_exponent(G) == len(G)

def is_isomorphic_to_zn(G: Structure, n: int) -> bool:
	''' a finite group is isomorphic to Z/nZ iff it is cyclic of order n '''
	return len(G) == n and is_cyclic(G)


# EULER'S TOTIENT
# ---------------

def euler_phi(n: int) -> int:
	'''
	φ(n), the amount of integers in [1, n] coprime to n, computed as
	`n × ∏(1 - 1/p)` over the distinct primes p dividing n.
	'''
	if n < 0:
		raise ValueError(f'φ is defined on nonnegative integers, got {n}')
	if n == 0:
		return 0
	result, rest = n, n
	p = 2
	while p * p <= rest:
		if rest % p == 0:
			while rest % p == 0:
				rest //= p
			result = result // p * (p - 1)
		p += 1
	if rest > 1:
		result = result // rest * (rest - 1)
	return result

def euler_phi_from_factors(factors: Iterable[tuple[int, int]]) -> int:
	''' φ(n) from the factorisation `n = p1^k1 × ... × pr^kr`, given as (p, k) pairs '''
	factors = list(factors)
	result = math.prod(p ** k for p, k in factors)
	for p, k in factors:
		if k:
			result = result // p * (p - 1)
	return result

def euler_phi_prime_power(p: int, k: int) -> int:
	''' φ(p^k) = p^k - p^(k-1) '''
	if k == 0:
		return 1
	return p ** k - p ** (k - 1)

def count_coprime(n: int) -> int:
	''' φ(n) by brute force, for cross-checking `euler_phi()` '''
	return sum(1 for i in range(1, n + 1) if math.gcd(i, n) == 1)

def coprimes(n: int) -> list[int]:
	''' the integers in [1, n] coprime to n '''
	return [i for i in range(1, n + 1) if math.gcd(i, n) == 1]

def verify_multiplicative_property(m: int, n: int) -> bool:
	''' checks φ(mn) = φ(m)φ(n); only meaningful (and only True) for coprime m, n '''
	if math.gcd(m, n) != 1:
		return False
	return euler_phi(m * n) == euler_phi(m) * euler_phi(n)

def verify_count(n: int) -> bool:
	return euler_phi(n) == count_coprime(n)

def verify_sum_over_divisors(n: int) -> bool:
	''' checks `∑ φ(d) = n` over the divisors d of n '''
	return sum(euler_phi(d) for d in range(1, n + 1) if n % d == 0) == n

def number_of_generators(G: Structure) -> int:
	''' φ(|G|) for a cyclic group, 0 otherwise '''
	if not is_cyclic(G):
		return 0
	return euler_phi(len(G))

def elements_of_order_in_cyclic_group(G: Structure, d: int) -> int:
	''' a cyclic group of order n has φ(d) elements of order d for each d | n, and none of other orders '''
	if not is_cyclic(G) or len(G) % d:
		return 0
	return euler_phi(d)
