'''
concrete finite groups, built as validated structures.

every builder here goes through `group()`, so the usual laws are checked
exhaustively even for groups whose laws are well known; the builders are
as much test fixtures as they are conveniences.

small groups can also be obtained by name, e.g. `groups.Z6`, `groups.S3`,
`groups.D4` (see `PREFIXES`).
'''

from typing import Iterator, Iterable, Callable, Any, TypeVar
import itertools
import math
import re

from .structures import Structure, Level, group
from .errors import InsufficientStructure

T = TypeVar('T')

__all__ = [
	'compose', 'invert', 'from_cycles', 'cycles_iter', 'cycles', 'cycle_type', 'sign', 'format_cycles',
	'cyclic', 'symmetric', 'alternating',
	'direct_product', 'semidirect_product', 'dihedral', 'units',
	'PREFIXES',
]

def circular_pairwise(x: Iterable[T]) -> Iterator[tuple[T, T]]:
	''' like pairwise, but with a trailing (last, first) entry '''
	x = iter(x)
	start = next(x)
	e1 = start
	for e2 in x:
		yield (e1, e2)
		e1 = e2
	yield (e1, start)


# PERMUTATIONS
# ------------

# a permutation of N_n is a tuple `p` mapping `i` to `p[i]`. composition
# follows usual left action notation, meaning `compose(a, b)` is `a ∘ b`
# (b is performed first, then a).

Permutation = tuple[int, ...]

def compose(a: Permutation, b: Permutation) -> Permutation:
	return tuple( a[j] for j in b )

def invert(p: Permutation) -> Permutation:
	result = [-1] * len(p)
	for i, j in enumerate(p):
		result[j] = i
	return tuple(result)

def cycles_iter(p: Permutation) -> Iterator[list[int]]:
	''' like cycles(p, sort=False), but yields an iterator over the discovered cycles '''
	seen = 0
	while True:
		# consult start of next cycle to extract
		pending = ~seen
		start_bit = pending & ~(pending - 1)
		start = start_bit.bit_length() - 1
		if not (start < len(p)):
			break
		# extract cycle
		cursor, cycle = start, []
		while True:
			cycle.append(cursor)
			seen |= 1 << cursor
			cursor = p[cursor]
			if cursor == start: break
		yield cycle

def cycles(p: Permutation, sort=True, fixpoints=True) -> list[list[int]]:
	'''
	expresses a permutation as a (normalized) product of disjoint cycles.

	normalization: each cycle begins with its minimal element. cycles are first
	sorted by size (if sort=True), and then by its minimal element.

	parameters:
	 - sort: if True, sort discovered cycles by descending size (cycles of the
	   same size are still solved by ascending minimal element, as noted above).
	 - fixpoints: if False, filter out 1-cycles (fixed points).
	'''
	found: Iterable[list[int]] = cycles_iter(p)
	if not fixpoints:
		found = filter(lambda x: len(x) != 1, found)
	if sort:
		found = sorted(found, key=len, reverse=True)
	return list(found)

def cycle_type(p: Permutation) -> tuple[int, ...]:
	''' the cycle type (conjugation class) of a permutation, as a partition of its size in descending order '''
	return tuple(sorted(map(len, cycles_iter(p)), reverse=True))

def sign(p: Permutation) -> int:
	''' returns the sign (0 → even, 1 → odd) of a permutation '''
	# equivalent to ( size - len(cycles) ) % 2
	return sum(len(c) - 1 for c in cycles_iter(p)) % 2

def from_cycles(size: int, *cycles: Iterable[int], strict=False) -> Permutation:
	'''
	construct a permutation of N_size from disjoint cycles.

	if strict=True, fixpoints must be explicitly mentioned.
	'''
	result = [-1] * size
	for cycle in cycles:
		for i, j in circular_pairwise(cycle):
			if not (isinstance(i, int) and 0 <= i < size and result[i] == -1):
				raise ValueError(f'invalid or repeated cycle entry {i!r}')
			result[i] = j
	for i, j in enumerate(result):
		if j == -1:
			if strict:
				raise ValueError(f'{i} is not mentioned in any cycle')
			result[i] = i
	return tuple(result)

def format_cycles(p: Permutation) -> str:
	''' short cycle notation, e.g. `[0,1,2]` or `[0,1][2,3]`; the identity formats as `ID` '''
	found = cycles(p, fixpoints=False)
	if not found:
		return 'ID'
	return ''.join('[' + ','.join(map(str, c)) + ']' for c in found)


# CATALOG
# -------

def _check_size(n: int, minimum=1):
	if not (isinstance(n, int) and n >= minimum):
		raise ValueError(f'size must be an integer >= {minimum}, got {n!r}')

def _check_groups(*parts: Structure):
	for part in parts:
		if part.level < Level.GROUP:
			raise InsufficientStructure(Level.GROUP, part.level)

def cyclic(n: int) -> Structure:
	''' finite cyclic group Z_n: `{0, ..., n-1}` under addition mod n '''
	_check_size(n)
	return group(range(n), lambda a, b: (a + b) % n, 0, lambda a: -a % n)

def symmetric(n: int) -> Structure:
	'''
	symmetric group S_n over N_n, with `compose` as the operation.

	elements are listed in lexicographical order, so the identity comes first:

		(0, 1, ..., n-1, n) < (0, 1, ..., n, n-1) < ... < (n, n-1, ..., 1, 0)
	'''
	_check_size(n, minimum=0)
	return group(itertools.permutations(range(n)), compose, tuple(range(n)), invert)

def alternating(n: int) -> Structure:
	''' alternating group A_n: the even permutations of S_n '''
	_check_size(n, minimum=0)
	even = (p for p in itertools.permutations(range(n)) if sign(p) == 0)
	return group(even, compose, tuple(range(n)), invert)

def direct_product(*parts: Structure) -> Structure:
	'''
	direct product of groups, with tuple-shaped elements and componentwise
	operation. elements are listed in lexicographical order of the parts'
	own orders.
	'''
	_check_groups(*parts)
	ops = [G.operation for G in parts]
	return group(
		itertools.product(*parts),
		lambda a, b: tuple( op(x, y) for op, x, y in zip(ops, a, b) ),
		tuple( G.identity for G in parts ),
		lambda a: tuple( G.inverse(x) for G, x in zip(parts, a) ),
	)

def semidirect_product(N: Structure, H: Structure, action: Callable[[Any, Any], Any]) -> Structure:
	'''
	(outer) semidirect product N ⋊ H, with `(n, h)` pairs as elements.

	`action(h, n)` is the H → Aut(N) homomorphism characterising the product,
	in curried form. the operation is

		(n1, h1) ∘ (n2, h2) = (n1 ∘ action(h1, n2), h1 ∘ h2)

	if `action` isn't an action by automorphisms, the operation is not
	associative and construction fails with `NotAssociative`.
	'''
	_check_groups(N, H)
	nop, hop = N.operation, H.operation

	def operation(a, b):
		(n1, h1), (n2, h2) = a, b
		return nop(n1, action(h1, n2)), hop(h1, h2)

	def inverse(a):
		n, h = a
		hinv = H.inverse(h)
		return action(hinv, N.inverse(n)), hinv

	return group(itertools.product(N, H), operation, (N.identity, H.identity), inverse)

def dihedral(n: int) -> Structure:
	'''
	dihedral group D_n of order 2n (symmetries of a regular n-gon), as
	Z_n ⋊ Z_2 with the reflection acting by negation.
	element `(k, 0)` is a rotation by k steps, `(k, 1)` a reflection.
	'''
	_check_size(n)
	return semidirect_product(cyclic(n), cyclic(2), lambda h, k: -k % n if h else k)

def units(n: int) -> Structure:
	'''
	multiplicative group of units mod n: residues coprime to n under
	multiplication. inverses are not supplied but searched for.
	'''
	_check_size(n)
	return group((a for a in range(n) if math.gcd(a, n) == 1), lambda a, b: a * b % n, 1 % n)


# AUTOMAGICAL GROUP CREATION
# --------------------------

PREFIXES: dict[str, Callable[[int], Structure]] = {
	'Z': cyclic,
	'S': symmetric,
	'A': alternating,
	'D': dihedral,
	'U': units,
}

def __getattr__(name: str):
	if (m := re.fullmatch(r'(\D+)(\d+)', name)) and (builder := PREFIXES.get(m.group(1))) is not None:
		G = builder(int(m.group(2)))
		globals()[name] = G
		return G
	raise AttributeError(f'module {__name__!r} has no attribute {name!r}')
