'''
cosets of a subgroup, and Lagrange's theorem.

the left cosets of H partition G into `[G : H]` blocks of `|H|` elements each,
so `|G| = |H| × [G : H]`.
'''

from typing import Iterator, Iterable, Any
import enum
import logging

from .errors import ElementNotInDomain
from .structures import Structure
from .subgroups import Subgroup

__all__ = [
	'Side', 'Coset',
	'find_all_cosets', 'left_coset_partition', 'right_coset_partition', 'verify_partition',
	'subgroup_index', 'verify_lagrange', 'order_divides_group_order', 'possible_subgroup_orders',
]

_logger = logging.getLogger(__name__)


class Side(enum.Enum):
	LEFT = 'left'    # g ∘ H
	RIGHT = 'right'  # H ∘ g


class Coset:
	'''
	the translate `g ∘ H` (left) or `H ∘ g` (right) of a subgroup by a
	representative `g`.

	the element set is computed once, at construction. two cosets are equal
	whenever they have the same elements in the same group, no matter which
	representative (or side) they were built from.
	'''

	_group: Structure
	_subgroup: Subgroup
	_representative: Any
	_side: Side
	_members: tuple
	_elements: frozenset

	def __init__(self, group: Structure, subgroup: Subgroup, representative: Any, side: Side = Side.LEFT):
		if subgroup.parent is not group:
			raise ValueError('the subgroup does not belong to this group')
		if representative not in group:
			raise ElementNotInDomain(representative, 'group')
		op = group.operate
		if side is Side.LEFT:
			elements = { op(representative, h) for h in subgroup }
		else:
			elements = { op(h, representative) for h in subgroup }
		self._group = group
		self._subgroup = subgroup
		self._representative = representative
		self._side = side
		self._elements = frozenset(elements)
		self._members = tuple(x for x in group if x in self._elements)

	def __repr__(self):
		return f'{type(self).__name__}({self})'

	def __str__(self):
		return '{' + ', '.join(map(str, self._members)) + '}'

	@property
	def group(self) -> Structure:
		return self._group

	@property
	def subgroup(self) -> Subgroup:
		return self._subgroup

	@property
	def representative(self) -> Any:
		''' the element this coset was built from (any member would do) '''
		return self._representative

	@property
	def side(self) -> Side:
		return self._side

	@property
	def elements(self) -> tuple:
		''' members, in the order of the group's carrier '''
		return self._members

	def __len__(self) -> int:
		return len(self._members)

	def __iter__(self) -> Iterator:
		return iter(self._members)

	def __contains__(self, x: Any) -> bool:
		return x in self._elements

	def __eq__(self, other):
		if not isinstance(other, Coset):
			return NotImplemented
		return self._group is other._group and self._elements == other._elements

	def __hash__(self):
		return hash(self._elements)


# PARTITIONS
# ----------

def find_all_cosets(group: Structure, subgroup: Subgroup, side: Side = Side.LEFT) -> list[Coset]:
	'''
	partitions the carrier of `group` into the distinct cosets of `subgroup`.

	walks the carrier in order, and each element not yet covered becomes the
	representative of a new coset; every element therefore lands in exactly one.
	'''
	cosets: list[Coset] = []
	covered: set = set()
	for g in group:
		if g in covered:
			continue
		coset = Coset(group, subgroup, g, side)
		cosets.append(coset)
		covered.update(coset)
	_logger.debug('found %d %s cosets of a subgroup of order %d', len(cosets), side.value, len(subgroup))
	return cosets

def left_coset_partition(group: Structure, subgroup: Subgroup) -> list[Coset]:
	return find_all_cosets(group, subgroup, Side.LEFT)

def right_coset_partition(group: Structure, subgroup: Subgroup) -> list[Coset]:
	return find_all_cosets(group, subgroup, Side.RIGHT)

def verify_partition(group: Structure, blocks: Iterable[Iterable[Any]]) -> bool:
	''' checks that `blocks` are pairwise disjoint and cover exactly the carrier of `group` '''
	union: set = set()
	for block in blocks:
		block = set(block)
		if union & block:
			return False
		union |= block
	return union == set(group)


# LAGRANGE'S THEOREM
# ------------------

def subgroup_index(group: Structure, subgroup: Subgroup) -> int:
	''' the index [G : H], counted as the amount of distinct left cosets '''
	return len(find_all_cosets(group, subgroup))

def verify_lagrange(group: Structure, subgroup: Subgroup) -> bool:
	''' checks `|G| = |H| × [G : H]` '''
	return len(group) == len(subgroup) * subgroup_index(group, subgroup)

def order_divides_group_order(group: Structure, subgroup: Subgroup) -> bool:
	''' the necessary condition from Lagrange's theorem: |H| divides |G| '''
	return len(group) % len(subgroup) == 0

def possible_subgroup_orders(group: Structure) -> list[int]:
	'''
	the divisors of |G|, ascending. by Lagrange's theorem these are the only
	orders a subgroup can have (though not every divisor need be attained).
	'''
	n = len(group)
	return [d for d in range(1, n + 1) if n % d == 0]
