'''
factor (quotient) groups G/N.
'''

from typing import Iterator, Any
import logging

from .errors import ElementNotInDomain
from .structures import Structure, group
from .subgroups import Subgroup, NormalSubgroup
from .cosets import Coset, find_all_cosets

__all__ = ['FactorGroup']

_logger = logging.getLogger(__name__)


class FactorGroup:
	'''
	the factor group G/N of a group by a normal subgroup.

	its elements are the cosets of N (the left cosets, which for a normal
	subgroup are also the right ones), and the operation is induced from G:

		(aN) ∘ (bN) = (a ∘ b)N

	`operate` takes one representative of each coset, multiplies them in G and
	looks up the coset containing the result. the answer doesn't depend on the
	representatives chosen precisely because N is normal, which is why a plain
	`Subgroup` is first run through `NormalSubgroup` (raising `NotNormal` if it
	isn't one).
	'''

	_group: Structure
	_normal: NormalSubgroup
	_cosets: tuple[Coset, ...]
	_coset_set: frozenset
	_lookup: dict[Any, Coset]

	def __init__(self, group: Structure, normal_subgroup: Subgroup):
		if normal_subgroup.parent is not group:
			raise ValueError('the subgroup does not belong to this group')
		if not isinstance(normal_subgroup, NormalSubgroup):
			normal_subgroup = NormalSubgroup(normal_subgroup)
		self._group = group
		self._normal = normal_subgroup
		self._cosets = tuple(find_all_cosets(group, normal_subgroup))
		self._coset_set = frozenset(self._cosets)
		self._lookup = { g: coset for coset in self._cosets for g in coset }
		_logger.debug('built factor group of order %d from a group of order %d', len(self._cosets), len(group))

	def __repr__(self):
		return f'{type(self).__name__}(' + ', '.join(map(str, self._cosets)) + ')'

	@property
	def parent(self) -> Structure:
		return self._group

	@property
	def normal_subgroup(self) -> NormalSubgroup:
		return self._normal

	@property
	def cosets(self) -> tuple[Coset, ...]:
		''' the elements of the factor group, ordered by their first member in G '''
		return self._cosets

	@property
	def order(self) -> int:
		''' |G/N|, which is the index [G : N] '''
		return len(self._cosets)

	def __len__(self) -> int:
		return len(self._cosets)

	def __iter__(self) -> Iterator[Coset]:
		return iter(self._cosets)

	def __contains__(self, coset: Any) -> bool:
		return isinstance(coset, Coset) and coset in self._coset_set

	def _check_coset(self, coset: Any):
		if coset not in self:
			raise ElementNotInDomain(coset, 'factor group')

	# operations

	def coset_of(self, g: Any) -> Coset:
		''' the coset gN containing `g` (the natural projection G → G/N) '''
		if g not in self._group:
			raise ElementNotInDomain(g, 'group')
		return self._lookup[g]

	def operate(self, a: Coset, b: Coset) -> Coset:
		self._check_coset(a)
		self._check_coset(b)
		product = self._group.operate(a.representative, b.representative)
		return self._lookup[product]

	def __call__(self, a: Coset, b: Coset) -> Coset:
		return self.operate(a, b)

	@property
	def identity(self) -> Coset:
		''' N itself, the coset containing the identity '''
		return self._lookup[self._group.identity]

	def inverse(self, coset: Coset) -> Coset:
		self._check_coset(coset)
		return self._lookup[self._group.inverse(coset.representative)]

	# verification

	def is_well_defined(self) -> bool:
		'''
		exhaustively checks that the induced operation doesn't depend on the
		representatives: for any cosets A, B and any `a ∈ A`, `b ∈ B`, the
		coset of `a ∘ b` is always the same.
		'''
		op = self._group.operate
		for A in self._cosets:
			for B in self._cosets:
				expected = self._lookup[op(A.representative, B.representative)]
				if any(self._lookup[op(a, b)] != expected for a in A for b in B):
					return False
		return True

	def verify_factor_group(self) -> bool:
		''' re-checks the identity, inverse and associativity laws on the quotient '''
		e = self.identity
		for A in self._cosets:
			if self.operate(e, A) != A or self.operate(A, e) != A:
				return False
		for A in self._cosets:
			inv = self.inverse(A)
			if self.operate(A, inv) != e or self.operate(inv, A) != e:
				return False
		for A in self._cosets:
			for B in self._cosets:
				AB = self.operate(A, B)
				for C in self._cosets:
					if self.operate(AB, C) != self.operate(A, self.operate(B, C)):
						return False
		return True

	def as_group(self) -> Structure:
		''' the factor group as a validated group whose elements are cosets '''
		return group(self._cosets, self.operate, self.identity, self.inverse)
