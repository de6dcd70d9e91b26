'''
subgroups and normal subgroups of a validated group, plus the centre and
centralisers (which are always subgroups).
'''

from typing import Optional, Iterator, Iterable, Any
import logging

from .errors import NotASubgroup, NotNormal, ElementNotInDomain, InsufficientStructure
from .structures import Structure, Level, group

__all__ = [
	'Subgroup', 'NormalSubgroup',
	'trivial_subgroup', 'improper_subgroup',
	'trivial_normal_subgroup', 'improper_normal_subgroup',
	'is_normal_in_abelian_group',
	'center', 'is_in_center', 'is_centerless',
	'centralizer', 'commutes',
]

_logger = logging.getLogger(__name__)


def _require_group(parent: Structure):
	if parent.level < Level.GROUP:
		raise InsufficientStructure(Level.GROUP, parent.level)

def _subgroup_violation(parent: Structure, candidates: tuple, closure_only=False) -> Optional[NotASubgroup]:
	'''
	returns the reason `candidates` isn't a subgroup of `parent`, or None.
	the full criterion checks `a ∘ b⁻¹`; with `closure_only` it checks `a ∘ b`,
	which is equivalent for finite groups.
	'''
	if not candidates:
		return NotASubgroup('subset is empty')
	for x in candidates:
		if x not in parent:
			return NotASubgroup('element is not in the parent group', x)
	subset = frozenset(candidates)
	combine = parent.operate if closure_only else parent.divide
	for a in candidates:
		for b in candidates:
			if combine(a, b) not in subset:
				law = 'a ∘ b' if closure_only else 'a ∘ b⁻¹'
				return NotASubgroup(f'{law} is not in the subset', (a, b))
	return None


# SUBGROUP
# --------

class Subgroup:
	'''
	a subset of a group's carrier which is a group under the same operation.

	construction verifies the subgroup criterion: the subset is nonempty, lies
	in the parent, and `a ∘ b⁻¹` stays in it for every pair. the subgroup keeps
	a reference to its parent and lists its elements in the parent's order.
	'''

	_parent: Structure
	_members: tuple
	_elements: frozenset

	def __init__(self, parent: Structure, subset: Iterable):
		_require_group(parent)
		candidates = tuple(dict.fromkeys(subset))
		if (error := _subgroup_violation(parent, candidates)) is not None:
			_logger.debug('rejected subgroup: %s', error)
			raise error
		self._parent = parent
		self._elements = frozenset(candidates)
		self._members = tuple(x for x in parent if x in self._elements)
		_logger.debug('validated subgroup of order %d in a group of order %d', len(self), len(parent))

	def __repr__(self):
		return f'{type(self).__name__}({{{", ".join(map(repr, self._members))}}})'

	@property
	def parent(self) -> Structure:
		return self._parent

	@property
	def elements(self) -> tuple:
		return self._members

	@property
	def order(self) -> int:
		return len(self._members)

	@property
	def identity(self) -> Any:
		''' same as the parent's '''
		return self._parent.identity

	def __len__(self) -> int:
		return len(self._members)

	def __iter__(self) -> Iterator:
		return iter(self._members)

	def __contains__(self, x: Any) -> bool:
		return x in self._elements

	def __eq__(self, other):
		if not isinstance(other, Subgroup):
			return NotImplemented
		return self._parent is other._parent and self._elements == other._elements

	def __hash__(self):
		return hash((id(self._parent), self._elements))

	# verification

	def verify_criterion(self) -> bool:
		''' re-checks the `a ∘ b⁻¹` criterion '''
		return _subgroup_violation(self._parent, self._members) is None

	def verify_finite_criterion(self) -> bool:
		''' re-checks the closure-only criterion, valid for finite groups '''
		return _subgroup_violation(self._parent, self._members, closure_only=True) is None

	# derived views

	def index(self) -> int:
		''' index [G : H], the amount of distinct left cosets '''
		from .cosets import subgroup_index
		return subgroup_index(self._parent, self)

	def as_group(self) -> Structure:
		''' the subgroup as a standalone validated group '''
		parent = self._parent
		return group(self._members, parent.operation, parent.identity, parent.inverse)

	def _check_same_parent(self, other: 'Subgroup'):
		if self._parent is not other._parent:
			raise ValueError('subgroups must belong to the same parent group')

	def intersection(self, other: 'Subgroup') -> 'Subgroup':
		''' the intersection of two subgroups, which is always a subgroup '''
		self._check_same_parent(other)
		return Subgroup(self._parent, (x for x in self if x in other))

	def product_set(self, other: 'Subgroup') -> frozenset:
		'''
		the set `HK = {h ∘ k | h ∈ H, k ∈ K}`. this isn't necessarily a subgroup;
		see `is_product_subgroup()`.
		'''
		self._check_same_parent(other)
		op = self._parent.operate
		return frozenset(op(h, k) for h in self for k in other)

	def is_product_subgroup(self, other: 'Subgroup') -> bool:
		''' HK is a subgroup iff HK = KH '''
		hk = self.product_set(other)
		if hk != other.product_set(self):
			return False
		return _subgroup_violation(self._parent, tuple(hk)) is None


def trivial_subgroup(parent: Structure) -> Subgroup:
	''' the subgroup `{e}` '''
	return Subgroup(parent, (parent.identity,))

def improper_subgroup(parent: Structure) -> Subgroup:
	''' the group itself, as a subgroup '''
	return Subgroup(parent, parent)


# NORMAL SUBGROUP
# ---------------

class NormalSubgroup(Subgroup):
	'''
	a subgroup closed under conjugation: `g ∘ n ∘ g⁻¹ ∈ N` for every `g` in the
	parent and every `n` in N. these are exactly the subgroups whose left and
	right cosets coincide, and the ones a factor group can be built over.

	can be built from an existing `Subgroup`, or from a parent group and a subset
	(in which case the subgroup criterion is verified first).
	'''

	def __init__(self, subgroup: Subgroup | Structure, subset: Optional[Iterable] = None):
		if isinstance(subgroup, Subgroup):
			if subset is not None:
				raise TypeError('a subset is only accepted together with a parent group')
			self._parent = subgroup._parent
			self._members = subgroup._members
			self._elements = subgroup._elements
		else:
			if subset is None:
				raise TypeError('a subset is required when building from a parent group')
			super().__init__(subgroup, subset)
		if (witness := self._conjugation_violation(self)) is not None:
			error = NotNormal(*witness)
			_logger.debug('rejected normal subgroup: %s', error)
			raise error

	@staticmethod
	def _conjugation_violation(subgroup: Subgroup) -> Optional[tuple]:
		G = subgroup.parent
		for g in G:
			for n in subgroup:
				if G.conjugate(g, n) not in subgroup:
					return g, n
		return None

	def verify_normal(self) -> bool:
		''' re-checks conjugation closure '''
		return self._conjugation_violation(self) is None

	def verify_normal_via_cosets(self) -> bool:
		''' checks `gN = Ng` for every `g` in the parent; must agree with `verify_normal()` '''
		op = self._parent.operate
		return all(
			{ op(g, n) for n in self } == { op(n, g) for n in self }
			for g in self._parent
		)

	@staticmethod
	def is_normal(subgroup: Subgroup) -> bool:
		''' checks conjugation closure of an arbitrary subgroup without building a NormalSubgroup '''
		return NormalSubgroup._conjugation_violation(subgroup) is None


def trivial_normal_subgroup(parent: Structure) -> NormalSubgroup:
	return NormalSubgroup(trivial_subgroup(parent))

def improper_normal_subgroup(parent: Structure) -> NormalSubgroup:
	return NormalSubgroup(improper_subgroup(parent))

def is_normal_in_abelian_group(subgroup: Subgroup) -> bool:
	''' every subgroup of an abelian group is normal; this reports whether that shortcut applies '''
	return subgroup.parent.is_abelian()


# CENTER / CENTRALIZER
# --------------------

def commutes(G: Structure, a: Any, b: Any) -> bool:
	''' whether `a ∘ b = b ∘ a` (False if either is outside the group) '''
	if a not in G or b not in G:
		return False
	return G.operate(a, b) == G.operate(b, a)

def is_in_center(G: Structure, z: Any) -> bool:
	if z not in G:
		return False
	return all(commutes(G, z, g) for g in G)

def center(G: Structure) -> NormalSubgroup:
	'''
	the centre Z(G): elements commuting with every element of G.
	it's always a normal (and abelian) subgroup.
	'''
	_require_group(G)
	return NormalSubgroup(G, [z for z in G if is_in_center(G, z)])

def is_centerless(G: Structure) -> bool:
	''' whether Z(G) = {e} '''
	return len(center(G)) == 1

def centralizer(G: Structure, a: Any) -> Subgroup:
	''' the centraliser C_G(a): elements commuting with `a` '''
	_require_group(G)
	if a not in G:
		raise ElementNotInDomain(a, 'group')
	return Subgroup(G, [g for g in G if commutes(G, g, a)])
