'''
finite structures with one binary operation, validated at construction.

there is a single `Structure` type, tagged with the `Level` it has been
validated up to. structures are built through a chain of constructors, each
of which checks exactly one more law than the previous one:

	groupoid()   closure
	semigroup()  + associativity
	monoid()     + two-sided identity
	group()      + two-sided inverses

the `to_*` variants promote an existing structure instead of building one
from scratch. every check is the exhaustive definitional one; a constructor
either returns a fully validated structure or raises the specific
`AlgebraError` describing the violated law, so an invalid structure is never
observable.
'''

from typing import Self, Optional, Iterator, Iterable, Callable, Any
import enum
import logging

from .errors import (
	ClosureViolation, NotAssociative, InvalidIdentity, NoIdentityFound,
	InvalidInverse, ElementNotInDomain, InsufficientStructure, AlgebraError,
)

__all__ = [
	'Level', 'Structure', 'AUTO', 'Operation',
	'groupoid', 'semigroup', 'monoid', 'group',
	'to_semigroup', 'to_monoid', 'to_group',
	'satisfies_left_axioms', 'satisfies_right_axioms',
]

_logger = logging.getLogger(__name__)

Operation = Callable[[Any, Any], Any]

AUTO = object()
'''
placeholder accepted by the constructor chain in place of an identity element
or an inverse function. the missing piece is then searched for in the carrier
(and the construction fails if the search comes up empty).
'''

_NOTHING = object()


class Level(enum.IntEnum):
	''' how far a structure has been validated. each level adds one law to the previous. '''

	GROUPOID = 1
	SEMIGROUP = 2
	MONOID = 3
	GROUP = 4


# STRUCTURE
# ---------

class Structure:
	'''
	a finite carrier together with a binary operation, validated up to `level`.

	the carrier keeps the order in which its elements were first seen (duplicates
	collapse); that order is stable and is the one every enumeration, scan and
	table of this package follows.

	instances are immutable and can only be obtained from `groupoid()`,
	`semigroup()`, `monoid()`, `group()` or the `to_*` promotions.
	'''

	__slots__ = ('_members', '_elements', '_op', '_level', '_identity', '_inverses')

	_members: tuple
	_elements: frozenset
	_op: Operation
	_level: Level
	_identity: Any
	_inverses: Optional[dict]

	def __init__(self, *args, **kwargs):
		raise TypeError('structures are built through groupoid(), semigroup(), monoid() or group()')

	@classmethod
	def _create(cls, members: tuple, operation: Operation, level: Level,
			identity: Any = _NOTHING, inverses: Optional[dict] = None) -> Self:
		''' internal constructor; performs no validation at all '''
		self = object.__new__(cls)
		self._members = members
		self._elements = frozenset(members)
		self._op = operation
		self._level = level
		self._identity = identity
		self._inverses = inverses
		return self

	def _promote(self, level: Level, identity: Any = _NOTHING, inverses: Optional[dict] = None) -> Self:
		if identity is _NOTHING:
			identity = self._identity
		return type(self)._create(self._members, self._op, level, identity, inverses)

	def __repr__(self):
		return f'{type(self).__name__}(level={self._level.name}, order={len(self._members)})'

	# carrier

	@property
	def elements(self) -> tuple:
		''' the carrier, in its stable order '''
		return self._members

	@property
	def order(self) -> int:
		''' amount of elements in the carrier '''
		return len(self._members)

	@property
	def level(self) -> Level:
		return self._level

	@property
	def operation(self) -> Operation:
		return self._op

	def __len__(self) -> int:
		return len(self._members)

	def __iter__(self) -> Iterator:
		return iter(self._members)

	def __contains__(self, x: Any) -> bool:
		return x in self._elements

	def _require(self, level: Level):
		if self._level < level:
			raise InsufficientStructure(level, self._level)

	def _check_member(self, x: Any):
		if x not in self._elements:
			raise ElementNotInDomain(x)

	# the operation

	def operate(self, a: Any, b: Any) -> Any:
		'''
		applies the operation, checking that both operands belong to the carrier
		and that the result does too.
		'''
		self._check_member(a)
		self._check_member(b)
		result = self._op(a, b)
		if result not in self._elements:
			raise ClosureViolation(a, b, result)
		return result

	def __call__(self, a: Any, b: Any) -> Any:
		return self.operate(a, b)

	# exhaustive scans (available at every level)

	def _non_associative_triple(self) -> Optional[tuple]:
		op = self._op
		for a in self._members:
			for b in self._members:
				ab = op(a, b)
				for c in self._members:
					if op(ab, c) != op(a, op(b, c)):
						return a, b, c
		return None

	def is_associative(self) -> bool:
		''' checks `(a ∘ b) ∘ c = a ∘ (b ∘ c)` for every triple '''
		return self._non_associative_triple() is None

	def is_commutative(self) -> bool:
		op = self._op
		return all(op(a, b) == op(b, a) for a in self._members for b in self._members)

	def is_idempotent(self) -> bool:
		''' checks `a ∘ a = a` for every element '''
		return all(self._op(a, a) == a for a in self._members)

	def has_left_cancellation(self) -> bool:
		''' `a ∘ b = a ∘ c` implies `b = c` '''
		op, n = self._op, len(self._members)
		return all(len({ op(a, b) for b in self._members }) == n for a in self._members)

	def has_right_cancellation(self) -> bool:
		''' `b ∘ a = c ∘ a` implies `b = c` '''
		op, n = self._op, len(self._members)
		return all(len({ op(b, a) for b in self._members }) == n for a in self._members)

	def has_cancellation(self) -> bool:
		return self.has_left_cancellation() and self.has_right_cancellation()

	def _is_identity(self, e: Any) -> bool:
		op = self._op
		return all(op(e, a) == a and op(a, e) == a for a in self._members)

	def find_identity(self) -> Any:
		'''
		returns the (unique) two-sided identity of the operation, or raises
		`NoIdentityFound`. for a monoid or group this is just `identity`.
		'''
		if self._identity is not _NOTHING:
			return self._identity
		for candidate in self._members:
			if self._is_identity(candidate):
				return candidate
		raise NoIdentityFound()

	def has_identity(self) -> bool:
		try:
			self.find_identity()
		except NoIdentityFound:
			return False
		return True

	# semigroup operations

	def product(self, elements: Iterable) -> Any:
		'''
		folds `a₁ ∘ a₂ ∘ ... ∘ aₙ` left to right (associativity makes the grouping
		irrelevant). the empty product is the identity, and is therefore only
		defined from monoids up.
		'''
		self._require(Level.SEMIGROUP)
		it = iter(elements)
		result = next(it, _NOTHING)
		if result is _NOTHING:
			self._require(Level.MONOID)
			return self._identity
		self._check_member(result)
		for x in it:
			result = self.operate(result, x)
		return result

	def power(self, a: Any, n: int) -> Any:
		'''
		raises an element to an integer power using exponentiation by squaring.

		semigroups accept `n >= 1`, monoids also `n = 0` (giving the identity),
		and groups any integer; negative exponents invert the base first.
		'''
		self._require(Level.SEMIGROUP)
		self._check_member(a)
		if not isinstance(n, int):
			raise TypeError(f'exponents must be integers, not {type(n)}')
		if n < 0:
			self._require(Level.GROUP)
			a, n = self._inverses[a], -n
		if n == 0:
			self._require(Level.MONOID)
			return self._identity
		op = self._op
		result, mult, x = a, a, n - 1
		while x:
			if x & 1: result = op(result, mult)
			x >>= 1
			if not x: break
			mult = op(mult, mult)
		return result

	# monoid operations

	@property
	def identity(self) -> Any:
		''' the identity element (monoids and groups only) '''
		self._require(Level.MONOID)
		return self._identity

	def _search_inverse(self, a: Any) -> Any:
		op, e = self._op, self._identity
		for b in self._members:
			if op(a, b) == e and op(b, a) == e:
				return b
		return _NOTHING

	def is_invertible(self, a: Any) -> bool:
		self._require(Level.MONOID)
		if a not in self._elements:
			return False
		if self._inverses is not None:
			return True
		return self._search_inverse(a) is not _NOTHING

	def invertible_elements(self) -> tuple:
		''' the elements having a two-sided inverse, in carrier order '''
		return tuple(a for a in self._members if self.is_invertible(a))

	def unit_group(self) -> 'Structure':
		''' the group formed by the invertible elements of a monoid '''
		self._require(Level.MONOID)
		if self._level >= Level.GROUP:
			return self
		return group(self.invertible_elements(), self._op, self._identity)

	def inverse(self, a: Any) -> Any:
		'''
		inverse element. for groups this is a lookup in the table built at
		construction; for monoids the carrier is searched, and `InvalidInverse` is
		raised for elements that aren't invertible.
		'''
		self._require(Level.MONOID)
		self._check_member(a)
		if self._inverses is not None:
			return self._inverses[a]
		b = self._search_inverse(a)
		if b is _NOTHING:
			raise InvalidInverse(a)
		return b

	# group operations

	def divide(self, a: Any, b: Any) -> Any:
		''' right division: `a ∘ b⁻¹` '''
		self._require(Level.GROUP)
		return self.operate(a, self.inverse(b))

	def left_divide(self, a: Any, b: Any) -> Any:
		''' left division: `b⁻¹ ∘ a` '''
		self._require(Level.GROUP)
		return self.operate(self.inverse(b), a)

	def conjugate(self, g: Any, a: Any) -> Any:
		''' conjugates `a` by `g`: `g ∘ a ∘ g⁻¹` '''
		self._require(Level.GROUP)
		return self.operate(self.operate(g, a), self.inverse(g))

	def commutator(self, a: Any, b: Any) -> Any:
		''' `a⁻¹ ∘ b⁻¹ ∘ a ∘ b` '''
		self._require(Level.GROUP)
		return self.product((self.inverse(a), self.inverse(b), a, b))

	def is_abelian(self) -> bool:
		self._require(Level.GROUP)
		return self.is_commutative()


# CONSTRUCTOR CHAIN
# -----------------

def _rejected(level: Level, exc: AlgebraError) -> AlgebraError:
	_logger.debug('rejected %s: %s', level.name.lower(), exc)
	return exc

def _validated(structure: Structure) -> Structure:
	_logger.debug('validated %s over %d elements', structure.level.name.lower(), len(structure))
	return structure

def groupoid(carrier: Iterable, operation: Operation) -> Structure:
	''' validates closure of `operation` over every ordered pair of `carrier` '''
	members = tuple(dict.fromkeys(carrier))
	elements = frozenset(members)
	for a in members:
		for b in members:
			result = operation(a, b)
			if result not in elements:
				raise _rejected(Level.GROUPOID, ClosureViolation(a, b, result))
	return _validated(Structure._create(members, operation, Level.GROUPOID))

def to_semigroup(structure: Structure) -> Structure:
	''' promotes a groupoid after checking every associativity triple '''
	if structure.level >= Level.SEMIGROUP:
		return structure
	witness = structure._non_associative_triple()
	if witness is not None:
		raise _rejected(Level.SEMIGROUP, NotAssociative(*witness))
	return _validated(structure._promote(Level.SEMIGROUP))

def to_monoid(structure: Structure, identity: Any = AUTO) -> Structure:
	'''
	promotes a semigroup (or groupoid, validating associativity first) once
	`identity` has been verified to be a two-sided identity. if `identity` is
	`AUTO`, it's searched for instead.
	'''
	structure = to_semigroup(structure)
	if identity is AUTO:
		if structure.level >= Level.MONOID:
			return structure
		try:
			identity = structure.find_identity()
		except NoIdentityFound as e:
			raise _rejected(Level.MONOID, e)
	else:
		if identity not in structure:
			raise _rejected(Level.MONOID, InvalidIdentity(identity))
		op = structure.operation
		for a in structure:
			if op(identity, a) != a:
				raise _rejected(Level.MONOID, InvalidIdentity(identity, a, 'left'))
			if op(a, identity) != a:
				raise _rejected(Level.MONOID, InvalidIdentity(identity, a, 'right'))
		# the identity is unique, so a verified candidate is the existing one
		if structure.level >= Level.MONOID:
			return structure
	return _validated(structure._promote(Level.MONOID, identity=identity))

def to_group(structure: Structure, inverse: Callable[[Any], Any] | Any = AUTO) -> Structure:
	'''
	promotes a monoid (validating any missing lower law first) once every element
	has a verified two-sided inverse. `inverse` maps each element to its claimed
	inverse; if it's `AUTO` the inverses are searched for instead.

	the inverses are stored in a table, so later lookups don't call `inverse`.
	'''
	structure = to_monoid(structure)
	if inverse is AUTO and structure.level >= Level.GROUP:
		return structure
	op, e = structure.operation, structure.identity
	inverses = {}
	for a in structure:
		if inverse is AUTO:
			b = structure._search_inverse(a)
			if b is _NOTHING:
				raise _rejected(Level.GROUP, InvalidInverse(a))
		else:
			b = inverse(a)
			if b not in structure:
				raise _rejected(Level.GROUP, InvalidInverse(a, b, 'has its inverse outside the carrier'))
			if op(a, b) != e:
				raise _rejected(Level.GROUP, InvalidInverse(a, b, 'fails a ∘ a⁻¹ = e'))
			if op(b, a) != e:
				raise _rejected(Level.GROUP, InvalidInverse(a, b, 'fails a⁻¹ ∘ a = e'))
		inverses[a] = b
	return _validated(structure._promote(Level.GROUP, inverses=inverses))

def semigroup(carrier: Iterable, operation: Operation) -> Structure:
	return to_semigroup(groupoid(carrier, operation))

def monoid(carrier: Iterable, operation: Operation, identity: Any = AUTO) -> Structure:
	return to_monoid(semigroup(carrier, operation), identity)

def group(carrier: Iterable, operation: Operation, identity: Any = AUTO,
		inverse: Callable[[Any], Any] | Any = AUTO) -> Structure:
	'''
	builds a validated group: closure, associativity, identity and inverses are
	checked in that order, and the first violated law is raised.
	'''
	return to_group(monoid(carrier, operation, identity), inverse)


# ALTERNATIVE DEFINITIONS
# -----------------------

def _satisfies_one_sided_axioms(carrier: Iterable, op: Operation, left: bool) -> bool:
	members = tuple(dict.fromkeys(carrier))
	elements = frozenset(members)
	# orient everything so that `act(x, a)` puts x on the chosen side
	act = op if left else (lambda x, a: op(a, x))

	if any(op(a, b) not in elements for a in members for b in members):
		return False
	e = next((c for c in members if all(act(c, a) == a for a in members)), _NOTHING)
	if e is _NOTHING:
		return False
	if not all(any(act(b, a) == e for b in members) for a in members):
		return False
	return all(op(op(a, b), c) == op(a, op(b, c)) for a in members for b in members for c in members)

def satisfies_left_axioms(carrier: Iterable, op: Operation) -> bool:
	'''
	checks the one-sided definition of a group: closure, associativity, a left
	identity `e ∘ a = a`, and a left inverse `b ∘ a = e` for every `a`.
	this is equivalent to the usual definition.
	'''
	return _satisfies_one_sided_axioms(carrier, op, left=True)

def satisfies_right_axioms(carrier: Iterable, op: Operation) -> bool:
	''' mirror image of `satisfies_left_axioms()`: right identity and right inverses '''
	return _satisfies_one_sided_axioms(carrier, op, left=False)
