'''
exception taxonomy.

every error is a `ValueError`, so callers that only care about "bad input"
can catch that. construction failures name the violated law and carry the
witness elements that break it.
'''

from typing import Any

__all__ = [
	'AlgebraError',
	'ClosureViolation', 'NotAssociative',
	'InvalidIdentity', 'NoIdentityFound', 'InvalidInverse',
	'NotASubgroup', 'NotNormal',
	'ElementNotInDomain', 'NoGeneratorFound', 'NoFiniteOrder',
	'InsufficientStructure',
]


class AlgebraError(ValueError):
	''' base class for every error raised by this package '''


# construction-time violations

class ClosureViolation(AlgebraError):
	''' `a ∘ b` landed outside the carrier '''

	def __init__(self, a: Any, b: Any, result: Any):
		super().__init__(f'operation is not closed: {a!r} ∘ {b!r} = {result!r} is not in the carrier')
		self.a, self.b, self.result = a, b, result

class NotAssociative(AlgebraError):
	''' `(a ∘ b) ∘ c != a ∘ (b ∘ c)` '''

	def __init__(self, a: Any, b: Any, c: Any):
		super().__init__(f'operation is not associative: ({a!r} ∘ {b!r}) ∘ {c!r} != {a!r} ∘ ({b!r} ∘ {c!r})')
		self.a, self.b, self.c = a, b, c

class InvalidIdentity(AlgebraError):
	'''
	the identity candidate is not in the carrier (`witness` is None), or
	fails `e ∘ a = a ∘ e = a` for `witness`.
	'''

	def __init__(self, candidate: Any, witness: Any = None, side: str = ''):
		if side:
			msg = f'{candidate!r} is not a {side} identity: fails for {witness!r}'
		else:
			msg = f'identity candidate {candidate!r} is not in the carrier'
		super().__init__(msg)
		self.candidate, self.witness, self.side = candidate, witness, side

class NoIdentityFound(AlgebraError):
	''' no element of the carrier is a two-sided identity '''

	def __init__(self, msg: str = 'structure has no identity element'):
		super().__init__(msg)

class InvalidInverse(AlgebraError):
	''' an element has no inverse, or its supplied inverse is wrong '''

	def __init__(self, element: Any, inverse: Any = None, reason: str = 'has no inverse in the carrier'):
		super().__init__(f'{element!r} {reason}' + ('' if inverse is None else f' (candidate {inverse!r})'))
		self.element, self.inverse, self.reason = element, inverse, reason

class NotASubgroup(AlgebraError):
	''' the subset fails the subgroup criterion; `reason` says how '''

	def __init__(self, reason: str, witness: Any = None):
		super().__init__(f'not a subgroup: {reason}' + ('' if witness is None else f' ({witness!r})'))
		self.reason, self.witness = reason, witness

class NotNormal(AlgebraError):
	''' `g ∘ n ∘ g⁻¹` escapes the subgroup '''

	def __init__(self, g: Any, n: Any):
		super().__init__(f'subgroup is not normal: conjugate of {n!r} by {g!r} is not in it')
		self.g, self.n = g, n


# query-time errors

class ElementNotInDomain(AlgebraError):
	''' a query was made on an element outside the relevant carrier '''

	def __init__(self, element: Any, domain: str = 'carrier'):
		super().__init__(f'{element!r} is not in the {domain}')
		self.element = element

class NoGeneratorFound(AlgebraError):
	''' the group is not cyclic '''

	def __init__(self, msg: str = 'group has no generator (it is not cyclic)'):
		super().__init__(msg)

class NoFiniteOrder(AlgebraError):
	''' the identity did not recur within |G| powers of the element '''

	def __init__(self, element: Any):
		super().__init__(f'{element!r} has no finite order within the group order')
		self.element = element

class InsufficientStructure(AlgebraError, TypeError):
	''' an operation needs a stronger structure level than the one available '''

	def __init__(self, required: Any, actual: Any):
		super().__init__(f'operation requires a {required.name.lower()}, structure is a {actual.name.lower()}')
		self.required, self.actual = required, actual
