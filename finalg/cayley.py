'''
Cayley (operation) tables.
'''

from typing import Callable, Any, Protocol
import logging

from .errors import ElementNotInDomain, NoIdentityFound

__all__ = ['CayleyTable']

_logger = logging.getLogger(__name__)


class _Operable(Protocol):
	def __iter__(self): ...
	def operate(self, a: Any, b: Any) -> Any: ...


class CayleyTable:
	'''
	the complete table of an operation over a finite carrier.

	built from anything that iterates over its carrier and has an
	`operate(a, b)` method (a `Structure`, a `FactorGroup`...). every ordered
	pair is evaluated exactly once at construction; afterwards, all the scans
	below read the table only and never call the operation again.

	rows and columns follow the iteration order of the source.
	'''

	_elements: tuple
	_table: dict[tuple[Any, Any], Any]

	def __init__(self, structure: _Operable):
		self._elements = tuple(structure)
		self._table = { (a, b): structure.operate(a, b) for a in self._elements for b in self._elements }
		_logger.debug('tabulated %d products', len(self._table))

	def __repr__(self):
		return f'{type(self).__name__}(size={len(self._elements)})'

	def __str__(self):
		return self.format()

	@property
	def elements(self) -> tuple:
		return self._elements

	def __len__(self) -> int:
		return len(self._elements)

	def lookup(self, a: Any, b: Any) -> Any:
		''' the entry at row `a`, column `b`: `a ∘ b` '''
		try:
			return self._table[a, b]
		except KeyError:
			missing = a if (a, a) not in self._table else b
			raise ElementNotInDomain(missing, 'table') from None

	def row(self, a: Any) -> tuple:
		return tuple(self.lookup(a, b) for b in self._elements)

	def column(self, b: Any) -> tuple:
		return tuple(self.lookup(a, b) for a in self._elements)

	# scans

	def is_associative(self) -> bool:
		t, els = self._table, self._elements
		return all(t[t[a, b], c] == t[a, t[b, c]] for a in els for b in els for c in els)

	def is_commutative(self) -> bool:
		t, els = self._table, self._elements
		return all(t[a, b] == t[b, a] for a in els for b in els)

	def find_identity(self) -> Any:
		''' the element whose row and column reproduce the headers; raises `NoIdentityFound` '''
		t, els = self._table, self._elements
		for e in els:
			if all(t[e, a] == a and t[a, e] == a for a in els):
				return e
		raise NoIdentityFound('table has no identity element')

	def has_identity(self) -> bool:
		try:
			self.find_identity()
		except NoIdentityFound:
			return False
		return True

	def has_left_cancellation(self) -> bool:
		''' no row repeats an entry '''
		n = len(self._elements)
		return all(len(set(self.row(a))) == n for a in self._elements)

	def has_right_cancellation(self) -> bool:
		''' no column repeats an entry '''
		n = len(self._elements)
		return all(len(set(self.column(b))) == n for b in self._elements)

	def has_cancellation(self) -> bool:
		return self.has_left_cancellation() and self.has_right_cancellation()

	def is_latin_square(self) -> bool:
		''' every row and every column is a permutation of the elements '''
		elements = set(self._elements)
		return all(set(self.row(a)) == elements and set(self.column(a)) == elements for a in self._elements)

	# formatting

	def format(self, label: Callable[[Any], str] = str, corner: str = '∘') -> str:
		'''
		renders the table as aligned text, one row per line, with `label`
		applied to every header and entry.
		'''
		labels = { x: label(x) for x in self._elements }
		for v in self._table.values():
			if v not in labels:
				labels[v] = label(v)
		width = max([4, len(corner) + 2, *(len(s) + 2 for s in labels.values())])
		cell = lambda s: s.rjust(width)
		lines = [cell(corner) + ''.join(cell(labels[b]) for b in self._elements)]
		for a in self._elements:
			lines.append(cell(labels[a]) + ''.join(cell(labels[self._table[a, b]]) for b in self._elements))
		return '\n'.join(lines) + '\n'
