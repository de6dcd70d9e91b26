'''
finite algebraic structures, verified by exhaustive search.

build a structure through the validating constructor chain (`groupoid`,
`semigroup`, `monoid`, `group`), then derive subgroups, cosets and factor
groups from it, or compute invariants such as element orders and the
exponent. see `finalg.groups` for ready-made groups.
'''

from .errors import *
from .structures import *
from .subgroups import *
from .cosets import *
from .quotients import *
from .orders import *
from .cyclic import *
from .cayley import *
from . import groups

from . import errors, structures, subgroups, cosets, quotients, orders, cyclic, cayley

__all__ = [
	*errors.__all__,
	*structures.__all__,
	*subgroups.__all__,
	*cosets.__all__,
	*quotients.__all__,
	*orders.__all__,
	*cyclic.__all__,
	*cayley.__all__,
	'groups',
]
