"""
A character class, stored as a sorted list of inclusive (low, high) code point ranges.

Rather than keep every member character, the class keeps only the ranges that
cover them. After every public operation the list is in canonical form:
sorted by low bound, pairwise disjoint, and with no two ranges touching, so
that (for example) 'a'-'c' and 'd'-'f' would have been folded into 'a'-'f'.
For a given set of covered code points there is exactly one such list, so
comparing lists compares sets.

The complement is always taken with respect to the whole domain
[DOMAIN_MIN, DOMAIN_MAX] from the interface module.

Membership is a binary search over the low bounds. A query range counts as
contained only when a single stored range encloses all of it. Because stored
ranges never touch, any query that spills out of its enclosing range (or spans
a gap between two ranges) does include some uncovered code point, so this is
exactly the question "is every code point of the query covered?".
"""
import bisect
from typing import Callable, Iterable, Iterator, List, Optional

from .interface import CodeRange, Bound, DOMAIN_MIN, DOMAIN_MAX, OutsideDomain, code_range
from .support import foundation, pretty


def _pair(item) -> tuple:
	""" Only a two-element tuple is a (low, high) pair, as with construction.charclass(...). """
	if not (isinstance(item, tuple) and len(item) == 2): raise TypeError("Expected a (low, high) tuple, not %r."%(item,))
	return item

class RangeSet:
	def __init__(self, ranges:Iterable=()):
		self.ranges : List[CodeRange] = [code_range(*_pair(r)) for r in ranges]
		self.normalize()

	@classmethod
	def from_predicate(cls, predicate:Callable[[str], bool]) -> "RangeSet":
		"""
		Scan the entire domain in ascending order, keeping each maximal run of
		characters for which the predicate holds as one range. This costs one
		predicate call per code point in the domain, whatever the result size.
		"""
		matching = (c for c in range(DOMAIN_MIN, DOMAIN_MAX + 1) if predicate(chr(c)))
		result = cls()
		result.ranges = list(foundation.runs(matching))
		return result

	def copy(self) -> "RangeSet":
		result = type(self)()
		result.ranges = list(self.ranges)
		return result

	def __len__(self):
		""" The number of distinct code points covered. Meaningful because the ranges never overlap. """
		return sum(high - low + 1 for low, high in self.ranges)

	def __iter__(self) -> Iterator[CodeRange]: return iter(self.ranges)

	def __eq__(self, other):
		if not isinstance(other, RangeSet): return NotImplemented
		return self.ranges == other.ranges

	__hash__ = None # Mutable.

	def __repr__(self): return "%s(%r)"%(type(self).__name__, self.ranges)

	def __str__(self): return pretty.class_text(self.ranges, self.is_any())

	def normalize(self):
		""" Sort, then fold each overlapping or adjacent range into its predecessor. Idempotent. """
		self.ranges.sort()
		self.ranges = list(foundation.coalesce(self.ranges))

	def add(self, low:Bound, high:Bound=None) -> int:
		"""
		Include an inclusive range of code points (or just one, if high is omitted).
		Returns how many code points were not already members.
		"""
		item = code_range(low, high)
		before = len(self)
		self.ranges.append(item)
		self.normalize()
		return len(self) - before

	def clear(self):
		self.ranges.clear()

	def negate(self) -> "RangeSet":
		""" Return the complement within the domain. This object is left alone. """
		result = type(self)()
		result.ranges = list(foundation.gaps(sorted(self.ranges), DOMAIN_MIN, DOMAIN_MAX))
		result.normalize()
		return result

	__invert__ = negate

	def test(self, low:Bound, high:Bound=None) -> bool:
		""" True exactly when a single stored range encloses the whole query range. """
		first, last = code_range(low, high)
		index = bisect.bisect_right(self.ranges, (first, DOMAIN_MAX)) - 1
		return index >= 0 and last <= self.ranges[index][1]

	def __contains__(self, item:Bound) -> bool:
		""" An integer outside the domain is simply not a member. Type mistakes still raise. """
		try: return self.test(item)
		except OutsideDomain: return False

	def is_any(self) -> bool:
		""" Does this class match every code point in the domain? """
		return self.ranges == [(DOMAIN_MIN, DOMAIN_MAX)]

	def union(self, other:"RangeSet") -> "RangeSet":
		result = self.copy()
		result.update(other)
		return result

	def update(self, other:"RangeSet") -> int:
		""" In-place union. Returns the net increase in membership, like .add(...) does. """
		before = len(self)
		self.ranges.extend(other.ranges)
		self.normalize()
		return len(self) - before

	def __add__(self, other):
		if not isinstance(other, RangeSet): return NotImplemented
		return self.union(other)

	def __iadd__(self, other):
		if not isinstance(other, RangeSet): return NotImplemented
		self.update(other)
		return self

	__or__ = __add__
	__ior__ = __iadd__

	def compare(self, other:"RangeSet") -> Optional[int]:
		"""
		A structural ordering, useful for sorting classes; it is NOT the subset relation.
		Classes with different numbers of ranges are incomparable, giving None.
		Otherwise corresponding ranges are compared in order: -1 if the other range
		reaches higher or starts later, 1 if it ends lower, and on to the next pair
		if they agree. Zero means no pair decided it.
		"""
		if len(self.ranges) != len(other.ranges): return None
		for (my_low, my_high), (their_low, their_high) in zip(self.ranges, other.ranges):
			if their_high > my_high or their_low > my_low: return -1
			elif their_high < my_high: return 1
		return 0

	def dump(self):
		pretty.dump(self.ranges, id(self))
