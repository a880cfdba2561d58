"""
Character-class Interface Definitions.

A character class works over a fixed domain of code points. Python strings may
hold any value from zero through sys.maxunicode, lone surrogates included, so
that whole span is the domain. Nothing here knows about Unicode properties.
"""
import sys
from typing import Tuple, Union

CodePoint = int
CodeRange = Tuple[CodePoint, CodePoint] # Inclusive at both ends, unlike Python's range().
Bound = Union[CodePoint, str]

DOMAIN_MIN : CodePoint = 0
DOMAIN_MAX : CodePoint = sys.maxunicode
DOMAIN_SIZE = DOMAIN_MAX - DOMAIN_MIN + 1

class CharClassError(ValueError):
	""" Base class of all exceptions arising from the character-class machinery. """

class BackwardsRange(CharClassError):
	"""
	Raised when a range is given with its bounds the wrong way around.
	Parameters are the low and high bounds, as given.
	"""
	def __init__(self, low, high):
		super().__init__(low, high)
		self.low, self.high = low, high

class OutsideDomain(CharClassError):
	""" Raised for a code point below DOMAIN_MIN or above DOMAIN_MAX. """
	def __init__(self, value):
		super().__init__(value)
		self.value = value

def codepoint(bound:Bound) -> CodePoint:
	""" Accept either an integer code point or a one-character string. """
	if isinstance(bound, str):
		if len(bound) != 1: raise TypeError("Expected a single character, not %r."%bound)
		return ord(bound)
	if isinstance(bound, bool) or not isinstance(bound, int):
		raise TypeError("Expected a code point or a single character, not %r."%type(bound))
	if not DOMAIN_MIN <= bound <= DOMAIN_MAX: raise OutsideDomain(bound)
	return bound

def code_range(low:Bound, high:Bound=None) -> CodeRange:
	""" Validate one inclusive range. A missing high bound means a single value. """
	first = codepoint(low)
	last = first if high is None else codepoint(high)
	if first > last: raise BackwardsRange(low, high)
	return first, last
