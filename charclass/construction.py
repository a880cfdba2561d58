"""
Call-site conveniences for building character classes idiomatically.

	charclass(('A', 'Z'), ('a', 'z'), '_')

is exactly the same as making an empty RangeSet and calling .add(...) once per item:
a tuple is a (low, high) pair and anything else is a single code point or character.
"""
from .rangeset import RangeSet

def charclass(*items) -> RangeSet:
	result = RangeSet()
	for item in items:
		if isinstance(item, tuple): result.add(*item)
		else: result.add(item)
	return result

def from_string(text:str) -> RangeSet:
	""" Every character of the text, as a member. """
	return charclass(*text)

def singleton(item) -> RangeSet: return charclass(item)
def range_class(first, last) -> RangeSet: return charclass((first, last))
