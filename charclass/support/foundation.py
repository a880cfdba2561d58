""" Small is beautiful. These algorithms need no introduction. """

from typing import Iterable, Iterator, Tuple

Pair = Tuple[int, int]

def runs(codes:Iterable[int]) -> Iterator[Pair]:
	"""
	Run-length encode an ascending stream of integers into inclusive (first, last) pairs.
	Each maximal run of consecutive integers becomes one pair, so the output is
	sorted, disjoint and non-adjacent. Duplicates or descent mean the input was not sorted.
	"""
	it = iter(codes)
	try: first = last = next(it)
	except StopIteration: return
	for code in it:
		if code <= last: raise ValueError("runs(...) needs strictly ascending input; got %d after %d."%(code, last))
		if code == last + 1: last = code
		else:
			yield first, last
			first = last = code
	yield first, last

def coalesce(pairs:Iterable[Pair]) -> Iterator[Pair]:
	"""
	Fold a stream of inclusive pairs, sorted by lower bound, into the fewest
	pairs covering the same integers. A pair that overlaps or merely touches its
	predecessor is absorbed into it.
	"""
	it = iter(pairs)
	try: low, high = next(it)
	except StopIteration: return
	for l, h in it:
		if l < low: raise ValueError("coalesce(...) encountered unsorted pair %r after %r."%((l, h), (low, high)))
		if l <= high + 1: high = max(high, h)
		else:
			yield low, high
			low, high = l, h
	yield low, high

def gaps(pairs:Iterable[Pair], first:int, last:int) -> Iterator[Pair]:
	"""
	Given sorted, disjoint inclusive pairs within [first, last], yield the
	inclusive pairs of that span which they leave uncovered.
	"""
	cursor = first
	for low, high in pairs:
		if cursor < low: yield cursor, low - 1
		cursor = max(cursor, high + 1)
	if cursor <= last: yield cursor, last
