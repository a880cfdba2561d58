""" Bits and bobs in support of visualizing character classes. """

ESCAPES = {
	0x07: '\\a',
	0x08: '\\b',
	0x0c: '\\f',
	0x0a: '\\n',
	0x0d: '\\r',
	0x09: '\\t',
	0x0b: '\\v',
	ord('\\'): '\\\\',
}

ANY = '.'

def code_text(code:int) -> str:
	try: return ESCAPES[code]
	except KeyError: return chr(code)

def range_text(low:int, high:int) -> str:
	if low == high: return code_text(low)
	return code_text(low) + '-' + code_text(high)

def class_text(ranges, is_any:bool) -> str:
	"""
	The compact form: a lone dot for the whole domain, otherwise a bracketed run of ranges.
	Nothing is done about a literal dash or bracket inside the brackets; this is for eyeballs.
	"""
	if is_any: return ANY
	return '[' + ''.join(range_text(low, high) for low, high in ranges) + ']'

COLUMNS = ('low', 'high', 'size')

def range_rows(ranges) -> list:
	""" One (low, high, size) row of text per range, bounds in hex. """
	return [('%#x'%low, '%#x'%high, str(high - low + 1)) for low, high in ranges]

def range_table(ranges) -> list:
	"""
	Lines of a boxed three-column table of ranges: the column titles, a rule,
	then one line per range with every cell right-justified.
	"""
	rows = range_rows(ranges)
	width = [max([len(title)] + [len(row[i]) for row in rows]) for i, title in enumerate(COLUMNS)]
	def rule(joint): return ('─'+joint+'─').join('─'*w for w in width)
	def line(cells): return ' │ '.join(c.rjust(w) for c, w in zip(cells, width))
	return [rule('┬'), line(COLUMNS), rule('┼'), *map(line, rows), rule('┴')]

def dump(ranges, identity:int):
	""" Diagnostic display: the object's identity, then one table row per stored range. """
	print("%#x ranges=%d" % (identity, len(ranges)))
	if ranges: print('\n'.join(range_table(ranges)))
