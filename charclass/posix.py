"""
POSIX classes for the ASCII range.
(See https://www.regular-expressions.info/posixbrackets.html)

Note that locale-based POSIX character equivalents are not supported in this module.
Digraphs (e.g. Czech or Spanish "ch") mean the concept works at a higher level than
the individual code point, and would throw several things out of kilter.

The shorthand classes follow the usual backslash-letter convention. Upper-case
shorthands are complements, taken over the entire domain, so (for instance)
SHORTHAND['D'] matches every non-ASCII character as well as the non-digits.
"""
from .construction import charclass, range_class, singleton

POSIX = {}
POSIX['ascii'] = range_class(0, 127)
POSIX['cntrl'] = charclass((0, 31), 127)
POSIX['blank'] = charclass(9, 32)
POSIX['space'] = charclass((9, 13), 32)
POSIX['digit'] = range_class('0', '9')
POSIX['upper'] = range_class('A', 'Z')
POSIX['lower'] = range_class('a', 'z')
POSIX['alpha'] = POSIX['upper'] + POSIX['lower']
POSIX['alnum'] = POSIX['digit'] + POSIX['alpha']
POSIX['word'] = POSIX['alnum'] + singleton('_')
POSIX['xdigit'] = POSIX['digit'] + charclass(('A', 'F'), ('a', 'f'))
POSIX['print'] = range_class(' ', '~')
POSIX['graph'] = range_class('!', '~')
POSIX['punct'] = charclass(('!', '/'), (':', '@'), ('[', '`'), ('{', '~'))

# Every printable ASCII character is exactly one of these.
assert len(POSIX['graph']) == len(POSIX['alnum']) + len(POSIX['punct'])

SHORTHAND = {}
def _init_():
	for shorthand, longhand in [
		('d', 'digit'),
		('l', 'alpha'),
		('w', 'word'),
		('s', 'space'),
	]:
		SHORTHAND[shorthand] = POSIX[longhand]
		SHORTHAND[shorthand.upper()] = POSIX[longhand].negate()
	SHORTHAND['h'] = charclass((8, 9), 32)
	SHORTHAND['H'] = SHORTHAND['h'].negate()

_init_()
