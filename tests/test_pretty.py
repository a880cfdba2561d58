import unittest
import io
import contextlib
from charclass.rangeset import RangeSet
from charclass.construction import charclass
from charclass.support import pretty


class TestFormatting(unittest.TestCase):
	def test_00_any(self):
		self.assertEqual('.', str(RangeSet().negate()))

	def test_01_empty(self):
		self.assertEqual('[]', str(RangeSet()))

	def test_02_ranges_and_singletons(self):
		cls = charclass(('a', 'c'), ('k', 'v'), '€')
		self.assertEqual('[a-ck-v€]', str(cls))

	def test_03_escapes(self):
		cls = charclass('\a', '\b', '\t', '\n', '\v', '\f', '\r', '\\')
		self.assertEqual('[\\a-\\r\\\\]', str(cls))
		for code, text in [(7, '\\a'), (8, '\\b'), (9, '\\t'), (10, '\\n'), (11, '\\v'), (12, '\\f'), (13, '\\r'), (92, '\\\\')]:
			with self.subTest(code=code):
				self.assertEqual('['+text+']', str(charclass(code)))

	def test_04_not_quite_any(self):
		""" Almost everything is not everything. """
		self.assertEqual('[\\b-\U0010ffff]', str(charclass((8, 0x10ffff))))

	def test_05_deterministic(self):
		a = charclass(('x', 'z'), ('a', 'c'))
		b = charclass(('a', 'c'), ('x', 'z'))
		self.assertEqual(str(a), str(b))


class TestDump(unittest.TestCase):
	def test_00_dump(self):
		cls = charclass(('a', 'c'), 'x')
		out = io.StringIO()
		with contextlib.redirect_stdout(out): cls.dump()
		lines = out.getvalue().splitlines()
		self.assertEqual("%#x ranges=2" % id(cls), lines[0])
		self.assertIn('0x61', lines[4])
		self.assertIn('0x63', lines[4])
		self.assertIn('0x78', lines[5])

	def test_01_dump_empty(self):
		cls = RangeSet()
		out = io.StringIO()
		with contextlib.redirect_stdout(out): cls.dump()
		self.assertEqual(["%#x ranges=0" % id(cls)], out.getvalue().splitlines())

	def test_02_range_table(self):
		lines = pretty.range_table([(0x61, 0x63), (0x10ffff, 0x10ffff)])
		self.assertEqual(6, len(lines))
		self.assertEqual(['low', 'high', 'size'], lines[1].replace('│', ' ').split())
		self.assertEqual(['0x61', '0x63', '3'], lines[3].replace('│', ' ').split())
		self.assertEqual(['0x10ffff', '0x10ffff', '1'], lines[4].replace('│', ' ').split())
		self.assertEqual(1, len(set(map(len, lines))))

	def test_03_range_table_without_ranges(self):
		self.assertEqual(['low', 'high', 'size'], pretty.range_table([])[1].replace('│', ' ').split())


if __name__ == '__main__':
	unittest.main()
