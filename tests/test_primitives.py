import unittest
from filterlex.scanning import charset, primitives as p
from filterlex.scanning.cursor import as_view
from filterlex.scanning.interface import Done, Failure, Incomplete, ErrorKind


def scan(scanner, text): return scanner(as_view(text))


class TestLeaves(unittest.TestCase):
	def test_00_tag(self):
		self.assertEqual(Done('0x', '1f'), scan(p.tag('0x'), '0x1f'))
		outcome = scan(p.tag('0x'), '0y')
		self.assertIsInstance(outcome, Failure)
		self.assertEqual(ErrorKind.NO_MATCH, outcome.kind)
		self.assertEqual('0y', outcome.at)
	
	def test_01_one_of(self):
		sep = p.one_of(':.-')
		self.assertEqual(Done('.', 'x'), scan(sep, '.x'))
		self.assertIsInstance(scan(sep, ''), Failure)
		self.assertIsInstance(scan(sep, ','), Failure)
	
	def test_02_take(self):
		self.assertEqual(Done('ab', 'c'), scan(p.take(2), 'abc'))
		self.assertIsInstance(scan(p.take(2), 'a'), Failure)
	
	def test_03_run_of(self):
		digits = p.run_of(charset.DIGIT, 'digit')
		self.assertEqual(Done('123', 'x'), scan(digits, '123x'))
		outcome = scan(digits, 'x')
		self.assertEqual('digit', outcome.expected)
		self.assertEqual(Done('', 'x'), scan(p.run_of(charset.DIGIT, 'digit', minimum=0), 'x'))
	
	def test_04_numeral_overflow_is_final(self):
		decimal = p.numeral(charset.DIGIT, 10, 'digit')
		self.assertEqual(Done(p.U64_MAX, ';'), scan(decimal, '18446744073709551615;'))
		outcome = scan(decimal, '18446744073709551616;')
		self.assertEqual(ErrorKind.NUMERIC_OVERFLOW, outcome.kind)
		self.assertEqual('18446744073709551616;', outcome.at)
		outcome = scan(decimal, '9'*5000)
		self.assertEqual(ErrorKind.NUMERIC_OVERFLOW, outcome.kind)
		self.assertEqual(0, outcome.position())
	
	def test_05_digit_count(self):
		for value, radix, count in [(0, 10, 1), (9, 10, 1), (10, 10, 2), (255, 16, 2), (256, 16, 3), (p.U64_MAX, 10, 20), (p.U64_MAX, 8, 22), (p.U64_MAX, 16, 16)]:
			with self.subTest(value=value, radix=radix):
				self.assertEqual(count, p.digit_count(value, radix))
	
	def test_06_run_length_respects_the_view(self):
		view = as_view('12345')[:2]
		self.assertEqual(2, p.run_length(charset.DIGIT, view))


class TestBytes(unittest.TestCase):
	def test_00_hex_byte(self):
		for text, value in [('ff', 255), ('0A', 10), ('7f7', 0x7f)]:
			with self.subTest(text=text): self.assertEqual(value, scan(p.hex_byte, text).value)
		for text in ['7g', 'f', '', '+f', 'g0']:
			with self.subTest(text=text):
				outcome = scan(p.hex_byte, text)
				self.assertIsInstance(outcome, Failure)
				self.assertEqual(text, outcome.at)
	
	def test_01_oct_byte(self):
		self.assertEqual(Done(0o42, 'x'), scan(p.oct_byte, '042x'))
		self.assertEqual(Done(255, '7'), scan(p.oct_byte, '3777'))
		for text in ['400', '777', '08', '04', '']:
			with self.subTest(text=text):
				outcome = scan(p.oct_byte, text)
				self.assertEqual(ErrorKind.NO_MATCH, outcome.kind)
	
	def test_02_dec_byte(self):
		self.assertEqual(Done(0, '.'), scan(p.dec_byte, '0.'))
		self.assertEqual(Done(255, ''), scan(p.dec_byte, '255'))
		self.assertEqual(ErrorKind.NUMERIC_OVERFLOW, scan(p.dec_byte, '256').kind)
		self.assertEqual(ErrorKind.NUMERIC_OVERFLOW, scan(p.dec_byte, '1234').kind)
		self.assertEqual(ErrorKind.NO_MATCH, scan(p.dec_byte, '0012').kind)
		self.assertEqual(ErrorKind.NUMERIC_OVERFLOW, scan(p.dec_byte, '2'*5000).kind)
		self.assertEqual(ErrorKind.NO_MATCH, scan(p.dec_byte, '0'*5000).kind)
		self.assertEqual(ErrorKind.NO_MATCH, scan(p.dec_byte, 'x').kind)


class TestCombinators(unittest.TestCase):
	def test_00_alternatives_in_order(self):
		either = p.alternatives(p.tag('>='), p.tag('>'), expected='comparison')
		self.assertEqual(Done('>=', '2'), scan(either, '>=2'))
		self.assertEqual(Done('>', '2'), scan(either, '>2'))
		outcome = scan(either, '=2')
		self.assertEqual(ErrorKind.NO_MATCH, outcome.kind)
		self.assertEqual('comparison', outcome.expected)
		self.assertEqual("'>'", outcome.cause.expected)
	
	def test_01_alternatives_stop_at_hard_failure(self):
		small = p.numeral(charset.DIGIT, 10, 'digit', limit=9)
		either = p.alternatives(small, p.take(2))
		self.assertEqual(ErrorKind.NUMERIC_OVERFLOW, scan(either, '42').kind)
	
	def test_02_sequence(self):
		seq = p.sequence(p.tag('a'), p.optional(p.tag('-')), p.tag('b'))
		self.assertEqual(Done(['a', '-', 'b'], '!'), scan(seq, 'a-b!'))
		self.assertEqual(Done(['a', None, 'b'], '!'), scan(seq, 'ab!'))
		outcome = scan(seq, 'a-c')
		self.assertEqual('c', outcome.at)
	
	def test_03_incomplete_hints_are_shifted(self):
		def wants_more(view): return Incomplete(2)
		def unknown(view): return Incomplete()
		self.assertEqual(Incomplete(5), scan(p.sequence(p.tag('abc'), wants_more), 'abc'))
		self.assertEqual(Incomplete(3), scan(p.preceded(p.tag('x'), wants_more), 'x'))
		self.assertEqual(Incomplete(None), scan(p.sequence(p.tag('a'), unknown), 'a'))
	
	def test_04_mapped_and_constant(self):
		self.assertEqual(Done(2, ''), scan(p.mapped(p.take(2), len), 'ab'))
		self.assertEqual(Done(True, 'c'), scan(p.constant(True, p.tag('ab')), 'abc'))
		self.assertIsInstance(scan(p.constant(True, p.tag('ab')), 'ba'), Failure)


if __name__ == '__main__':
	unittest.main()
