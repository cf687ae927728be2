import unittest
from filterlex.scanning import charset


class TestCharClass(unittest.TestCase):
	def check(self, cls, members, nonmembers):
		for c in members:
			with self.subTest(c=c): self.assertTrue(charset.in_class(cls, ord(c)))
		for c in nonmembers:
			with self.subTest(c=c): self.assertFalse(charset.in_class(cls, ord(c)))
	
	def test_00_singleton(self): self.check(charset.singleton(ord('a')), 'a', 'Ab')
	
	def test_01_range_class(self):
		self.check(charset.range_class(ord('0'), ord('9')), '059', 'A b\0')
		self.assertEqual(charset.range_class(ord('0'), ord('9')), charset.range_class(ord('9'), ord('0')))
	
	def test_02_complement(self):
		self.check(charset.complement(charset.DIGIT), 'A b\0', '059')
		self.assertEqual(charset.EMPTY, charset.complement(charset.UNIVERSAL))
		self.assertEqual(charset.UNIVERSAL, charset.complement(charset.EMPTY))
	
	def test_03_union(self):
		self.check(charset.of_chars(':.-'), ':.-', ',/;a0')
	
	def test_04_digit_classes(self):
		self.check(charset.DIGIT, '0123456789', 'aAx/:٣')
		self.check(charset.OCTAL, '01234567', '89a')
		self.check(charset.HEX, '0123456789abcdefABCDEF', 'gGxX ')
	
	def test_05_word_classes(self):
		self.check(charset.ALPHA, 'azAZqQ', '_09 \xe9')
		self.check(charset.WORD_TAIL, 'azAZ_', '09- ')
	
	def test_06_string_body(self):
		self.check(charset.STRING_BODY, 'a ;\0\n\xff中\U0001f600', '"\\')


if __name__ == '__main__':
	unittest.main()
