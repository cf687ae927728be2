"""
The smallest scanners, and the handful of combinators used to build the rest.

A scanner is any function `TextView -> outcome` (see `interface`). The factories
in this module (`tag`, `one_of`, `run_of`, ...) each return such a function, and
the combinators (`alternatives`, `sequence`, ...) glue them together. Order is
significant wherever there is a choice: the first alternative to succeed wins.

Two conventions hold throughout:
	* A NO_MATCH failure is "soft": an enclosing `alternatives` or `optional`
		may try something else. Any other failure (e.g. numeric overflow) is final.
	* An Incomplete outcome's `needed` count is relative to where the scanner
		that produced it began, so combinators that consume a prefix first
		must add on what they consumed before passing it along.
"""
from typing import Callable

from . import charset
from .cursor import TextView
from .interface import Done, Incomplete, no_match, overflow, is_soft

U64_MAX = 2**64 - 1


def run_length(cls:list, view:TextView) -> int:
	""" How many characters at the front of the view belong to the character class? """
	text, cursor, stop = view.text, view.start, view.stop
	while cursor < stop and charset.in_class(cls, ord(text[cursor])): cursor += 1
	return cursor - view.start

def _shift(outcome, consumed:int):
	if isinstance(outcome, Incomplete) and outcome.needed is not None:
		return Incomplete(outcome.needed + consumed)
	return outcome


# Leaf scanners:

def tag(literal:str) -> Callable:
	""" Match a fixed literal. """
	expected = repr(literal)
	def scan(view:TextView):
		if view.startswith(literal): return Done(literal, view.advance(len(literal)))
		return no_match(view, expected)
	return scan

def one_of(chars:str, expected:str=None) -> Callable:
	""" Match exactly one character from the given set, yielding that character. """
	expected = expected or 'one of %r'%chars
	def scan(view:TextView):
		if view and view[0] in chars: return Done(view[0], view.advance(1))
		return no_match(view, expected)
	return scan

def take(nr_chars:int) -> Callable:
	""" Exactly `nr_chars` characters of any sort, as a view. """
	def scan(view:TextView):
		if len(view) < nr_chars: return no_match(view, '%d character(s)'%nr_chars)
		return Done(view[:nr_chars], view.advance(nr_chars))
	return scan

def run_of(cls:list, expected:str, minimum:int=1) -> Callable:
	""" The maximal run of characters in the class, as a view. """
	def scan(view:TextView):
		size = run_length(cls, view)
		if size < minimum: return no_match(view.advance(size), expected)
		return Done(view[:size], view.advance(size))
	return scan

def digit_count(value:int, radix:int) -> int:
	""" How many digits it takes to write a non-negative value in the given radix. """
	count = 1
	while value >= radix: value, count = value // radix, count + 1
	return count

def _significant(digits:TextView) -> str:
	""" The digits without their leading zeros; a run of nothing but zeros is '0'. """
	return str(digits).lstrip('0') or '0'

def numeral(cls:list, radix:int, expected:str, limit:int=U64_MAX) -> Callable:
	"""
	A greedy run of digits read in the given radix. Values beyond `limit` are an overflow, never clamped.
	A run with more significant digits than `limit` has is an overflow without ever being converted.
	"""
	digits = run_of(cls, expected)
	width = digit_count(limit, radix)
	def scan(view:TextView):
		outcome = digits(view)
		if not isinstance(outcome, Done): return outcome
		significant = _significant(outcome.value)
		value = int(significant, radix) if len(significant) <= width else None
		if value is None or value > limit: return overflow(view, 'at most %d'%limit)
		return Done(value, outcome.rest)
	return scan

def fixed_digits(cls:list, width:int, radix:int, expected:str) -> Callable:
	""" Exactly `width` digits, no more and no fewer, read in the given radix. """
	def scan(view:TextView):
		if len(view) < width or run_length(cls, view[:width]) < width: return no_match(view, expected)
		return Done(int(str(view[:width]), radix), view.advance(width))
	return scan


# Byte readers:

hex_byte = fixed_digits(charset.HEX, 2, 16, 'two hex digits')

_octal_triple = fixed_digits(charset.OCTAL, 3, 8, 'three octal digits')

def oct_byte(view:TextView):
	""" Three octal digits whose value fits in a byte. Anything past 0o377 is simply not a byte literal. """
	outcome = _octal_triple(view)
	if isinstance(outcome, Done) and outcome.value > 0xFF: return no_match(view, 'octal byte (000 to 377)')
	return outcome

_decimal_run = run_of(charset.DIGIT, 'decimal digit')

def dec_byte(view:TextView):
	""" A decimal literal of one to three digits, 0 through 255. """
	outcome = _decimal_run(view)
	if not isinstance(outcome, Done): return outcome
	significant = _significant(outcome.value)
	value = int(significant) if len(significant) <= 3 else None
	if value is None or value > 0xFF: return overflow(view, 'byte value (0 to 255)')
	if len(outcome.value) > 3: return no_match(view, 'at most three digits')
	return Done(value, outcome.rest)


# Combinators:

def alternatives(*scanners, expected:str=None) -> Callable:
	"""
	Try each scanner in order; the first outcome that is not a soft failure wins.
	If every one of them fails softly, report NO_MATCH here, citing the last attempt as the cause.
	"""
	def scan(view:TextView):
		failure = None
		for scanner in scanners:
			outcome = scanner(view)
			if not is_soft(outcome): return outcome
			failure = outcome
		return no_match(view, expected, failure)
	return scan

def sequence(*scanners) -> Callable:
	""" Each scanner in turn, picking up where the last left off. Yields the list of values. """
	def scan(view:TextView):
		values, rest = [], view
		for scanner in scanners:
			outcome = scanner(rest)
			if not isinstance(outcome, Done): return _shift(outcome, rest.start - view.start)
			values.append(outcome.value)
			rest = outcome.rest
		return Done(values, rest)
	return scan

def preceded(prefix:Callable, scanner:Callable) -> Callable:
	""" Match the prefix, throw its value away, and carry on with the scanner. """
	def scan(view:TextView):
		outcome = prefix(view)
		if not isinstance(outcome, Done): return outcome
		return _shift(scanner(outcome.rest), outcome.rest.start - view.start)
	return scan

def optional(scanner:Callable) -> Callable:
	""" A soft failure becomes Done(None) without consuming anything. """
	def scan(view:TextView):
		outcome = scanner(view)
		if is_soft(outcome): return Done(None, view)
		return outcome
	return scan

def mapped(scanner:Callable, fn:Callable) -> Callable:
	""" Transform the value of a successful outcome. """
	def scan(view:TextView):
		outcome = scanner(view)
		if isinstance(outcome, Done): return Done(fn(outcome.value), outcome.rest)
		return outcome
	return scan

def constant(value, scanner:Callable) -> Callable:
	""" When the scanner succeeds, yield this value in place of whatever it matched. """
	return mapped(scanner, lambda _: value)
