"""
Double-quoted strings with backslash escapes.

After a backslash comes one of:
	`x` and exactly two hex digits -- the character with that byte value,
	exactly three octal digits (000 to 377) -- likewise,
	anything else -- that very character, taken verbatim.
The last rule is what makes `\\"` and `\\\\` work, but it also quietly accepts
escapes nobody has defined. Pass `strict=True` to allow only `\\"` and `\\\\` there.

The body is read in runs of plain characters between escapes. As long as no
escape turns up, the result is a view of the input; the first escape switches
it over to an owned copy (see `tokens.DecodedString`).

Running out of text before the closing quote is not an error, but Incomplete:
the text so far may well be the front of a perfectly good string.
"""
from ..scanning import charset
from ..scanning.cursor import TextView, as_view
from ..scanning.interface import Done, Incomplete, no_match
from ..scanning.primitives import hex_byte, oct_byte, run_length, tag, one_of, take, alternatives, preceded, mapped
from .tokens import DecodedString

_hex_escape = mapped(preceded(tag('x'), hex_byte), chr)
_oct_escape = mapped(oct_byte, chr)

_permissive_escape = alternatives(_hex_escape, _oct_escape, mapped(take(1), str), expected='escape sequence')
_strict_escape = alternatives(_hex_escape, _oct_escape, one_of('"\\'), expected='escape sequence')


def _is_truncated(view:TextView, cls:list, width:int) -> bool:
	""" Could the view be the front of a fixed-width run of digits, cut short by the end of text? """
	return len(view) < width and run_length(cls, view) == len(view)

def _strict_shortfall(view:TextView):
	""" In strict mode a cut-off numeric escape must wait for more text rather than fail. """
	if view.startswith('x') and _is_truncated(view.advance(1), charset.HEX, 2): return 3
	if _is_truncated(view, charset.OCTAL, 3): return 3
	return None


def parse_string(subject, *, strict:bool=False):
	view = as_view(subject)
	if not view: return Incomplete(1)
	if view[0] != '"': return no_match(view, 'opening quote')
	escape = _strict_escape if strict else _permissive_escape
	cursor = view.advance(1)
	size = run_length(charset.STRING_BODY, cursor)
	result = DecodedString(cursor[:size])
	cursor = cursor.advance(size)
	while cursor and cursor[0] == '\\':
		after_backslash = cursor.advance(1)
		outcome = escape(after_backslash)
		if not isinstance(outcome, Done):
			# The escaped character and a closing quote.
			if not after_backslash: return Incomplete(len(view) + 2)
			shortfall = _strict_shortfall(after_backslash)
			if shortfall is None: return outcome
			# Room for the rest of the escape, plus a closing quote.
			return Incomplete(after_backslash.start - view.start + shortfall + 1)
		size = run_length(charset.STRING_BODY, outcome.rest)
		result.append(outcome.value, outcome.rest[:size])
		cursor = outcome.rest.advance(size)
	if not cursor: return Incomplete(len(view) + 1)
	return Done(result, cursor.advance(1))


def encode_string(text:str) -> str:
	"""
	The inverse of `parse_string`: quote the text, backslash the quote and the
	backslash, and spell control characters as hex escapes.
	"""
	pieces = ['"']
	for c in text:
		if c in '"\\': pieces.append('\\' + c)
		elif ord(c) < 32 or ord(c) == 127: pieces.append('\\x%02x'%ord(c))
		else: pieces.append(c)
	pieces.append('"')
	return ''.join(pieces)
