"""
Numbers, operators, and the things that look like words.

The ordering of alternatives in this module is part of the language, not a
matter of style: hex is tried before octal so `0x...` is never read as an
octal zero, and each two-character operator comes before its one-character prefix.
"""
from ..scanning import charset
from ..scanning.cursor import as_view
from ..scanning.interface import Done
from ..scanning.primitives import tag, numeral, run_length, run_of, alternatives, preceded, constant
from .tokens import Operator, Identifier

_unsigned = alternatives(
	preceded(tag('0x'), numeral(charset.HEX, 16, 'hex digit')),
	preceded(tag('0'), numeral(charset.OCTAL, 8, 'octal digit')),
	numeral(charset.DIGIT, 10, 'decimal digit'),
	expected='unsigned integer',
)

def parse_unsigned(subject):
	"""
	Hex (`0x1f`), octal (`017`), or decimal (`15`), in that order of preference.
	A lone `0` is just zero. Anything that will not fit in 64 bits is a NUMERIC_OVERFLOW.
	"""
	return _unsigned(as_view(subject))


OPERATOR_SPELLINGS = [
	('==', Operator.EQUAL),
	('!=', Operator.NOT_EQUAL),
	('>=', Operator.GREATER_THAN_EQUAL),
	('<=', Operator.LESS_THAN_EQUAL),
	('>', Operator.GREATER_THAN),
	('<', Operator.LESS_THAN),
	('~', Operator.MATCHES),
	('&', Operator.BITWISE_AND),
]

_operator = alternatives(*[constant(op, tag(spelling)) for spelling, op in OPERATOR_SPELLINGS], expected='operator')

def parse_operator(subject):
	return _operator(as_view(subject))


KEYWORDS = {
	'eq': Operator.EQUAL,
	'ne': Operator.NOT_EQUAL,
	'gt': Operator.GREATER_THAN,
	'lt': Operator.LESS_THAN,
	'ge': Operator.GREATER_THAN_EQUAL,
	'le': Operator.LESS_THAN_EQUAL,
	'contains': Operator.CONTAINS,
	'matches': Operator.MATCHES,
	'bitwise_and': Operator.BITWISE_AND,
}
LONGEST_KEYWORD = max(map(len, KEYWORDS))

_letter = run_of(charset.ALPHA, 'letter')

def parse_identifier_like(subject):
	"""
	Take the whole word, then decide: an operator keyword if the entire word is
	one, otherwise an identifier. `containst` is an identifier, not `contains`+`t`.
	"""
	view = as_view(subject)
	outcome = _letter(view)
	if not isinstance(outcome, Done): return outcome
	rest = outcome.rest.advance(run_length(charset.WORD_TAIL, outcome.rest))
	word = view.upto(rest)
	operator = KEYWORDS.get(str(word)) if len(word) <= LONGEST_KEYWORD else None
	return Done(Identifier(word) if operator is None else operator, rest)
