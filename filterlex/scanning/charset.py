"""
Character classes for the hand-written scanners in this package.

A character class is a sorted list of lower bounds with implied exclusion
below the first listed bound. That is: a character is a member of the class
exactly when an odd number of lower-bounds in the class are less-than-or-equal-to
that character's codepoint value. (See the `in_class(...)` function.)

The filter language is deliberately ASCII-minded: digits and letters mean
the ASCII ones, never their locale-dependent cousins. Anything beyond ASCII
is only ever interesting as "not a quote and not a backslash".
"""
import bisect, operator

# How to tell if a character (by codepoint) is a member of the class:
def in_class(cls:list, codepoint:int) -> bool: return bisect.bisect_right(cls, codepoint) % 2


# Character class construction and set-operations:
EMPTY = []
UNIVERSAL = [0]

def singleton(codepoint:int) -> list: return [codepoint, codepoint + 1]
def range_class(first, last) -> list: return [first, last+1] if first <= last else [last, first+1]
def complement(cls:list) -> list:
	if not cls: return UNIVERSAL
	if cls[0]<=0: return cls[1:]
	return [0]+cls
def combine(op, x:list, y:list) -> list:
	""" Arbitrary boolean combination of character classes controlled by 'op :: (bool, bool) -> bool'  """
	result = []
	for b in sorted({0}.union(x, y)): # The zero is included in case op(False, False) == True.
		if len(result) % 2 != bool(op(in_class(x, b), in_class(y, b))):
			result.append(b)
	return result
def union(a:list, b:list) -> list: return combine(operator.or_, a, b)
def of_chars(chars:str) -> list:
	result = EMPTY
	for c in chars: result = union(result, singleton(ord(c)))
	return result


DIGIT = range_class(ord('0'), ord('9'))
OCTAL = range_class(ord('0'), ord('7'))
HEX = union(DIGIT, union(range_class(ord('A'), ord('F')), range_class(ord('a'), ord('f'))))
ALPHA = union(range_class(ord('A'), ord('Z')), range_class(ord('a'), ord('z')))
WORD_TAIL = union(ALPHA, singleton(ord('_'))) # Keywords such as `bitwise_and` need the underscore.
STRING_BODY = complement(of_chars('"\\'))

assert all(cls == sorted(cls) for cls in (DIGIT, OCTAL, HEX, ALPHA, WORD_TAIL, STRING_BODY))
