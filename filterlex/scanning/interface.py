"""
Scanning Interface Definitions.

Every scanner in this package is a plain function from a text (a str or a
TextView) to exactly one of three outcomes:

	Done(value, rest) -- a token was recognized; `rest` views what remains.
	Failure(kind, at, expected, cause) -- the text cannot start this kind of token.
		`at` views the remaining text at the point where things went wrong,
		and `cause` is the failure of a sub-scanner, if that explains it better.
	Incomplete(needed) -- the text is a proper prefix of a legal token.
		`needed` is the least total length (counted from where the scan began)
		the text must reach before another attempt can get anywhere, or None
		if nobody knows.

The grammar layer above depends on telling "bad" apart from "not enough yet",
so these are kept deliberately distinct. Callers who would rather deal in
exceptions can pass any outcome through `expect(...)`.
"""
from enum import Enum
from typing import NamedTuple, Optional, Any, Union

from .cursor import TextView


class ErrorKind(Enum):
	NO_MATCH = "No match"
	NUMERIC_OVERFLOW = "Numeric overflow"


class Done(NamedTuple):
	value: Any
	rest: TextView


class Failure(NamedTuple):
	kind: ErrorKind
	at: TextView
	expected: Optional[str] = None
	cause: Optional["Failure"] = None

	def position(self) -> int: return self.at.start

	def chain(self):
		""" Yield this failure and then each underlying cause in turn. """
		failure = self
		while failure is not None:
			yield failure
			failure = failure.cause


class Incomplete(NamedTuple):
	needed: Optional[int] = None


Outcome = Union[Done, Failure, Incomplete]


def no_match(at:TextView, expected:str=None, cause:Failure=None) -> Failure:
	return Failure(ErrorKind.NO_MATCH, at, expected, cause)

def overflow(at:TextView, expected:str=None) -> Failure:
	return Failure(ErrorKind.NUMERIC_OVERFLOW, at, expected)

def is_soft(outcome) -> bool:
	""" A NO_MATCH failure leaves room for an alternative. Anything else settles the question. """
	return isinstance(outcome, Failure) and outcome.kind is ErrorKind.NO_MATCH


class ScanError(ValueError):
	""" Base for exceptions raised from an unhappy outcome. The outcome itself rides along. """
	def __init__(self, outcome):
		super().__init__(outcome)
		self.outcome = outcome

class ScanFailed(ScanError):
	"""
	Raised (by `expect`) for a Failure. Attributes are:
		the kind of error,
		the string offset where it happened.
	"""
	def __init__(self, failure:Failure):
		super().__init__(failure)
		self.kind, self.position = failure.kind, failure.position()

class NeedMoreInput(ScanError):
	""" Raised (by `expect`) for an Incomplete outcome. """
	def __init__(self, incomplete:Incomplete):
		super().__init__(incomplete)
		self.needed = incomplete.needed


def expect(outcome) -> Done:
	""" Pass a Done through untouched; raise the corresponding exception for anything else. """
	if isinstance(outcome, Done): return outcome
	if isinstance(outcome, Failure): raise ScanFailed(outcome)
	if isinstance(outcome, Incomplete): raise NeedMoreInput(outcome)
	raise TypeError(outcome)
