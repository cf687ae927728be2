"""
The values a scan can produce. None of these has a life of its own: each is made by
one scanning call and consumed straight away by whoever asked for it.
"""
from enum import Enum
from typing import NamedTuple, Union

from ..scanning.cursor import TextView


class Operator(Enum):
	""" Each member's value is its canonical spelling. """
	EQUAL = '=='
	NOT_EQUAL = '!='
	GREATER_THAN = '>'
	LESS_THAN = '<'
	GREATER_THAN_EQUAL = '>='
	LESS_THAN_EQUAL = '<='
	CONTAINS = 'contains'
	MATCHES = '~'
	BITWISE_AND = '&'


class Identifier(NamedTuple):
	name: TextView # Borrowed from the scanned text.

	def __str__(self): return str(self.name)

IdentifierLike = Union[Identifier, Operator]


class EthernetAddress(bytes):
	""" Six octets, in the order they were written. """
	def __str__(self): return ':'.join('%02x'%b for b in self)
	def __repr__(self): return 'EthernetAddress(%r)'%str(self)

class IPv4Address(bytes):
	""" Four octets, in the order they were written. """
	def __str__(self): return '.'.join(map(str, self))
	def __repr__(self): return 'IPv4Address(%r)'%str(self)


class DecodedString:
	"""
	The body of a quoted string, copy-on-write style.

	It starts life borrowing a view of the input. Only when the scanner finds
	an escape sequence does it copy that borrowed prefix into an owned buffer,
	after which each decoded character and the literal run that follows it
	are appended. Escape-free strings (by far the common case) never copy.
	"""
	__slots__ = ('__view', '__pieces')

	def __init__(self, view:TextView):
		self.__view = view
		self.__pieces = None

	def is_borrowed(self) -> bool: return self.__pieces is None

	def append(self, decoded:str, literal:TextView):
		if self.__pieces is None: self.__pieces = [str(self.__view)]
		self.__pieces.append(decoded)
		if literal: self.__pieces.append(str(literal))

	def __str__(self):
		if self.__pieces is None: return str(self.__view)
		if len(self.__pieces) > 1: self.__pieces = [''.join(self.__pieces)]
		return self.__pieces[0]

	def __len__(self): return len(str(self))
	def __hash__(self): return hash(str(self))

	def __eq__(self, other):
		if isinstance(other, DecodedString): return str(self) == str(other)
		if isinstance(other, str):
			return self.__view == other if self.__pieces is None else str(self) == other
		return NotImplemented

	def __repr__(self):
		return '%s(%r)'%('Borrowed' if self.is_borrowed() else 'Owned', str(self))
