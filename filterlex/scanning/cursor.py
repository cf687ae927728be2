"""
A TextView is a window onto (part of) some larger string.

Scanners hand these back instead of substrings, so consuming a token never
copies the text behind it: the remainder after a token, an identifier, or an
escape-free string body are all just a pair of offsets into the caller's text.
Call str(...) on a view when you actually want the characters.

A view compares equal to a string with the same characters, which keeps tests
and casual comparisons pleasant.
"""


class TextView:
	__slots__ = ('text', 'start', 'stop')

	def __init__(self, text:str, start:int=0, stop:int=None):
		size = len(text)
		if stop is None: stop = size
		assert 0 <= start <= stop <= size, (start, stop, size)
		self.text, self.start, self.stop = text, start, stop

	def __len__(self): return self.stop - self.start
	def __bool__(self): return self.stop > self.start
	def __str__(self): return self.text[self.start:self.stop]
	def __repr__(self): return 'TextView(%r)'%str(self)
	def __hash__(self): return hash(str(self))

	def __eq__(self, other):
		if isinstance(other, TextView):
			if other.text is self.text and other.start == self.start and other.stop == self.stop: return True
			other = str(other)
		if isinstance(other, str):
			return len(other) == len(self) and self.text.startswith(other, self.start, self.stop)
		return NotImplemented

	def __getitem__(self, index):
		""" Integers give characters. Slices give views, never copies. """
		if isinstance(index, slice):
			start, stop, step = index.indices(len(self))
			assert step == 1, "A view is contiguous."
			return TextView(self.text, self.start+start, self.start+max(start, stop))
		if index < 0: index += len(self)
		if not 0 <= index < len(self): raise IndexError(index)
		return self.text[self.start+index]

	def startswith(self, prefix:str) -> bool:
		return self.text.startswith(prefix, self.start, self.stop)

	def advance(self, nr_chars:int) -> "TextView":
		""" The view that remains after consuming `nr_chars` characters from the front. """
		assert 0 <= nr_chars <= len(self), nr_chars
		return TextView(self.text, self.start+nr_chars, self.stop)

	def upto(self, rest:"TextView") -> "TextView":
		""" The portion of self that was consumed to arrive at `rest`. """
		assert rest.text is self.text and self.start <= rest.start <= self.stop
		return TextView(self.text, self.start, rest.start)

	def extent(self) -> slice: return slice(self.start, self.stop)


def as_view(subject) -> TextView:
	""" Scanners accept either a plain string or a view on one. """
	if isinstance(subject, TextView): return subject
	if isinstance(subject, str): return TextView(subject)
	raise TypeError("Expected str or TextView, got %s"%type(subject).__name__)
