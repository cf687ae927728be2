"""
Feeding a scanner text a piece at a time.

The scanners are not resumable: an Incomplete outcome just means "come back with
more". The Feeder does the coming back. It keeps everything fed so far, re-runs
the scanner from the top whenever there is enough new text to matter (going by
the Incomplete's `needed` hint), and holds on to the result once the token has
settled into Done or Failure. Text fed after that lands in the Done's remainder.

A Done that ran right up to the end of the text has not settled: a greedy
scanner may have stopped only because the text did. Such a Done is scanned
again when more text arrives, and only stands as final once something follows
it or `finish` is called.
"""
from typing import Callable

from ..scanning.cursor import TextView
from ..scanning.interface import Done, Incomplete, NeedMoreInput

VERBOSE = False


class Feeder:
	def __init__(self, scanner:Callable):
		self.__scanner = scanner
		self.__text = ''
		self.__outcome = None

	@property
	def text(self) -> str: return self.__text

	@property
	def outcome(self): return self.__outcome

	def __scan(self):
		self.__outcome = self.__scanner(self.__text)
		if VERBOSE: print("Scanned %d characters: %s"%(len(self.__text), type(self.__outcome).__name__))

	def feed(self, chunk:str):
		""" Add text; return the outcome as it now stands. """
		self.__text += chunk
		outcome = self.__outcome
		if outcome is None: self.__scan()
		elif isinstance(outcome, Incomplete):
			if outcome.needed is None or len(self.__text) >= outcome.needed: self.__scan()
			elif VERBOSE: print("Holding %d characters; need at least %d."%(len(self.__text), outcome.needed))
		elif isinstance(outcome, Done) and not outcome.rest:
			if chunk: self.__scan()
		elif isinstance(outcome, Done):
			self.__outcome = Done(outcome.value, TextView(self.__text, outcome.rest.start))
		return self.__outcome

	def finish(self):
		""" No more text is coming. Return the final outcome, or raise NeedMoreInput if the token never closed. """
		if self.__outcome is None: self.__scan()
		if isinstance(self.__outcome, Incomplete): raise NeedMoreInput(self.__outcome)
		return self.__outcome
