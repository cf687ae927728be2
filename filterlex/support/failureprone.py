"""
This module is all about showing where a scan went wrong.

A scan failure carries a view of the text at the point of failure, and a view
knows its offset into the full text. That is as much location data as the
scanners deal in. Turning the offset into a line and column, slicing out the
offending line, and drawing a caret under the spot is the job of `SourceText`,
and `describe_failure` strings it all together for a Failure and its causes.

Filters are usually one line, but nothing stops someone writing them across
several, so line breaks follow the usual Unix, Apple, and DOS conventions.
"""

import bisect, re

from ..scanning.interface import Failure

LINE_BREAK = re.compile(r'\r\n?|\n')


def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line)-start))
	underline = '^'*underline_width
	return prefix + single_line.rstrip() + '\n' + blanks + underline +" "+caption


class SourceText:
	""" Wrapper for (a section of) source text: participates in half-respectable error-display with context. """
	def __init__(self, content:str, filename:str=None, first_line=1):
		self.content = content
		self.filename = filename
		self.first_line = first_line
		self.__bounds = None

	def __make_bounds(self):
		""" Lazily only find line breaks if it turns out to be necessary for a particular text. """
		if self.__bounds is None:
			inside = [m.end() for m in LINE_BREAK.finditer(self.content)]
			self.__bounds = [0] + inside + [len(self.content)]

	def find_row_col(self, index:int):
		""" Based on a character index offset from the start of text. Respects self.first_line. """
		self.__make_bounds()
		row = bisect.bisect_right(self.__bounds, index, hi=len(self.__bounds) - 1) - 1
		col = index - self.__bounds[row]
		return row+self.first_line, col

	def line_of_text(self, row):
		""" Argument respects self.first_line. """
		self.__make_bounds()
		r = max(0, row - self.first_line)
		return self.content[self.__bounds[r]:self.__bounds[r + 1]]

	def _format_message(self, row, col, message):
		prefix = "At" if self.filename is None else str(self.filename)+":"
		return "%s line %d, column %d: %s" % (prefix, row, col + 1, message)

	def complaint(self, a_slice:slice, message:str):
		left, right = a_slice.start, a_slice.stop
		row, col = self.find_row_col(left)
		reference = self._format_message(row, col, message)
		line = self.line_of_text(row)
		illustrated = illustration(line, col, right - left, prefix=' >>> ')
		return "%s\n%s"%(reference, illustrated)


def _failure_message(failure:Failure) -> str:
	if failure.expected is None: return failure.kind.value
	return "%s; expected %s"%(failure.kind.value, failure.expected)

def describe_failure(failure:Failure, filename:str=None) -> str:
	"""
	A full report: the outermost failure with its picture, then one line per
	underlying cause (deepest last) so the reader can see what was being attempted.
	"""
	source = SourceText(failure.at.text, filename=filename)
	lines = [source.complaint(failure.at[:1].extent(), _failure_message(failure))]
	for cause in list(failure.chain())[1:]:
		row, col = source.find_row_col(cause.position())
		lines.append("  because at line %d, column %d: %s"%(row, col+1, _failure_message(cause)))
	return "\n".join(lines)
