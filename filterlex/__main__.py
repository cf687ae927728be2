"""
Scan one token of a filter expression and report what came of it:
the token and the remaining text, or a picture of where things went wrong.

If no text is given on the command line, it is read from STDIN a line at a time,
which exercises the scanners' handling of partial input.
"""

import sys, argparse, functools

from filterlex.lexical.all_scanners import SCANNERS
from filterlex.scanning.interface import Failure, NeedMoreInput
from filterlex.support import failureprone, incremental

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m filterlex', description=__doc__,)
	parser.add_argument('kind', choices=sorted(SCANNERS), help='what sort of token to scan for')
	parser.add_argument('text', nargs='?', help='text to scan (default: read STDIN)')
	parser.add_argument('--strict', action='store_true', help='reject string escapes other than \\" and \\\\')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about each attempt to scan.")
	args = parser.parse_args(argv)
	if args.strict and args.kind != 'string': parser.error('--strict only applies to strings')
	return args

def main(args) -> int:
	if args.verbose: incremental.VERBOSE = True
	scanner = SCANNERS[args.kind]
	if args.strict: scanner = functools.partial(scanner, strict=True)
	feeder = incremental.Feeder(scanner)
	if args.text is None:
		for line in sys.stdin: feeder.feed(line)
	else: feeder.feed(args.text)
	try: outcome = feeder.finish()
	except NeedMoreInput as e:
		print('Text ended in the middle of a %s token.'%args.kind, file=sys.stderr)
		if e.needed is not None: print('It would take at least %d characters to go on.'%e.needed, file=sys.stderr)
		return 1
	if isinstance(outcome, Failure):
		print(failureprone.describe_failure(outcome), file=sys.stderr)
		return 1
	print(repr(outcome.value))
	print('Remainder:', repr(str(outcome.rest)))
	return 0

if __name__ == '__main__': sys.exit(main(parse_arguments()))
