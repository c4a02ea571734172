"""Command-line interfaces to modules."""
import logging
from sys import argv, stdout, stderr
from sys import exit as sysexit

COMMANDS = {
		'draw': 'Draw trees as rows of labeled brackets around the words.',
		'spans': 'List the span, depth and row group of each constituent.',
		'demo': 'Draw some example sentences.',
	}
SAMPLES = [
		'''(O
			(SN_Sujeto
				(Det Los)
				(Adj_Ady jóvenes)
				(N_Núcleo estudiantes)
			)
			(SV_Predicado
				(V_Núcleo leen)
				(Adv_CCM rápidamente)
				(SN_CD
					(Det el)
					(N_Núcleo libro)
				)
			)
		)''',
		'''(FN
			(Atributo doː_tɪɦɑːiː)
			(Núcleo ʋɪdjɑːɾtʰiː)
		)''',
		'(S (NP (Det The) (N cat)) (VP (V sat)))',
	]


def main():
	"""Expose command-line interfaces."""
	from os.path import basename
	thiscmd = basename(argv[0])
	if len(argv) == 2 and argv[1] in ('-v', '--version'):
		from synbox import __version__
		print(__version__)
	elif len(argv) <= 1 or argv[1] not in COMMANDS:
		print('Usage: %s <command> [arguments]\n' % thiscmd, file=stderr)
		print('Command is one of:', file=stderr)
		for a, b in COMMANDS.items():
			print('   %s  %s' % (a.ljust(15), b), file=stderr)
		print('for additional instructions issue: %s <command> --help'
			% thiscmd, file=stderr)
		sysexit(2)
	else:
		globals()[argv[1]](argv[2:])


def setuplogging(opts):
	"""Log to stderr, in a format with just the message."""
	level = logging.DEBUG if '--verbose' in opts else logging.WARNING
	logging.basicConfig(level=level, format='%(message)s')


def getparams(opts):
	"""Combine a parameter file (if any) with command line options.

	:raises ValueError: for invalid options."""
	from .params import readparam, validate
	params = readparam(opts['--param']) if '--param' in opts else validate({})
	if '--highlevel' in opts:
		params.highlevel = opts['--highlevel']
	if '--output' in opts:
		params.output = opts['--output']
	if '--abbr' in opts:
		params.abbr = True
	if '--plain' in opts:
		params.unicodelines = False
	return validate(vars(params))


def readinput(args, encoding):
	"""Yield the bracket strings in the given files, one file at a time.

	Each file is closed when its trees are exhausted, or when the caller
	closes this generator."""
	from .tree import readtrees
	from .util import openread
	for fname in args or ['-']:
		with openread(fname, encoding=encoding) as inp:
			yield from readtrees(inp)


def draw(args=None):
	"""Draw trees as rows of labeled brackets around the words.
Usage: synbox draw [<file>...] [options]
Options:
  --output=[text|html]  Specify output format [default: text].
  --highlevel=x,y   Labels of constituents drawn above the words
                    [default: SN_Sujeto,SV_Predicado].
  --param=file      Read options from a parameter file; command line options
                    take precedence.
  --encoding=enc    Specify a different encoding than the default UTF-8.
  --abbr            Abbreviate labels longer than 5 characters.
  --plain           Use ASCII characters instead of Unicode lines.
  --strict          Stop at the first tree that cannot be drawn.
  --verbose         Log debug messages to stderr.
  -n, --numtrees=x  Only display the first x trees from the input.
If no file is given, input is read from standard input; a file may contain
several trees. Exit status is 1 if any tree could not be drawn."""
	from getopt import gnu_getopt, GetoptError
	from itertools import islice
	from .tree import MalformedInput
	from .layout import InvariantViolation
	from .draw import DrawBoxes
	if args is None:
		args = argv[2:]
	flags = ('help', 'abbr', 'plain', 'strict', 'verbose')
	options = ('output=', 'highlevel=', 'param=', 'encoding=', 'numtrees=')
	try:
		opts, args = gnu_getopt(args, 'hn:', flags + options)
		opts = dict(opts)
		params = getparams(opts)
		limit = opts.get('--numtrees', opts.get('-n'))
		limit = int(limit) if limit else None
	except (GetoptError, ValueError) as err:
		print('error:', err, file=stderr)
		print(draw.__doc__, file=stderr)
		sysexit(2)
	if '--help' in opts or '-h' in opts:
		print(draw.__doc__)
		return
	setuplogging(opts)
	logging.debug('parameters: %r', params)
	if params.output == 'html':
		print(DrawBoxes.templates['html'][0])  # preamble
	numtrees = errors = 0
	trees = readinput(args, opts.get('--encoding', 'utf8'))
	try:
		for n, treestr in enumerate(islice(trees, limit), 1):
			try:
				dt = DrawBoxes(treestr, highlevel=params.highlevel,
						abbr=params.abbr)
			except (MalformedInput, InvariantViolation) as err:
				errors += 1
				print('error in tree %d:\n%s' % (n, err), file=stderr)
				if '--strict' in opts:
					break
				continue
			numtrees += 1
			logging.debug('tree %d: %d words, height %d',
					n, len(dt.layout.words), dt.tree.height())
			if params.output == 'html':
				print(dt.html())
			else:
				print('%d. (len=%d):' % (n, len(dt.layout.words)))
				print(dt.text(unicodelines=params.unicodelines,
						nodedist=params.nodedist))
	finally:
		trees.close()
	if params.output == 'html':
		print(DrawBoxes.templates['html'][1])  # postamble
	stdout.flush()
	logging.info('drew %d trees; %d with errors', numtrees, errors)
	if errors:
		sysexit(1)


def spans(args=None):
	"""List the span, depth and row group of each constituent.
Usage: synbox spans [<file>...] [options]
Options:
  --highlevel=x,y   Labels of constituents drawn above the words.
  --param=file      Read options from a parameter file.
  --encoding=enc    Specify a different encoding than the default UTF-8.
  --verbose         Also print each tree; log debug messages to stderr.
Spans are inclusive word indices starting at 0; the root has depth 0."""
	from getopt import gnu_getopt, GetoptError
	from .tree import Tree, MalformedInput
	from .layout import layout, classify, InvariantViolation
	if args is None:
		args = argv[2:]
	try:
		opts, args = gnu_getopt(args, 'h', ('help', 'verbose', 'highlevel=',
				'param=', 'encoding='))
		opts = dict(opts)
		params = getparams(opts)
	except (GetoptError, ValueError) as err:
		print('error:', err, file=stderr)
		print(spans.__doc__, file=stderr)
		sysexit(2)
	if '--help' in opts or '-h' in opts:
		print(spans.__doc__)
		return
	setuplogging(opts)
	highlevel = frozenset(params.highlevel)
	errors = 0
	trees = readinput(args, opts.get('--encoding', 'utf8'))
	try:
		for n, treestr in enumerate(trees, 1):
			try:
				result = layout(Tree.parse(treestr), highlevel)
			except (MalformedInput, InvariantViolation) as err:
				errors += 1
				print('error in tree %d:\n%s' % (n, err), file=stderr)
				continue
			print('%d. %s' % (n, ' '.join(result.words)))
			if '--verbose' in opts:
				print(result.tree.pprint())
			print('%-15s %5s %5s %5s  %s' % (
					'label', 'depth', 'start', 'end', 'group'))
			for node in result.tree.subtrees():
				span = result.span(node)
				print('%-15s %5d %5d %5d  %s' % (node.label, span.depth,
						span.start, span.end,
						classify(node.label, span.depth, highlevel) or '-'))
			print()
	finally:
		trees.close()
	if errors:
		sysexit(1)


def demo(args=None):
	"""Draw some example sentences.
Usage: synbox demo [--plain] [--output=html]"""
	from .draw import DrawBoxes
	from .params import DEFAULTS
	if args is None:
		args = argv[2:]
	if '--help' in args or '-h' in args:
		print(demo.__doc__)
		return
	html = '--output=html' in args
	if html:
		print(DrawBoxes.templates['html'][0])
	for treestr in SAMPLES:
		dt = DrawBoxes(treestr, highlevel=DEFAULTS['highlevel'] + ('NP', ))
		if html:
			print(dt.html())
		else:
			print(' '.join(dt.layout.words))
			print(dt.text(unicodelines='--plain' not in args))
	if html:
		print(DrawBoxes.templates['html'][1])


__all__ = ['main', 'draw', 'spans', 'demo']
