"""Default parameters and parameter files."""
import io

DEFAULTS = dict(
	# brackets with these labels are drawn above the words
	highlevel=('SN_Sujeto', 'SV_Predicado'),
	# one of 'text', 'html'
	output='text',
	# use Unicode box-drawing characters in text output
	unicodelines=True,
	# abbreviate labels longer than 5 characters
	abbr=False,
	# number of spaces between columns in text output
	nodedist=1,
	)
OUTPUTFORMATS = ('text', 'html')


class DictObj(object):
	"""Trivial class to wrap a dictionary for reasons of syntactic sugar."""

	def __init__(self, *args, **kwds):
		self.__dict__.update(*args, **kwds)

	def update(self, *args, **kwds):
		"""Update/add more attributes."""
		self.__dict__.update(*args, **kwds)

	def __getattr__(self, name):
		"""Dummy function for suppressing pylint E1101 errors."""
		raise AttributeError('%r instance has no attribute %r.\n'
				'Available attributes: %r' % (
				self.__class__.__name__, name, list(self.__dict__.keys())))

	def __repr__(self):
		return '%s(%s)' % (self.__class__.__name__,
			',\n\t'.join('%s=%r' % a for a in self.__dict__.items()))


def parsehighlevel(text):
	"""Parse a comma-separated list of labels.

	>>> parsehighlevel('NP, VP')
	('NP', 'VP')"""
	return tuple(a.strip() for a in text.split(',') if a.strip())


def validate(params):
	"""Check parameters and normalize values; returns a DictObj.

	:param params: a dictionary; missing keys are taken from ``DEFAULTS``.
	:raises ValueError: for unknown keys or invalid values."""
	for key in params:
		if key not in DEFAULTS:
			raise ValueError('unrecognized option: %r' % key)
	result = DictObj(DEFAULTS)
	result.update(params)
	if isinstance(result.highlevel, str):
		result.highlevel = parsehighlevel(result.highlevel)
	elif not all(isinstance(a, str) for a in result.highlevel):
		raise ValueError('highlevel should be a sequence of labels; got %r'
				% (result.highlevel, ))
	result.highlevel = tuple(result.highlevel)
	if result.output not in OUTPUTFORMATS:
		raise ValueError('unrecognized output format: %r' % result.output)
	if not isinstance(result.nodedist, int) or result.nodedist < 0:
		raise ValueError('nodedist should be a non-negative integer; got %r'
				% (result.nodedist, ))
	return result


def readparam(filename):
	"""Parse a parameter file.

	:param filename: The file should contain a list of comma-separated
		``attribute=value`` pairs and will be read using
		``eval('dict(%s)' % open(file).read())``, without builtins.
	:returns: A DictObj with defaults for any missing attributes."""
	with io.open(filename, encoding='utf8') as fileobj:
		params = eval('dict(%s)' % fileobj.read(),  # pylint: disable=eval-used
				{'__builtins__': {}, 'dict': dict})
	return validate(params)


__all__ = ['DEFAULTS', 'DictObj', 'readparam', 'validate', 'parsehighlevel']
