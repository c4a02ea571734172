"""Tree objects for labeled bracket notation.

A tree consists of internal nodes (:class:`Tree`) and terminals
(:class:`Leaf`). Trees are immutable once built: the layout of a tree is
computed by a separate pass (see :mod:`synbox.layout`) and does not modify it.
"""
import re
from itertools import count

# the three token kinds: open/close bracket, and labels/words
TOKENRE = re.compile(r'\(|\)|[^\s()]+')
BRACKETS = ('(', ')')


class MalformedInput(ValueError):
	"""Raised when a string is not a single well-formed bracketed tree."""


class Leaf(object):
	"""A terminal: a word with its position in the sentence.

	:param label: the label of the node that directly dominates this word.
	:param word: the word itself.
	:param index: zero-based position of the word in the sentence."""
	__slots__ = ('label', 'word', 'index')

	def __init__(self, label, word, index=None):
		self.label = label
		self.word = word
		self.index = index

	def __eq__(self, other):
		if not isinstance(other, Leaf):
			return False
		return (self.label == other.label and self.word == other.word
				and self.index == other.index)

	def __ne__(self, other):
		return not self.__eq__(other)

	def __hash__(self):
		return hash((self.label, self.word, self.index))

	def __repr__(self):
		return '%s(%r, %r, %r)' % (self.__class__.__name__,
				self.label, self.word, self.index)

	def __str__(self):
		return self.word


class Tree(object):
	"""An immutable, labeled, n-ary tree structure.

	Each Tree represents a single constituent; its children are an ordered
	tuple of subtrees and :class:`Leaf` objects.

	- ``Tree(label, children)`` constructs a new tree with the specified label
		and sequence of children.
	- ``Tree.parse(s)`` constructs a new tree by parsing the string s.

	Tree positions are tuples of child indices: ``()`` is the tree itself,
	``(i, )`` its i-th child, ``(i, j)`` the j-th child of the i-th child,
	&c."""
	__slots__ = ('label', 'children')

	def __init__(self, label, children):
		if not label or not isinstance(label, str):
			raise ValueError('label should be a non-empty string; got %r'
					% (label, ))
		if isinstance(children, str) or not hasattr(children, '__iter__'):
			raise TypeError('%s() argument 2 should be a sequence of '
					'children, not %r' % (self.__class__.__name__, children))
		self.label = label
		self.children = tuple(children)

	# === Comparison operators ==================================
	def __eq__(self, other):
		if not isinstance(other, Tree):
			return False
		return (self.label == other.label
				and self.children == other.children)

	def __ne__(self, other):
		return not self.__eq__(other)

	def __hash__(self):
		return hash((self.label, self.children))

	# === Delegated sequence operations =========================
	def __iter__(self):
		return self.children.__iter__()

	def __len__(self):
		return self.children.__len__()

	def __getitem__(self, index):
		if isinstance(index, (int, slice)):
			return self.children[index]
		elif len(index) == 0:
			return self
		elif len(index) == 1:
			return self.children[index[0]]
		return self.children[index[0]][index[1:]]

	# === Basic tree operations =================================
	def leaves(self):
		""":returns: list of the :class:`Leaf` objects of this tree.

		The order reflects the order of the tree's hierarchical structure."""
		leaves = []
		for child in self.children:
			if isinstance(child, Tree):
				leaves.extend(child.leaves())
			else:
				leaves.append(child)
		return leaves

	def words(self):
		""":returns: list of the words in this tree, in sentence order."""
		return [leaf.word for leaf in self.leaves()]

	def height(self):
		""":returns: the number of nodes on the longest path from this node
			down to a word, counting both ends; e.g., ``(NP (N cat))`` has
			height 3."""
		return 1 + max((child.height() if isinstance(child, Tree) else 1
				for child in self.children), default=0)

	def subtrees(self, condition=None):
		"""Yield internal nodes of this tree in depth-first, pre-order
		traversal.

		:param condition: a function ``Tree -> bool`` to filter which nodes are
			yielded (does not affect whether children are visited)."""
		agenda = [self]
		while agenda:
			node = agenda.pop()
			if isinstance(node, Tree):
				if condition is None or condition(node):
					yield node
				agenda.extend(node[::-1])

	def postorder(self, condition=None):
		"""A generator that does a post-order traversal of this tree.

		Similar to Tree.subtrees() which does a pre-order traversal.

		:yields: Tree objects."""
		# Non-recursive; requires no parent pointers but uses O(n) space.
		agenda = [self]
		visited = set()
		while agenda:
			node = agenda[-1]
			if not isinstance(node, Tree):
				agenda.pop()
			elif id(node) in visited:
				agenda.pop()
				if condition is None or condition(node):
					yield node
			else:
				agenda.extend(node[::-1])
				visited.add(id(node))

	# === Parsing ===============================================
	@classmethod
	def parse(cls, s):
		"""Parse a bracketed tree string and return the resulting tree.

		Trees are represented as nested bracketings, such as:
		``(S (NP (Det The) (N cat)) (VP (V sat)))``. The token after an
		opening bracket is the label; any other token that is not a bracket
		is a word, which becomes a :class:`Leaf` with the label of the
		enclosing bracket.

		:param s: The string to parse; it should contain exactly one tree.
		:returns: A tree corresponding to the string representation s.
		:raises MalformedInput: if the input does not start with ``(``, a
			bracket has no label, a bracket is not closed, or there is text
			after the tree."""
		stack = []  # list of (label, children) tuples
		result = None
		expectlabel = False
		indices = count()
		for match in TOKENRE.finditer(s):
			token = match.group()
			if expectlabel:
				if token in BRACKETS:
					cls._parse_error(s, match, 'label')
				stack.append((token, []))
				expectlabel = False
			elif result is not None:
				cls._parse_error(s, match, 'end-of-string')
			elif token == '(':  # Beginning of a tree/subtree
				expectlabel = True
			elif not stack:
				cls._parse_error(s, match, '(')
			elif token == ')':  # End of a tree/subtree
				label, children = stack.pop()
				node = cls(label, children)
				if stack:
					stack[-1][1].append(node)
				else:
					result = node
			else:  # Leaf node
				label = stack[-1][0]
				stack[-1][1].append(Leaf(label, token, next(indices)))
		if expectlabel:
			cls._parse_error(s, 'end-of-string', 'label')
		elif stack:
			cls._parse_error(s, 'end-of-string', ')')
		elif result is None:
			cls._parse_error(s, 'end-of-string', '(')
		return result

	@classmethod
	def _parse_error(cls, orig, match, expecting):
		"""Raise an exception with a friendly message when parsing fails.

		:param orig: The string we're parsing.
		:param match: regexp match of the problem token.
		:param expecting: what we expected to see instead."""
		# Construct a basic error message
		if match == 'end-of-string':
			pos, token = len(orig), 'end-of-string'
		else:
			pos, token = match.start(), match.group()
		msg = '%s.parse(): expected %r but got %r\n%sat index %d.' % (
			cls.__name__, expecting, token, ' ' * 12, pos)
		# Add a display showing the error token itself:
		s = orig.replace('\n', ' ').replace('\t', ' ')
		offset = pos
		if len(s) > pos + 10:
			s = s[:pos + 10] + '...'
		if pos > 10:
			s = '...' + s[pos - 10:]
			offset = 13
		msg += '\n%s"%s"\n%s^' % (' ' * 16, s, ' ' * (17 + offset))
		raise MalformedInput(msg)

	# === String Representations ================================
	def __repr__(self):
		childstr = ', '.join(repr(c) for c in self)
		return '%s(%r, [%s])' % (self.__class__.__name__, self.label, childstr)

	def __str__(self):
		return '(%s %s)' % (self.label, ' '.join(str(a) for a in self))

	def pprint(self, margin=70, indent=0):
		"""Return the bracket notation of this tree, broken over several
		lines when it does not fit within ``margin`` columns.

		:param indent: the column at which this node starts; children are
			indented two more columns than their parent."""
		result = str(self)
		if len(result) + indent < margin:
			return result
		lines = ['(%s' % self.label]
		for child in self.children:
			lines.append(' ' * (indent + 2) + (child.pprint(margin, indent + 2)
					if isinstance(child, Tree) else child.word))
		return '\n'.join(lines) + ')'


def tokenize(text):
	"""Split a bracketed tree into tokens: brackets, labels and words.

	>>> tokenize('(S (NP Mary) walks)')
	['(', 'S', '(', 'NP', 'Mary', ')', 'walks', ')']
	"""
	return TOKENRE.findall(text)


def parse(text):
	"""Parse a single tree in bracket notation; alias of ``Tree.parse``."""
	return Tree.parse(text)


def readtrees(lines):
	"""Divide lines of text into the bracket strings of successive trees.

	Brackets are counted across lines; a chunk ends when the brackets of a
	tree are balanced. Blank text between trees is skipped; any other text
	outside of brackets stays attached to a chunk so that parsing that chunk
	reports it. An unterminated tree at the end of the input is yielded as
	well.

	:param lines: an iterable of strings (line endings optional).
	:yields: strings, each of which should be parsable by ``Tree.parse``."""
	cur = []
	parens = 0
	for line in lines:
		start = 0
		for match in TOKENRE.finditer(line):
			token = match.group()
			if token == '(':
				parens += 1
			elif token == ')':
				parens -= 1
			if parens <= 0:
				cur.append(line[start:match.end()])
				start = match.end()
				if token == ')':
					yield ''.join(cur).strip()
					cur = []
					parens = 0
		rest = line[start:]
		if cur or rest.strip():
			cur.append(rest if rest.endswith('\n') else rest + '\n')
	if ''.join(cur).strip():
		yield ''.join(cur).strip()


__all__ = ['Tree', 'Leaf', 'MalformedInput', 'tokenize', 'parse',
		'readtrees']
