"""Compute the grid layout of a tree: word columns, spans and bracket rows.

The words of a sentence form a single row of columns. Every constituent is a
horizontal bracket spanning the columns of the words it dominates. A set of
high-level categories is drawn above the words, all other constituents below
them. Within each group, constituents of the same depth share a row; rows
are stacked outwards from the word row:

- above the words, the shallowest constituents are at the top, and deeper
	constituents are closer to the words;
- below the words, the deepest constituents come first, shallower
	constituents are further down.

The root is never drawn as a bracket; leaves are words, not brackets.

>>> from synbox.tree import Tree
>>> tree = Tree.parse('(S (NP (Det The) (N cat)) (VP (V sat)))')
>>> result = layout(tree, highlevel={'NP', 'VP'})
>>> result.words
['The', 'cat', 'sat']
>>> [(a.label, a.start, a.end) for a in result.above[0].placements]
[('NP', 0, 1), ('VP', 2, 2)]
>>> [(a.label, a.start, a.end) for a in result.below[0].placements]
[('Det', 0, 0), ('N', 1, 1), ('V', 2, 2)]
"""
import logging
from collections import namedtuple, defaultdict
from operator import attrgetter
import numpy as np
from .tree import Tree

ABOVE, BELOW = 'above', 'below'

# inclusive word indices and distance from the root of a node
Span = namedtuple('Span', ('start', 'end', 'depth'))
# a row of placements, ordered by start index
Row = namedtuple('Row', ('group', 'depth', 'placements'))


class Placement(namedtuple('Placement', ('label', 'start', 'width', 'depth'))):
	"""A bracket occupying ``width`` columns starting at column ``start``.

	A placement with label ``None`` is an empty cell (a gap)."""
	__slots__ = ()

	@property
	def end(self):
		"""Index of the last column covered by this placement."""
		return self.start + self.width - 1


class InvariantViolation(RuntimeError):
	"""Raised when a tree or layout is internally inconsistent.

	e.g., an internal node without children has no span, and brackets in
	the same row must not overlap."""


class Layout(object):
	"""The result of :func:`layout`.

	:ivar tree: the tree this layout was computed for.
	:ivar words: list of words; the column of each word is its index.
	:ivar spans: dictionary mapping ``id(node)`` to a :class:`Span`, for
		every node of the tree, leaves included.
	:ivar above: list of rows drawn above the words, from top to bottom.
	:ivar below: list of rows drawn below the words, from top to bottom."""
	__slots__ = ('tree', 'words', 'spans', 'above', 'below')

	def __init__(self, tree, words, spans, above, below):
		self.tree = tree
		self.words = words
		self.spans = spans
		self.above = above
		self.below = below

	def __eq__(self, other):
		if not isinstance(other, Layout):
			return False
		return (self.words == other.words and self.above == other.above
				and self.below == other.below)

	def __ne__(self, other):
		return not self.__eq__(other)

	def __repr__(self):
		return '%s(words=%r, above=%r, below=%r)' % (
				self.__class__.__name__, self.words, self.above, self.below)

	def span(self, node):
		"""Return the :class:`Span` of a node of this tree."""
		try:
			return self.spans[id(node)]
		except KeyError:
			raise ValueError('%r is not a node of this tree' % (node, ))

	def rows(self):
		"""Return all rows from top to bottom.

		The words are drawn between the last row of ``self.above`` and the
		first row of ``self.below``."""
		return self.above + self.below

	def cells(self, row):
		"""Return the placements of a row including empty cells, such that
		each column is covered exactly once."""
		return list(fillgaps(row.placements, len(self.words), row.depth))

	def matrix(self):
		"""Return the occupancy of the grid as an array.

		:returns: an integer array with a line for each row of ``rows()``
			and a column for each word; each cell holds the number of the
			placement covering it (counting placements in the order of
			``rows()``), or -1 for empty cells.
		:raises InvariantViolation: if placements in a row overlap."""
		rows = self.rows()
		result = np.full((len(rows), len(self.words)), -1, dtype=int)
		n = 0
		for i, row in enumerate(rows):
			for placement in row.placements:
				cells = result[i, placement.start:placement.end + 1]
				if (cells != -1).any():
					raise InvariantViolation(
							'%s overlaps with another bracket in %s row '
							'at depth %d' % (placement, row.group, row.depth))
				cells[:] = n
				n += 1
		return result


def indexleaves(tree):
	"""Assign each word its column.

	:returns: a tuple ``(words, indices)`` where words is the list of words
		in left-to-right order, and indices maps ``id(leaf)`` to the index
		of the leaf."""
	words, indices = [], {}
	for n, leaf in enumerate(tree.leaves()):
		indices[id(leaf)] = n
		words.append(leaf.word)
	return words, indices


def annotate(tree, indices=None):
	"""Compute the span and depth of every node.

	Depths are assigned top-down (the root has depth 0), spans bottom-up: the
	span of an internal node runs from the minimum start to the maximum end
	of its children.

	:param indices: the result of ``indexleaves(tree)[1]``; computed if not
		given.
	:returns: a dictionary mapping ``id(node)`` to a :class:`Span`.
	:raises InvariantViolation: if an internal node has no children."""
	if not isinstance(tree, Tree):
		raise TypeError('expected a Tree; got %r' % (tree, ))
	if indices is None:
		_, indices = indexleaves(tree)
	depths = {id(tree): 0}
	for node in tree.subtrees():
		for child in node:
			depths[id(child)] = depths[id(node)] + 1
	result = {}
	for node in tree.postorder():
		if len(node) == 0:
			raise InvariantViolation(
					'node %r at depth %d has no children; cannot compute span'
					% (node.label, depths[id(node)]))
		starts, ends = [], []
		for child in node:
			if isinstance(child, Tree):
				span = result[id(child)]
			else:
				span = result[id(child)] = Span(
						indices[id(child)], indices[id(child)],
						depths[id(child)])
			starts.append(span.start)
			ends.append(span.end)
		result[id(node)] = Span(min(starts), max(ends), depths[id(node)])
	return result


def classify(label, depth, highlevel):
	"""Decide where the bracket of an internal node is drawn.

	:param highlevel: a set of labels drawn above the words.
	:returns: ``ABOVE``, ``BELOW``, or ``None`` for the root, which is not
		drawn."""
	if depth == 0:
		return None
	elif label in highlevel:
		return ABOVE
	return BELOW


def fillgaps(placements, numwords, depth=None):
	"""Yield placements interspersed with empty cells for uncovered columns.

	:param placements: a sequence of placements sorted by start index.
	:param numwords: the total number of columns.
	:param depth: depth to give to empty cells.
	:raises InvariantViolation: if placements overlap."""
	pos = 0
	for placement in placements:
		if placement.start < pos:
			raise InvariantViolation('%s overlaps with previous bracket'
					% (placement, ))
		if placement.start > pos:
			yield Placement(None, pos, placement.start - pos, depth)
		yield placement
		pos = placement.end + 1
	if numwords > pos:
		yield Placement(None, pos, numwords - pos, depth)


def layout(tree, highlevel=()):
	"""Compute the words, spans and bracket rows of a tree.

	:param tree: a :class:`synbox.tree.Tree`.
	:param highlevel: a collection of labels whose brackets are drawn above
		the words; all other brackets are drawn below the words.
	:returns: a :class:`Layout` object."""
	if not isinstance(tree, Tree):
		raise TypeError('expected a Tree; got %r' % (tree, ))
	highlevel = frozenset(highlevel)
	words, indices = indexleaves(tree)
	spans = annotate(tree, indices)
	groups = {ABOVE: defaultdict(list), BELOW: defaultdict(list)}
	for node in tree.subtrees():
		span = spans[id(node)]
		group = classify(node.label, span.depth, highlevel)
		if group is None:
			continue
		groups[group][span.depth].append(Placement(
				node.label, span.start, span.end - span.start + 1,
				span.depth))
	above = [Row(ABOVE, depth, tuple(sorted(
				groups[ABOVE][depth], key=attrgetter('start'))))
			for depth in sorted(groups[ABOVE])]
	below = [Row(BELOW, depth, tuple(sorted(
				groups[BELOW][depth], key=attrgetter('start'))))
			for depth in sorted(groups[BELOW], reverse=True)]
	logging.debug('%d words; %d rows above, %d rows below',
			len(words), len(above), len(below))
	return Layout(tree, words, spans, above, below)


__all__ = ['Layout', 'Placement', 'Row', 'Span', 'InvariantViolation',
		'ABOVE', 'BELOW', 'layout', 'indexleaves', 'annotate', 'classify',
		'fillgaps']
