"""Draw the bracket layout of a tree as an HTML table or as text."""
from html import escape as htmlescape
import numpy as np
from .tree import Tree
from .layout import layout

CSS = '''\
.syn-table { border-collapse: collapse; width: auto; table-layout: auto;
	margin: 0 auto; }
.syn-table td { border: none; text-align: center; padding: 2px 8px 0 8px;
	font-family: sans-serif; height: 25px; white-space: nowrap;
	min-width: 40px; }
.syn-table .syn-word-row td { border: none; font-weight: bold; height: auto;
	padding-bottom: 2px; min-width: 40px; }
.syn-table .syn-high-level-row td { height: 30px; padding-top: 2px;
	padding-bottom: 2px; min-width: 40px; }
.syn-table .syn-high-level-line { border-top: 2px solid black;
	position: relative; display: block; height: 100%; min-width: 60px;
	border-top-left-radius: 15px; border-top-right-radius: 15px; }
.syn-table .syn-low-level-line { border-bottom: 2px solid black;
	position: relative; display: block; height: 100%; min-width: 60px;
	border-bottom-left-radius: 15px; border-bottom-right-radius: 15px; }
.syn-table .syn-low-label { position: absolute; bottom: 0; left: 50%;
	transform: translate(-50%, 100%); font-size: 0.7em; font-weight: bold;
	color: #004d40; background-color: white; padding: 1px 6px;
	white-space: nowrap; min-width: 30px; }
.syn-table .syn-high-label { position: absolute; top: 0; left: 50%;
	transform: translate(-50%, -100%); font-size: 0.7em; font-weight: bold;
	color: #004d40; background-color: white; padding: 1px 6px;
	white-space: nowrap; min-width: 30px; }
.syn-table .syn-empty-cell { border: none; }
'''


class DrawBoxes(object):
	"""Visualize a tree as rows of labeled brackets around a row of words.

	``DrawBoxes(tree, highlevel=(), abbr=False)``
	creates an object from which different visualizations can be created.

	:param tree: a Tree object or a string in bracket notation.
	:param highlevel: labels of constituents to draw above the words;
		other constituents are drawn below the words.
	:param abbr: when True, abbreviate labels longer than 5 characters.
	"""

	# each template is a tuple of strings ``(preamble, postamble)``.
	templates = dict(
			html=(('<!doctype html>\n<html>\n<head>\n'
					'\t<meta http-equiv="Content-Type" content="text/html; '
					'charset=UTF-8">\n\t<title>Syntactic analysis</title>\n'
					'\t<style>\n%s\t</style>\n</head>\n<body>' % CSS),
					'</body></html>'))

	def __init__(self, tree, highlevel=(), abbr=False):
		if isinstance(tree, str):
			tree = Tree.parse(tree)
		self.tree = tree
		self.abbr = abbr
		self.layout = layout(tree, highlevel)

	def __str__(self):
		return self.text(unicodelines=True)

	def __repr__(self):
		return repr(self.layout)

	def _repr_html_(self):
		"""Return a rich representation for IPython notebook."""
		return self.html()

	def label(self, label):
		"""Return label as it should be displayed."""
		if self.abbr and len(label) > 5:
			return label[:4] + '…'  # unicode '...' ellipsis
		return label

	def html(self):
		""":returns: an HTML table; use ``templates['html']`` for a complete
		document with the required style sheet."""
		result = ['<table class="syn-table">']
		for row in self.layout.above:
			result.append(self._htmlrow(row, 'syn-high-level-row',
					'syn-high-level-line', 'syn-high-label'))
		result.append('<tr class="syn-word-row">%s</tr>' % ''.join(
				'<td>%s</td>' % htmlescape(word)
				for word in self.layout.words))
		for row in self.layout.below:
			result.append(self._htmlrow(row, 'syn-low-level-row',
					'syn-low-level-line', 'syn-low-label'))
		result.append('</table>')
		return '\n'.join(result)

	def _htmlrow(self, row, rowclass, lineclass, labelclass):
		"""Produce a single table row with a cell for each bracket or gap."""
		cells = []
		for cell in self.layout.cells(row):
			if cell.label is None:
				cells.append('<td colspan="%d" class="syn-empty-cell"></td>'
						% cell.width)
			else:
				cells.append('<td colspan="%d"><div class="%s">'
						'<span class="%s">%s</span></div></td>' % (
						cell.width, lineclass, labelclass,
						htmlescape(self.label(cell.label))))
		return '<tr class="%s">%s</tr>' % (rowclass, ''.join(cells))

	def columnwidths(self, nodedist=1):
		"""Compute the width of each word column in text output.

		A column is at least as wide as its word; the last column of a
		bracket is widened when its label would not fit between the
		corners of the bracket.

		:returns: an integer array with the width of each column."""
		widths = np.array([max(len(word), 1) for word in self.layout.words],
				dtype=int)
		for row in self.layout.rows():
			for a in row.placements:
				need = len(self.label(a.label)) + 2
				have = widths[a.start:a.end + 1].sum() + nodedist * (
						a.width - 1)
				if need > have:
					widths[a.end] += need - have
		return widths

	def text(self, unicodelines=True, nodedist=1):
		""":returns: the brackets and words as text.

		:param unicodelines: whether to use Unicode line drawing characters
			instead of plain (7-bit) ASCII.
		:param nodedist: number of spaces between columns."""
		if unicodelines:
			horzline = '─'
			topcorners = '┌', '┐'
			bottomcorners = '└', '┘'
		else:
			horzline = '-'
			topcorners = bottomcorners = '+', '+'
		widths = self.columnwidths(nodedist)
		sep = ' ' * nodedist

		def cellwidth(cell):
			"""Number of characters spanned by a cell."""
			return int(widths[cell.start:cell.end + 1].sum()
					+ nodedist * (cell.width - 1))

		def drawrow(row, corners):
			"""Return the label line and the bracket line of a row."""
			labels, lines = [], []
			for cell in self.layout.cells(row):
				width = cellwidth(cell)
				if cell.label is None:
					labels.append(' ' * width)
					lines.append(' ' * width)
				else:
					labels.append(self.label(cell.label).center(width))
					lines.append(corners[0] + horzline * (width - 2)
							+ corners[1])
			return sep.join(labels), sep.join(lines)

		result = []
		for row in self.layout.above:
			labels, lines = drawrow(row, topcorners)
			result.extend([labels, lines])
		result.append(sep.join(word.center(int(width)) for word, width
				in zip(self.layout.words, widths)))
		for row in self.layout.below:
			labels, lines = drawrow(row, bottomcorners)
			result.extend([lines, labels])
		return '\n'.join(line.rstrip() for line in result) + '\n'


__all__ = ['DrawBoxes', 'CSS']
