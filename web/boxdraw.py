"""Web interface to draw trees as brackets around words. Requires Flask."""
import os
from flask import Flask, Response
from flask import request, render_template, redirect, url_for
from synbox.tree import readtrees, MalformedInput
from synbox.layout import InvariantViolation
from synbox.draw import DrawBoxes
from synbox.params import DEFAULTS, parsehighlevel

LIMIT = 1024 * 10  # ~10KB
APP = Flask(__name__)


@APP.route('/')
def main():
	""" Redirect to avoid trailing slash hassles. """
	return redirect(url_for('index'))


@APP.route('/index')
def index():
	""" Form for trees & parameters. """
	return render_template('draw.html',
			highlevel=','.join(DEFAULTS['highlevel']))


@APP.route('/draw')
def draw():
	""" Wrapper to parse & draw tree(s). """
	treestr = request.args.get('tree', '')
	if len(treestr) > LIMIT:
		return Response('Too much data. Limit: %d bytes' % LIMIT,
				status=413, mimetype='text/plain')
	if 'highlevel' in request.args:
		highlevel = parsehighlevel(request.args['highlevel'])
	else:
		highlevel = DEFAULTS['highlevel']
	dts = []
	for n, tree in enumerate(readtrees(treestr.splitlines()), 1):
		try:
			dts.append(DrawBoxes(tree, highlevel=highlevel,
					abbr='abbr' in request.args))
		except (MalformedInput, InvariantViolation) as err:
			return Response('error in tree %d:\n%s' % (n, err),
					status=400, mimetype='text/plain')
	if not dts:
		return Response('No trees!', status=400, mimetype='text/plain')
	return drawtrees(request.args, dts)


def drawtrees(form, dts):
	""" Draw trees in the requested format. """
	if form.get('output', 'html') == 'text':
		unicodelines = form.get('unicode', '1') != '0'
		result = [dt.text(unicodelines=unicodelines) for dt in dts]
		return Response('\n'.join(result).encode('utf8'),
				mimetype='text/plain; charset=utf-8')
	preamble, postamble = DrawBoxes.templates['html']
	result = [preamble]
	for dt in dts:
		result.append('<div>\n%s\n</div>\n' % dt.html())
	result.append(postamble)
	return Response('\n'.join(result).encode('utf8'),
			mimetype='text/html')


if __name__ == '__main__':
	APP.run(debug=os.environ.get('FLASK_DEBUG') == '1', host='0.0.0.0')
