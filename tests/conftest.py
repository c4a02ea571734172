import sys
import pytest


@pytest.hookimpl(wrapper=True, trylast=True)
def pytest_runtest_call(item):
	"""Rebind synbox.cli's module-level ``stderr`` to the stream that is
	active during the test call, so capsys can capture it."""
	from synbox import cli
	orig = cli.stderr
	cli.stderr = sys.stderr
	try:
		return (yield)
	finally:
		cli.stderr = orig
