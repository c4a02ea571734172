"""Misc code to avoid cyclic imports."""
import sys
import gzip


def openread(filename, encoding='utf8'):
	"""Open stdin/file for reading; decompress gz files on-the-fly.

	:param encoding: if None, mode is binary; otherwise, text."""
	mode = 'rb' if encoding is None else 'rt'
	if filename == '-':
		return open(sys.stdin.fileno(), mode=mode, encoding=encoding,
				closefd=False)
	if filename.endswith('.gz'):
		return gzip.open(filename, mode=mode, encoding=encoding)
	return open(filename, mode=mode, encoding=encoding)


__all__ = ['openread']
