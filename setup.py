"""Generic setup.py for synbox."""
import sys
from setuptools import setup

from synbox import __version__

with open('README.rst', encoding='utf8') as inp:
	README = inp.read()

REQUIRES = [
		'numpy',  # '>=1.17'
		]
EXTRAS = {
		'web': ['flask'],
		'test': ['pytest', 'flask'],
		}
METADATA = dict(name='synbox',
		version=__version__,
		description='Draw constituency trees as labeled brackets around words',
		long_description=README,
		classifiers=[
				'Development Status :: 4 - Beta',
				'Environment :: Console',
				'Environment :: Web Environment',
				'Intended Audience :: Science/Research',
				'License :: OSI Approved :: GNU General Public License (GPL)',
				'Operating System :: POSIX',
				'Programming Language :: Python :: 3',
				'Topic :: Text Processing :: Linguistic',
		],
		install_requires=REQUIRES,
		extras_require=EXTRAS,
		python_requires='>=3.6',
		packages=['synbox'],
		entry_points={
				'console_scripts': ['synbox = synbox.cli:main']},
	)

if __name__ == '__main__':
	if sys.version_info[:2] < (3, 6):
		raise RuntimeError('Python version 3.6+ required.')
	setup(**METADATA)
