"""Syntactic box drawing (synbox).

Main components:

- A parser for constituency trees in labeled bracket notation.
- A layout engine that places each constituent as a bracket spanning its
  words, in rows above or below the words.
- Renderers producing HTML tables and text from such a layout.
"""
__version__ = '0.1.0'
