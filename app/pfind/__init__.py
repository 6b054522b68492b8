"""pfind - concurrent find-style directory search.

Walks a directory tree with a pool of scan workers and prints every
entry that matches the requested type and name filters.
"""

__version__ = "0.1.0"
