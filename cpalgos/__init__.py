"""Classic algorithms and data structures: trees, union-find, dynamic programming,
graphs, number theory, geometry, sequences and strings."""

__version__ = "0.1.0"