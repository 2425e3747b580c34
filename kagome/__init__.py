"""Transfer-matrix counting of ice-rule states on kagome lattices."""

__version__ = "0.1.0"