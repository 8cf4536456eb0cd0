"""Grid recomposition benchmark: a Qt demo for observing repaint granularity."""

__version__ = "0.1.0"
