"""pyezlist: a small Tk list widget."""

__version__ = "0.1.0"
