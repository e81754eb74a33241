"""Pet feeding calculator and food recommendation engine."""

__version__ = "1.0.0"
