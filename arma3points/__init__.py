# arma3points/__init__.py
"""Live and all-time GameTracker stats for Arma 3 players."""

__version__ = "0.1.0"
