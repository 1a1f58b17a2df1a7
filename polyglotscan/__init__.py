"""Detect polyglot files by checking data against many file-format signatures."""

__version__ = "0.1.0"
__all__ = ["__version__"]