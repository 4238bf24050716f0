"""Solvers for five short competitive-programming problems, with commands."""

__version__ = "0.1.0"
__all__ = ["phone", "apartment", "betting", "baggage", "bermuda"]