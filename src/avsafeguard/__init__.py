"""CEDIA/CTA-CEB23 home-theater design analysis."""

__version__ = "0.1.0"
