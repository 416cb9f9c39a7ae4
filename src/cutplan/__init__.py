"""Sheet cutting optimization for furniture panels."""

__version__ = "1.0.0"
