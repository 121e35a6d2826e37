"""ESPN MMA fighter statistics crawler."""

__version__ = "0.1.0"
