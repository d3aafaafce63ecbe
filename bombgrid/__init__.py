"""A terminal bomb-laying arcade maze game with linked levels and a high-score table."""

__version__ = "0.1.0"