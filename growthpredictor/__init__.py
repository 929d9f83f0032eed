"""
Growth Predictor.

Answers statistical queries about child height and weight by age from a
fixed reference table of per-age normal distributions.
"""

__version__ = "0.1.0"
