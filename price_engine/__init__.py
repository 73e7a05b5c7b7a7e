"""
Product price normalization and estimation engine.
"""
__version__ = "1.0.0"
