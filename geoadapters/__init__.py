"""
geoadapters: interchangeable geocoding provider adapters.
"""

__version__ = "0.1.0"
