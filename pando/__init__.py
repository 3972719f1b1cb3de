"""Pando fleet and organization data access"""

__version__ = "0.1.0"
