"""
matrix-contacts - list the people a Matrix user shares rooms with
"""

__version__ = "0.1.0"
__logo__ = "👥"
