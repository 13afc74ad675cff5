"""
termsnake - snake in the terminal, on a board that wraps around at the edges.
"""

__version__ = "0.1.0"
