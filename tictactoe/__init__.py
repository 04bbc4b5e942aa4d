"""
Two-player Tic Tac Toe: pure rules engine plus a PySide6 window.
"""

__version__ = "1.0.0"
