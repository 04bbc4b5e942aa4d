"""
PySide6 view layer: board widget and main window.
"""
