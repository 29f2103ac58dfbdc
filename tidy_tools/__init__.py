"""
Tidy Tools - sort loose files into category folders by extension.
"""

__version__ = "1.0.0"
