"""
bevmenu - Beverage menu grouping and filtering engine
"""

__version__ = "0.1.0"
