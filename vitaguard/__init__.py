"""
VitaGuard Health Risk Analysis Engine
"""

__version__ = "1.0.0"
