"""
Space Shooter: a grid-based vertical-scrolling shooter.
"""

__version__ = "0.1.0"
