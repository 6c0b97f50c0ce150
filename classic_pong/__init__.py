"""
Classic Pong: a two-paddle ball game on a fixed 1080x720 arena
"""

__version__ = "1.0.0"
