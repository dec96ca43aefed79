"""
rotatelog: archive a live log, compress rotated logs, and purge old
archives by count or cumulative size.
"""

__version__ = "1.0.0"
