"""Optimal N-puzzle solver: twin-engine A* search over sliding-tile boards."""

__version__ = "0.1.0"
