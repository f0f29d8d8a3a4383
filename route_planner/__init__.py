"""
Route Planner Module.

This module orders delivery drop-off points into a visiting sequence using a
nearest-neighbor heuristic and fetches a driving route through them from the
Longdo Map API.
"""

__version__ = '0.1.0'
