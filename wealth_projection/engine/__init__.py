"""
Projection engine: phase classification, the yearly fold and read-only views.
"""

from .simulator import project

__all__ = ["project"]
