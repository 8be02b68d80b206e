"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the application.

Modules:
--------
- validators: Product payload validation and identifier generation

==============================================================================
"""

from .validators import IdGenerator, ProductValidator

__all__ = [
    "IdGenerator",
    "ProductValidator",
]
