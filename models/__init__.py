"""
Pickmin Models Package
Import all models for easy access
"""

from .fields import FieldKey
from .product import ProductCandidate, Product

__all__ = [
    "FieldKey",
    "ProductCandidate",
    "Product",
]
