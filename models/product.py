"""
Product Models
Candidate input and stored product shape
"""

from decimal import Decimal
import uuid
from typing import Optional, Union
from pydantic import BaseModel, Field


Price = Union[Decimal, float, int]

class ProductCandidate(BaseModel):
    """Raw product input, checked before it reaches the inventory"""
    name: Optional[str] = None
    is_available: bool = False
    ripening_date: Optional[str] = None
    season: Optional[str] = None
    stock: Optional[int] = None
    price: Optional[Price] = None

class Product(BaseModel):
    """Product as held by an inventory"""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    is_available: bool = False
    ripening_date: str
    season: str
    stock: int
    price: Price

    def __repr__(self):
        return f"<Product {self.name}>"
