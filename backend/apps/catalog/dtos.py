from dataclasses import dataclass
from typing import Optional


@dataclass
class ProductDTO:
    id: Optional[int]
    name: str
    price: float
    category: str = ""