from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ProductCreateCommand:
    name: str
    price: float
    category: str = ""

    @staticmethod
    def from_raw(payload: Dict[str, Any]):
        data = dict(payload or {})
        # ids are always assigned by the store
        data.pop("id", None)
        return ProductCreateCommand(
            name=str(data.get("name", "")).strip(),
            price=float(data.get("price", 0)),
            category=str(data.get("category") or "").strip(),
        )


@dataclass
class ProductUpdateCommand:
    product_id: int
    partial: bool
    name: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None

    @staticmethod
    def from_raw(product_id: int, payload: Dict[str, Any], partial: bool):
        data = dict(payload or {})
        data.pop("id", None)
        return ProductUpdateCommand(
            product_id=product_id,
            partial=partial,
            name=str(data["name"]).strip() if "name" in data else None,
            price=float(data["price"]) if "price" in data else None,
            category=str(data["category"] or "").strip() if "category" in data else None,
        )

    def changes(self) -> Dict[str, Any]:
        fields = {"name": self.name, "price": self.price, "category": self.category}
        if self.partial:
            return {k: v for k, v in fields.items() if v is not None}
        # Full replacement: an omitted category resets to blank
        if fields["category"] is None:
            fields["category"] = ""
        return fields
