import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


def decode_sizes(raw: Optional[str]) -> List[str]:
    """Sizes are stored as a JSON list; NULL or empty text means no sizes."""
    if not raw:
        return []
    return list(json.loads(raw))


@dataclass
class Product:
    """A cached catalog entry as stored in the products table"""
    id: int
    name: str
    price: float
    category: Optional[str] = None
    tag: Optional[str] = None
    description: str = ""
    image_url: Optional[str] = None
    sizes: List[str] = field(default_factory=list)
    printify_id: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Product":
        return cls(
            id=row["id"],
            name=row["name"],
            price=row["price"],
            category=row.get("category"),
            tag=row.get("tag"),
            description=row.get("description") or "",
            image_url=row.get("image_url"),
            sizes=decode_sizes(row.get("sizes")),
            printify_id=row.get("printify_id"),
        )

    def to_summary(self) -> Dict[str, Any]:
        """Listing shape, aligned with the formatted provider product"""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "image_url": self.image_url,
            "sizes": self.sizes,
            "description": self.description,
            "printify_id": self.printify_id,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        data = self.to_summary()
        data["tag"] = self.tag
        return data
