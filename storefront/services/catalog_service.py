from typing import Any, Dict, List

from sqlalchemy.orm import Session

from storefront.repos.product_repo import ProductRepo


class CatalogService:
    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_products(self) -> List[Dict[str, Any]]:
        return [
            {
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "price": float(p.price),
                "created_at": p.created_at,
            }
            for p in self.repo.list_products()
        ]
