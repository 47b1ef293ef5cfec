# storefront/data/seed.py
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_PRODUCTS = [
    ("Design", "Professional design services for your business", "2000.00"),
    ("Professional Sound Hire", "High-quality audio equipment rental", "2000.00"),
    ("AI & Machine Learning", "Custom AI solutions and consulting", "2500.00"),
    ("Cyber Security", "Comprehensive security assessment and protection", "7000.00"),
    ("Photography", "Professional photography services", "2000.00"),
    ("Placement & Project Management", "Expert project management services", "2500.00"),
    ("Technical Support Services", "24/7 technical support and maintenance", "1500.00"),
    ("Videography", "Professional video production services", "2000.00"),
    ("Domain & Hosting", "Web hosting and domain registration", "3000.00"),
    ("Marketing", "Digital marketing and brand promotion", "1000.00"),
    ("Development", "Custom software development solutions", "5000.00"),
    ("Email Services", "Professional email hosting and management", "500.00"),
]


def seed_catalog(db: Session) -> int:
    # not forcing: only seed if empty
    if db.scalar(select(func.count()).select_from(ProductModel)):
        return 0

    for name, description, price in SAMPLE_PRODUCTS:
        db.add(ProductModel(name=name, description=description, price=Decimal(price)))
    db.commit()

    logger.info(f"Seeded catalog with {len(SAMPLE_PRODUCTS)} products")
    return len(SAMPLE_PRODUCTS)


if __name__ == "__main__":
    from storefront.data.database import init_db, make_engine

    init_db(make_engine(), seed=True)
