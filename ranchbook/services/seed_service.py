import logging
from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ranchbook.core.dates import utc_now
from ranchbook.models.health_record import HealthRecord
from ranchbook.models.inventory import InventoryItem
from ranchbook.models.livestock import Livestock
from ranchbook.models.transaction import Transaction

logger = logging.getLogger(__name__)


def reset_ranch_data(db: Session) -> None:
    db.execute(delete(HealthRecord))
    db.execute(delete(Transaction))
    db.execute(delete(InventoryItem))
    db.execute(delete(Livestock))
    db.commit()


def seed_sample_data(db: Session, *, now: datetime | None = None) -> bool:
    """Load the demo ranch. Returns False when livestock already exists."""
    if db.execute(select(Livestock.id).limit(1)).first():
        logger.info("Seed skipped: livestock already exists.")
        return False

    now = now or utc_now()
    day = timedelta(days=1)

    db.add_all(
        [
            Livestock(
                tag_id="C-001",
                breed="Angus",
                gender="female",
                weight=Decimal("1200"),
                health_status="healthy",
                location="Pasture A",
                birth_date=now - 700 * day,
                purchase_price=Decimal("1850.00"),
                purchase_date=now - 200 * day,
            ),
            Livestock(
                tag_id="C-002",
                breed="Hereford",
                gender="male",
                weight=Decimal("1350"),
                health_status="monitoring",
                location="Pasture B",
                birth_date=now - 420 * day,
                purchase_price=Decimal("2400.00"),
                purchase_date=now - 90 * day,
            ),
            Livestock(
                tag_id="C-003",
                breed="Charolais",
                gender="female",
                weight=Decimal("980"),
                health_status="healthy",
                location="Pasture A",
                birth_date=now - 250 * day,
                purchase_price=Decimal("1320.00"),
                purchase_date=now - 30 * day,
            ),
        ]
    )

    db.add_all(
        [
            Transaction(
                type="income",
                category="livestock_sales",
                description="Cattle Sale - Buyer ABC Corp",
                amount=Decimal("12500"),
                date=now - day,
            ),
            Transaction(
                type="expense",
                category="feed_supplies",
                description="Feed Purchase - Ranch Supply Co",
                amount=Decimal("3200"),
                date=now - 2 * day,
            ),
            Transaction(
                type="expense",
                category="maintenance",
                description="Equipment Maintenance",
                amount=Decimal("850"),
                date=now - 3 * day,
            ),
        ]
    )

    inventory = [
        ("Cattle Feed Premium", "feed", "1245", "tons", "500", "250"),
        ("Hay Bales", "feed", "850", "bales", "200", "15"),
        ("Antibiotics", "medicine", "25", "bottles", "10", "45"),
    ]
    for name, category, quantity, unit, minimum, cost in inventory:
        db.add(
            InventoryItem(
                name=name,
                category=category,
                quantity=Decimal(quantity),
                unit=unit,
                min_stock_level=Decimal(minimum),
                cost_per_unit=Decimal(cost),
                supplier="Ranch Supply Co",
                last_restocked=now - 10 * day,
                location="Main Storage",
            )
        )

    db.commit()
    logger.info("Seed data created.")
    return True


__all__ = ["reset_ranch_data", "seed_sample_data"]
