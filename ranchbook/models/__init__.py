import importlib

from ranchbook.models.health_record import HealthRecord
from ranchbook.models.inventory import InventoryItem
from ranchbook.models.livestock import Livestock
from ranchbook.models.session import UserSession
from ranchbook.models.transaction import Transaction
from ranchbook.models.user import User


def import_all_models() -> None:
    for module_name in (
        "ranchbook.models.health_record",
        "ranchbook.models.inventory",
        "ranchbook.models.livestock",
        "ranchbook.models.session",
        "ranchbook.models.transaction",
        "ranchbook.models.user",
    ):
        importlib.import_module(module_name)


__all__ = [
    "HealthRecord",
    "InventoryItem",
    "Livestock",
    "Transaction",
    "User",
    "UserSession",
    "import_all_models",
]
