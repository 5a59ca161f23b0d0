from ranchbook.routers.admin import router as admin_router
from ranchbook.routers.auth import router as auth_router
from ranchbook.routers.health import router as health_router
from ranchbook.routers.health_records import router as health_records_router
from ranchbook.routers.inventory import router as inventory_router
from ranchbook.routers.livestock import router as livestock_router
from ranchbook.routers.partners import router as partners_router
from ranchbook.routers.reports import router as reports_router
from ranchbook.routers.transactions import router as transactions_router

__all__ = [
    "admin_router",
    "auth_router",
    "health_records_router",
    "health_router",
    "inventory_router",
    "livestock_router",
    "partners_router",
    "reports_router",
    "transactions_router",
]
