"""
bakery_services -- Package init and public API.

Responsibility:
    Stateful orchestration over the kernel domain. This layer holds the
    mutable catalog state, and each Catalog reads time only through the
    Clock injected into it.

Architecture position:
    Dependency direction (enforced by tests/architecture/test_kernel_boundary.py):
        bakery_services/ -> bakery_kernel/  (allowed)
        bakery_services/ -> bakery_config/  (allowed)
        bakery_kernel/   -> bakery_services/ (FORBIDDEN)
"""

from bakery_services.catalog_service import Bakery, Catalog
from bakery_services.records import InventoryPosition, SaleRecord

__all__ = [
    "Bakery",
    "Catalog",
    "InventoryPosition",
    "SaleRecord",
]
