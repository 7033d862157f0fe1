from warehousing.api.errors import register_error_handlers, status_for
from warehousing.api.routes import location_router, warehouse_router

__all__ = ["location_router", "register_error_handlers", "status_for", "warehouse_router"]
