from demo_customer_app.api.http.health import router as health_router
from demo_customer_app.api.http.projects import router as projects_router
from demo_customer_app.api.http.tasks import router as tasks_router
from demo_customer_app.api.http.customers import router as customers_router

__all__ = [
    "health_router",
    "projects_router",
    "tasks_router",
    "customers_router",
]
