from typing import TYPE_CHECKING

from demo_customer_app.db.repositories.base import InMemoryRepository

if TYPE_CHECKING:
    from demo_customer_app.domains.customers.entities import Customer


class CustomerRepository(InMemoryRepository["Customer"]):
    """Репозиторий клиентов"""
