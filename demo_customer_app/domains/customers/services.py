import logging
from typing import List, Optional
import uuid

from demo_customer_app.db.repositories.customer_repository import CustomerRepository
from demo_customer_app.domains.customers.entities import Customer
from demo_customer_app.domains.customers.schemas import CustomerCreate

logger = logging.getLogger(__name__)


class CustomerService:
    """Сервис для работы с клиентами"""

    def __init__(self, repository: CustomerRepository):
        self.customer_repository = repository

    async def create(self, customer_data: CustomerCreate) -> Customer:
        """Создание нового клиента"""
        customer = Customer.create_customer(
            name=customer_data.name,
            email=customer_data.email,
            active=customer_data.active,
        )
        created_customer = await self.customer_repository.append(customer)
        logger.info(f"Created customer {created_customer.id}")
        return created_customer

    async def list(self) -> List[Customer]:
        """Получение всех клиентов"""
        return await self.customer_repository.list_all()

    async def get(self, customer_id: uuid.UUID) -> Optional[Customer]:
        """Получение клиента по идентификатору"""
        return await self.customer_repository.find_by_id(customer_id)
