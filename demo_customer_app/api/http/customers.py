from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import uuid

from demo_customer_app.api.dependencies import get_customer_service
from demo_customer_app.domains.customers.schemas import CustomerCreate, CustomerResponse
from demo_customer_app.domains.customers.services import CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=List[CustomerResponse])
async def list_customers(customer_service: CustomerService = Depends(get_customer_service)):
    """Получение списка клиентов"""
    customers = await customer_service.list()
    return [CustomerResponse.model_validate(customer) for customer in customers]


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_data: CustomerCreate,
    customer_service: CustomerService = Depends(get_customer_service)
):
    """Создание нового клиента"""
    customer = await customer_service.create(customer_data)
    return CustomerResponse.model_validate(customer)


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: uuid.UUID,
    customer_service: CustomerService = Depends(get_customer_service)
):
    """Получение клиента по идентификатору"""
    customer = await customer_service.get(customer_id)

    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found"
        )

    return CustomerResponse.model_validate(customer)
