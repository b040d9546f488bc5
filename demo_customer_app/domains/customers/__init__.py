from demo_customer_app.domains.customers.entities import Customer
from demo_customer_app.domains.customers.schemas import CustomerBase, CustomerCreate, CustomerResponse
from demo_customer_app.domains.customers.services import CustomerService

__all__ = [
    "Customer",
    "CustomerBase", "CustomerCreate", "CustomerResponse",
    "CustomerService",
]
