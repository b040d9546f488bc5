from demo_customer_app.db.repositories import (
    CustomerRepository,
    ProjectRepository,
    TaskRepository,
)


class AppState:
    """Хранилища приложения, создаются один раз при сборке приложения"""

    def __init__(self):
        self.projects = ProjectRepository()
        self.tasks = TaskRepository()
        self.customers = CustomerRepository()
