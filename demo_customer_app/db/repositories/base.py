from typing import Generic, List, Optional, Protocol, TypeVar
import uuid

from demo_customer_app.core.locks import ReadWriteLock


class Record(Protocol):
    id: uuid.UUID


RecordT = TypeVar("RecordT", bound=Record)


class InMemoryRepository(Generic[RecordT]):
    """Хранилище записей одного типа в памяти процесса.

    Записи хранятся в порядке добавления. Добавление выполняется под
    блокировкой на запись, чтение под разделяемой блокировкой, поэтому
    читатель никогда не видит частично добавленную запись.
    """

    def __init__(self):
        self._records: List[RecordT] = []
        self._lock = ReadWriteLock()

    async def append(self, record: RecordT) -> RecordT:
        """Добавление записи в конец коллекции"""
        async with self._lock.writer():
            self._records.append(record)
        return record

    async def list_all(self) -> List[RecordT]:
        """Снимок всех записей в порядке добавления"""
        async with self._lock.reader():
            return list(self._records)

    async def find_by_id(self, record_id: uuid.UUID) -> Optional[RecordT]:
        """Поиск записи по идентификатору"""
        async with self._lock.reader():
            for record in self._records:
                if record.id == record_id:
                    return record
        return None

    async def count(self) -> int:
        async with self._lock.reader():
            return len(self._records)
