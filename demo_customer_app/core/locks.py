import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ReadWriteLock:
    """Асинхронная блокировка: много читателей или один писатель.

    Ожидающий писатель не пропускает новых читателей, поэтому запись
    не может ждать бесконечно при постоянном потоке чтений.
    """

    def __init__(self):
        self._condition = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @asynccontextmanager
    async def reader(self) -> AsyncIterator[None]:
        """Разделяемый доступ на чтение"""
        async with self._condition:
            while self._writer or self._waiting_writers:
                await self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            async with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()

    @asynccontextmanager
    async def writer(self) -> AsyncIterator[None]:
        """Монопольный доступ на запись"""
        async with self._condition:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    await self._condition.wait()
            finally:
                self._waiting_writers -= 1
                # Отменённый писатель должен разбудить заблокированных им читателей
                self._condition.notify_all()
            self._writer = True
        try:
            yield
        finally:
            async with self._condition:
                self._writer = False
                self._condition.notify_all()
