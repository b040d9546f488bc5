"""
Настройка логирования приложения.

``setup_logging`` подключает к корневому логгеру консольный обработчик
с форматом ``время [уровень] логгер: сообщение``. Повторные вызовы
(например, при создании нескольких приложений в тестах) ничего не делают.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Настройка корневого логгера"""
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
