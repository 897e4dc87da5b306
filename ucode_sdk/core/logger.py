# core/logger.py
import logging
import sys

from ucode_sdk.config.settings import settings

ROOT_LOGGER_NAME = "ucode_sdk"


def _ensure_root_handler(level: int):
    """
    Гарантируем, что root-логгер пишет в консоль.
    Вызывается из setup_logger() только при settings.log_console — idempotent.
    """
    root = logging.getLogger()
    if not root.handlers:
        fmt = logging.Formatter(
            fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        ch = logging.StreamHandler(sys.stdout)
        ch.setLevel(logging.NOTSET)  # фильтрует уровень логгеров
        ch.setFormatter(fmt)
        root.addHandler(ch)
    root.setLevel(level)
    root.disabled = False


def setup_logger(name: str = "sdk") -> logging.Logger:
    """
    Возвращает именованный логгер ucode_sdk.<name>.
    - Уровень берётся из settings.log_level.
    - Своих хендлеров не добавляет: пишем через root (консоль включается
      флагом settings.log_console, иначе настройка логирования за приложением).
    - Снимает флаг disabled, если кто-то его выставил
      (dictConfig с disable_existing_loggers=True).
    """
    level_name = (settings.log_level or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    if settings.log_console:
        _ensure_root_handler(level)

    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    logger.setLevel(level)
    logger.propagate = True
    logger.disabled = False

    return logger
