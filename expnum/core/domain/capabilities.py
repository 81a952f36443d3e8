"""
Capabilities — объявленные, но не реализованные операции числового типа

Полный контракт числового типа включает разбор строк, обобщённые
конверсии и форматирование в буфер. Для ExponentialNumber эти операции
пока не реализованы: каждая из них падает с UnsupportedOperation.

ЗАПРЕЩЕНО возвращать значение по умолчанию вместо исключения.
"""

import logging
from typing import Any, NoReturn, Optional

from expnum.core.errors import UnsupportedOperation

logger = logging.getLogger(__name__)


class NumberCapabilities:
    """
    Mixin с объявленными capabilities числового типа.

    Все методы, кроме try_format, — classmethod: они относятся к типу,
    а не к экземпляру.
    """

    @classmethod
    def _unsupported(cls, operation: str) -> NoReturn:
        name = f"{cls.__name__}.{operation}"
        logger.debug("unsupported capability invoked: %s", name)
        raise UnsupportedOperation(name)

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, provider: Optional[Any] = None) -> NoReturn:
        cls._unsupported("parse")

    @classmethod
    def try_parse(cls, text: Optional[str], provider: Optional[Any] = None) -> NoReturn:
        cls._unsupported("try_parse")

    # -------------------------------------------------------------------------
    # Generic conversion
    # -------------------------------------------------------------------------

    @classmethod
    def try_convert_from_checked(cls, value: Any) -> NoReturn:
        cls._unsupported("try_convert_from_checked")

    @classmethod
    def try_convert_from_saturating(cls, value: Any) -> NoReturn:
        cls._unsupported("try_convert_from_saturating")

    @classmethod
    def try_convert_from_truncating(cls, value: Any) -> NoReturn:
        cls._unsupported("try_convert_from_truncating")

    @classmethod
    def try_convert_to_checked(cls, value: Any, target: type) -> NoReturn:
        cls._unsupported("try_convert_to_checked")

    @classmethod
    def try_convert_to_saturating(cls, value: Any, target: type) -> NoReturn:
        cls._unsupported("try_convert_to_saturating")

    @classmethod
    def try_convert_to_truncating(cls, value: Any, target: type) -> NoReturn:
        cls._unsupported("try_convert_to_truncating")

    # -------------------------------------------------------------------------
    # Buffer formatting
    # -------------------------------------------------------------------------

    def try_format(self, destination: Any, format_spec: str = "") -> NoReturn:
        type(self)._unsupported("try_format")
