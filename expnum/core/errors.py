"""
Errors — иерархия исключений ExponentialNumber

Три различимых вида отказов:
- InvalidFormatArgument — некорректные параметры форматирования
- UnsupportedOperation — объявленная, но не реализованная capability
- ExponentOverflowError — экспонента не помещается в ширину варианта

Деление на ноль НЕ является ошибкой: результат — NaN-значение.
"""


class ExponentialNumberError(Exception):
    """Базовое исключение для всех ошибок expnum."""

    pass


class InvalidFormatArgument(ExponentialNumberError, ValueError):
    """
    Некорректный аргумент форматирования.

    Например, отрицательное количество знаков после запятой или
    маркер экспоненты длиной не в один символ.
    """

    pass


class UnsupportedOperation(ExponentialNumberError, NotImplementedError):
    """
    Операция объявлена в наборе capabilities, но не поддерживается.

    Вызов никогда не возвращает значение по умолчанию: он всегда падает.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} is not supported")


class ExponentOverflowError(ExponentialNumberError, OverflowError):
    """Экспонента вышла за пределы знакового целого заданной ширины."""

    def __init__(self, exponent: int, bits: int):
        self.exponent = exponent
        self.bits = bits
        super().__init__(f"exponent {exponent} does not fit in a signed {bits}-bit integer")
