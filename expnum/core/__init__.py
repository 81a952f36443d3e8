"""
Core: математические примитивы, доменная модель и контракты.

Модуль не зависит от внешних систем: только чистые вычисления над
неизменяемыми значениями.
"""
