"""
Исключения Timewave core.

Все ошибки поднимаются сразу и передаются вызывающему коду:
никаких retry, никаких fallback-значений.
"""


class InvalidArgument(ValueError):
    """
    Некорректный аргумент публичной операции.

    Примеры:
    - iterations < 0 или не int
    - days_per_step <= 0
    - zero_date не является валидной календарной датой
    - значение волны NaN/Inf
    """
    pass


class DataIntegrityError(Exception):
    """
    Нарушена целостность таблицы символов.

    Поднимается при загрузке, если таблица не содержит ровно 64
    уникальных 6-битных кода (повреждённая или вручную отредактированная таблица).
    """
    pass
