"""Винятки ядра cg2q."""


class GeometryError(Exception):
    """Базовий виняток для геометричних операцій."""

    pass


class NonFiniteInput(GeometryError, ValueError):
    """Скаляр будується з inf або NaN."""

    pass


class DivisionByZero(GeometryError, ZeroDivisionError):
    """Ділення (або обернення) раціонального числа на нуль."""

    pass


class NegativeRadius(GeometryError, ValueError):
    """Коло з від'ємним квадратом радіуса."""

    pass


class DegenerateInputError(GeometryError):
    """Вироджений вхід (наприклад, колінеарні точки)."""

    pass


class CollinearPoints(DegenerateInputError):
    """Три точки збігаються: коло через них не визначене."""

    pass


class InsufficientPointsError(GeometryError):
    """Замало точок для операції."""

    pass


class EmptyPointSet(InsufficientPointsError):
    """Мінімальне охоплююче коло порожньої множини."""

    pass
