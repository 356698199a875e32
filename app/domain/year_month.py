"""
YearMonth - календарный месяц без дня и времени.

Текстовый формат: MM-YYYY (месяц с ведущим нулём, год из 4 цифр).
В БД хранится как date первого числа месяца.
"""
import re
from dataclasses import dataclass
from datetime import date

_MM_YYYY = re.compile(r"([0-9]{2})-([0-9]{4})")


class InvalidDateFormat(ValueError):
    pass


@dataclass(frozen=True, order=True)
class YearMonth:
    """
    Месяц конкретного года.

    Порядок сравнения - (year, month), поэтому поля объявлены именно в этом порядке.
    """
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise InvalidDateFormat(f"Месяц вне диапазона 1-12: {self.month}")

    @classmethod
    def from_date(cls, value: date) -> "YearMonth":
        """Месяц, в который попадает дата (день отбрасывается)"""
        return cls(value.year, value.month)

    def to_date(self) -> date:
        """Первое число месяца"""
        return date(self.year, self.month, 1)

    def __str__(self) -> str:
        return f"{self.month:02d}-{self.year:04d}"


def parse_year_month(text: str) -> YearMonth:
    """
    Разобрать строку MM-YYYY

    Raises:
        InvalidDateFormat: строка не в формате MM-YYYY или месяц вне 01-12

    Example:
        >>> parse_year_month("03-2024")
        YearMonth(year=2024, month=3)
    """
    match = _MM_YYYY.fullmatch(text or "")
    if not match:
        raise InvalidDateFormat("Неверный формат даты. Ожидается MM-YYYY")

    month, year = int(match.group(1)), int(match.group(2))
    # год 0000 не представим в datetime.date
    if not 1 <= month <= 12 or year < 1:
        raise InvalidDateFormat("Неверный формат даты. Ожидается MM-YYYY")

    return YearMonth(year, month)


def format_year_month(value: YearMonth | None) -> str | None:
    """MM-YYYY; None (открытая граница) остаётся None"""
    if value is None:
        return None
    return str(value)
