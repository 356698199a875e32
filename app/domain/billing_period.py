"""
Billing period arithmetic: overlap of a subscription with a report window
and inclusive month counting.

Все границы - включительные месяцы (YearMonth). Отсутствие пересечения -
обычный результат (None), а не ошибка.
"""
from dataclasses import dataclass

from app.domain.year_month import YearMonth


@dataclass(frozen=True)
class BillingPeriod:
    """Закрытый интервал [start, end] оплачиваемых месяцев, start <= end"""
    start: YearMonth
    end: YearMonth

    @property
    def months(self) -> int:
        return count_months(self.start, self.end)


def clamp_period(
    window_start: YearMonth,
    window_end: YearMonth,
    sub_start: YearMonth,
    sub_end: YearMonth | None,
) -> BillingPeriod | None:
    """
    Пересечение периода подписки с окном отчёта.

    Args:
        window_start: Начало окна (включительно)
        window_end: Конец окна (включительно)
        sub_start: Месяц начала подписки
        sub_end: Месяц окончания подписки; None - подписка бессрочная

    Returns:
        BillingPeriod или None, если пересечения нет (в т.ч. при sub_end < sub_start)
    """
    effective_end = window_end
    if sub_end is not None and sub_end < effective_end:
        effective_end = sub_end

    overlap_start = max(window_start, sub_start)
    # Повторное ограничение окном: overlap_end никогда не выходит за window_end
    overlap_end = min(window_end, effective_end)

    if overlap_start > overlap_end:
        return None
    return BillingPeriod(overlap_start, overlap_end)


def count_months(start: YearMonth, end: YearMonth) -> int:
    """Число месяцев в [start, end], оба конца включительно (янв-мар = 3)"""
    return (end.year - start.year) * 12 + (end.month - start.month) + 1
