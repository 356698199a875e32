"""
Subscription cost aggregation over a report window.

Subscription здесь - value object, собранный из строки БД на время запроса.
Фильтрация (user_id, service_name) обычно уже выполнена запросом к БД;
SubscriptionFilter повторяет те же условия для in-memory коллекций.
"""
from dataclasses import dataclass
from typing import Iterable
from uuid import UUID

from app.domain.billing_period import clamp_period
from app.domain.year_month import YearMonth


@dataclass(frozen=True)
class Subscription:
    price: int  # минимальные единицы валюты, >= 0
    start_month: YearMonth
    end_month: YearMonth | None = None  # None - бессрочная
    user_id: UUID | None = None
    service_name: str | None = None


@dataclass(frozen=True)
class ReportWindow:
    period_start: YearMonth
    period_end: YearMonth


@dataclass(frozen=True)
class SubscriptionFilter:
    """Условия отбора, объединяются через AND; None - условие не задано"""
    user_id: UUID | None = None
    service_name: str | None = None

    def matches(self, sub: Subscription) -> bool:
        if self.user_id is not None and sub.user_id != self.user_id:
            return False
        if self.service_name is not None and sub.service_name != self.service_name:
            return False
        return True


def subscription_cost(sub: Subscription, window: ReportWindow) -> int:
    """Стоимость одной подписки в окне; 0 если периоды не пересекаются"""
    period = clamp_period(window.period_start, window.period_end, sub.start_month, sub.end_month)
    if period is None:
        return 0
    return period.months * sub.price


def total_cost(
    subscriptions: Iterable[Subscription],
    window: ReportWindow,
    filters: SubscriptionFilter | None = None,
) -> int:
    """
    Суммарная стоимость подписок за окно.

    Args:
        subscriptions: Подписки (порядок не важен)
        window: Окно отчёта, period_end >= period_start
        filters: Дополнительный отбор; None - учитывать все

    Returns:
        Сумма price * число оплачиваемых месяцев; 0 для пустого набора
    """
    total = 0
    for sub in subscriptions:
        if filters is not None and not filters.matches(sub):
            continue
        total += subscription_cost(sub, window)
    return total
