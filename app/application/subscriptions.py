"""
Subscription use cases — CRUD подписок + расчёт суммарной стоимости за период.

Модуль работает напрямую с ORM. Даты на входе и выходе - строки MM-YYYY,
в БД - первое число месяца.
"""
import logging
from uuid import UUID

from sqlalchemy.orm import Session

from app.domain.subscription_cost import (
    ReportWindow, Subscription, SubscriptionFilter, total_cost,
)
from app.domain.year_month import YearMonth, parse_year_month
from app.infrastructure.db.models import SubscriptionModel

logger = logging.getLogger(__name__)


class SubscriptionValidationError(ValueError):
    pass


class SubscriptionNotFound(LookupError):
    pass


class InvertedWindow(ValueError):
    pass


def _validate_service_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise SubscriptionValidationError("Название сервиса не может быть пустым")
    return name


def _validate_price(price: int) -> int:
    if price < 0:
        raise SubscriptionValidationError("Цена не может быть отрицательной")
    return price


def to_domain(sub: SubscriptionModel) -> Subscription:
    """Строка БД -> value object для расчёта стоимости"""
    return Subscription(
        price=sub.price,
        start_month=YearMonth.from_date(sub.start_date),
        end_month=YearMonth.from_date(sub.end_date) if sub.end_date else None,
        user_id=sub.user_id,
        service_name=sub.service_name,
    )


def _filtered_query(db: Session, filters: SubscriptionFilter):
    query = db.query(SubscriptionModel)
    if filters.user_id is not None:
        query = query.filter(SubscriptionModel.user_id == filters.user_id)
    if filters.service_name is not None:
        query = query.filter(SubscriptionModel.service_name == filters.service_name)
    return query


# ============================================================================
# Subscriptions CRUD
# ============================================================================


class CreateSubscriptionUseCase:
    def __init__(self, db: Session):
        self.db = db

    def execute(
        self,
        service_name: str,
        price: int,
        user_id: UUID,
        start_date: str,
        end_date: str | None = None,
    ) -> SubscriptionModel:
        start = parse_year_month(start_date)
        end = parse_year_month(end_date) if end_date is not None else None

        sub = SubscriptionModel(
            service_name=_validate_service_name(service_name),
            price=_validate_price(price),
            user_id=user_id,
            start_date=start.to_date(),
            end_date=end.to_date() if end else None,
        )
        self.db.add(sub)
        self.db.flush()
        self.db.commit()
        self.db.refresh(sub)
        logger.info("Subscription created: id=%s user_id=%s service=%s", sub.id, sub.user_id, sub.service_name)
        return sub


def get_subscription(db: Session, sub_id: UUID) -> SubscriptionModel:
    sub = db.query(SubscriptionModel).filter(SubscriptionModel.id == sub_id).first()
    if not sub:
        raise SubscriptionNotFound("Подписка не найдена")
    return sub


def list_subscriptions(
    db: Session,
    user_id: UUID | None = None,
    service_name: str | None = None,
    limit: int = 50,
    offset: int = 0,
) -> list[SubscriptionModel]:
    """Список подписок с фильтрами по равенству и пагинацией"""
    query = _filtered_query(db, SubscriptionFilter(user_id=user_id, service_name=service_name))
    return query.order_by(SubscriptionModel.created_at, SubscriptionModel.id).limit(limit).offset(offset).all()


class UpdateSubscriptionUseCase:
    """
    Частичное обновление подписки.

    Изменяются только переданные поля. end_date="" снимает дату окончания
    (подписка становится бессрочной), end_date=None оставляет её как есть.
    """

    def __init__(self, db: Session):
        self.db = db

    def execute(self, sub_id: UUID, **changes) -> SubscriptionModel:
        sub = get_subscription(self.db, sub_id)

        # Сначала проверяем все поля, затем присваиваем: при ошибке сессия остаётся чистой
        values = {}
        if changes.get("service_name") is not None:
            values["service_name"] = _validate_service_name(changes["service_name"])
        if changes.get("price") is not None:
            values["price"] = _validate_price(changes["price"])
        if changes.get("start_date") is not None:
            values["start_date"] = parse_year_month(changes["start_date"]).to_date()
        if changes.get("end_date") is not None:
            if changes["end_date"] == "":
                values["end_date"] = None
            else:
                values["end_date"] = parse_year_month(changes["end_date"]).to_date()

        for field, value in values.items():
            setattr(sub, field, value)
        self.db.commit()
        self.db.refresh(sub)
        logger.info("Subscription updated: id=%s", sub.id)
        return sub


class DeleteSubscriptionUseCase:
    def __init__(self, db: Session):
        self.db = db

    def execute(self, sub_id: UUID) -> None:
        """Удаление идемпотентно: отсутствующая подписка не считается ошибкой"""
        deleted = self.db.query(SubscriptionModel).filter(
            SubscriptionModel.id == sub_id,
        ).delete(synchronize_session=False)
        self.db.commit()
        if deleted:
            logger.info("Subscription deleted: id=%s", sub_id)


# ============================================================================
# Aggregation
# ============================================================================


class AggregateTotalUseCase:
    """Суммарная стоимость подписок за период [period_start, period_end]"""

    def __init__(self, db: Session):
        self.db = db

    def execute(
        self,
        period_start: str,
        period_end: str,
        user_id: UUID | None = None,
        service_name: str | None = None,
    ) -> int:
        start = parse_year_month(period_start)
        end = parse_year_month(period_end)
        if end < start:
            raise InvertedWindow("Конец периода раньше начала")

        filters = SubscriptionFilter(user_id=user_id, service_name=service_name)
        rows = _filtered_query(self.db, filters).all()

        total = total_cost((to_domain(r) for r in rows), ReportWindow(start, end), filters)
        logger.debug(
            "Aggregate total %s..%s (user_id=%s, service=%s): %d over %d subscription(s)",
            start, end, user_id, service_name, total, len(rows),
        )
        return total
