"""
SQLAlchemy ORM models
"""
import uuid
from datetime import date as date_type
from sqlalchemy import String, Integer, Date, Uuid, CheckConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.db.session import Base


class SubscriptionModel(Base):
    """Подписка пользователя на сервис: цена в месяц и период действия"""
    __tablename__ = "subscriptions"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_subscriptions_price_non_negative"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    service_name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)  # минимальные единицы валюты
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)

    # Всегда первое число месяца
    start_date: Mapped[date_type] = mapped_column(Date, nullable=False)
    end_date: Mapped[date_type | None] = mapped_column(Date, nullable=True, index=True)  # NULL - бессрочная

    created_at: Mapped[date_type] = mapped_column(
        Date, nullable=False, default=date_type.today, server_default=func.current_date()
    )
