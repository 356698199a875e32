"""
Subscription API endpoints
"""
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, StrictInt
from sqlalchemy.orm import Session

from app.api.deps import get_db, parse_optional_uuid, parse_pagination
from app.application.subscriptions import (
    AggregateTotalUseCase,
    CreateSubscriptionUseCase,
    DeleteSubscriptionUseCase,
    SubscriptionNotFound,
    UpdateSubscriptionUseCase,
    get_subscription,
    list_subscriptions,
)
from app.domain.year_month import YearMonth, format_year_month
from app.infrastructure.db.models import SubscriptionModel


router = APIRouter(prefix="/api/v1/subscriptions", tags=["subscriptions"])


# === Request/Response models ===

class CreateSubscriptionRequest(BaseModel):
    service_name: str
    price: StrictInt  # минимальные единицы валюты
    user_id: UUID
    start_date: str  # MM-YYYY
    end_date: str | None = None  # MM-YYYY, None - бессрочная


class UpdateSubscriptionRequest(BaseModel):
    service_name: str | None = None
    price: StrictInt | None = None
    start_date: str | None = None
    end_date: str | None = None  # "" - снять дату окончания


class SubscriptionResponse(BaseModel):
    id: UUID
    service_name: str
    price: int
    user_id: UUID
    start_date: str
    end_date: str | None
    created_at: date


class TotalResponse(BaseModel):
    total: int


# === Helper function ===

def _to_response(sub: SubscriptionModel) -> SubscriptionResponse:
    return SubscriptionResponse(
        id=sub.id,
        service_name=sub.service_name,
        price=sub.price,
        user_id=sub.user_id,
        start_date=format_year_month(YearMonth.from_date(sub.start_date)),
        end_date=format_year_month(YearMonth.from_date(sub.end_date) if sub.end_date else None),
        created_at=sub.created_at,
    )


# === Endpoints ===

@router.get("/aggregate/total", response_model=TotalResponse)
def aggregate_total(
    period_start: str | None = None,
    period_end: str | None = None,
    user_id: str | None = None,
    service_name: str | None = None,
    db: Session = Depends(get_db),
):
    """Суммарная стоимость подписок за период (MM-YYYY .. MM-YYYY включительно)"""
    if not period_start or not period_end:
        raise HTTPException(status_code=400, detail="period_start и period_end обязательны")

    try:
        total = AggregateTotalUseCase(db).execute(
            period_start=period_start,
            period_end=period_end,
            user_id=parse_optional_uuid(user_id),
            service_name=service_name or None,
        )
    except ValueError as e:
        # InvalidDateFormat / InvertedWindow
        raise HTTPException(status_code=400, detail=str(e))

    return TotalResponse(total=total)


@router.post("", response_model=SubscriptionResponse, status_code=status.HTTP_201_CREATED)
def create_subscription(
    req: CreateSubscriptionRequest,
    db: Session = Depends(get_db),
):
    """Создать подписку"""
    try:
        sub = CreateSubscriptionUseCase(db).execute(
            service_name=req.service_name,
            price=req.price,
            user_id=req.user_id,
            start_date=req.start_date,
            end_date=req.end_date,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _to_response(sub)


@router.get("", response_model=list[SubscriptionResponse])
def list_subscriptions_endpoint(
    user_id: str | None = None,
    service_name: str | None = None,
    limit: str | None = None,
    offset: str | None = None,
    db: Session = Depends(get_db),
):
    """Список подписок с фильтрами user_id / service_name"""
    page_limit, page_offset = parse_pagination(limit, offset)
    subs = list_subscriptions(
        db,
        user_id=parse_optional_uuid(user_id),
        service_name=service_name or None,
        limit=page_limit,
        offset=page_offset,
    )
    return [_to_response(s) for s in subs]


@router.get("/{sub_id}", response_model=SubscriptionResponse)
def get_subscription_endpoint(
    sub_id: UUID,
    db: Session = Depends(get_db),
):
    """Получить подписку по id"""
    try:
        sub = get_subscription(db, sub_id)
    except SubscriptionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

    return _to_response(sub)


@router.put("/{sub_id}", response_model=SubscriptionResponse)
def update_subscription(
    sub_id: UUID,
    req: UpdateSubscriptionRequest,
    db: Session = Depends(get_db),
):
    """Обновить переданные поля подписки"""
    try:
        sub = UpdateSubscriptionUseCase(db).execute(
            sub_id,
            service_name=req.service_name,
            price=req.price,
            start_date=req.start_date,
            end_date=req.end_date,
        )
    except SubscriptionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _to_response(sub)


@router.delete("/{sub_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_subscription(
    sub_id: UUID,
    db: Session = Depends(get_db),
):
    """Удалить подписку"""
    DeleteSubscriptionUseCase(db).execute(sub_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
