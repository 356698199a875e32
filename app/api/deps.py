"""
FastAPI dependencies (DB session, query parameter parsing)
"""
from uuid import UUID

from app.config import get_settings
from app.infrastructure.db.session import get_db as _get_db


# Re-export get_db для удобства
get_db = _get_db


def parse_optional_uuid(value: str | None) -> UUID | None:
    """
    Мягкий разбор UUID из query-параметра

    Returns:
        UUID или None, если значение пустое или не является UUID
        (фильтр в этом случае просто не применяется)
    """
    if not value:
        return None
    try:
        return UUID(value)
    except ValueError:
        return None


def parse_pagination(limit: str | None, offset: str | None) -> tuple[int, int]:
    """
    limit/offset из query-параметров; некорректные значения заменяются дефолтами

    Example:
        >>> parse_pagination("10", "20")
        (10, 20)
        >>> parse_pagination("0", "-5")
        (50, 0)
    """
    settings = get_settings()
    page_limit = settings.LIST_DEFAULT_LIMIT
    page_offset = 0

    if limit:
        try:
            n = int(limit)
        except ValueError:
            n = None
        if n is not None and 1 <= n <= settings.LIST_MAX_LIMIT:
            page_limit = n

    if offset:
        try:
            n = int(offset)
        except ValueError:
            n = None
        if n is not None and n >= 0:
            page_offset = n

    return page_limit, page_offset
