"""
Request guards shared by the stock routes.

Each guard either passes its input through or raises one of the errors in
stock_api.core.errors. They hold no state and never touch the database.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, TypeVar

from stock_api.core.errors import Forbidden, NotFound

logger = logging.getLogger(__name__)

T = TypeVar("T")


def handle_404(record: Optional[T], resource: str = "Document", identifier: Any = None) -> T:
    """
    Pass a looked-up record through, or raise NotFound when it is missing.

    Args:
        record: Result of a lookup by id (None when absent)
        resource: Resource type reported in the error
        identifier: Identifier reported in the error

    Returns:
        The record, unchanged
    """
    if record is None:
        logger.info("%s %s not found", resource, identifier)
        raise NotFound(resource, identifier)
    return record


def _identity(value: Any) -> Any:
    # ORM rows compare by their primary key, everything else by value
    return getattr(value, "id", value)


def require_ownership(requester: Any, record: Any) -> None:
    """
    Raise Forbidden unless `requester` owns `record`.

    `requester` may be a user row or a bare user id; `record` must expose
    `owner_id`.
    """
    owner = _identity(getattr(record, "owner_id", None))
    if owner is None or owner != _identity(requester):
        logger.info("user %s denied access to record owned by %s", _identity(requester), owner)
        raise Forbidden()


def remove_blank_fields(payload: Mapping[str, Any]) -> dict[str, Any]:
    """
    Drop every field whose value is an empty string.

    {"stock": {"title": "", "text": "foo"}} -> {"stock": {"text": "foo"}}
    """
    cleaned: dict[str, Any] = {}
    for key, fields in payload.items():
        if isinstance(fields, Mapping):
            cleaned[key] = {name: value for name, value in fields.items() if value != ""}
        else:
            cleaned[key] = fields
    return cleaned
