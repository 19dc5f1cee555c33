"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from bank_sim.models import Account


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if isinstance(obj, Account):
        return account_to_dict(obj)
    elif is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a flat dataclass to a dict with serialized values."""
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def account_to_dict(account: Account) -> dict:
    """Snapshot of an account's public fields."""
    return {
        "account_id": account.account_id,
        "holder_name": account.holder_name,
        "account_type": account.account_type.value,
        "opened_date": account.opened_date.isoformat(),
        "balance": str(account.balance),
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
