"""Database layer - execute SQLSet queries and map rows onto models."""

from __future__ import annotations

from sqlset.db.helper import DBHelper
from sqlset.db.model import ModelMapper

__all__ = [
    "DBHelper",
    "ModelMapper",
]
