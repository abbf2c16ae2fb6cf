"""Simple row-to-model mapper.

Supports dataclasses, Pydantic models, and plain classes.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from sqlset.core.exceptions import ColumnMismatchError

T = TypeVar("T")


class ModelMapper(Generic[T]):
    """Maps row dicts onto instances of *target_class*.

    Detection order:
    1. Pydantic BaseModel -> model_validate(row)
    2. dataclass -> only the dataclass fields are passed, extra columns are dropped
    3. Plain class -> target_class(**row)

    Args:
        target_class: The class to construct from row data.
        aliases: Optional column-name to field-name mapping.
    """

    def __init__(
        self,
        target_class: type[T],
        aliases: dict[str, str] | None = None,
    ) -> None:
        self._target_class = target_class
        self._aliases = aliases or {}
        self._is_pydantic = isinstance(target_class, type) and issubclass(target_class, BaseModel)
        self._fields: frozenset[str] | None = None
        if dataclasses.is_dataclass(target_class):
            self._fields = frozenset(f.name for f in dataclasses.fields(target_class))

    def map_one(self, row: dict[str, Any]) -> T:
        """Map a single row to a target_class instance."""
        if self._aliases:
            row = {self._aliases.get(key, key): value for key, value in row.items()}

        if self._is_pydantic:
            try:
                return self._target_class.model_validate(row)  # type: ignore[attr-defined, no-any-return]
            except ValidationError as e:
                missing: list[str] = []
                invalid: list[str] = []
                for err in e.errors():
                    field = ".".join(str(p) for p in err["loc"])
                    if err["type"] == "missing":
                        missing.append(field)
                    else:
                        invalid.append(field)
                raise ColumnMismatchError(self._target_class.__name__, missing, invalid) from e

        if self._fields is not None:
            row = {key: value for key, value in row.items() if key in self._fields}

        try:
            return self._target_class(**row)
        except TypeError as e:
            raise ColumnMismatchError(self._target_class.__name__, [str(e)]) from e

    def map_many(self, rows: list[dict[str, Any]]) -> list[T]:
        """Map all rows via map_one."""
        return [self.map_one(row) for row in rows]
