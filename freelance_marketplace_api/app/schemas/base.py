"""
Shared base classes for the schemas.

Attributes are snake_case in Python and camelCase on the wire
(``accountType``, ``createdAt`` …).  Payloads accept either spelling.
"""

from typing import ClassVar, FrozenSet, TypeVar

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for request payloads."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class PatchModel(CamelModel):
    """Base for partial updates.

    Every field is optional so that it can be left out.  An explicit
    ``null`` is only accepted for the fields listed in
    ``nullable_fields``; any other field sent as ``null`` fails
    validation.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required(self):
        cleared = sorted(
            name for name in self.model_fields_set
            if getattr(self, name) is None and name not in self.nullable_fields
        )
        if cleared:
            raise ValueError(f"Field(s) cannot be null: {', '.join(cleared)}")
        return self


class Record(CamelModel):
    """Base for stored records.

    Records are immutable and list‑like fields are tuples, so a record
    handed out by a service cannot be changed by the caller.  Updates
    produce a new instance through :func:`apply_patch`.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
        "from_attributes": True,
    }


RecordT = TypeVar("RecordT", bound=Record)


def apply_patch(record: RecordT, patch: BaseModel) -> RecordT:
    """Return a copy of ``record`` with the fields set on ``patch`` merged in.

    Only fields the caller actually provided are applied, so absent
    fields keep their stored value while an explicit ``None`` clears a
    nullable field.  The merged data is validated against the record
    type again before it is returned.
    """
    merged = {**record.model_dump(), **patch.model_dump(exclude_unset=True)}
    return type(record).model_validate(merged)
