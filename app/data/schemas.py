"""
Form validation for student records.

Create and edit share one model. The only difference is the accepted phone
length, selected with `FormVariant` and passed as validation context.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

DESC_MIN = 10
DESC_MAX = 200

_DIGITS = re.compile(r"^\d+$")


class FormVariant(str, Enum):
    CREATE = "create"
    EDIT = "edit"


# (min, max) digits accepted per variant. Edit has historically been looser than create.
PHONE_LENGTHS = {
    FormVariant.CREATE: (10, 10),
    FormVariant.EDIT: (10, 15),
}


class RecordForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    email: str
    number: str
    desc: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if len(v) < 2:
            raise ValueError("Name must be at least 2 characters")
        return v

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v):
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("Invalid email address")
        return v

    @field_validator("number")
    @classmethod
    def validate_number(cls, v, info: ValidationInfo):
        variant = FormVariant((info.context or {}).get("variant", FormVariant.CREATE))
        lo, hi = PHONE_LENGTHS[variant]
        if not lo <= len(v) <= hi:
            if lo == hi:
                raise ValueError(f"Phone number must be {lo} digits")
            raise ValueError(f"Phone number must be {lo} to {hi} digits")
        if not _DIGITS.match(v):
            raise ValueError("Phone number must contain only digits")
        return v

    @field_validator("desc")
    @classmethod
    def validate_desc(cls, v):
        if len(v) < DESC_MIN:
            raise ValueError(f"Description must be at least {DESC_MIN} characters")
        if len(v) > DESC_MAX:
            raise ValueError(f"Description must be at most {DESC_MAX} characters")
        return v


@dataclass(frozen=True)
class ValidationOutcome:
    values: Optional[dict[str, str]] = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.values is not None and not self.errors


def _message(err: Mapping[str, Any]) -> str:
    # ValueErrors raised in validators carry the original exception; use its text without pydantic's prefix.
    ctx = err.get("ctx") or {}
    if "error" in ctx:
        return str(ctx["error"])
    return str(err.get("msg", "Invalid value"))


def validate_record(values: Mapping[str, Any], variant: FormVariant = FormVariant.CREATE) -> ValidationOutcome:
    """
    Validate raw form values.

    Returns the cleaned writable fields, or the first error message per field.
    """
    try:
        form = RecordForm.model_validate(dict(values), context={"variant": variant})
    except ValidationError as e:
        errors: dict[str, str] = {}
        for err in e.errors():
            loc = err.get("loc") or ("__root__",)
            errors.setdefault(str(loc[0]), _message(err))
        return ValidationOutcome(errors=errors)
    return ValidationOutcome(values=form.model_dump())
