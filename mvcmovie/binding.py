from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError
from sqlmodel import SQLModel

# primary keys are signed 64-bit integers in the database
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class FieldError(BaseModel):
    field: str
    message: str


class FormView(BaseModel):
    form: Dict[str, Any]
    errors: List[FieldError] = []

    @classmethod
    def empty(cls, fields: Iterable[str]) -> "FormView":
        return cls(form={name: None for name in fields})

    @classmethod
    def for_record(cls, record: SQLModel, fields: Iterable[str]) -> "FormView":
        fields = tuple(fields)
        values = record.model_dump(mode="json", include=set(fields))
        return cls(form={name: values.get(name) for name in fields})


def bind_form(form: Mapping[str, Any], allowed_fields: Iterable[str]) -> Dict[str, Any]:
    """Copy only the allowed fields out of a submission, skipping blanks and uploads."""
    bound = {}
    for name in allowed_fields:
        value = form.get(name)
        if not isinstance(value, str) or value == "":
            continue
        bound[name] = value
    return bound


def validate_form(
        form_model: Type[SQLModel],
        data: Dict[str, Any]
) -> Tuple[Optional[SQLModel], List[FieldError]]:
    try:
        return form_model.model_validate(data), []
    except ValidationError as e:
        errors = [
            FieldError(field=".".join(str(part) for part in err["loc"]), message=err["msg"])
            for err in e.errors()
        ]
        return None, errors


def parse_id(value: Any) -> Optional[int]:
    """None unless ``value`` is an integer that fits a primary key column."""
    try:
        record_id = int(value)
    except (TypeError, ValueError):
        return None
    if record_id < MIN_ID or record_id > MAX_ID:
        return None
    return record_id


def submitted_id(data: Mapping[str, Any]) -> Optional[int]:
    return parse_id(data.get("id"))


def rejected_form(data: Mapping[str, Any], fields: Iterable[str], errors: List[FieldError]) -> FormView:
    return FormView(form={name: data.get(name) for name in fields}, errors=errors)
