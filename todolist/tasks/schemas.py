from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

DUE_DATE_FORMATS = ('%Y-%m-%d', '%Y-%m-%dT%H:%M', '%Y-%m-%dT%H:%M:%S')
DUE_DATE_MESSAGE = 'Due date must look like YYYY-MM-DD or YYYY-MM-DDTHH:MM'


class TaskUpdate(BaseModel):
    """Fields a client may change on an existing task; all optional."""

    model_config = ConfigDict(str_strip_whitespace=True, extra='ignore')

    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None
    due_date: Optional[datetime] = None

    @model_validator(mode='before')
    @classmethod
    def _collapse_form(cls, data):
        # a checkbox is preceded by a hidden "0" input; the last value wins
        if hasattr(data, 'getlist'):
            return {key: data.getlist(key)[-1] for key in data if key in cls.model_fields}
        return data

    @field_validator('title')
    @classmethod
    def _title_present(cls, value):
        if value is not None and not value:
            raise ValueError('Title is required')
        return value

    @field_validator('due_date', mode='before')
    @classmethod
    def _parse_due_date(cls, value):
        if value is None:
            return None
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                raise ValueError(DUE_DATE_MESSAGE)
            return value
        raw = str(value).strip()
        if not raw:
            return None
        for fmt in DUE_DATE_FORMATS:
            try:
                return datetime.strptime(raw, fmt)
            except ValueError:
                continue
        raise ValueError(DUE_DATE_MESSAGE)


class TaskCreate(TaskUpdate):
    title: str
    description: str = ''
    completed: bool = False
