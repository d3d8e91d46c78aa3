import datetime
import re
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class MDXFrontMatter(BaseModel):
    slug: str = Field(..., min_length=1)
    title: str
    description: Optional[str] = None
    date: str
    tags: Optional[List[str]] = None

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_iso(cls, value):
        # YAML hands back date objects for unquoted dates
        if isinstance(value, (datetime.date, datetime.datetime)):
            return value.isoformat()
        return value

    @field_validator("date")
    @classmethod
    def _date_is_calendar_date(cls, value: str) -> str:
        message = f"date must start with YYYY-MM-DD, got {value!r}"
        if not ISO_DATE_RE.fullmatch(value[:10]):
            raise ValueError(message)
        try:
            datetime.date.fromisoformat(value[:10])
        except ValueError:
            raise ValueError(message)
        return value

    @property
    def published_on(self) -> datetime.date:
        return datetime.date.fromisoformat(self.date[:10])


class PostSummary(MDXFrontMatter):
    readingTime: str = "1 min"


class PostDetail(PostSummary):
    content: str = ""
