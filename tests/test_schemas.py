import datetime

import pytest
from pydantic import ValidationError

from app.schemas.blog import MDXFrontMatter, PostDetail


def test_minimal_frontmatter():
    fm = MDXFrontMatter(slug="hello", title="Hello", date="2024-03-01")
    assert fm.description is None
    assert fm.tags is None
    assert fm.published_on == datetime.date(2024, 3, 1)


@pytest.mark.parametrize("missing", ["slug", "date"])
def test_missing_slug_or_date_rejected(missing):
    data = {"slug": "hello", "title": "Hello", "date": "2024-03-01"}
    del data[missing]
    with pytest.raises(ValidationError):
        MDXFrontMatter(**data)


def test_unparseable_date_rejected():
    with pytest.raises(ValidationError):
        MDXFrontMatter(slug="hello", title="Hello", date="last tuesday")


@pytest.mark.parametrize("value", ["20240101", "2024-W01-1", "2024-02-30"])
def test_non_calendar_date_forms_rejected(value):
    with pytest.raises(ValidationError):
        MDXFrontMatter(slug="hello", title="Hello", date=value)


def test_date_objects_become_iso_strings():
    fm = MDXFrontMatter(slug="hello", title="Hello", date=datetime.date(2024, 3, 1))
    assert fm.date == "2024-03-01"


def test_iso_datetime_accepted():
    fm = MDXFrontMatter(slug="hello", title="Hello", date="2024-03-01T09:30:00")
    assert fm.published_on == datetime.date(2024, 3, 1)


def test_post_detail_extends_frontmatter():
    post = PostDetail(
        slug="hello", title="Hello", date="2024-03-01", tags=["a"], content="body"
    )
    assert isinstance(post, MDXFrontMatter)
    assert post.readingTime == "1 min"
    assert post.content == "body"
