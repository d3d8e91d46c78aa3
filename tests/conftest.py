import textwrap
from pathlib import Path

import pytest


class FakeRepo:
    """
    In-memory stand-in for FilePostsRepo keyed by file name.
    Set track_calls=True to record the order of read() calls.
    """

    def __init__(self, files: dict[str, str], track_calls: bool = False):
        self.files = {
            Path(name): textwrap.dedent(text).lstrip() for name, text in files.items()
        }
        self.track_calls = track_calls
        self.calls = []

    def list_post_files(self):
        return sorted(self.files)

    def read(self, path: Path) -> str:
        if self.track_calls:
            self.calls.append(str(path))
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        return self._get_post_return


@pytest.fixture
def content_dir(tmp_path):
    posts = tmp_path / "posts"
    posts.mkdir()
    (posts / "hello-world.mdx").write_text(
        textwrap.dedent(
            """\
            ---
            slug: hello-world
            title: Hello World
            description: First entry in the diary
            date: 2024-03-01
            tags: [intro, zenshop]
            ---
            Welcome to the developer diary.
            """
        ),
        encoding="utf-8",
    )
    (posts / "shipping-v2.md").write_text(
        textwrap.dedent(
            """\
            ---
            title: Shipping v2
            date: "2024-05-12"
            ---
            We shipped the second version.
            """
        ),
        encoding="utf-8",
    )
    return posts
