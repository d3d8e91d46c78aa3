from pathlib import Path
from typing import List

POST_SUFFIXES = (".md", ".mdx")


class FilePostsRepo:
    def __init__(self, content_dir: Path | str):
        self.content_dir = Path(content_dir)

    def list_post_files(self) -> List[Path]:
        if not self.content_dir.is_dir():
            return []
        return sorted(
            path
            for path in self.content_dir.rglob("*")
            if path.is_file() and path.suffix in POST_SUFFIXES
        )

    def read(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")
