from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Author:
    id: str
    name: str


@dataclass
class Document:
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    id: str | None = field(default=None)
    created: datetime | None = field(default=None)


@dataclass
class SearchRequest:
    """Search criteria. Every populated field is an independent OR-ed match."""

    title_prefixes: list[str] | set[str] | None = None
    contains_contents: list[str] | set[str] | None = None
    author_ids: list[str] | set[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    def is_empty(self) -> bool:
        return not (
            self.title_prefixes
            or self.contains_contents
            or self.author_ids
            or self.created_from is not None
            or self.created_to is not None
        )
