# parsers/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParsedPage:
    page_number: int
    text: str


@dataclass(frozen=True)
class ParsedDocument:
    title: str
    metadata: dict
    pages: list[ParsedPage] = field(default_factory=list)

    @property
    def page_texts(self) -> list[str]:
        return [page.text for page in self.pages]
