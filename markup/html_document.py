from __future__ import annotations

from bs4 import BeautifulSoup, Tag


PARSER = "html.parser"


class HtmlDocument:
    """A parsed HTML document whose nodes are rewritten in place."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def from_string(cls, html: str) -> "HtmlDocument":
        return cls(BeautifulSoup(html, PARSER))

    @property
    def title(self) -> Tag | None:
        head = self.soup.head
        if head is None:
            return None
        return head.find("title")

    @property
    def body(self) -> Tag:
        return self.soup.body or self.soup

    @staticmethod
    def inner_html(node: Tag) -> str:
        return node.decode_contents()

    @staticmethod
    def set_inner_html(node: Tag, html: str) -> None:
        fragment = BeautifulSoup(html, PARSER)
        node.clear()
        for child in list(fragment.contents):
            node.append(child.extract())

    def render(self) -> str:
        return str(self.soup)

