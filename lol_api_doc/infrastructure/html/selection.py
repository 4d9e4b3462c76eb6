"""Cardinality-checked wrappers around BeautifulSoup query results.

``Sel`` always holds exactly one element; ``Sels`` is an ordered sequence of
them. Navigation never fails on its own: it returns a possibly empty ``Sels``
and leaves the cardinality check to the caller (``must_be_single``,
``exactly``, ``ensure``). Every failure carries a line-numbered dump of the
subtree in scope.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

from bs4 import Comment, NavigableString, PageElement, Tag

from lol_api_doc.domain.exceptions import ShapeError, StructuralError

QueryResult = Union[Tag, Iterable[Tag], None]

_DUMP_PREFIX = "\nDUMP HTML: \n"


def dump(nodes: Iterable[PageElement]) -> str:
    """Render nodes as pretty-printed, line-numbered HTML."""
    rendered: list[str] = []
    for node in nodes:
        if isinstance(node, Tag):
            rendered.append(node.prettify())
        else:
            rendered.append(str(node))
    if not rendered:
        return _DUMP_PREFIX + "<!-- EMPTY NODE -->" + "\n"
    return _DUMP_PREFIX + _number_lines("".join(rendered)) + "\n"


def _number_lines(text: str) -> str:
    lines = [line for line in text.splitlines() if line.strip()]
    width = len(str(len(lines)))
    return "\n".join(f"{no:>{width}}  {line}" for no, line in enumerate(lines, start=1))


def _as_nodes(result: QueryResult) -> list[Tag]:
    if result is None:
        return []
    if isinstance(result, Tag):
        return [result]
    return [node for node in result if isinstance(node, Tag)]


class Sel:
    """Handle to exactly one element."""

    __slots__ = ("tag",)

    def __init__(self, tag: Tag) -> None:
        if not isinstance(tag, Tag):
            raise ShapeError(f"expected a single element, got {type(tag).__name__}", dump([tag]))
        self.tag = tag

    @classmethod
    def wrap(cls, result: QueryResult) -> Sel:
        nodes = _as_nodes(result)
        if len(nodes) != 1:
            raise ShapeError(f"invalid selection: must have single node, but has {len(nodes)}", dump(nodes))
        return cls(nodes[0])

    @property
    def name(self) -> str:
        return self.tag.name

    def is_(self, selector: str) -> bool:
        return bool(self.tag.css.match(selector))

    def has_class(self, css_class: str) -> bool:
        return css_class in (self.tag.get("class") or [])

    def attr(self, name: str) -> str | None:
        value = self.tag.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def ensure(self, selector: str) -> Sel:
        if not self.is_(selector):
            raise StructuralError(f"expected selector: {selector!r}", self.dump())
        return self

    def find(self, selector: str) -> Sels:
        return Sels(self.tag.select(selector), scope=self)

    def children(self) -> Sels:
        return Sels((c for c in self.tag.children if isinstance(c, Tag)), scope=self)

    def children_filtered(self, selector: str) -> Sels:
        return Sels(
            (c for c in self.tag.children if isinstance(c, Tag) and c.css.match(selector)),
            scope=self,
        )

    def contents(self) -> list[PageElement]:
        return list(self.tag.contents)

    def remove(self) -> None:
        self.tag.extract()

    def replace_with_comment(self, text: str) -> None:
        self.tag.replace_with(Comment(f" {text} "))

    def dump(self) -> str:
        return dump([self.tag])

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Sel) and other.tag is self.tag

    def __hash__(self) -> int:
        return id(self.tag)

    def __repr__(self) -> str:
        classes = ".".join(self.tag.get("class") or [])
        return f"Sel(<{self.tag.name}{'.' + classes if classes else ''}>)"


class Sels(Sequence[Sel]):
    """Ordered sequence of single-element handles.

    ``scope`` is the element the sequence was queried from; it is dumped when
    a cardinality check fails on an empty sequence.
    """

    def __init__(self, items: Iterable[Tag | Sel] = (), scope: Sel | None = None) -> None:
        self._items = [item if isinstance(item, Sel) else Sel(item) for item in items]
        self.scope = scope

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Sels(self._items[index], scope=self.scope)
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Sels({self._items!r})"

    def must_be_single(self) -> Sel:
        return self.exactly(1)[0]

    def exactly(self, count: int) -> Sels:
        if len(self) != count:
            raise ShapeError(f"must have {count} node(s), but has {len(self)}", self.dump())
        return self

    def first(self) -> Sel:
        if not self:
            raise ShapeError("cannot take first node of an empty selection", self.dump())
        return self._items[0]

    def last(self) -> Sel:
        if not self:
            raise ShapeError("cannot take last node of an empty selection", self.dump())
        return self._items[-1]

    def reverse(self) -> Sels:
        return Sels(reversed(self._items), scope=self.scope)

    def children(self) -> Sels:
        flat: list[Sel] = []
        for sel in self._items:
            flat.extend(sel.children())
        return Sels(flat, scope=self.scope)

    def dump(self) -> str:
        if not self and self.scope is not None:
            return self.scope.dump()
        return dump([sel.tag for sel in self._items])


def is_text(node: PageElement) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, Comment)
