from __future__ import annotations

from collections.abc import Iterator

from suffixscope.domain.idn import normalize_content


class LabelSequence:
    """Dot-separated labels of a domain, stored TLD first.

    Index ``0`` is the rightmost label and positive indices move left;
    ``-1`` is the leftmost label and negative indices move right.
    ``None`` content holds no label at all, while ``""`` holds a single
    empty label.
    """

    __slots__ = ("_content", "_labels")

    def __init__(self, content: str | None = None) -> None:
        self._content = normalize_content(content)
        if self._content is None:
            self._labels: tuple[str, ...] = ()
        else:
            self._labels = tuple(reversed(self._content.split(".")))

    @property
    def content(self) -> str | None:
        return self._content

    @property
    def labels(self) -> tuple[str, ...]:
        """Labels in natural, left to right, order."""
        return tuple(reversed(self._labels))

    def label(self, index: int) -> str | None:
        if index >= len(self._labels) or index < -len(self._labels):
            return None
        return self._labels[index]

    def keys(self, label: str) -> list[int]:
        return [index for index, value in enumerate(self._labels) if value == label]

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __str__(self) -> str:
        return self._content or ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._content!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._content == other._content

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._content))
