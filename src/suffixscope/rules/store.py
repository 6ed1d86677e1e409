"""Read-only trie of Public Suffix List rules, one root per section."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

ALL_DOMAINS = "ALL_DOMAINS"
ICANN_DOMAINS = "ICANN_DOMAINS"
PRIVATE_DOMAINS = "PRIVATE_DOMAINS"

WILDCARD_KEYS = frozenset({"*", ""})
EXCEPTION_KEY = "!"


class RuleNode:
    """Trie node for labels stored in reverse order (TLD at the root)."""

    __slots__ = ("children", "wildcard", "exception")

    def __init__(
        self,
        children: dict[str, RuleNode] | None = None,
        wildcard: bool = False,
        exception: bool = False,
    ) -> None:
        self.children = children if children else {}
        self.wildcard = wildcard
        self.exception = exception

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> RuleNode:
        node = cls()
        if not isinstance(mapping, Mapping):
            return node
        for key, value in mapping.items():
            if key in WILDCARD_KEYS:
                node.wildcard = True
            elif key == EXCEPTION_KEY:
                node.exception = True
            else:
                node.children[key] = cls.from_mapping(value)
        return node

    def has_exception_for(self, label: str) -> bool:
        child = self.children.get(label)
        return child is not None and child.exception

    def has_wildcard(self) -> bool:
        return self.wildcard

    def child_for(self, label: str) -> RuleNode | None:
        return self.children.get(label)


class RuleStore:
    def __init__(self, sections: Mapping[str, RuleNode]) -> None:
        self._sections = dict(sections)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> RuleStore:
        return cls(
            {
                name: RuleNode.from_mapping(rules)
                for name, rules in mapping.items()
                if isinstance(rules, Mapping)
            }
        )

    def lookup(self, section: str) -> RuleNode | None:
        return self._sections.get(section)

    def sections(self) -> list[str]:
        return list(self._sections)

    def __contains__(self, section: object) -> bool:
        return section in self._sections
