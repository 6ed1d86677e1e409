"""Entry points resolving domains against a loaded Public Suffix List."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from suffixscope.domain.model import Domain, PublicSuffix
from suffixscope.exceptions import NotMatchable, RuleSourceError, SuffixScopeError, UnknownSection
from suffixscope.rules.converter import convert
from suffixscope.rules.matcher import find_public_suffix
from suffixscope.rules.store import ALL_DOMAINS, ICANN_DOMAINS, PRIVATE_DOMAINS, RuleStore

logger = logging.getLogger(__name__)

SECTIONS = (ALL_DOMAINS, ICANN_DOMAINS, PRIVATE_DOMAINS)


class SuffixResolver:
    """Resolve public suffixes with a rule store that is never mutated.

    ``get_public_suffix`` raises on bad input while ``resolve`` always
    returns a :class:`Domain`, empty when the input could not be used.
    """

    def __init__(self, store: RuleStore) -> None:
        self._store = store

    @classmethod
    def from_mapping(cls, rules: Mapping[str, Any]) -> SuffixResolver:
        return cls(RuleStore.from_mapping(rules))

    @classmethod
    def from_string(cls, content: str) -> SuffixResolver:
        return cls.from_mapping(convert(content))

    @classmethod
    def from_path(cls, path: str | Path) -> SuffixResolver:
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise RuleSourceError(f"`{path}`: failed to open the Public Suffix List") from exc
        logger.info("Loaded Public Suffix List from %s", path)
        return cls.from_string(content)

    @property
    def store(self) -> RuleStore:
        return self._store

    def _validate_section(self, section: str) -> None:
        if section == ALL_DOMAINS:
            return
        if section in SECTIONS and section in self._store:
            return
        raise UnknownSection(f"`{section}` is an unknown Public Suffix List section")

    @staticmethod
    def _is_matchable(domain: Domain) -> bool:
        return len(domain) > 1 and (domain.content or "").find(".") > 0

    def get_public_suffix(self, domain: str | None = None, section: str = ALL_DOMAINS) -> PublicSuffix:
        self._validate_section(section)
        domain_obj = Domain(domain)
        if not self._is_matchable(domain_obj):
            raise NotMatchable(f"The domain `{domain}` can not contain a public suffix")
        return find_public_suffix(domain_obj, self._store, section)

    def resolve(self, domain: str | None = None, section: str = ALL_DOMAINS) -> Domain:
        try:
            self._validate_section(section)
            domain_obj = Domain(domain)
            if not self._is_matchable(domain_obj):
                return domain_obj
            return Domain(domain_obj.content, find_public_suffix(domain_obj, self._store, section))
        except SuffixScopeError as exc:
            logger.debug("Could not resolve %r in %s: %s", domain, section, exc)
            return Domain()
