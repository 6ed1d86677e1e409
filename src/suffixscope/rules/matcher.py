"""Longest-match resolution of a domain against the rule store."""

from __future__ import annotations

from collections.abc import Iterable

from suffixscope.domain.idn import ACE_PREFIX
from suffixscope.domain.model import Domain, PublicSuffix
from suffixscope.rules.store import (
    ALL_DOMAINS,
    ICANN_DOMAINS,
    PRIVATE_DOMAINS,
    RuleNode,
    RuleStore,
)


def match_section(labels: Iterable[str], root: RuleNode | None, section: str) -> PublicSuffix:
    """Match TLD-first ``labels`` against a single section trie."""
    matches: list[str] = []
    node = root
    for label in labels:
        if node is None or node.has_exception_for(label):
            break
        if node.has_wildcard():
            matches.append(label)
            break
        child = node.child_for(label)
        if child is None:
            break
        matches.append(label)
        node = child

    if not matches:
        return PublicSuffix()
    return PublicSuffix(".".join(reversed(matches)), section)


def _normalize(public_suffix: PublicSuffix, domain: Domain) -> PublicSuffix:
    if public_suffix.content is None:
        public_suffix = PublicSuffix(domain.label(0))
    if ACE_PREFIX not in (domain.content or ""):
        return public_suffix.to_unicode()
    return public_suffix


def find_public_suffix(domain: Domain, store: RuleStore, section: str = ALL_DOMAINS) -> PublicSuffix:
    ascii_domain = domain.to_ascii()
    icann = match_section(ascii_domain, store.lookup(ICANN_DOMAINS), ICANN_DOMAINS)
    if section == ICANN_DOMAINS:
        return _normalize(icann, domain)

    private = match_section(ascii_domain, store.lookup(PRIVATE_DOMAINS), PRIVATE_DOMAINS)
    if len(private) > len(icann):
        return _normalize(private, domain)
    if section == ALL_DOMAINS:
        return _normalize(icann, domain)
    return _normalize(PublicSuffix(), domain)
