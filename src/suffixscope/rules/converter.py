"""Turn raw Public Suffix List text into the nested rule mapping.

The mapping has one entry per section; each section is a dict keyed by
label, TLD first, where ``"*"`` marks a wildcard rule and ``"!"`` marks an
exception rule::

    {"ICANN_DOMAINS": {"uk": {"co": {}}, "ck": {"*": {}, "www": {"!": {}}}}}
"""

from __future__ import annotations

import logging
import re
from typing import Any

from suffixscope.domain.idn import to_ascii
from suffixscope.exceptions import InvalidDomainEncoding
from suffixscope.rules.store import EXCEPTION_KEY, ICANN_DOMAINS, PRIVATE_DOMAINS

logger = logging.getLogger(__name__)

SECTION_MARKER_RE = re.compile(r"^//\s*===(?P<point>BEGIN|END)\s+(?P<type>ICANN|PRIVATE)\s+DOMAINS===")
SECTION_NAMES = {"ICANN": ICANN_DOMAINS, "PRIVATE": PRIVATE_DOMAINS}


def _section_from_marker(line: str, current: str | None) -> str | None:
    match = SECTION_MARKER_RE.match(line)
    if match is None:
        return current
    if match.group("point") == "END":
        return None
    return SECTION_NAMES[match.group("type")]


def _add_rule(rules: dict[str, Any], labels: list[str]) -> None:
    """Insert ``labels`` (TLD first) into ``rules``."""
    node = rules
    for position, label in enumerate(labels):
        is_last = position == len(labels) - 1
        if is_last and label.startswith("!"):
            node.setdefault(label[1:], {})[EXCEPTION_KEY] = {}
            return
        node = node.setdefault(label, {})


def _rule_labels(rule: str) -> list[str] | None:
    exception = rule.startswith("!")
    labels = rule.lstrip("!").split(".")
    if "" in labels:
        logger.warning("Skipping rule with an empty label: %s", rule)
        return None
    try:
        labels = to_ascii(labels)
    except InvalidDomainEncoding:
        logger.warning("Skipping rule that can not be encoded: %s", rule)
        return None
    if exception:
        labels[0] = "!" + labels[0]
    return list(reversed(labels))


def convert(content: str) -> dict[str, dict[str, Any]]:
    rules: dict[str, dict[str, Any]] = {ICANN_DOMAINS: {}, PRIVATE_DOMAINS: {}}
    section: str | None = None
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if line.startswith("//"):
            section = _section_from_marker(line, section)
            continue
        if not line or section is None:
            continue
        rule = line.split()[0].lower()
        labels = _rule_labels(rule)
        if labels:
            _add_rule(rules[section], labels)

    logger.debug(
        "Converted PSL: %s ICANN top-level entries, %s PRIVATE top-level entries",
        len(rules[ICANN_DOMAINS]),
        len(rules[PRIVATE_DOMAINS]),
    )
    return rules
