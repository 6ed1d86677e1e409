"""ASCII (punycode) and Unicode conversion for domain labels.

Only labels that need work are handed to :mod:`idna`: ASCII labels pass
through ``to_ascii`` untouched and labels without the ``xn--`` prefix pass
through ``to_unicode`` untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import unquote

import idna

from suffixscope.exceptions import InvalidDomainEncoding

ACE_PREFIX = "xn--"


def _label_to_ascii(label: str) -> str:
    if label.isascii():
        return label
    try:
        encoded = idna.encode(label, uts46=True).decode("ascii")
    except (UnicodeError, IndexError) as exc:
        raise InvalidDomainEncoding(f"`{label}` can not be converted to ASCII: {exc}") from exc
    # UTS-46 mapping can turn a single code point into a separator (e.g. U+2488).
    if "." in encoded:
        raise InvalidDomainEncoding(f"`{label}` expands to more than one label")
    return encoded


def _label_to_unicode(label: str) -> str:
    if not label.lower().startswith(ACE_PREFIX):
        return label
    try:
        return idna.decode(label.lower())
    except (UnicodeError, IndexError) as exc:
        raise InvalidDomainEncoding(f"`{label}` is not valid punycode: {exc}") from exc


def to_ascii(labels: Iterable[str]) -> list[str]:
    return [_label_to_ascii(label) for label in labels]


def to_unicode(labels: Iterable[str]) -> list[str]:
    return [_label_to_unicode(label) for label in labels]


def is_ascii_form(labels: Iterable[str]) -> bool:
    return all(label.isascii() for label in labels)


def is_unicode_form(labels: Iterable[str]) -> bool:
    return not any(label.startswith(ACE_PREFIX) for label in labels)


def normalize_content(content: str | None) -> str | None:
    """Percent-decode, lowercase and validate a raw domain string.

    Non-ASCII labels are round-tripped through punycode so that invalid
    code points are rejected and case folding follows UTS-46.
    """
    if content is None:
        return None
    if "%" in content:
        try:
            content = unquote(content, errors="strict")
        except UnicodeDecodeError as exc:
            raise InvalidDomainEncoding(f"`{content}` holds invalid percent-encoded bytes") from exc

    normalized: list[str] = []
    for label in content.split("."):
        if label.isascii():
            normalized.append(label.lower())
        else:
            normalized.append(_label_to_unicode(_label_to_ascii(label)))
    return ".".join(normalized)
