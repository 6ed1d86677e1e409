from __future__ import annotations

from typing import Any

from suffixscope.domain import idn
from suffixscope.domain.labels import LabelSequence
from suffixscope.exceptions import InvalidDomain, UnknownSection
from suffixscope.rules.store import ICANN_DOMAINS, PRIVATE_DOMAINS

SUFFIX_SECTIONS = (ICANN_DOMAINS, PRIVATE_DOMAINS)


class PublicSuffix(LabelSequence):
    """Public suffix of a domain, tagged with the section that matched it.

    A suffix without content stands for "no public suffix found" and never
    carries a section. A suffix with content but no section was not matched
    by any rule.
    """

    __slots__ = ("_section",)

    def __init__(self, content: str | None = None, section: str | None = None) -> None:
        super().__init__(content)
        if section is not None and section not in SUFFIX_SECTIONS:
            raise UnknownSection(f"`{section}` is an unknown Public Suffix List section")
        self._section = section if self._content is not None else None

    @property
    def section(self) -> str | None:
        return self._section

    @property
    def is_known(self) -> bool:
        return self._section is not None

    @property
    def is_icann(self) -> bool:
        return self._section == ICANN_DOMAINS

    @property
    def is_private(self) -> bool:
        return self._section == PRIVATE_DOMAINS

    def to_ascii(self) -> PublicSuffix:
        if self._content is None or idn.is_ascii_form(self._labels):
            return self
        return PublicSuffix(".".join(idn.to_ascii(self.labels)), self._section)

    def to_unicode(self) -> PublicSuffix:
        if self._content is None or idn.is_unicode_form(self._labels):
            return self
        return PublicSuffix(".".join(idn.to_unicode(self.labels)), self._section)

    def __repr__(self) -> str:
        return f"PublicSuffix({self._content!r}, section={self._section!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicSuffix):
            return NotImplemented
        return self._content == other._content and self._section == other._section

    def __hash__(self) -> int:
        return hash(("PublicSuffix", self._content, self._section))


class Domain(LabelSequence):
    """A domain name together with the public suffix resolved for it."""

    __slots__ = ("_public_suffix",)

    def __init__(self, content: str | None = None, public_suffix: PublicSuffix | None = None) -> None:
        super().__init__(content)
        if public_suffix is None:
            public_suffix = PublicSuffix()
        self._public_suffix = self._attach(public_suffix)

    def _attach(self, public_suffix: PublicSuffix) -> PublicSuffix:
        if public_suffix.content is None:
            return public_suffix
        if len(public_suffix) > len(self):
            raise InvalidDomain(
                f"the public suffix `{public_suffix}` can not be assigned to the domain `{self}`"
            )
        trailing = list(self._labels[: len(public_suffix)])
        if idn.to_ascii(trailing) != idn.to_ascii(public_suffix):
            raise InvalidDomain(
                f"the public suffix `{public_suffix}` can not be assigned to the domain `{self}`"
            )
        return public_suffix

    @property
    def public_suffix(self) -> PublicSuffix:
        return self._public_suffix

    @property
    def registrable_domain(self) -> str | None:
        size = len(self._public_suffix)
        if self._public_suffix.content is None or len(self) <= size:
            return None
        return ".".join(self.labels[-(size + 1):])

    @property
    def sub_domain(self) -> str | None:
        size = len(self._public_suffix) + 1
        if self.registrable_domain is None or len(self) == size:
            return None
        return ".".join(self.labels[: len(self) - size])

    @property
    def is_known(self) -> bool:
        return self._public_suffix.is_known

    @property
    def is_icann(self) -> bool:
        return self._public_suffix.is_icann

    @property
    def is_private(self) -> bool:
        return self._public_suffix.is_private

    def to_ascii(self) -> Domain:
        if self._content is None or idn.is_ascii_form(self._labels):
            return self
        return Domain(".".join(idn.to_ascii(self.labels)), self._public_suffix.to_ascii())

    def to_unicode(self) -> Domain:
        if self._content is None or idn.is_unicode_form(self._labels):
            return self
        return Domain(".".join(idn.to_unicode(self.labels)), self._public_suffix.to_unicode())

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self._content,
            "public_suffix": self._public_suffix.content,
            "section": self._public_suffix.section,
            "registrable_domain": self.registrable_domain,
            "sub_domain": self.sub_domain,
            "is_known": self.is_known,
            "is_icann": self.is_icann,
            "is_private": self.is_private,
        }

    def __repr__(self) -> str:
        return f"Domain({self._content!r}, public_suffix={self._public_suffix!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return self._content == other._content and self._public_suffix == other._public_suffix

    def __hash__(self) -> int:
        return hash(("Domain", self._content, self._public_suffix))
