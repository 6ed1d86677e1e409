"""Errors raised while parsing domains and resolving public suffixes."""

from __future__ import annotations


class SuffixScopeError(ValueError):
    """Base class for every error raised by suffixscope."""


class InvalidDomain(SuffixScopeError):
    """The domain, or the public suffix attached to it, is malformed."""


class InvalidDomainEncoding(InvalidDomain):
    """A label could not be converted between its ASCII and Unicode forms."""


class UnknownSection(SuffixScopeError):
    """The requested Public Suffix List section is not supported."""


class NotMatchable(SuffixScopeError):
    """The domain is structurally unable to contain a public suffix."""


class RuleSourceError(SuffixScopeError):
    """The Public Suffix List could not be read or fetched."""
