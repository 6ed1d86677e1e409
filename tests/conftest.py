from __future__ import annotations

from pathlib import Path

import pytest

from suffixscope.resolver import SuffixResolver

PSL_TEXT = """\
// This rule sits before any section and must be ignored.
ignored

// ===BEGIN ICANN DOMAINS===

// be
be
ac.be

// bl
bl
!example.bl

// ck
*.ck
!www.ck

// cn
cn
公司.cn

// com
com

// de
de

// io
io

// jp
jp
*.kawasaki.jp
!city.kawasaki.jp

// uk
uk
co.uk    trailing text after the rule is ignored

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

// Amazon
s3.amazonaws.com

// Google
blogspot.com
blogspot.co.uk

// GitHub
github.io

// CentralNic
uk.com

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture()
def psl_text() -> str:
    return PSL_TEXT


@pytest.fixture()
def psl_path(tmp_path: Path) -> Path:
    path = tmp_path / "public_suffix_list.dat"
    path.write_text(PSL_TEXT, encoding="utf-8")
    return path


@pytest.fixture()
def resolver() -> SuffixResolver:
    return SuffixResolver.from_string(PSL_TEXT)
