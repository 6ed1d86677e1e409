from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from suffixscope.resolver import SuffixResolver
from suffixscope.rules.store import ALL_DOMAINS

logger = logging.getLogger(__name__)

OUTPUT_COLUMNS = [
    "domain",
    "public_suffix",
    "section",
    "registrable_domain",
    "sub_domain",
    "is_known",
]


@dataclass
class BatchResult:
    rows: int
    known_count: int
    output_csv_path: Path


def resolve_domains(
    domains: list[str | None],
    resolver: SuffixResolver,
    section: str = ALL_DOMAINS,
) -> pd.DataFrame:
    rows: list[dict[str, object]] = []
    for raw in domains:
        resolved = resolver.resolve(raw, section).to_dict()
        rows.append({name: resolved[name] for name in OUTPUT_COLUMNS})
    return pd.DataFrame(rows, columns=OUTPUT_COLUMNS)


def resolve_domains_csv(
    input_csv: Path,
    output_csv: Path,
    resolver: SuffixResolver,
    column: str = "domain",
    section: str = ALL_DOMAINS,
) -> BatchResult:
    source = pd.read_csv(input_csv, dtype=str, keep_default_na=False)
    if column not in source.columns:
        raise ValueError(f"Column `{column}` not found in {input_csv}")

    values = [value.strip() or None for value in source[column].tolist()]
    df = resolve_domains(values, resolver, section=section)
    output_csv.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_csv, index=False)
    logger.info("Wrote %s rows to %s", len(df), output_csv)

    return BatchResult(
        rows=len(df),
        known_count=int(df["is_known"].sum()),
        output_csv_path=output_csv,
    )
