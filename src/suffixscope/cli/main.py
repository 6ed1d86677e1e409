from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from suffixscope.config import PSL_URL, get_psl_path
from suffixscope.data.batch import resolve_domains_csv
from suffixscope.data.download import download_psl
from suffixscope.exceptions import SuffixScopeError
from suffixscope.logging_utils import configure_logging
from suffixscope.resolver import SECTIONS, SuffixResolver
from suffixscope.rules.store import ALL_DOMAINS


def _load_resolver(args: argparse.Namespace) -> SuffixResolver:
    return SuffixResolver.from_path(Path(args.psl) if args.psl else get_psl_path())


def cmd_download_psl(args: argparse.Namespace) -> None:
    local = Path(args.local) if args.local else None
    output_dir = Path(args.output_dir) if args.output_dir else None
    path = download_psl(url=args.url, output_dir=output_dir, fallback_local=local)
    print(f"Downloaded Public Suffix List -> {path}")


def cmd_resolve(args: argparse.Namespace) -> None:
    resolver = _load_resolver(args)
    for raw in args.domains:
        resolved = resolver.resolve(raw, args.section)
        if args.json:
            print(json.dumps(resolved.to_dict(), ensure_ascii=False))
            continue
        print(
            f"{raw:<40} suffix={resolved.public_suffix.content or '-'} "
            f"registrable={resolved.registrable_domain or '-'} "
            f"section={resolved.public_suffix.section or '-'}"
        )


def cmd_public_suffix(args: argparse.Namespace) -> None:
    resolver = _load_resolver(args)
    try:
        suffix = resolver.get_public_suffix(args.domain, args.section)
    except SuffixScopeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(suffix.content)


def cmd_resolve_csv(args: argparse.Namespace) -> None:
    resolver = _load_resolver(args)
    result = resolve_domains_csv(
        Path(args.input_csv),
        Path(args.output_csv),
        resolver,
        column=args.column,
        section=args.section,
    )
    print(
        f"Resolved {result.rows} domains ({result.known_count} with a known suffix) "
        f"-> {result.output_csv_path}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="suffixscope")
    sub = parser.add_subparsers(dest="command", required=True)

    d = sub.add_parser("download-psl")
    d.add_argument("--url", default=PSL_URL)
    d.add_argument("--output-dir", default=None)
    d.add_argument("--local", default=None)
    d.set_defaults(func=cmd_download_psl)

    r = sub.add_parser("resolve")
    r.add_argument("domains", nargs="+")
    r.add_argument("--section", choices=SECTIONS, default=ALL_DOMAINS)
    r.add_argument("--psl", default=None)
    r.add_argument("--json", action="store_true")
    r.set_defaults(func=cmd_resolve)

    p = sub.add_parser("public-suffix")
    p.add_argument("domain")
    p.add_argument("--section", choices=SECTIONS, default=ALL_DOMAINS)
    p.add_argument("--psl", default=None)
    p.set_defaults(func=cmd_public_suffix)

    c = sub.add_parser("resolve-csv")
    c.add_argument("--input-csv", required=True)
    c.add_argument("--output-csv", required=True)
    c.add_argument("--column", default="domain")
    c.add_argument("--section", choices=SECTIONS, default=ALL_DOMAINS)
    c.add_argument("--psl", default=None)
    c.set_defaults(func=cmd_resolve_csv)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
