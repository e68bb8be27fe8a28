#!/usr/bin/env python3
"""
Parse a batch of names, one per line, and report how many are usable.

Each input line produces a tab-separated report line:

    input  cased name  salutation  type  error  non_matching

followed by a closing "BATCH DATA QUALITY: NN.NN percent" summary, the share
of names parsed without error.

    python scripts/name_quality_report.py names.txt --auto-clean --joint-names
    cat names.txt | python scripts/name_quality_report.py --surnames my_surnames.txt
"""

import sys
import logging
import argparse
from pathlib import Path

# Add the parent directory to path to import nameparse
sys.path.insert(0, str(Path(__file__).parent.parent))

from nameparse.english_names import NameParseConfig, NameParser
from nameparse.surname_overrides import SurnameOverrideTable


def build_parser(args: argparse.Namespace) -> NameParser:
    config = NameParseConfig.create_default(
        salutation=args.salutation,
        sal_default=args.sal_default,
        auto_clean=args.auto_clean,
        force_case=args.force_case,
        lc_prefix=args.lc_prefix,
        initials=args.initials,
        allow_reversed=args.allow_reversed,
        joint_names=args.joint_names,
        extended_titles=args.extended_titles,
    )
    if args.surnames:
        overrides = SurnameOverrideTable.from_file(args.surnames)
    else:
        overrides = SurnameOverrideTable.load_default()
    return NameParser(config, overrides)


def report(lines, name_parser: NameParser, out) -> float:
    """Write one report line per non-blank input line and return the error-free percentage."""
    total = 0
    clean_count = 0

    for line in lines:
        text = line.rstrip("\r\n")
        if not text.strip():
            continue
        total += 1

        name = name_parser.parse(text)
        if not name.error:
            clean_count += 1

        row = [
            text,
            name.case_all(),
            name.salutation(),
            name.type,
            "1" if name.error else "0",
            name.non_matching,
        ]
        out.write("\t".join(row) + "\n")

    return 100.0 * clean_count / total if total else 0.0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Report parse quality for a file of English names.")
    parser.add_argument("input", nargs="?", type=str, default=None, help="File of names, one per line. Defaults to stdin.")
    parser.add_argument("--salutation", type=str, default="Dear", help="Greeting lead word.")
    parser.add_argument("--sal-default", type=str, default="Friend", help="Greeting noun for unusable names.")
    parser.add_argument("--auto-clean", action="store_true", help="Retry once on cleaned text after a failed parse.")
    parser.add_argument("--force-case", action="store_true", help="Case the non-matching tail too.")
    parser.add_argument("--lc-prefix", action="store_true", help="Lower case surname prefixes (van, de ...).")
    parser.add_argument("--initials", type=int, default=2, help="Maximum number of initials, 1 to 3.")
    parser.add_argument("--allow-reversed", action="store_true", help="Accept 'Surname, Title Initials' names.")
    parser.add_argument("--joint-names", action="store_true", help="Accept names of two people.")
    parser.add_argument("--extended-titles", action="store_true", help="Accept extended titles and suffixes.")
    parser.add_argument("--surnames", type=str, default=None, help="Surname override file.")
    parser.add_argument("--verbose", action="store_true", help="Log each parse at debug level.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    name_parser = build_parser(args)

    if args.input:
        with open(args.input, encoding="utf-8") as f:
            quality = report(f, name_parser, sys.stdout)
    else:
        quality = report(sys.stdin, name_parser, sys.stdout)

    print(f"BATCH DATA QUALITY: {quality:.2f} percent")
