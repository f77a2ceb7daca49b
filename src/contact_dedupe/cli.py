from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from collections.abc import Sequence
from dataclasses import asdict
from pathlib import Path

from contact_dedupe.datasets import (
    ReferenceContactGenerator,
    read_contacts_csv,
    write_contacts_csv,
    write_matches_csv,
)
from contact_dedupe.errors import ContactDedupeError
from contact_dedupe.models import ContactRecord, MatchRecord
from contact_dedupe.runners import LocalMatchPipeline, ParallelMatchPipeline
from contact_dedupe.steps import (
    FunctionalCleaner,
    PairwiseContactMatcher,
    count_accuracy_levels,
    score_breakdown,
)
from contact_dedupe.steps.matching import pair_count

LOG_LEVEL_ENV = "CONTACT_DEDUPE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format=LOG_FORMAT)

    try:
        if args.command == "find-matches":
            contacts = read_contacts_csv(args.input_csv)
            find_matches(contacts, dataset_path=args.input_csv, **_run_options(args))
            return 0
        if args.command == "run-test":
            run_test(
                size=args.size,
                duplicate_rate=args.duplicate_rate,
                seed=args.seed,
                **_run_options(args),
            )
            return 0
    except ContactDedupeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    parser.print_help()
    return 1


def run_test(*, size: int, duplicate_rate: float, seed: int, output_dir: Path, **options: object) -> dict[str, object]:
    output_dir.mkdir(parents=True, exist_ok=True)
    contacts = ReferenceContactGenerator(seed=seed).generate(size=size, duplicate_rate=duplicate_rate)
    dataset_path = output_dir / "test_dataset.csv"
    write_contacts_csv(dataset_path, contacts)
    return find_matches(contacts, dataset_path=dataset_path, output_dir=output_dir, **options)


def find_matches(
    contacts: list[ContactRecord],
    *,
    dataset_path: Path,
    output_dir: Path,
    workers: int = 1,
    processes: bool = False,
    clean: bool = False,
    explain: bool = False,
) -> dict[str, object]:
    output_dir.mkdir(parents=True, exist_ok=True)

    matcher = PairwiseContactMatcher()
    cleaner = FunctionalCleaner.default() if clean else None
    if workers > 1:
        pipeline = ParallelMatchPipeline(matcher, cleaner=cleaner, max_workers=workers, use_processes=processes)
    else:
        pipeline = LocalMatchPipeline(matcher, cleaner=cleaner)

    matches = pipeline.run(contacts)

    matches_json_path = output_dir / "matches.json"
    matches_csv_path = output_dir / "matches.csv"
    summary_path = output_dir / "summary.json"

    _write_json(matches_json_path, [asdict(match) for match in matches])
    write_matches_csv(matches_csv_path, matches)
    summary = _build_summary(
        contacts=contacts,
        matches=matches,
        dataset_path=dataset_path,
        matches_path=matches_json_path,
    )
    _write_json(summary_path, summary)

    print(f"Dataset: {dataset_path}")
    print(f"Matches: {matches_json_path}")
    print(f"Summary: {summary_path}")
    print("---")
    print(f"records={summary['record_count']}")
    print(f"pairs_scored={summary['pair_count']}")
    print(f"matches={summary['match_count']}")
    for label, count in summary["accuracy_counts"].items():
        print(f"{label.lower()}={count}")
    if explain and matches:
        print("---")
        print("breakdowns=")
        scored = cleaner.clean(contacts) if cleaner is not None else contacts
        print(json.dumps(_breakdown_payload(scored, matches, matcher), indent=2))
    return summary


def _build_summary(
    *,
    contacts: list[ContactRecord],
    matches: list[MatchRecord],
    dataset_path: Path,
    matches_path: Path,
) -> dict[str, object]:
    return {
        "record_count": len(contacts),
        "pair_count": pair_count(len(contacts)),
        "match_count": len(matches),
        "accuracy_counts": count_accuracy_levels(matches),
        "dataset_path": str(dataset_path),
        "matches_path": str(matches_path),
    }


def _breakdown_payload(
    contacts: list[ContactRecord],
    matches: list[MatchRecord],
    matcher: PairwiseContactMatcher,
) -> list[dict[str, object]]:
    by_id = {contact.contact_id: contact for contact in contacts}
    payload: list[dict[str, object]] = []
    for match in matches:
        breakdown = score_breakdown(by_id[match.source_id], by_id[match.match_id], matcher.weights)
        payload.append(
            {
                "source_id": match.source_id,
                "match_id": match.match_id,
                "accuracy": str(match.accuracy),
                "score": breakdown.total,
                "components": asdict(breakdown),
            }
        )
    return payload


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="contact-dedupe", description="Contact duplicate finder")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
    )
    subparsers = parser.add_subparsers(dest="command")

    find_parser = subparsers.add_parser(
        "find-matches",
        help="Load contacts from CSV and write possible duplicate pairs + summary",
    )
    find_parser.add_argument("--input-csv", type=Path, required=True)
    _add_run_arguments(find_parser)

    run_test_parser = subparsers.add_parser(
        "run-test",
        help="Generate a reference dataset, run matching, and write pairs + summary",
    )
    run_test_parser.add_argument("--size", type=int, default=500)
    run_test_parser.add_argument("--duplicate-rate", type=float, default=0.15)
    run_test_parser.add_argument("--seed", type=int, default=42)
    _add_run_arguments(run_test_parser)

    return parser


def _add_run_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--output-dir", type=Path, default=Path("data/cli_output"))
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--processes", action="store_true", help="Use processes instead of threads")
    parser.add_argument("--clean", action="store_true", help="Collapse whitespace and drop blank fields")
    parser.add_argument("--explain", action="store_true", help="Print per-match score breakdowns")


def _run_options(args: argparse.Namespace) -> dict[str, object]:
    return {
        "output_dir": args.output_dir,
        "workers": args.workers,
        "processes": args.processes,
        "clean": args.clean,
        "explain": args.explain,
    }


def _write_json(path: Path, payload: object) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)


if __name__ == "__main__":
    sys.exit(main())
