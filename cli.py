import argparse
import json
import os
import sys
import uuid as _uuid
from pathlib import Path

from config.settings import get_settings
from models.selection import Mode, Size
from services.errors import CandidateFetchError
from services.reporting import print_summary
from services.request_builder import describe_selection
from sources.registry import available_sources, get_source
from utils.logging_setup import init_logging
import sources  # noqa: F401 ensure registration


def cmd_fetch(args):
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = _uuid.uuid4().hex
    try:
        src = get_source(args.source)
    except KeyError:
        error = {"kind": "UnknownSource", "message": f"Unknown source: {args.source}", "available": sorted(available_sources())}
        print(json.dumps(error, indent=2, ensure_ascii=False), file=sys.stderr)
        sys.exit(1)
    try:
        records = src.run(args.mode, args.size)
        selection = describe_selection(args.mode, args.size)
    except CandidateFetchError as e:
        print(json.dumps(e.to_dict(), indent=2, ensure_ascii=False, default=str), file=sys.stderr)
        sys.exit(1)

    payload = [r.model_dump() for r in records]
    output_path = Path(args.output) if args.output else None
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    print_summary(records, selection, getattr(src, "source_name", args.source), output_path)
    if not output_path:
        print(json.dumps(payload, indent=2, ensure_ascii=False))


def cmd_sources(args):
    for name in sorted(available_sources()):
        print(name)


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Candidate datasource CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_fetch = sub.add_parser("fetch", help="Fetch a batch of candidates from a source")
    p_fetch.add_argument("--mode", required=True, help=f"Generation mode: {', '.join(m.value for m in Mode)}")
    p_fetch.add_argument("--size", default="", help=f"Size tier: {', '.join(s.value for s in Size)} (default: small; ignored for complete)")
    p_fetch.add_argument("--source", "-s", default="heroku_datasource", help="Source name (default: heroku_datasource)")
    p_fetch.add_argument("--output", "-o", default=None, help="Write records as JSON to this path instead of stdout")
    p_fetch.set_defaults(func=cmd_fetch)

    p_src = sub.add_parser("sources", help="List registered candidate sources")
    p_src.set_defaults(func=cmd_sources)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
