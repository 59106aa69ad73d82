from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, List, Optional

from config.settings import get_settings
from models.candidate_record import CandidateRecord


def _callouts_for_run(run_id: str) -> Dict[str, int]:
    """Aggregate callout outcomes from the callout trace for the given run_id.

    Returns dict like { 'ok': N, 'error': M }
    """
    result: Dict[str, int] = {}
    log_path = Path(get_settings().callout_log_path)
    if not log_path.exists():
        return result
    with log_path.open("r", encoding="utf-8") as f:
        for line in f:
            try:
                rec = json.loads(line)
            except json.JSONDecodeError:
                continue
            if not isinstance(rec, dict) or rec.get("run_id") != run_id:
                continue
            status = rec.get("status") or "unknown"
            result[status] = result.get(status, 0) + 1
    return result


def print_summary(
    records: List[CandidateRecord],
    selection: str,
    source_name: str,
    output_path: Optional[Path] = None,
) -> None:
    """Print summary of a candidate fetch."""
    with_company = sum(1 for r in records if r.company)
    with_position = sum(1 for r in records if r.position)

    print("\n" + "="*60)
    print("CANDIDATE FETCH - SUMMARY")
    print("="*60)
    print(f"Source: {source_name}")
    print(f"Selection: {selection}")
    print(f"Total Candidates: {len(records)}")
    print(f"  With Position: {with_position}")
    print(f"  With Company: {with_company}")
    # Callout outcomes for current RUN_ID if tracing enabled
    settings = get_settings()
    run_id = os.getenv("RUN_ID")
    if run_id and settings.callout_trace:
        usage = _callouts_for_run(run_id)
        if usage:
            print("Callouts:")
            for status, count in sorted(usage.items()):
                print(f"  {status}: {count}")
    if output_path:
        print(f"Output File: {output_path}")
    print("="*60)
