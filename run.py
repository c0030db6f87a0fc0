#!/usr/bin/env python3

"""
Regression runner for a live BurnView API.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import asyncio
import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

import httpx

BASE_URL = os.getenv("BURNVIEW_BASE_URL", "http://localhost:4322/api/v1")
HEADERS = {"Content-Type": "application/json"}


def _has_zone(body: Any) -> bool:
    return isinstance(body, dict) and body.get("alert_zone") is not None


def _no_zone(body: Any) -> bool:
    return isinstance(body, dict) and body.get("alert_zone") is None


@dataclass(frozen=True)
class Case:
    label: str
    method: str
    path: str
    body: Dict[str, Any] = field(default_factory=dict)
    expect: int = 200
    section: str = ""
    check: Optional[Callable[[Any], bool]] = None


CASES: list[Case] = [
    # ── Health ────────────────────────────────────────────
    Case("health", "GET", "/health", section="Health"),
    Case("ready", "GET", "/ready", section="Health"),

    # ── Form ──────────────────────────────────────────────
    Case("defaults", "GET", "/burn-rate/defaults", section="Form"),
    Case("form layout", "GET", "/burn-rate/form", section="Form"),

    # ── Chart ─────────────────────────────────────────────
    Case("default scenario stays quiet", "POST", "/burn-rate/chart", section="Chart", body={}, check=_no_zone),
    Case("99.9% target", "POST", "/burn-rate/chart", section="Chart",
         body={"sloTarget": 99.9, "badEventRate": 5}, check=_has_zone),
    Case("mild incident stays quiet", "POST", "/burn-rate/chart", section="Chart",
         body={"sloTarget": 99, "badEventRate": 2}, check=_no_zone),
    Case("zero error budget", "POST", "/burn-rate/chart", section="Chart",
         body={"sloTarget": 100}, check=_no_zone),
    Case("long incident", "POST", "/burn-rate/chart", section="Chart",
         body={"badEventDurationMinutes": 90, "longWindowMinutes": 360}),
    Case("chart.js document", "POST", "/burn-rate/chartjs", section="Chart", body={}),

    # ── Validation ────────────────────────────────────────
    Case("slo target > 100", "POST", "/burn-rate/chart", section="Validation",
         body={"sloTarget": 150}, expect=422),
    Case("zero short window", "POST", "/burn-rate/chart", section="Validation",
         body={"shortWindowMinutes": 0}, expect=422),
    Case("negative bad event rate", "POST", "/burn-rate/chart", section="Validation",
         body={"badEventRate": -1}, expect=422),
    Case("infinite incident duration", "POST", "/burn-rate/chart", section="Validation",
         body={"badEventDurationMinutes": "inf"}, expect=422),
]


async def run_case(client: httpx.AsyncClient, case: Case) -> tuple[bool, str, Any]:
    try:
        if case.method == "GET":
            r = await client.get(case.path)
        else:
            r = await client.request(case.method, case.path, json=case.body)
    except httpx.TransportError as exc:
        return False, f"transport error: {exc}", None

    try:
        body: Any = r.json()
    except ValueError:
        body = r.text

    if r.status_code != case.expect:
        return False, f"{r.status_code} {r.reason_phrase}", body
    if case.check is not None and not case.check(body):
        return False, "response check failed", body
    return True, "", body


async def main() -> None:
    import argparse

    parser = argparse.ArgumentParser(description="Run API test cases")
    parser.add_argument("--section", help="only run cases from this section name")
    parser.add_argument("--verbose", action="store_true", help="print response bodies")
    args = parser.parse_args()
    selected = [c for c in CASES if not args.section or c.section == args.section]
    if not selected:
        print("no matching cases (check --section)")
        sys.exit(1)

    passed = failed = 0
    current_section = ""

    async with httpx.AsyncClient(base_url=BASE_URL, headers=HEADERS, timeout=30) as client:
        for case in selected:
            if case.section != current_section:
                current_section = case.section
                print(f"\n── {current_section} {'─' * max(0, 44 - len(current_section))}")

            ok, detail, body = await run_case(client, case)
            if ok:
                passed += 1
                print(f"  ✓ PASS  {case.method} {case.path} ({case.label})")
            else:
                failed += 1
                print(f"  ✗ FAIL  {case.method} {case.path} ({case.label}, expected {case.expect})")
                print(f"         {detail}")
            if args.verbose or not ok:
                print(f"         response:\n{json.dumps(body, indent=2) if body is not None else '<no response>'}")

    total = passed + failed
    print(f"\n{'━' * 43}")
    print(f"  Results: {passed} passed / {failed} failed / {total} total")
    print(f"{'━' * 43}\n")
    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
