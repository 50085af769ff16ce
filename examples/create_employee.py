#!/usr/bin/env python3
"""Create-employee workflow example.

This demonstrates mixing direct-style guards with an async datastore call:

* validate the candidate with guards built by `ensure`
* adapt the guards with `asyncify`
* store the employee through an `async def` step adapted with `callbackify`
* chain everything with `compose` and branch on the final outcome

Logging is configured from `.env` / environment (`LOG_LEVEL`,
`STEPCHAIN_LOG_FORMAT`, `STEPCHAIN_TRACE_STEPS`).
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from functools import partial
from typing import Any

from pydantic import ValidationError

from stepchain import asyncify, callbackify, compose, configure_from_settings, ensure, run_step

NATURAL_HAIR_COLORS = {"black", "brown", "blonde", "red", "grey", "white"}

ensure_natural_hair = partial(
    ensure,
    lambda e: e["hair_color"] in NATURAL_HAIR_COLORS,
    "hair must be a natural color",
)
ensure_of_age = partial(ensure, lambda e: e["age"] > 17, "must be 18+")
ensure_licensed = partial(ensure, lambda e: bool(e["license"]), "must hold a driving license")


class EmployeeStore:
    """In-memory stand-in for a database."""

    def __init__(self) -> None:
        self._rows: list[dict[str, Any]] = []

    async def insert(self, employee: dict[str, Any]) -> dict[str, Any]:
        await asyncio.sleep(0)
        row = {**employee, "id": len(self._rows) + 1}
        self._rows.append(row)
        return row


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate and store an employee.")
    parser.add_argument("--name", required=True, help="Employee name")
    parser.add_argument("--age", type=int, required=True, help="Employee age")
    parser.add_argument("--hair-color", default="brown", help="Hair color")
    parser.add_argument("--license", default="", help="Driving license number (optional)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    try:
        configure_from_settings()
    except ValidationError as e:
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    store = EmployeeStore()
    create_employee = compose(
        callbackify(store.insert),
        asyncify(ensure_licensed),
        asyncify(ensure_of_age),
        asyncify(ensure_natural_hair),
    )

    candidate = {
        "name": args.name,
        "age": args.age,
        "hair_color": args.hair_color.lower(),
        "license": args.license,
    }
    outcome = asyncio.run(run_step(create_employee, candidate))

    if not outcome.ok:
        print(f"Rejected: {outcome.failure}")
        return 1

    print(f"Created employee #{outcome.value['id']}: {outcome.value['name']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
