#!/usr/bin/env python3
"""
Create the info table and insert placeholder records.

Each record uses a generated UUID string as both identifier and payload. Run
once against a fresh database before starting the lookup service.
"""

import argparse
import asyncio
import json
from pathlib import Path
import sys
import os

from service_lookup.app.persistence import PostgresInfoStore


async def seed(*, dsn: str, count: int, dry_run: bool) -> dict:
    """Bootstrap the schema, insert records and return a summary."""
    if dry_run:
        return {"dsn": dsn, "planned": count, "inserted": 0, "ids": []}

    store = PostgresInfoStore(dsn, min_size=1, max_size=2)
    await store.start()
    try:
        await store.ensure_schema()
        ids = await store.seed(count)
    finally:
        await store.stop()

    return {"dsn": dsn, "planned": count, "inserted": len(ids), "ids": ids}


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the info table with placeholder records.")
    parser.add_argument("--dsn", default=os.getenv("LOOKUP_POSTGRES_DSN", "postgresql://localhost:5432/info"), help="PostgreSQL DSN")
    parser.add_argument("--count", type=int, default=int(os.getenv("LOOKUP_SEED_COUNT", 100)), help="Number of records to insert")
    parser.add_argument("--dry-run", action="store_true", help="Do not touch the database; print the plan")
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write JSON summary")
    return parser.parse_args()


def main() -> int:
    args = _parse_args()
    if args.count < 0:
        print("[seed] --count must not be negative", file=sys.stderr)
        return 2

    try:
        summary = asyncio.run(seed(dsn=args.dsn, count=args.count, dry_run=args.dry_run))
    except KeyboardInterrupt:
        return 130
    except Exception as exc:  # pragma: no cover - CLI surface
        print(f"[seed] failed: {exc}", file=sys.stderr)
        return 1

    if args.dry_run:
        print("[seed] DRY RUN - no rows inserted")

    print(json.dumps(summary, indent=2))

    if args.output:
        args.output.write_text(json.dumps(summary, indent=2))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
