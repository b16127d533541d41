#!/usr/bin/env python3
"""
Fixture population for the match registry.

Standalone script that registers the built-in sample fixtures, or the fixtures
from a CSV file, in the configured database. Inserts are made as
OWNER_DISCORD_ID, so the registry's writer check applies as usual. Fixtures
that are already registered are skipped.

Usage:
    python populate_matches.py
    python populate_matches.py --csv fixtures.csv

CSV columns:
    name,participants,participant_count,year,month,day,hour,minute
"""

import argparse
import asyncio
import sys

from matchbook.config import Config
from matchbook.database.database import Database
from matchbook.database.match_store import MatchStore
from matchbook.operations.authorization import WriterAuthorization
from matchbook.operations.match_registry import MatchRegistry
from matchbook.operations.seeding import SAMPLE_FIXTURES, load_fixtures_csv, seed_matches
from matchbook.utils.match_id import format_match_id
from matchbook.utils.logger import setup_logger

logger = setup_logger('populate_matches')


async def populate(csv_path=None) -> int:
    """Register fixtures and return the number of new matches"""
    fixtures = load_fixtures_csv(csv_path) if csv_path else SAMPLE_FIXTURES
    logger.info(f"Loaded {len(fixtures)} fixtures from {csv_path or 'built-in samples'}")

    db = Database()
    await db.initialize()
    try:
        registry = MatchRegistry(MatchStore(db), WriterAuthorization(Config.OWNER_DISCORD_ID))
        inserted = await seed_matches(registry, Config.OWNER_DISCORD_ID, fixtures)
        for match_id in inserted:
            match = await registry.get(match_id)
            logger.info(f"  {format_match_id(match_id)}  {match.name}: {match.participants}")
        return len(inserted)
    finally:
        await db.close()


def main() -> int:
    parser = argparse.ArgumentParser(description="Register fixtures in the match registry")
    parser.add_argument('--csv', dest='csv_path', help="CSV file of fixtures (defaults to built-in samples)")
    args = parser.parse_args()

    if not Config.OWNER_DISCORD_ID:
        logger.error("OWNER_DISCORD_ID is required to register matches")
        return 1

    try:
        count = asyncio.run(populate(args.csv_path))
    except (OSError, ValueError) as e:
        logger.error(f"Population failed: {e}")
        return 1

    logger.info(f"Population complete: {count} new matches")
    return 0


if __name__ == "__main__":
    sys.exit(main())
