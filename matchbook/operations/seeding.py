"""
Fixture seeding for the match registry.

Bulk registration is a thin wrapper over MatchRegistry.insert: fixtures come
either from the built-in sample list or from a CSV file with the columns

    name,participants,participant_count,year,month,day,hour,minute

and each one is inserted as the given caller. Kickoff fields are converted
to the stored timestamp with `to_timestamp`.
"""

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union

from matchbook.config import Config
from matchbook.operations.match_registry import MatchRegistry
from matchbook.utils.match_calendar import to_timestamp
from matchbook.utils.match_id import derive_match_id, format_match_id
from matchbook.utils.logger import setup_logger

logger = setup_logger(__name__)

CSV_COLUMNS = ('name', 'participants', 'participant_count', 'year', 'month', 'day', 'hour', 'minute')


@dataclass(frozen=True)
class FixtureSeed:
    """A match waiting to be registered."""
    name: str
    participants: str
    participant_count: int
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0

    @property
    def timestamp(self) -> int:
        return to_timestamp(self.year, self.month, self.day, self.hour, self.minute)


SAMPLE_FIXTURES = [
    FixtureSeed("World Cup 2026 Group A", "Mexico vs South Africa", 2, 2026, 6, 11, 19, 0),
    FixtureSeed("World Cup 2026 Group A", "South Korea vs Czechia", 2, 2026, 6, 12, 2, 0),
    FixtureSeed("World Cup 2026 Group B", "Canada vs Bosnia and Herzegovina", 2, 2026, 6, 12, 19, 0),
    FixtureSeed("World Cup 2026 Group D", "United States vs Paraguay", 2, 2026, 6, 13, 1, 0),
    FixtureSeed("World Cup 2026 Group C", "Brazil vs Morocco", 2, 2026, 6, 13, 22, 0),
    FixtureSeed("World Cup 2026 Group J", "Argentina vs Algeria", 2, 2026, 6, 17, 1, 0),
]


def load_fixtures_csv(path: Union[str, Path]) -> List[FixtureSeed]:
    """
    Read fixtures from a CSV file with a header row.

    Raises:
        ValueError: If the header is missing columns or a row has invalid values
    """
    fixtures = []
    with open(path, newline='', encoding='utf-8') as handle:
        reader = csv.DictReader(handle)
        missing = [column for column in CSV_COLUMNS if column not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"{path}: missing columns {', '.join(missing)}")

        for row in reader:
            line = reader.line_num
            name = (row['name'] or '').strip()
            if not name:
                raise ValueError(f"{path}:{line}: match name is required")
            try:
                fixtures.append(FixtureSeed(
                    name=name,
                    participants=(row['participants'] or '').strip(),
                    participant_count=int(row['participant_count'] or Config.DEFAULT_PARTICIPANT_COUNT),
                    year=int(row['year']),
                    month=int(row['month']),
                    day=int(row['day']),
                    hour=int(row['hour'] or 0),
                    minute=int(row['minute'] or 0),
                ))
            except (TypeError, ValueError) as e:
                raise ValueError(f"{path}:{line}: {e}") from e

    return fixtures


async def seed_matches(
    registry: MatchRegistry,
    caller: int,
    fixtures: Iterable[FixtureSeed] = SAMPLE_FIXTURES,
    skip_existing: bool = True
) -> List[bytes]:
    """
    Insert each fixture through the registry.

    Args:
        registry: Target registry
        caller: Principal performing the inserts (must be the writer)
        fixtures: Fixtures to register
        skip_existing: Skip fixtures that are already registered instead of
            failing with DuplicateRecordError

    Returns:
        Ids of the newly registered matches, in insertion order
    """
    inserted = []
    skipped = 0

    for fixture in fixtures:
        timestamp = fixture.timestamp
        if skip_existing:
            match_id = derive_match_id(fixture.name, fixture.participant_count, timestamp)
            if await registry.exists(match_id):
                logger.info(f"Skipping existing fixture '{fixture.name}' ({format_match_id(match_id)})")
                skipped += 1
                continue

        inserted.append(await registry.insert(
            caller,
            fixture.name,
            fixture.participants,
            fixture.participant_count,
            timestamp
        ))

    logger.info(f"Seeded {len(inserted)} matches ({skipped} already registered)")
    return inserted
