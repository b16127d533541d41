"""
Tests for fixture seeding and CSV import.
"""

import asyncio

import pytest

from conftest import OWNER_ID, STRANGER_ID
from matchbook.operations.seeding import FixtureSeed, SAMPLE_FIXTURES, load_fixtures_csv, seed_matches
from matchbook.utils.match_id import derive_match_id
from matchbook.utils.registry_exceptions import DuplicateRecordError, UnauthorizedError

CSV_HEADER = "name,participants,participant_count,year,month,day,hour,minute\n"


def test_fixture_timestamp():
    fixture = FixtureSeed("Opener", "Mexico vs South Africa", 2, 2026, 6, 11, 19, 0)
    assert fixture.timestamp == 1781204400


def test_seed_samples_newest_first(registry_env):
    async def scenario():
        async with registry_env() as registry:
            inserted = await seed_matches(registry, OWNER_ID)

            assert len(inserted) == len(SAMPLE_FIXTURES)
            assert await registry.list_all() == list(reversed(inserted))

            first = await registry.get(inserted[0])
            assert first.name == SAMPLE_FIXTURES[0].name
            assert first.participants == SAMPLE_FIXTURES[0].participants
            assert first.date == SAMPLE_FIXTURES[0].timestamp

    asyncio.run(scenario())


def test_seeding_twice_skips_existing(registry_env):
    async def scenario():
        async with registry_env() as registry:
            await seed_matches(registry, OWNER_ID)
            assert await seed_matches(registry, OWNER_ID) == []
            assert await registry.count() == len(SAMPLE_FIXTURES)

            with pytest.raises(DuplicateRecordError):
                await seed_matches(registry, OWNER_ID, skip_existing=False)

    asyncio.run(scenario())


def test_seeding_requires_writer(registry_env):
    async def scenario():
        async with registry_env() as registry:
            with pytest.raises(UnauthorizedError):
                await seed_matches(registry, STRANGER_ID)
            assert await registry.count() == 0

    asyncio.run(scenario())


def test_load_fixtures_csv(tmp_path):
    path = tmp_path / "fixtures.csv"
    path.write_text(
        CSV_HEADER
        + "Quarter-final 1,Spain vs Portugal,2,2026,7,9,20,0\n"
        + "Quarter-final 2,England vs France,,2026,7,10,,\n",
        encoding='utf-8'
    )

    fixtures = load_fixtures_csv(path)

    assert fixtures == [
        FixtureSeed("Quarter-final 1", "Spain vs Portugal", 2, 2026, 7, 9, 20, 0),
        FixtureSeed("Quarter-final 2", "England vs France", 2, 2026, 7, 10, 0, 0),
    ]


def test_load_fixtures_csv_rejects_bad_rows(tmp_path):
    missing_column = tmp_path / "missing.csv"
    missing_column.write_text("name,participants\nFinal,A vs B\n", encoding='utf-8')
    with pytest.raises(ValueError, match="missing columns"):
        load_fixtures_csv(missing_column)

    bad_value = tmp_path / "bad.csv"
    bad_value.write_text(CSV_HEADER + "Final,A vs B,2,2026,seven,19,20,0\n", encoding='utf-8')
    with pytest.raises(ValueError, match=":2:"):
        load_fixtures_csv(bad_value)

    no_name = tmp_path / "noname.csv"
    no_name.write_text(CSV_HEADER + ",A vs B,2,2026,7,19,20,0\n", encoding='utf-8')
    with pytest.raises(ValueError, match="name is required"):
        load_fixtures_csv(no_name)


def test_seed_from_csv(registry_env, tmp_path):
    path = tmp_path / "fixtures.csv"
    path.write_text(CSV_HEADER + "Final,Argentina vs France,2,2026,7,19,19,0\n", encoding='utf-8')

    async def scenario():
        async with registry_env() as registry:
            inserted = await seed_matches(registry, OWNER_ID, load_fixtures_csv(path))
            fixture = load_fixtures_csv(path)[0]
            assert inserted == [derive_match_id("Final", 2, fixture.timestamp)]

    asyncio.run(scenario())
