"""
Tests for match embed rendering.
"""

from matchbook.constants import UIConstants
from matchbook.data_models.match import Match
from matchbook.database.models import MatchOutcome
from matchbook.utils.embeds import build_match_embed, build_match_list_embed, outcome_label
from matchbook.utils.error_embeds import ErrorEmbeds
from matchbook.utils.match_id import derive_match_id
from matchbook.utils.registry_exceptions import InvalidWinnerError, UnauthorizedError


def make_match(outcome=MatchOutcome.PENDING, winner=-1, name="Group A", date=1781204400):
    return Match(
        match_id=derive_match_id(name, 2, date),
        name=name,
        participants="Mexico vs South Africa",
        participant_count=2,
        date=date,
        outcome=outcome,
        winner=winner,
    )


def test_outcome_labels():
    assert outcome_label(make_match()) == f"{UIConstants.PENDING_EMOJI} Pending"
    assert outcome_label(make_match(MatchOutcome.DECIDED, 1)) == f"{UIConstants.DECIDED_EMOJI} Decided: South Africa"
    # A stale winner is not shown for non-decided outcomes
    assert outcome_label(make_match(MatchOutcome.DRAW, 1)) == f"{UIConstants.DRAW_EMOJI} Draw"


def test_match_embed_fields():
    match = make_match(MatchOutcome.DECIDED, 0)
    embed = build_match_embed(match)

    assert embed.title == "Group A"
    assert embed.description == "Mexico vs South Africa"
    assert embed.color.value == UIConstants.DECIDED_COLOR
    fields = {field.name: field.value for field in embed.fields}
    assert fields["Kickoff"] == "2026-06-11 19:00 UTC"
    assert fields["Outcome"].endswith("Mexico")
    assert embed.footer.text == f"ID: {match.id_hex}"


def test_match_list_embed_notes_truncation():
    matches = [make_match(name=f"Match {i}", date=i) for i in range(3)]

    embed = build_match_list_embed(matches, "All Matches", total=10)
    assert "Match 0" in embed.description
    assert embed.fields[0].value == "Showing latest 3 of 10 matches"

    empty = build_match_list_embed([], "All Matches", total=0)
    assert empty.description == "No matches found."
    assert not empty.fields


def test_registry_error_embeds():
    denied = ErrorEmbeds.registry_error(UnauthorizedError(42))
    assert denied.title == "Permission Denied"

    rejected = ErrorEmbeds.registry_error(InvalidWinnerError(5, 2))
    assert rejected.title == "Request Rejected"
    assert rejected.description == "❌ Winner must be between 0 and 1."
