"""Tests for the exclusions module."""

import pytest

from secret_santa.exclusions import (
    DuplicateParticipantError,
    build_exclusion_index,
    validate_participants,
)
from secret_santa.types import Exclusion


class TestBuildExclusionIndex:
    def test_every_participant_has_an_entry(self):
        index = build_exclusion_index(["A", "B", "C"], [])
        assert index == {"A": set(), "B": set(), "C": set()}

    def test_exclusions_are_added_per_giver(self):
        index = build_exclusion_index(
            ["A", "B", "C"],
            [Exclusion("A", "B"), Exclusion("A", "C"), Exclusion("C", "A")],
        )
        assert index["A"] == {"B", "C"}
        assert index["B"] == set()
        assert index["C"] == {"A"}

    def test_accepts_plain_tuples(self):
        index = build_exclusion_index(["A", "B"], [("A", "B")])
        assert index["A"] == {"B"}

    def test_duplicate_rules_collapse(self):
        index = build_exclusion_index(["A", "B"], [("A", "B"), ("A", "B")])
        assert index["A"] == {"B"}

    def test_unknown_giver_is_ignored(self):
        index = build_exclusion_index(["A", "B"], [("Zed", "A")])
        assert "Zed" not in index
        assert index == {"A": set(), "B": set()}

    def test_unknown_receiver_is_kept(self):
        index = build_exclusion_index(["A", "B"], [("A", "Zed")])
        assert index["A"] == {"Zed"}

    def test_unknown_receiver_logs_warning(self, caplog):
        build_exclusion_index(["A", "B"], [("A", "Zed")])
        assert "unknown receiver" in caplog.text

    def test_empty_participants(self):
        assert build_exclusion_index([], [("A", "B")]) == {}

    def test_does_not_mutate_inputs(self):
        participants = ["A", "B"]
        exclusions = [("A", "B")]
        build_exclusion_index(participants, exclusions)
        assert participants == ["A", "B"]
        assert exclusions == [("A", "B")]


class TestValidateParticipants:
    def test_unique_participants_pass(self):
        validate_participants(["A", "B", "C"])

    def test_empty_list_passes(self):
        validate_participants([])

    def test_duplicates_raise(self):
        with pytest.raises(DuplicateParticipantError, match="Duplicate participants: A"):
            validate_participants(["A", "B", "A"])

    def test_all_duplicates_listed(self):
        with pytest.raises(DuplicateParticipantError, match="A, B"):
            validate_participants(["B", "A", "B", "A", "C"])

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_participants(["A", "A"])
