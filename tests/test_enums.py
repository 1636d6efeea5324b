"""Tests for enum coercion."""

from typing import Annotated

import pytest
from pydantic import BaseModel, ValidationError

from github_manager.schemas import (
    CheckStatus,
    MigrationState,
    ReactionContent,
    RunnerLabelType,
    UnknownEnumValueError,
    Visibility,
    WorkflowRunStatus,
    lenient_enum,
    strict_enum,
)


class TestParse:
    """Tests for GitHubEnum.parse."""

    def test_exact_value(self):
        assert MigrationState.parse("exported") is MigrationState.EXPORTED
        assert WorkflowRunStatus.parse("in_progress") is WorkflowRunStatus.IN_PROGRESS

    def test_member_passes_through(self):
        assert CheckStatus.parse(CheckStatus.QUEUED) is CheckStatus.QUEUED

    def test_case_insensitive_name(self):
        """Member names match regardless of case."""
        assert CheckStatus.parse("IN_PROGRESS") is CheckStatus.IN_PROGRESS
        assert Visibility.parse("Selected") is Visibility.SELECTED

    def test_hyphenated_value(self):
        """Values containing hyphens parse by value and by name."""
        assert RunnerLabelType.parse("read-only") is RunnerLabelType.READ_ONLY
        assert RunnerLabelType.parse("READ_ONLY") is RunnerLabelType.READ_ONLY

    def test_unknown_value_raises(self):
        with pytest.raises(UnknownEnumValueError) as exc_info:
            MigrationState.parse("bogus")

        assert exc_info.value.enum_cls is MigrationState
        assert exc_info.value.value == "bogus"
        assert "MigrationState" in str(exc_info.value)

    def test_non_string_raises(self):
        with pytest.raises(UnknownEnumValueError):
            CheckStatus.parse(3)

    def test_unknown_is_a_value_error(self):
        """Unknown values surface as ValueError inside pydantic validation."""
        assert issubclass(UnknownEnumValueError, ValueError)


class TestParseOr:
    """Tests for GitHubEnum.parse_or."""

    def test_known_value(self):
        assert Visibility.parse_or("all", Visibility.PRIVATE) is Visibility.ALL

    def test_unknown_value_returns_default(self):
        assert Visibility.parse_or("everyone", Visibility.PRIVATE) is Visibility.PRIVATE

    def test_missing_value_returns_default(self):
        assert Visibility.parse_or(None) is None
        assert Visibility.parse_or(None, Visibility.ALL) is Visibility.ALL


class TestReactionContent:
    """Reaction content uses "+1" and "-1" as values."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("+1", ReactionContent.PLUS_ONE),
            ("-1", ReactionContent.MINUS_ONE),
            ("plus_one", ReactionContent.PLUS_ONE),
            ("MINUS_ONE", ReactionContent.MINUS_ONE),
            ("heart", ReactionContent.HEART),
            ("rocket", ReactionContent.ROCKET),
        ],
    )
    def test_parse(self, raw: str, expected: ReactionContent):
        assert ReactionContent.parse(raw) is expected

    def test_values_serialize_as_github_sends_them(self):
        assert ReactionContent.PLUS_ONE.value == "+1"
        assert str(ReactionContent.MINUS_ONE) == "-1"

    def test_unknown_reaction_raises(self):
        with pytest.raises(UnknownEnumValueError):
            ReactionContent.parse("thumbs")


class _Holder(BaseModel):
    strict: Annotated[MigrationState | None, strict_enum(MigrationState)] = None
    lenient: Annotated[Visibility | None, lenient_enum(Visibility)] = None
    labelled: Annotated[
        RunnerLabelType, lenient_enum(RunnerLabelType, RunnerLabelType.READ_ONLY)
    ] = RunnerLabelType.READ_ONLY


class TestFieldPolicies:
    """strict_enum and lenient_enum as pydantic field validators."""

    def test_strict_accepts_known(self):
        assert _Holder(strict="exported").strict is MigrationState.EXPORTED

    def test_strict_rejects_unknown(self):
        with pytest.raises(ValidationError):
            _Holder(strict="bogus")

    def test_lenient_unknown_becomes_default(self):
        assert _Holder(lenient="everyone").lenient is None

    def test_lenient_with_explicit_default(self):
        assert _Holder(labelled="mystery").labelled is RunnerLabelType.READ_ONLY
        assert _Holder(labelled="custom").labelled is RunnerLabelType.CUSTOM
