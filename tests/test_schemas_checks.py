"""Tests for check run and check suite records."""

import pytest
from pydantic import ValidationError

from github_manager.schemas import (
    AnnotationLevel,
    CheckConclusion,
    CheckRun,
    CheckRunAnnotation,
    CheckRunsList,
    CheckStatus,
    CheckSuite,
    CheckSuitesList,
    CheckSuitesPreferences,
)
from tests.fixtures.github_responses import GITHUB_CHECK_RUN_RESPONSE, GITHUB_CHECK_SUITE_RESPONSE


class TestCheckRun:
    """Check runs and their nested records."""

    def test_check_run(self):
        run = CheckRun.from_json(GITHUB_CHECK_RUN_RESPONSE)

        assert run.id == 4
        assert run.name == "mighty_readme"
        assert run.status is CheckStatus.COMPLETED
        assert run.conclusion is CheckConclusion.NEUTRAL
        assert run.started_at_timestamp == 1525396492000

    def test_nested_output(self):
        run = CheckRun.from_json(GITHUB_CHECK_RUN_RESPONSE)

        assert run.output is not None
        assert run.output.title == "Mighty Readme report"
        assert run.output.annotations_count == 2

    def test_nested_app_suite_and_pull_requests(self):
        run = CheckRun.from_json(GITHUB_CHECK_RUN_RESPONSE)

        assert run.check_suite is not None and run.check_suite.id == 5
        assert run.app is not None and run.app.slug == "octoapp"
        assert run.app.events == ["push", "pull_request"]
        assert len(run.pull_requests) == 1
        pull = run.pull_requests[0]
        assert pull.number == 3956
        assert pull.head is not None and pull.head.ref == "say-hello"
        assert pull.base is not None and pull.base.repo is not None
        assert pull.base.repo.name == "hello-world"

    def test_absent_output_is_none(self):
        run = CheckRun.from_json({"id": 1, "status": "queued"})

        assert run.output is None
        assert run.conclusion is None
        assert run.pull_requests == []

    def test_unknown_status_raises(self):
        """Check status is strict."""
        with pytest.raises(ValidationError):
            CheckRun.from_json({"id": 1, "status": "exploded"})

    def test_unknown_conclusion_is_lenient(self):
        run = CheckRun.from_json({"id": 1, "status": "completed", "conclusion": "mystery"})
        assert run.conclusion is None

    def test_check_runs_list(self):
        runs = CheckRunsList.from_json({"total_count": 1, "check_runs": [GITHUB_CHECK_RUN_RESPONSE]})

        assert runs.total_count == 1
        assert runs.check_runs[0].id == 4

    def test_annotation(self):
        annotation = CheckRunAnnotation.from_json(
            {
                "path": "README.md",
                "start_line": 2,
                "end_line": 2,
                "annotation_level": "warning",
                "title": "Spell Checker",
                "message": "Check your spelling for 'banaas'.",
            }
        )

        assert annotation.annotation_level is AnnotationLevel.WARNING
        assert annotation.start_line == 2
        assert annotation.start_column == 0


class TestCheckSuite:
    """Check suites and preferences."""

    def test_check_suite(self):
        suite = CheckSuite.from_json(GITHUB_CHECK_SUITE_RESPONSE)

        assert suite.id == 5
        assert suite.status is CheckStatus.COMPLETED
        assert suite.rerequestable is True
        assert suite.head_commit is not None
        assert suite.head_commit.author is not None
        assert suite.head_commit.author.email == "octocat@nowhere.com"
        assert suite.repository is not None and suite.repository.name == "Hello-World"

    def test_check_suites_list(self):
        suites = CheckSuitesList.from_json(
            {"total_count": 1, "check_suites": [GITHUB_CHECK_SUITE_RESPONSE]}
        )
        assert [suite.head_branch for suite in suites] == ["master"]

    def test_preferences(self):
        preferences = CheckSuitesPreferences.from_json(
            {
                "preferences": {"auto_trigger_checks": [{"app_id": 2, "setting": True}]},
                "repository": {"id": 1296269, "name": "Hello-World"},
            }
        )

        assert preferences.preferences is not None
        checks = preferences.preferences.auto_trigger_checks
        assert [(check.app_id, check.setting) for check in checks] == [(2, True)]
