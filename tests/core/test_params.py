"""Tests for the Params container."""

from github_manager.core.params import Params
from github_manager.schemas import Visibility, WorkflowRunStatus


class TestParams:
    """Query string and payload rendering."""

    def test_insertion_order_kept(self):
        params = Params(per_page=50).add("page", 2).add("status", "queued")

        assert params.as_pairs() == [("per_page", "50"), ("page", "2"), ("status", "queued")]
        assert params.to_query_string() == "?per_page=50&page=2&status=queued"

    def test_empty_query_string(self):
        assert Params().to_query_string() == ""
        assert Params(page=None).to_query_string() == ""

    def test_none_values_skipped(self):
        params = Params(name=None, per_page=10)

        assert params.as_pairs() == [("per_page", "10")]
        assert params.to_payload() == {"per_page": 10}

    def test_query_value_rendering(self):
        """Booleans, enums and sequences render the way GitHub expects."""
        params = Params(
            exclude_pull_requests=True,
            status=WorkflowRunStatus.IN_PROGRESS,
            exclude=["repositories", "metadata"],
        )

        assert params.as_pairs() == [
            ("exclude_pull_requests", "true"),
            ("status", "in_progress"),
            ("exclude", "repositories,metadata"),
        ]

    def test_query_string_is_encoded(self):
        assert Params(name="my artifact").to_query_string() == "?name=my+artifact"

    def test_payload_keeps_json_types(self):
        params = Params(
            visibility=Visibility.SELECTED,
            selected_repository_ids=[1, 2],
            config=Params(url="https://example.com", secret=None),
            active=False,
        )

        assert params.to_payload() == {
            "visibility": "selected",
            "selected_repository_ids": [1, 2],
            "config": {"url": "https://example.com"},
            "active": False,
        }

    def test_of_merges(self):
        base = Params(per_page=100)
        merged = Params.of(base, status="completed", page=None)

        assert merged == {"per_page": 100, "status": "completed", "page": None}
        assert merged is not base
        assert merged.as_pairs() == [("per_page", "100"), ("status", "completed")]

    def test_of_none(self):
        assert Params.of(None) == {}

    def test_add_all(self):
        params = Params(a=1).add_all({"b": 2}).add_all(None)
        assert list(params) == ["a", "b"]
