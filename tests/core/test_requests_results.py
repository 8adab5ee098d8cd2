"""
Request / result value objects and DataPipelineError.
"""

import dataclasses
import uuid

import pytest

from core.exceptions import DataPipelineError
from core.requests import (
    DEFAULT_PAGE_SIZE,
    CommandRequest,
    FilterDefinition,
    ItemQueryRequest,
    ListQueryRequest,
)
from core.results import CommandResult, ItemQueryResult, ListQueryResult


class TestRequests:

    def test_list_request_defaults(self):
        request = ListQueryRequest()
        assert request.start_index == 0
        assert request.page_size == DEFAULT_PAGE_SIZE == 1000
        assert request.sort_field is None
        assert request.sort_descending is False
        assert request.filters == ()

    def test_list_request_filters_become_tuple(self):
        request = ListQueryRequest(filters=[FilterDefinition("BySummary", "Hot")])
        assert isinstance(request.filters, tuple)
        assert request.filters[0].filter_data == "Hot"

    def test_requests_are_immutable(self):
        request = ItemQueryRequest(uid=uuid.uuid4())
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.uid = uuid.uuid4()

    def test_requests_compare_by_value(self):
        uid = uuid.uuid4()
        assert ItemQueryRequest(uid) == ItemQueryRequest(uid)
        assert CommandRequest(item="x") == CommandRequest(item="x")


class TestResults:

    def test_list_success(self):
        result = ListQueryResult.success(("a", "b"), 10)
        assert result.successful is True
        assert result.items == ["a", "b"]
        assert result.total_count == 10

    def test_list_failure_is_empty(self):
        result = ListQueryResult.failure("boom")
        assert result.successful is False
        assert result.items == []
        assert result.total_count == 0
        assert result.message == "boom"

    def test_item_failure_has_no_item(self):
        result = ItemQueryResult.failure("No record retrieved")
        assert result.item is None
        assert result.successful is False

    def test_command_results(self):
        assert CommandResult.success("Record Saved") == CommandResult(True, "Record Saved")
        assert CommandResult.failure("nope").successful is False


class TestDataPipelineError:

    def test_message_with_source(self):
        error = DataPipelineError("No ListQueryRequest defined", source="ListRequestBaseServerHandler")
        assert str(error) == "No ListQueryRequest defined in ListRequestBaseServerHandler"
        assert error.source == "ListRequestBaseServerHandler"

    def test_message_without_source(self):
        assert str(DataPipelineError("bad")) == "bad"
