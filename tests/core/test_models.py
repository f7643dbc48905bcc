from core.models import RowSet, ToolDescriptor, ToolResult


class TestRowSet:
    """Candidate keys are probed in order; the first list value wins."""

    def test_first_present_key_wins(self):
        payload = {"data": [{"a": 1}], "pricing_data": [{"b": 2}]}
        rowset = RowSet.from_payload(payload, ("data", "pricing_data"))
        assert rowset.rows == [{"a": 1}]

    def test_falls_back_to_later_key(self):
        payload = {"pricing_data": [{"b": 2}]}
        rowset = RowSet.from_payload(payload, ("data", "pricing_data"))
        assert rowset.rows == [{"b": 2}]
        assert rowset.total_results == 1

    def test_empty_list_under_first_key_still_wins(self):
        payload = {"data": [], "results": [{"x": 1}]}
        assert RowSet.from_payload(payload, ("data", "results")).rows == []

    def test_non_list_values_are_skipped(self):
        payload = {"data": None, "results": [{"x": 1}]}
        assert RowSet.from_payload(payload, ("data", "results")).rows == [{"x": 1}]

    def test_metadata(self):
        payload = {
            "data": [{}],
            "filters_applied": {"q": "leggings", "device": None},
            "total_results": 120,
            "message": "partial",
        }
        rowset = RowSet.from_payload(payload, ("data",))
        assert rowset.total_results == 120
        assert rowset.message == "partial"
        assert rowset.filter_description() == "q=leggings"

    def test_list_payload(self):
        rowset = RowSet.from_payload(["leggings", "yoga pants"], ("data",))
        assert len(rowset) == 2

    def test_unexpected_payload(self):
        rowset = RowSet.from_payload("oops", ("data",))
        assert rowset.rows == []


def test_tool_result_serialization():
    ok = ToolResult.text("hello")
    assert ok.to_dict() == {"content": [{"type": "text", "text": "hello"}]}

    failed = ToolResult.error("Error: boom")
    assert failed.to_dict() == {"content": [{"type": "text", "text": "Error: boom"}], "isError": True}
    assert failed.joined_text == "Error: boom"


def test_tool_descriptor_accessors():
    descriptor = ToolDescriptor(
        name="t",
        description="d",
        input_schema={"type": "object", "properties": {"a": {}, "b": {}}, "required": ["a"]},
    )
    assert descriptor.parameters == ["a", "b"]
    assert descriptor.required == ["a"]
