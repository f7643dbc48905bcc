import pytest

from tools.registry import HANDLERS, TOOLS, get_descriptor, get_handler, tool_names

EXPECTED_PARAMETERS = {
    "list_accounts": ([], []),
    "list_projects": (["account_prefix"], []),
    "get_market_share": (["account_prefix", "project_number", "source", "q", "device"], ["project_number"]),
    "get_market_overview": (["account_prefix", "project_number", "q", "device"], ["project_number"]),
    "get_rankings": (
        [
            "account_prefix", "project_number", "search_term", "location", "device",
            "company", "date_from", "date_to", "limit",
        ],
        ["project_number"],
    ),
    "get_pricing": (["account_prefix", "project_number", "search_term", "company", "device"], ["project_number"]),
    "get_search_terms": (["account_prefix", "project_number"], ["project_number"]),
    "get_title_analysis": (["account_prefix", "project_number"], ["project_number"]),
    "get_google_ads": (["account_prefix", "project_number", "search_term"], ["project_number"]),
    "get_scraping_stats": ([], []),
}


def test_registry_order_and_names():
    assert tool_names() == list(EXPECTED_PARAMETERS)
    assert len(TOOLS) == 10


@pytest.mark.parametrize("name", list(EXPECTED_PARAMETERS))
def test_descriptor_parameters(name):
    parameters, required = EXPECTED_PARAMETERS[name]
    descriptor = get_descriptor(name)
    assert descriptor.parameters == parameters
    assert descriptor.required == required
    assert descriptor.input_schema["type"] == "object"
    assert descriptor.description


def test_device_enum():
    for tool in TOOLS:
        device = tool.input_schema["properties"].get("device")
        if device is not None:
            assert device["enum"] == ["desktop", "mobile"]


def test_every_descriptor_has_a_handler():
    assert set(HANDLERS) == set(tool_names())
    assert get_handler("get_pricing") is HANDLERS["get_pricing"]


def test_unknown_names_raise_key_error():
    with pytest.raises(KeyError):
        get_descriptor("nope")
    with pytest.raises(KeyError):
        get_handler("nope")


def test_numeric_parameters_are_integers():
    rankings = get_descriptor("get_rankings").input_schema["properties"]
    assert rankings["project_number"]["type"] == "integer"
    assert rankings["limit"]["type"] == "integer"
