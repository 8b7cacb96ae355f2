from __future__ import annotations

from docker_mcp.server import TOOL_HANDLERS, list_operations

EXPECTED_TOOLS = [
    "docker_ps",
    "docker_ps_all",
    "docker_port",
    "docker_logs",
    "docker_inspect",
    "docker_stats",
    "docker_images",
    "docker_delete",
]


def _schemas(handlers) -> dict:
    return {tool.name: tool.inputSchema for tool in list_operations(handlers)}


def test_list_operations_advertises_each_tool_once(handlers) -> None:
    names = [tool.name for tool in list_operations(handlers)]

    assert names == EXPECTED_TOOLS


def test_list_operations_is_stable_across_calls(handlers) -> None:
    first = [tool.model_dump() for tool in list_operations(handlers)]
    second = [tool.model_dump() for tool in list_operations(handlers)]

    assert first == second


def test_default_registry_matches_handler_table() -> None:
    assert [tool.name for tool in list_operations()] == list(TOOL_HANDLERS)
    assert list(TOOL_HANDLERS) == EXPECTED_TOOLS


def test_tools_without_parameters_have_empty_schema(handlers) -> None:
    schemas = _schemas(handlers)

    for name in ("docker_ps", "docker_ps_all", "docker_images"):
        assert schemas[name]["type"] == "object"
        assert schemas[name]["properties"] == {}
        assert not schemas[name].get("required")


def test_container_tools_require_container(handlers) -> None:
    schemas = _schemas(handlers)

    for name in ("docker_port", "docker_inspect", "docker_logs", "docker_delete"):
        assert schemas[name]["properties"]["container"]["type"] == "string"
        assert schemas[name]["required"] == ["container"]


def test_optional_parameters_advertise_defaults(handlers) -> None:
    schemas = _schemas(handlers)

    tail = schemas["docker_logs"]["properties"]["tail"]
    assert tail["type"] == "integer"
    assert tail["default"] == 100

    no_stream = schemas["docker_stats"]["properties"]["no_stream"]
    assert no_stream["type"] == "boolean"
    assert no_stream["default"] is True
    assert not schemas["docker_stats"].get("required")

    force = schemas["docker_delete"]["properties"]["force"]
    assert force["type"] == "boolean"
    assert force["default"] is False


def test_descriptions_are_present(handlers) -> None:
    for tool in list_operations(handlers):
        assert tool.description
