from __future__ import annotations

import pytest

from core.support.parameters import Parameter, ParameterSet, placeholder_token
from core.utils.errors import MalformedParameterError


def test_parse_single_parameter_builds_token() -> None:
    result = ParameterSet.parse(["REASON=disk-pressure"])

    assert list(result) == [Parameter(name="REASON", value="disk-pressure")]
    assert result.parameters[0].token == "${REASON}"


def test_parse_preserves_order_and_duplicates() -> None:
    result = ParameterSet.parse(["B=2", "A=1", "B=3"])

    assert result.names() == ["B", "A", "B"]
    assert [parameter.value for parameter in result] == ["2", "1", "3"]
    assert len(result) == 3


def test_parse_splits_on_first_separator_only() -> None:
    result = ParameterSet.parse(["QUERY=a=b"])

    assert result.parameters[0].name == "QUERY"
    assert result.parameters[0].value == "a=b"


def test_parse_empty_sequence_returns_empty_set() -> None:
    assert len(ParameterSet.parse([])) == 0


@pytest.mark.parametrize("raw", ["NOSEPARATOR", "=value", "NAME=", "="])
def test_parse_rejects_malformed_entries(raw: str) -> None:
    with pytest.raises(MalformedParameterError) as exc_info:
        ParameterSet.parse(["GOOD=1", raw])

    assert exc_info.value.raw == raw
    assert "-p FOO=BAR" in str(exc_info.value)


def test_placeholder_token_wraps_name() -> None:
    assert placeholder_token("CLUSTER_NAME") == "${CLUSTER_NAME}"
