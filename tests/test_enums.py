"""Domain enum tests: member values, string equality, and member counts."""

from __future__ import annotations

import pytest

from greetbridge.domain.enums import OutputFormat, WireFormat

# ======================== OutputFormat ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (OutputFormat.HUMAN, "human"),
        (OutputFormat.JSON, "json"),
    ],
)
def test_output_format_members_equal_their_strings(member: OutputFormat, expected_value: str) -> None:
    assert member.value == expected_value
    assert member == expected_value


@pytest.mark.os_agnostic
def test_output_format_member_count() -> None:
    assert len(OutputFormat) == 2


# ======================== WireFormat ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("text", WireFormat.TEXT),
        ("json", WireFormat.JSON),
    ],
)
def test_wire_format_is_built_from_its_value(raw: str, expected: WireFormat) -> None:
    assert WireFormat(raw) is expected


@pytest.mark.os_agnostic
def test_wire_format_rejects_unknown_values() -> None:
    with pytest.raises(ValueError):
        WireFormat("xml")


@pytest.mark.os_agnostic
def test_wire_format_member_count() -> None:
    assert len(WireFormat) == 2
