from pathlib import Path

import pytest
from pydantic import ValidationError

from assembly_info_harvester.errors import InvalidVersionFormatError
from assembly_info_harvester.models import HarvestConfig, Version


@pytest.mark.parametrize("value", ["0.0.0.0", "1.2.3.4", "10.20.300.4000", "2147483647.0.0.1"])
def test_version_round_trip(value: str):
    assert str(Version.parse(value)) == value


def test_version_components():
    version = Version.parse("2.3.4.5")

    assert (version.major, version.minor, version.build, version.revision) == (2, 3, 4, 5)


def test_version_surrounding_whitespace():
    assert str(Version.parse("  2.3.4.5 ")) == "2.3.4.5"


def test_version_leading_zeros_are_canonicalized():
    assert str(Version.parse("01.002.3.04")) == "1.2.3.4"


@pytest.mark.parametrize(
    "value",
    [
        "",
        "1",
        "1.2",
        "1.2.3",
        "1.2.3.4.5",
        "1.2.3.a",
        "-1.2.3.4",
        "1.2..4",
        "1.2.3.4.",
        "v1.2.3.4",
        "2147483648.0.0.0",
        "99999999999.0.0.0",
        "1" * 5000 + ".0.0.0",
    ],
)
def test_version_rejects_malformed(value: str):
    with pytest.raises(InvalidVersionFormatError) as exc_info:
        Version.parse(value)

    assert str(exc_info.value) == f"{value} is not a valid version number"


def test_version_is_frozen():
    version = Version.parse("1.2.3.4")

    with pytest.raises(ValidationError):
        version.major = 5  # pyright: ignore[reportAttributeAccessIssue]


def test_config_requires_a_pattern():
    with pytest.raises(ValidationError):
        HarvestConfig(version=Version.parse("1.2.3.4"), patterns=(), root=Path("/tmp"))
