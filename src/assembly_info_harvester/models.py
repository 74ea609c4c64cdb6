import re
from pathlib import Path
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from assembly_info_harvester.errors import InvalidVersionFormatError

MAX_COMPONENT = 2_147_483_647

VERSION_PATTERN = re.compile(r"^\s*([0-9]{1,10})\.([0-9]{1,10})\.([0-9]{1,10})\.([0-9]{1,10})\s*$")


class Version(BaseModel):
    """A four-part version number: major.minor.build.revision."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    major: int = Field(ge=0, le=MAX_COMPONENT, description="The major version component.")
    minor: int = Field(ge=0, le=MAX_COMPONENT, description="The minor version component.")
    build: int = Field(ge=0, le=MAX_COMPONENT, description="The build number component.")
    revision: int = Field(ge=0, le=MAX_COMPONENT, description="The revision component.")

    @classmethod
    def parse(cls, value: str) -> Self:
        """Parse a dotted version string.

        Raises:
            InvalidVersionFormatError: If the value does not have exactly four non-negative numeric components
                or a component does not fit in a signed 32-bit integer.
        """
        match = VERSION_PATTERN.match(value)
        if match is None:
            raise InvalidVersionFormatError(value)

        major, minor, build, revision = (int(group) for group in match.groups())

        try:
            return cls(major=major, minor=minor, build=build, revision=revision)
        except ValidationError as e:
            raise InvalidVersionFormatError(value) from e

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}.{self.revision}"


class HarvestConfig(BaseModel):
    """The effective settings for one harvesting run."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    version: Version = Field(description="The value written into AssemblyVersion attributes.")
    file_version: Version | None = Field(default=None, description="The value written into AssemblyFileVersion attributes.")
    patterns: tuple[str, ...] = Field(min_length=1, description="File name globs to search for, in order.")
    root: Path = Field(description="The absolute directory to search from.")
