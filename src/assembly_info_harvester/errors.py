from pathlib import Path


class HarvesterError(Exception):
    """A base exception for the harvester."""

    msg: str

    def __init__(self, msg: str):
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class MissingRequiredOptionError(HarvesterError):
    """An exception for when a required command-line option is absent or empty."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"[{option}] - attribute not specified")


class InvalidVersionFormatError(HarvesterError):
    """An exception for when a value is not a four-part version number."""

    def __init__(self, value: str, option: str | None = None):
        self.value = value
        self.option = option
        if option is None:
            super().__init__(f"{value} is not a valid version number")
        else:
            super().__init__(f"[{option}] - {value} is not a valid version number")

    def for_option(self, option: str) -> "InvalidVersionFormatError":
        return InvalidVersionFormatError(self.value, option=option)


class HarvestDirectoryNotFoundError(HarvesterError):
    """An exception for when the directory to harvest does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Directory {path} does not exist")


class HarvestFileError(HarvesterError):
    """An exception for when a matched file cannot be read or written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Unable to update {path}: {reason}")
