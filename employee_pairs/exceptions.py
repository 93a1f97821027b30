"""
Exception types raised by employee-pairs.
"""


class EmployeePairsError(Exception):
    """Base class for all employee-pairs errors."""


class InputFileError(EmployeePairsError):
    """The assignment CSV could not be found, read, or parsed."""


class DateParseError(EmployeePairsError, ValueError):
    """A date text does not describe a real date in the requested layout."""

    def __init__(self, text: str, layout: str):
        self.text = text
        self.layout = layout
        super().__init__(f"Cannot parse date '{text}' as {layout}")
