class ChromasyncError(Exception):
    """Base class for errors raised by chromasync."""


class HueNotFoundError(ChromasyncError, KeyError):
    """Raised when a hue name is not present in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No hue registered under the name {name!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class ColorParseError(ChromasyncError, ValueError):
    """Raised when a color string cannot be parsed."""

    def __init__(self, text: object, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse color {text!r}: {reason}")
