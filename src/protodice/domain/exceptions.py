class DiceError(Exception):
    """Base class for errors raised by the dice domain."""


class InvalidConfiguration(DiceError, ValueError):
    """Raised when a die or source is built with values it cannot work with."""


class SourceContractViolation(DiceError):
    """Raised when a RandomSource returns a value outside [1, 10]."""

    def __init__(self, value: int, source_name: str) -> None:
        self.value = value
        self.source_name = source_name
        super().__init__(f"{source_name} returned {value}, outside the range [1, 10]")
