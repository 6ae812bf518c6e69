"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class XsTimeError(Exception):
    """Base class for all xstime errors."""


class InvalidValueError(XsTimeError, ValueError):
    """Raised when a value object is constructed with out-of-range components."""

    def __init__(self, kind: str, field: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid {kind} {field}={value!r}: {reason}")
        self.kind = kind
        self.field = field
        self.value = value


# ============================================================================
#                           Lexical (parse) errors
# ============================================================================


class XsdTimeParseError(XsTimeError, ValueError):
    """Raised when text does not match the (lenient) ``xs:time`` grammar.

    ``position`` is a 0-based index into the input after surrounding
    whitespace has been trimmed.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        text: str | None,
        reason: str,
        *,
        field: str | None = None,
        value: str | None = None,
        position: int | None = None,
    ) -> None:
        if field is None:
            message = f"Invalid xs:time {text!r}: {reason}"
        else:
            message = (
                f"Invalid xs:time {text!r}: {field} {value!r} "
                f"at position {position}: {reason}"
            )
        super().__init__(message)
        self.text = text
        self.reason = reason
        self.field = field
        self.value = value
        self.position = position


class EndOfDayError(XsdTimeParseError):
    """Raised when hour 24 is used for anything other than exactly 24:00:00."""

    def __init__(self, text: str, value: str) -> None:
        super().__init__(
            text,
            "hour 24 is only valid as 24:00:00",
            field="hour",
            value=value,
            position=0,
        )


# ============================================================================
#                           Offset resolution errors
# ============================================================================


class UnresolvableOffsetError(XsTimeError):
    """Raised when no UTC offset can be determined for an offset-less value."""


class MissingOffsetError(UnresolvableOffsetError):
    """Raised when the input carries no offset and the caller requires one."""

    def __init__(self, time_of_day: object) -> None:
        super().__init__(f"No UTC offset given for {time_of_day} and none allowed.")
        self.time_of_day = time_of_day
