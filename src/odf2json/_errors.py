"""Exception hierarchy for ODF-to-JSON conversion."""


class ConversionError(Exception):
    """Base exception for ODF-to-JSON conversion errors.

    Provides dual messaging: a short user-facing message and
    internal details (file, line number) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidFormatError(ConversionError):
    """Raised when a section header cannot be delimited (``[`` without ``]``)."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        file_name: str = "",
        line_number: int = 0,
        line: str = "",
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.file_name = file_name
        self.line_number = line_number
        self.line = line


class EmitterStateError(ConversionError):
    """Raised when JSON emitter operations are called out of order."""


class DiscoveryError(ConversionError):
    """Raised when a search root for ODF files cannot be used."""


# User-facing error message constants
ERR_MSG_INVALID_SECTION = "ODF section has an invalid format"
ERR_MSG_INVALID_KEY_VALUE = "invalid key/value length; some values in this ODF JSON may be malformed"
ERR_MSG_EMITTER_STATE = "JSON emitter used out of order"
ERR_MSG_DISCOVERY_FAILED = "unable to search for ODF files"
