"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ConversionError(DomainException):
    """User-entered text is not a valid integer literal"""

    pass


class ActorCallError(DomainException):
    """A call to the backend actor failed"""

    pass


class ArgumentEncodingError(ActorCallError):
    """An argument does not fit the wire type declared for it"""

    pass


class ActorRejectError(ActorCallError):
    """The backend rejected the call"""

    def __init__(self, message: str, reject_code: int | None = None):
        super().__init__(message)
        self.reject_code = reject_code


class CallResultError(ActorCallError):
    """The method replied with an Err variant"""

    pass


class ActorTransportError(ActorCallError):
    """Backend unreachable, HTTP error, or malformed response"""

    pass
