"""Error taxonomy for the analyze/verdict pipeline.

Every error is terminal for the request that raised it; the API layer maps
each class to a status code and an error envelope.
"""


class VerdictError(Exception):
    """Base class for pipeline failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(VerdictError):
    """Required input is missing, empty or inconsistent."""


class UnknownPersona(InvalidInput):
    """No persona is registered under the requested name."""


class UpstreamFailure(VerdictError):
    """The model endpoint could not be reached or reported an error."""


class MalformedResponse(VerdictError):
    """The completion could not be reduced to schema-conforming JSON.

    ``raw_text`` is kept for logging only and must never reach a client.
    """

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text
