"""Error types raised by bindable_assertions.

Two kinds of failures exist:

- usage errors (``InvalidArgumentError``) mean the test itself is set up
  incorrectly, independent of how the subject behaves;
- assertion failures (``PropertyAssertionError``) mean the subject's observed
  behavior deviates from the notification protocol.
"""


class BindableAssertionsError(Exception):
    """Base class for errors that are not assertion failures."""


class InvalidArgumentError(BindableAssertionsError, ValueError):
    """Raised when a verification is called with malformed arguments."""

    def __init__(self, message: str, parameter_name: str | None = None) -> None:
        """Initialize the error.

        Parameters
        ----------
        message : str
            Description of the problem
        parameter_name : str, optional
            Name of the offending parameter
        """
        super().__init__(message)
        self.parameter_name = parameter_name


class ConfigFileError(BindableAssertionsError):
    """Raised when a configuration file cannot be read or parsed."""


class PropertyAssertionError(AssertionError):
    """Raised when a subject violates a notification protocol."""

    def __init__(
        self,
        message: str,
        property_name: str | None = None,
        expectation: str | None = None,
    ) -> None:
        """Initialize the error.

        Parameters
        ----------
        message : str
            Full failure message
        property_name : str, optional
            Property under verification
        expectation : str, optional
            Short description of the violated expectation
        """
        super().__init__(message)
        self.property_name = property_name
        self.expectation = expectation
