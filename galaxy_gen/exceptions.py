"""Exceptions raised by galaxy generation and display."""


class ParameterError(ValueError):
    """A galaxy parameter is outside its valid domain."""


class DisposalError(RuntimeError):
    """The renderer failed to release a previously attached particle set."""
