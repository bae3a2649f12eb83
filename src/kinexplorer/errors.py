"""Exceptions raised by kinexplorer."""


class KinExplorerError(Exception):
    """Base class for kinexplorer errors."""


class InvalidParameterError(KinExplorerError, ValueError):
    """Raised when reaction parameters are outside the model's domain."""
