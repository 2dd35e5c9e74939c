# querykit/query/exceptions.py
"""Errors raised by the query builder."""


class InvalidArgumentError(ValueError):
    """Raised when a required argument is absent (``None``)."""

    def __init__(self, name: str):
        super().__init__(f"Argument '{name}' must not be None")
        self.name = name
