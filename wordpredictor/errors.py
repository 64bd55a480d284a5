"""Exceptions raised by the word predictor."""


class InvalidArgument(TypeError):
    """A word, prefix or word iterable was None or not a string."""
