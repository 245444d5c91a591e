# filename: errors.py


class HuffmanError(Exception):
    """Base class for failures reported to the user."""


class SourceUnreadableError(HuffmanError):
    pass


class EmptySourceError(HuffmanError):
    pass


class OutputUnwritableError(HuffmanError):
    pass
