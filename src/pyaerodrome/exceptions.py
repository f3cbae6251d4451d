"""Custom Exceptions."""


class MetarDecodeError(Exception):
    """A mandatory METAR group is missing or malformed.

    The whole report is unusable when this is raised, no partial record is
    returned.  The offending report is kept on the ``text`` attribute.
    """

    def __init__(self, msg, text=None):
        """constructor"""
        self.text = text
        if text is not None:
            msg = f"{msg}: '{text.strip()}'"
        super().__init__(msg)


class UnitsError(Exception):
    """Exception for bad Units."""
