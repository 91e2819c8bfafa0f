# errors.py


class ResumeRankerError(Exception):
    """Base class for errors raised by the ranking app."""


class MissingInputError(ResumeRankerError):
    """A required upload (job description or resumes) has not been selected."""


class UnknownLinkError(ResumeRankerError, KeyError):
    """The link was never created or has already been revoked."""

    def __str__(self):
        # KeyError repr()s its argument, keep the plain message
        return str(self.args[0]) if self.args else ""
