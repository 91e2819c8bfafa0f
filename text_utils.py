# text_utils.py
# File-name tokenizing. Only the name is used, the file content is never read.
import re

_PDF_SUFFIX = re.compile(r"\.pdf\Z", re.IGNORECASE)
_SEPARATORS = re.compile(r"[\s\-_.]+")


def clean_name(file_name: str) -> str:
    """Drop a trailing .pdf (any case) and lowercase what is left."""
    return _PDF_SUFFIX.sub("", file_name).lower()


def tokenize(file_name: str) -> list:
    """
    Split a file name into lowercase keyword tokens.

    "Backend-Engineer_Resume.PDF" -> ["backend", "engineer", "resume"]

    Leading or trailing separators leave an empty token at that end,
    e.g. "_cv.pdf" -> ["", "cv"]. They are kept as-is.
    """
    return _SEPARATORS.split(clean_name(file_name))
