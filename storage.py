# storage.py
# Uploaded resumes are never written to disk. Each scored batch registers the
# resume bytes here and gets back a short-lived link, which the results page
# uses for the download buttons. Links must be revoked once the batch is
# replaced, otherwise the bytes of every earlier upload stay in the session.
import logging
import uuid

from errors import UnknownLinkError

logger = logging.getLogger(__name__)

LINK_PREFIX = "blob:"


class LinkStore:
    def __init__(self):
        self._blobs = {}

    def __len__(self):
        return len(self._blobs)

    def __contains__(self, link):
        return link in self._blobs

    def create(self, name: str, data: bytes) -> str:
        link = LINK_PREFIX + uuid.uuid4().hex
        self._blobs[link] = (name, bytes(data))
        logger.debug("Created link %s for %s", link, name)
        return link

    def read(self, link: str) -> bytes:
        return self._get(link)[1]

    def name_of(self, link: str) -> str:
        return self._get(link)[0]

    def revoke(self, link: str):
        """Release a link. Revoking twice is a no-op."""
        if self._blobs.pop(link, None) is not None:
            logger.debug("Revoked link %s", link)

    def revoke_all(self, links):
        for link in list(links):
            self.revoke(link)

    def _get(self, link):
        try:
            return self._blobs[link]
        except KeyError:
            raise UnknownLinkError(f"Unknown or revoked link: {link}") from None
