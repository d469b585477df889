"""SHA1 hash adapter."""

import hashlib

from ..ports.hash import HashPort


class Sha1Adapter(HashPort):
    """SHA1 implementation of HashPort.

    SHA1 gives 160 bits, rendered as 40 hex characters. It is used for path
    distribution and collision resistance between cache keys, not for
    authentication.
    """

    @property
    def hex_width(self) -> int:
        return hashlib.sha1().digest_size * 2

    def digest(self, data: str) -> str:
        return hashlib.sha1(data.encode("utf-8")).hexdigest()
