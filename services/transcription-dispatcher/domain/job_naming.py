"""Derivation of transcription job names from object keys."""

import hashlib
import posixpath
import re
from enum import StrEnum

MAX_JOB_NAME_LENGTH = 200
DIGEST_LENGTH = 16

_VALID_JOB_NAME = re.compile(r"^[0-9A-Za-z._-]+$")
_INVALID_CHARS = re.compile(r"[^0-9A-Za-z._-]+")


class JobNameStrategy(StrEnum):
    """How an object key is turned into a job name."""

    LEGACY = "legacy"
    STEM = "stem"
    HASHED = "hashed"


def media_suffix(object_key: str) -> str:
    """Returns the lower-cased text after the last '.' of the key's file name."""
    file_name = posixpath.basename(object_key)
    if "." not in file_name:
        return ""
    return file_name.rsplit(".", 1)[1].lower()


class JobNameBuilder:
    """
    Builds deterministic job names so redelivered notifications map to the
    same job, letting the service's uniqueness constraint reject duplicates.

    ``legacy`` keeps everything before the first '.', which collides for
    ``a.b.wav``/``a.c.wav``. ``stem`` strips only the final extension and
    falls back to a digest of the full key when the stem has to be rewritten.
    ``hashed`` always appends the digest, so ``x.mp3`` and ``x.wav`` differ.
    """

    def __init__(self, strategy: JobNameStrategy = JobNameStrategy.STEM):
        self._strategy = strategy

    @property
    def strategy(self) -> JobNameStrategy:
        return self._strategy

    def build(self, object_key: str) -> str:
        if self._strategy == JobNameStrategy.LEGACY:
            return self._sanitized(object_key.split(".")[0], object_key)

        stem = self._strip_extension(object_key)
        if self._strategy == JobNameStrategy.HASHED:
            return self._with_digest(stem, object_key)
        return self._sanitized(stem, object_key)

    def _strip_extension(self, object_key: str) -> str:
        head, file_name = posixpath.split(object_key)
        if "." in file_name.lstrip("."):
            file_name = file_name.rsplit(".", 1)[0]
        return posixpath.join(head, file_name) if head else file_name

    def _sanitized(self, name: str, object_key: str) -> str:
        if _VALID_JOB_NAME.match(name) and len(name) <= MAX_JOB_NAME_LENGTH:
            return name
        return self._with_digest(name, object_key)

    def _with_digest(self, name: str, object_key: str) -> str:
        digest = hashlib.sha256(object_key.encode("utf-8")).hexdigest()[:DIGEST_LENGTH]
        cleaned = _INVALID_CHARS.sub("-", name).strip("-")
        cleaned = cleaned[: MAX_JOB_NAME_LENGTH - DIGEST_LENGTH - 1]
        if not cleaned:
            return digest
        return f"{cleaned}-{digest}"
