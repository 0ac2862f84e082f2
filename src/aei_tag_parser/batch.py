"""Decode a sequence of tag strings, one result per input, in input order."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import TagDecodeError
from .tag import AEITagData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    """Outcome for one input: either data or error is set."""

    tag: str
    data: AEITagData | None = None
    error: TagDecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def decode_one(tag: str) -> DecodeResult:
    try:
        return DecodeResult(tag=tag, data=AEITagData.from_hex(tag))
    except TagDecodeError as e:
        return DecodeResult(tag=tag, error=e)


def decode_many(tags: Iterable[str]) -> list[DecodeResult]:
    """
    Decode every tag independently. A malformed tag yields a result with error
    set and never stops the rest of the batch.
    """
    results = [decode_one(tag) for tag in tags]
    failed = sum(1 for r in results if not r.ok)
    logger.debug("Decoded %d tags (%d failed)", len(results), failed)
    return results
