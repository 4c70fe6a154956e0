"""Batch normalization runner.

Applies a Normalizer to a collection of raw records. A hard failure on
one item is recorded with its index and payload and never aborts the
batch.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

import structlog

from cataloghub.core.exceptions import NormalizationError
from cataloghub.normalization.coercion import to_array
from cataloghub.normalization.schema import CanonicalItem

if TYPE_CHECKING:
    from cataloghub.normalization.normalizer import NormalizeOptions, Normalizer

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class BatchError:
    """A raw item that failed normalization."""

    index: int
    error: str
    raw: Any

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, "error": self.error, "raw": self.raw}


@dataclass
class BatchResult:
    """Surviving items and per-index failures of a batch."""

    items: list[CanonicalItem] = field(default_factory=list)
    errors: list[BatchError] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.items) + len(self.errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "errors": [error.to_dict() for error in self.errors],
        }


def normalize_many(
    normalizer: "Normalizer",
    raw_items: Any,
    options: Optional["NormalizeOptions"] = None,
) -> BatchResult:
    """Normalize every raw item independently.

    Args:
        normalizer: Normalizer for the provider the items came from.
        raw_items: List of raw payloads (a single payload or None is accepted).
        options: Per-call normalization options.

    Returns:
        BatchResult with surviving items in input order and one BatchError
        per failed index.
    """
    result = BatchResult()
    raw_list = to_array(raw_items)

    for index, raw in enumerate(raw_list):
        try:
            result.items.append(normalizer.normalize(raw, options))
        except NormalizationError as e:
            result.errors.append(BatchError(index=index, error=e.message, raw=raw))
        except Exception as e:
            logger.warning(
                "item_normalization_failed",
                source=normalizer.source,
                index=index,
                error=str(e),
                error_type=type(e).__name__,
            )
            result.errors.append(BatchError(index=index, error=str(e), raw=raw))

    if result.errors:
        logger.warning(
            "batch_normalization_partial",
            source=normalizer.source,
            failed=len(result.errors),
            total=len(raw_list),
        )

    return result
