"""
Batch aggregation for ``POST <resource>/batch``.

A batch request bundles create, update and delete sub-requests in one call.
The server answers each sub-request independently, so individual failures
come back in-band as ``{"id": ..., "error": {...}}`` elements; they are
decoded into failed `BatchItem`s and never raised.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Mapping, Optional, Sequence, Type, TypeVar, Union

from woocommerce_api.domain.models.base import WooModel

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=WooModel)


class BatchOperation(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class BatchOutcomeStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    MISSING = "missing"


@dataclass(frozen=True)
class BatchItemError:
    """In-band error of one batch element (``code``, ``message``, ``data.status``)."""

    code: Optional[str] = None
    message: Optional[str] = None
    status: Optional[int] = None

    @classmethod
    def decode(cls, data: Any) -> "BatchItemError":
        if not isinstance(data, Mapping):
            return cls(message=str(data))
        extra = data.get("data")
        status = extra.get("status") if isinstance(extra, Mapping) else None
        return cls(code=data.get("code"), message=data.get("message"), status=status)


@dataclass(frozen=True)
class BatchItem(Generic[M]):
    """One element of a batch response: either a decoded model or an error."""

    model: Optional[M] = None
    error: Optional[BatchItemError] = None
    resource_id: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _resource_id(entry: Any) -> Any:
    return entry.id if isinstance(entry, WooModel) else entry


def _same_id(left: Any, right: Any) -> bool:
    # the server echoes numeric ids even when the request sent them as text
    return left is not None and right is not None and str(left) == str(right)


@dataclass(frozen=True)
class BatchRequest(Generic[M]):
    """
    Create, update and delete sub-requests of one batch call.

    ``delete`` accepts identifiers or models (their ``id`` is sent).
    """

    create: Sequence[M] = ()
    update: Sequence[M] = ()
    delete: Sequence[Union[int, str, M]] = ()

    def __post_init__(self):
        for model in self.update:
            if model.id is None:
                raise ValueError(f"Batch update of {type(model).__name__} requires an id")

    @property
    def is_empty(self) -> bool:
        return not (self.create or self.update or self.delete)

    def delete_ids(self) -> List[Any]:
        return [_resource_id(entry) for entry in self.delete]

    def encode(self) -> Dict[str, List[Any]]:
        """Wire body; keys without entries are omitted."""
        body: Dict[str, List[Any]] = {}
        if self.create:
            body[BatchOperation.CREATE.value] = [model.encode() for model in self.create]
        if self.update:
            body[BatchOperation.UPDATE.value] = [model.encode() for model in self.update]
        if self.delete:
            body[BatchOperation.DELETE.value] = self.delete_ids()
        return body


@dataclass(frozen=True)
class BatchOutcome(Generic[M]):
    """Result of one request entry after correlation."""

    operation: BatchOperation
    index: int
    status: BatchOutcomeStatus
    resource_id: Optional[Any] = None
    model: Optional[M] = None
    error: Optional[BatchItemError] = None


@dataclass(frozen=True)
class BatchReport(Generic[M]):
    outcomes: List[BatchOutcome[M]] = field(default_factory=list)
    unmatched: List[BatchItem[M]] = field(default_factory=list)

    def by_status(self, status: BatchOutcomeStatus) -> List[BatchOutcome[M]]:
        return [outcome for outcome in self.outcomes if outcome.status == status]

    @property
    def succeeded(self) -> List[BatchOutcome[M]]:
        return self.by_status(BatchOutcomeStatus.SUCCEEDED)

    @property
    def failed(self) -> List[BatchOutcome[M]]:
        return self.by_status(BatchOutcomeStatus.FAILED)

    @property
    def missing(self) -> List[BatchOutcome[M]]:
        return self.by_status(BatchOutcomeStatus.MISSING)

    @property
    def all_succeeded(self) -> bool:
        return not self.unmatched and all(o.status == BatchOutcomeStatus.SUCCEEDED for o in self.outcomes)


def _outcome(operation: BatchOperation, index: int, resource_id: Any, item: Optional[BatchItem[M]]) -> BatchOutcome[M]:
    if item is None:
        return BatchOutcome(operation, index, BatchOutcomeStatus.MISSING, resource_id=resource_id)
    status = BatchOutcomeStatus.SUCCEEDED if item.ok else BatchOutcomeStatus.FAILED
    return BatchOutcome(
        operation,
        index,
        status,
        resource_id=item.resource_id if item.resource_id is not None else resource_id,
        model=item.model,
        error=item.error,
    )


@dataclass(frozen=True)
class BatchResponse(Generic[M]):
    create: List[BatchItem[M]] = field(default_factory=list)
    update: List[BatchItem[M]] = field(default_factory=list)
    delete: List[BatchItem[M]] = field(default_factory=list)

    @classmethod
    def decode(cls, data: Mapping[str, Any], model: Type[M]) -> "BatchResponse[M]":
        """
        Decode the batch envelope.

        Raises:
            TypeError: If the envelope or one of its arrays has the wrong shape
            pydantic.ValidationError: If a successful element cannot be decoded
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Batch response must be an object, got {type(data).__name__}")

        decoded: Dict[str, List[BatchItem[M]]] = {}
        for operation in BatchOperation:
            elements = data.get(operation.value) or []
            if not isinstance(elements, list):
                raise TypeError(f"Batch '{operation.value}' must be an array, got {type(elements).__name__}")
            decoded[operation.value] = [cls._decode_item(element, model) for element in elements]
        return cls(**decoded)

    @staticmethod
    def _decode_item(element: Any, model: Type[M]) -> BatchItem[M]:
        if isinstance(element, Mapping) and "error" in element:
            error = BatchItemError.decode(element["error"])
            logger.warning(f"Batch element {element.get('id')!r} failed: {error.code} {error.message}")
            return BatchItem(error=error, resource_id=element.get("id"))
        decoded = model.decode(element)
        return BatchItem(model=decoded, resource_id=getattr(decoded, "id", None))

    @property
    def items(self) -> List[BatchItem[M]]:
        return [*self.create, *self.update, *self.delete]

    @property
    def errors(self) -> List[BatchItem[M]]:
        return [item for item in self.items if not item.ok]

    def correlate(self, request: BatchRequest[M]) -> BatchReport[M]:
        """
        Pair every request entry with its response element.

        Create entries pair by position. Update and delete entries pair by
        identifier, compared as text so ``"7"`` matches ``7``. Entries
        without a response element are MISSING and response elements without
        a request entry are reported as unmatched.
        """
        outcomes: List[BatchOutcome[M]] = []
        unmatched: List[BatchItem[M]] = []

        for index in range(len(request.create)):
            item = self.create[index] if index < len(self.create) else None
            outcomes.append(_outcome(BatchOperation.CREATE, index, None, item))
        unmatched.extend(self.create[len(request.create):])

        for operation, requested_ids, items in (
            (BatchOperation.UPDATE, [model.id for model in request.update], self.update),
            (BatchOperation.DELETE, request.delete_ids(), self.delete),
        ):
            pending = list(items)
            for index, resource_id in enumerate(requested_ids):
                position = next((i for i, item in enumerate(pending) if _same_id(item.resource_id, resource_id)), None)
                match = pending.pop(position) if position is not None else None
                outcomes.append(_outcome(operation, index, resource_id, match))
            unmatched.extend(pending)

        if unmatched:
            logger.warning(f"{len(unmatched)} batch response elements did not match any request entry")
        return BatchReport(outcomes=outcomes, unmatched=unmatched)
