"""
Backends executing resource operations.

`RemoteBackend` calls the REST API through a `Transport`, decodes the JSON and
translates failures into `WooCommerceAPIException`. `SyntheticBackend` answers
the same calls with data built from each model's ``fake()`` and never touches
the network. Both expose the same coroutine interface.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Tuple, Type, TypeVar

import aiohttp

from woocommerce_api.domain.models import WooModel
from woocommerce_api.utils.error_handler import (
    translate_decode_error,
    translate_http_error,
    translate_transport_error,
)

from .batch import BatchItem, BatchRequest, BatchResponse
from .descriptors import ResourceDescriptor
from .transport import Transport

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=WooModel)
T = TypeVar("T")

Params = Optional[Dict[str, Any]]


class ResourceBackend(Protocol):
    async def fetch_list(
        self, descriptor: ResourceDescriptor, params: Params, count: int
    ) -> List[WooModel]: ...

    async def fetch_one(self, descriptor: ResourceDescriptor, resource_id: Any, params: Params) -> WooModel: ...

    async def submit(
        self,
        method: str,
        path: str,
        model: Type[M],
        body: Mapping[str, Any],
        params: Params = None,
        resource_id: Any = None,
    ) -> M: ...

    async def remove(self, descriptor: ResourceDescriptor, resource_id: Any, force: bool) -> bool: ...

    async def batch(self, descriptor: ResourceDescriptor, request: BatchRequest) -> BatchResponse: ...


class RemoteBackend:
    """Executes operations against the REST API."""

    def __init__(self, transport: Transport):
        self.transport = transport

    async def _call(self, method: str, path: str, params: Params = None, body: Any = None) -> Tuple[int, Any]:
        try:
            response = await self.transport.request(method, path, params=params, json=body)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise translate_transport_error(e, method, path) from e

        if not response.ok:
            raise translate_http_error(response.status, response.text, method, path)

        if not response.text:
            return response.status, None
        try:
            return response.status, response.json()
        except ValueError as e:
            raise translate_decode_error(e, response.status, method, path) from e

    @staticmethod
    def _decode(method: str, path: str, status: int, decoder: Callable[[], T]) -> T:
        # pydantic.ValidationError subclasses ValueError
        try:
            return decoder()
        except (TypeError, ValueError) as e:
            raise translate_decode_error(e, status, method, path) from e

    @staticmethod
    def _decode_list(model: Type[M], data: Any) -> List[M]:
        if not isinstance(data, list):
            raise TypeError(f"Expected a JSON array, got {type(data).__name__}")
        return [model.decode(element) for element in data]

    async def fetch_list(self, descriptor: ResourceDescriptor, params: Params, count: int) -> List[WooModel]:
        path = descriptor.collection_path
        status, data = await self._call("GET", path, params=params)
        return self._decode("GET", path, status, lambda: self._decode_list(descriptor.model, data))

    async def fetch_one(self, descriptor: ResourceDescriptor, resource_id: Any, params: Params) -> WooModel:
        path = descriptor.item_path(resource_id)
        status, data = await self._call("GET", path, params=params)
        return self._decode("GET", path, status, lambda: descriptor.model.decode(data))

    async def submit(
        self,
        method: str,
        path: str,
        model: Type[M],
        body: Mapping[str, Any],
        params: Params = None,
        resource_id: Any = None,
    ) -> M:
        status, data = await self._call(method, path, params=params, body=dict(body))
        return self._decode(method, path, status, lambda: model.decode(data))

    async def remove(self, descriptor: ResourceDescriptor, resource_id: Any, force: bool) -> bool:
        await self._call("DELETE", descriptor.item_path(resource_id), params={"force": "true" if force else "false"})
        return True

    async def batch(self, descriptor: ResourceDescriptor, request: BatchRequest) -> BatchResponse:
        status, data = await self._call("POST", descriptor.batch_path, body=request.encode())
        return self._decode("POST", descriptor.batch_path, status, lambda: BatchResponse.decode(data, descriptor.model))


class SyntheticBackend:
    """
    Answers operations with synthesized models.

    Lists return exactly ``count`` items regardless of filters, single reads
    pin the requested id, writes overlay the caller's fields on a fake and
    deletes always succeed.
    """

    @staticmethod
    def _overlay(model: Type[M], body: Mapping[str, Any], resource_id: Any = None) -> M:
        data = model.fake().encode()
        data.update({key: value for key, value in body.items() if value is not None})
        if resource_id is not None:
            data["id"] = resource_id
        return model.decode(data)

    async def fetch_list(self, descriptor: ResourceDescriptor, params: Params, count: int) -> List[WooModel]:
        logger.debug(f"Synthesizing {count} {descriptor.name} items")
        return [descriptor.model.fake() for _ in range(count)]

    async def fetch_one(self, descriptor: ResourceDescriptor, resource_id: Any, params: Params) -> WooModel:
        logger.debug(f"Synthesizing {descriptor.name} {resource_id}")
        return descriptor.model.fake().copy_with(**{descriptor.id_field: resource_id})

    async def submit(
        self,
        method: str,
        path: str,
        model: Type[M],
        body: Mapping[str, Any],
        params: Params = None,
        resource_id: Any = None,
    ) -> M:
        logger.debug(f"Synthesizing response of {method} {path}")
        return self._overlay(model, body, resource_id)

    async def remove(self, descriptor: ResourceDescriptor, resource_id: Any, force: bool) -> bool:
        logger.debug(f"Synthesizing delete of {descriptor.name} {resource_id} (force={force})")
        return True

    async def batch(self, descriptor: ResourceDescriptor, request: BatchRequest) -> BatchResponse:
        logger.debug(f"Synthesizing {descriptor.name} batch")
        model = descriptor.model

        def item(decoded: WooModel) -> BatchItem:
            return BatchItem(model=decoded, resource_id=descriptor.id_of(decoded))

        return BatchResponse(
            create=[item(self._overlay(model, entry.encode())) for entry in request.create],
            update=[item(self._overlay(model, entry.encode(), descriptor.id_of(entry))) for entry in request.update],
            delete=[item(self._overlay(model, {}, resource_id)) for resource_id in request.delete_ids()],
        )
