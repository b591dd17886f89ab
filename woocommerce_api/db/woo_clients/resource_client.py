"""
Generic client for one REST resource.

The same class serves every resource; what differs is carried by its
`ResourceDescriptor`. Each call builds the wire parameters, chooses the
backend (synthetic or remote) and returns typed models.
"""

import copy
import logging
from typing import Any, Generic, List, Optional, TypeVar, Union

from woocommerce_api.core.client_config import ClientConfig
from woocommerce_api.domain.models import WooModel

from .backends import RemoteBackend, ResourceBackend, SyntheticBackend
from .batch import BatchRequest, BatchResponse
from .descriptors import ResourceDescriptor
from .query_builder import ListQuery, Query, build_query_params
from .transport import Transport

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=WooModel)
Q = TypeVar("Q", bound=Query)
C = TypeVar("C", bound="ReadOnlyResourceClient")


class BaseResourceClient:
    """
    Holds the configuration and both backends.

    Every operation accepts ``use_faker``; when omitted the value of
    ``ClientConfig.use_faker`` applies.
    """

    def __init__(self, transport: Transport, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()
        self._remote = RemoteBackend(transport)
        self._synthetic = SyntheticBackend()

    def _backend(self, use_faker: Optional[bool]) -> ResourceBackend:
        if self.config.resolve_faker(use_faker):
            return self._synthetic
        return self._remote


class ReadOnlyResourceClient(BaseResourceClient, Generic[M, Q]):
    """List and retrieve operations."""

    def __init__(self, descriptor: ResourceDescriptor, transport: Transport, config: Optional[ClientConfig] = None):
        super().__init__(transport, config)
        self.descriptor = descriptor

    def with_parent(self: C, **parents: Any) -> C:
        """
        Return a copy of this client bound to one parent resource.

        Example:
            notes = woo.order_notes.with_parent(order_id=123)

        Raises:
            ValueError: If the identifiers do not match the path placeholders
        """
        bound = copy.copy(self)
        bound.descriptor = self.descriptor.bind(**parents)
        return bound

    def _resource(self) -> ResourceDescriptor:
        # faker mode fails here too
        if not self.descriptor.is_bound:
            raise ValueError(
                f"{self.descriptor.name} requires parent identifiers {list(self.descriptor.parent_params)}; "
                "use with_parent()"
            )
        return self.descriptor

    def _params(self, query: Optional[Query]) -> dict:
        return build_query_params(query or Query(), max_per_page=self.config.per_page_max)

    async def list(self, query: Optional[Q] = None, *, use_faker: Optional[bool] = None) -> List[M]:
        """
        List resources matching the query.

        Args:
            query: Filters, pagination and sort; defaults to the resource's query type defaults
            use_faker: Per-call override of the faker mode

        Returns:
            List: Decoded models in server order

        Raises:
            ValueError: If ``page`` or ``per_page`` is lower than 1, or the client is not bound to its parent
            WooCommerceAPIException: On transport, server or decode failures
        """
        descriptor = self._resource()
        query = query if query is not None else descriptor.query_type()
        params = build_query_params(query, max_per_page=self.config.per_page_max)
        count = query.per_page if isinstance(query, ListQuery) else self.config.default_per_page
        return await self._backend(use_faker).fetch_list(descriptor, params, count)

    async def retrieve(self, resource_id: Any, query: Optional[Query] = None, *, use_faker: Optional[bool] = None) -> M:
        """Retrieve one resource by identifier."""
        descriptor = self._resource()
        return await self._backend(use_faker).fetch_one(descriptor, resource_id, self._params(query))


class AppendOnlyResourceClient(ReadOnlyResourceClient[M, Q]):
    """Adds create and delete; for resources the API never updates in place."""

    async def create(self, model: M, query: Optional[Query] = None, *, use_faker: Optional[bool] = None) -> M:
        """
        Create a resource. Absent fields are not sent, so server defaults apply.

        Returns:
            The resource as stored by the server
        """
        descriptor = self._resource()
        return await self._backend(use_faker).submit(
            "POST", descriptor.collection_path, descriptor.model, model.encode(), params=self._params(query)
        )

    async def delete(
        self, resource_id: Union[Any, M], *, force: Optional[bool] = None, use_faker: Optional[bool] = None
    ) -> bool:
        """
        Delete a resource.

        Args:
            resource_id: Identifier or model
            force: Bypass the trash; defaults to the resource's documented default
            use_faker: Per-call override of the faker mode

        Returns:
            bool: True when the server accepted the deletion
        """
        descriptor = self._resource()
        if isinstance(resource_id, WooModel):
            resource_id = descriptor.id_of(resource_id)
        force = descriptor.default_force if force is None else force
        return await self._backend(use_faker).remove(descriptor, resource_id, force)


class ResourceClient(AppendOnlyResourceClient[M, Q]):
    """Full CRUD plus batch operations."""

    async def update(self, model: M, query: Optional[Query] = None, *, use_faker: Optional[bool] = None) -> M:
        """
        Update the resource identified by ``model.id`` with its present fields.

        Raises:
            ValueError: If the model has no identifier
        """
        descriptor = self._resource()
        resource_id = descriptor.id_of(model)
        if resource_id is None:
            raise ValueError(f"Cannot update a {descriptor.name} without {descriptor.id_field}")
        return await self._backend(use_faker).submit(
            "PUT",
            descriptor.item_path(resource_id),
            descriptor.model,
            model.encode(),
            params=self._params(query),
            resource_id=resource_id,
        )

    async def batch(self, request: BatchRequest[M], *, use_faker: Optional[bool] = None) -> BatchResponse[M]:
        """
        Send create, update and delete sub-requests in one call.

        Per-item failures are reported in the response, not raised. Use
        ``BatchResponse.correlate(request)`` to pair them with the request.

        Raises:
            ValueError: If the resource has no batch endpoint or the request is empty
        """
        descriptor = self._resource()
        if not descriptor.supports_batch:
            raise ValueError(f"{descriptor.name} does not support batch operations")
        if request.is_empty:
            raise ValueError("Batch request has no create, update or delete entries")
        response = await self._backend(use_faker).batch(descriptor, request)
        logger.info(f"Batch {descriptor.name}: {len(response.items)} items, {len(response.errors)} failed")
        return response
