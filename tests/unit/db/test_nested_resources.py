"""Tests unitarios de recursos anidados bajo un recurso padre."""

import pytest

from woocommerce_api.db.woo_clients import descriptors
from woocommerce_api.db.woo_clients.query_builder import OrderNoteQuery
from woocommerce_api.db.woo_clients.resources import CustomerClient, OrderNoteClient
from woocommerce_api.domain.enums import OrderNoteType
from woocommerce_api.domain.models import CustomerDownload, OrderNote

DOWNLOAD_PAYLOAD = {
    "download_id": "91447fd1849316bbc89dfb7e986a6006",
    "download_url": "https://shop.example.com/?download_file=96&order=wc_order_58d17c18352&email=jane@example.com",
    "product_id": 96,
    "product_name": "Woo Album #2",
    "download_name": "Woo Album #2 &ndash; Song 2",
    "order_id": 723,
    "order_key": "wc_order_58d17c18352",
    "downloads_remaining": "3",
    "access_expires": "never",
    "access_expires_gmt": "never",
    "file": {"name": "Song 2", "file": "https://shop.example.com/song2.mp3"},
}


class TestPathTemplates:
    """Tests para plantillas de ruta con identificadores del padre."""

    def test_top_level_descriptor_is_bound(self):
        """Un recurso de primer nivel no tiene parámetros pendientes."""
        assert descriptors.ORDERS.parent_params == ()
        assert descriptors.ORDERS.item_path(5) == "orders/5"

    def test_bind_resolves_placeholders(self):
        """bind debe sustituir los identificadores en todas las rutas."""
        notes = descriptors.ORDER_NOTES.bind(order_id=123)

        assert descriptors.ORDER_NOTES.parent_params == ("order_id",)
        assert notes.collection_path == "orders/123/notes"
        assert notes.item_path(7) == "orders/123/notes/7"
        assert notes.batch_path == "orders/123/notes/batch"

    @pytest.mark.parametrize("parents", [{}, {"order_id": None}, {"order_id": 1, "product_id": 2}])
    def test_bind_rejects_missing_or_unknown_names(self, parents):
        """Identificadores ausentes, nulos o desconocidos deben fallar."""
        with pytest.raises(ValueError):
            descriptors.ORDER_NOTES.bind(**parents)

    def test_unbound_paths_raise(self):
        """Sin padre no se puede construir ninguna ruta."""
        with pytest.raises(ValueError):
            descriptors.ORDER_NOTES.collection_path

        with pytest.raises(ValueError):
            descriptors.ORDER_NOTES.item_path(7)


class TestOrderNotes:
    """Tests para las notas de pedido."""

    @pytest.mark.asyncio
    async def test_list_uses_order_path_and_type_filter(self, transport, config):
        """El listado debe ir a orders/{id}/notes con el filtro type."""
        transport.queue_json([{"id": 281, "note": "Order ok!!!", "customer_note": False}])
        notes = OrderNoteClient(transport, config).for_order(723)

        result = await notes.list(OrderNoteQuery(type=OrderNoteType.INTERNAL))

        assert transport.last_call["path"] == "orders/723/notes"
        assert transport.last_call["params"] == {"context": "view", "type": "internal"}
        assert result == [OrderNote(id=281, note="Order ok!!!", customer_note=False)]

    @pytest.mark.asyncio
    async def test_create_and_retrieve(self, transport, config):
        """create envía la nota y retrieve usa la ruta del elemento."""
        transport.queue_json({"id": 281, "note": "Shipped", "customer_note": True}, status=201)
        transport.queue_json({"id": 281, "note": "Shipped", "customer_note": True})
        notes = OrderNoteClient(transport, config).for_order(723)

        created = await notes.create(OrderNote(note="Shipped", customer_note=True))
        fetched = await notes.retrieve(created.id)

        assert transport.calls[0]["method"] == "POST"
        assert transport.calls[0]["path"] == "orders/723/notes"
        assert transport.calls[0]["json"] == {"note": "Shipped", "customer_note": True}
        assert transport.calls[1]["path"] == "orders/723/notes/281"
        assert fetched == created

    @pytest.mark.asyncio
    async def test_delete_always_forces(self, transport, config):
        """Las notas no van a la papelera: force=true por defecto."""
        transport.queue_json({"id": 281})
        notes = OrderNoteClient(transport, config).for_order(723)

        assert await notes.delete(281) is True
        assert transport.last_call["method"] == "DELETE"
        assert transport.last_call["path"] == "orders/723/notes/281"
        assert transport.last_call["params"] == {"force": "true"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("use_faker", [False, True])
    async def test_unbound_client_fails_before_calling(self, transport, config, use_faker):
        """Sin pedido asociado debe fallar igual en modo remoto y faker."""
        client = OrderNoteClient(transport, config)

        with pytest.raises(ValueError):
            await client.list(use_faker=use_faker)

        assert transport.calls == []

    def test_binding_returns_a_new_client(self, transport, config):
        """for_order no modifica el cliente original."""
        client = OrderNoteClient(transport, config)

        bound = client.for_order(1)

        assert bound is not client
        assert not client.descriptor.is_bound
        assert bound.config is client.config

    def test_notes_are_not_updated_in_place(self, transport, config):
        """Las notas no exponen update ni batch."""
        client = OrderNoteClient(transport, config)

        assert not hasattr(client, "update")
        assert not hasattr(client, "batch")

    @pytest.mark.asyncio
    async def test_faker_list_uses_default_count(self, transport, faker_config):
        """En modo faker se sintetizan default_per_page notas sin red."""
        notes = OrderNoteClient(transport, faker_config).for_order(723)

        result = await notes.list()

        assert len(result) == faker_config.default_per_page
        assert all(isinstance(note, OrderNote) for note in result)
        assert transport.calls == []


class TestCustomerDownloads:
    """Tests para las descargas de un cliente."""

    @pytest.mark.asyncio
    async def test_downloads_path_and_decode(self, transport, config):
        """Debe listar customers/{id}/downloads y decodificar cada permiso."""
        transport.queue_json([DOWNLOAD_PAYLOAD])

        downloads = await CustomerClient(transport, config).downloads(26)

        assert transport.last_call["method"] == "GET"
        assert transport.last_call["path"] == "customers/26/downloads"
        download = downloads[0]
        assert download.download_id == "91447fd1849316bbc89dfb7e986a6006"
        assert download.downloads_remaining == "3"
        assert download.access_expires is None
        assert download.file.name == "Song 2"

    @pytest.mark.asyncio
    async def test_downloads_in_faker_mode(self, transport, faker_config):
        """En modo faker se devuelven descargas sintéticas sin red."""
        downloads = await CustomerClient(transport, faker_config).downloads(26)

        assert len(downloads) == faker_config.default_per_page
        assert all(isinstance(download, CustomerDownload) for download in downloads)
        assert transport.calls == []
