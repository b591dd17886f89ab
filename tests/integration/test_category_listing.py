"""
Test de integración: listado de categorías de punta a punta.

Recorre el flujo completo (query builder, backend remoto, transporte y
codec) usando un transporte en memoria con respuestas reales de la API.
"""

import pytest

from woocommerce_api.core.client_config import ClientConfig
from woocommerce_api.db.woo_clients import CategoryQuery, WooCommerceClient
from woocommerce_api.domain.enums import CategoryOrderBy, SortOrder
from woocommerce_api.domain.models import ProductCategory

CATEGORIES_BY_COUNT_ASC = [
    {
        "id": 11,
        "name": "Accessories",
        "slug": "accessories",
        "parent": 9,
        "description": "",
        "display": "default",
        "image": None,
        "menu_order": 0,
        "count": 2,
        "_links": {"self": [{"href": "https://shop.example.com/wp-json/wc/v3/products/categories/11"}]},
    },
    {
        "id": 9,
        "name": "Clothing",
        "slug": "clothing",
        "parent": 0,
        "description": "",
        "display": "subcategories",
        "image": {"id": 730, "date_created": "2017-03-23T00:01:07", "src": "https://shop.example.com/c.jpg"},
        "menu_order": 0,
        "count": 36,
        "_links": {"self": [{"href": "https://shop.example.com/wp-json/wc/v3/products/categories/9"}]},
    },
]


class TestCategoryListing:
    """Flujo completo de listado de categorías."""

    @pytest.mark.asyncio
    async def test_list_ordered_by_count_ascending(self, settings, transport):
        """Debe enviar orderby=count, order=asc, per_page=2 y respetar el orden del servidor."""
        transport.queue_json(CATEGORIES_BY_COUNT_ASC, status=200)
        woo = WooCommerceClient(settings, transport=transport)

        categories = await woo.categories.list(
            CategoryQuery(orderby=CategoryOrderBy.COUNT, order=SortOrder.ASC, per_page=2)
        )

        params = transport.last_call["params"]
        assert params["orderby"] == "count"
        assert params["order"] == "asc"
        assert params["per_page"] == 2
        assert transport.last_call["path"] == "products/categories"
        assert [c.id for c in categories] == [11, 9]
        assert categories[0].count <= categories[1].count
        assert categories[1].image.id == 730

    @pytest.mark.asyncio
    async def test_same_listing_in_faker_mode(self, settings, transport):
        """El mismo listado con faker activo devuelve per_page categorías sin red."""
        woo = WooCommerceClient(settings, config=ClientConfig(use_faker=True), transport=transport)

        categories = await woo.categories.list(
            CategoryQuery(orderby=CategoryOrderBy.COUNT, order=SortOrder.ASC, per_page=2)
        )

        assert len(categories) == 2
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_create_update_delete_cycle(self, settings, transport):
        """Ciclo completo de escritura sobre una categoría."""
        transport.queue_json({"id": 20, "name": "Hats", "slug": "hats"}, status=201)
        transport.queue_json({"id": 20, "name": "Caps", "slug": "hats"})
        transport.queue_json({"id": 20, "name": "Caps", "slug": "hats"})
        woo = WooCommerceClient(settings, transport=transport)

        created = await woo.categories.create(ProductCategory(name="Hats"))
        updated = await woo.categories.update(created.copy_with(name="Caps"))
        deleted = await woo.categories.delete(updated, force=True)

        assert updated.name == "Caps"
        assert deleted is True
        assert [call["method"] for call in transport.calls] == ["POST", "PUT", "DELETE"]
        assert transport.calls[1]["json"] == {"id": 20, "name": "Caps", "slug": "hats"}
