"""Tests unitarios del modo faker (backend sintético)."""

import pytest

from woocommerce_api.core.client_config import ClientConfig
from woocommerce_api.db.woo_clients.batch import BatchOutcomeStatus, BatchRequest
from woocommerce_api.db.woo_clients.query_builder import CategoryQuery, CouponQuery, OrderQuery
from woocommerce_api.db.woo_clients.resources import (
    AuthenticationClient,
    CouponClient,
    OrderClient,
    ProductCategoryClient,
    ShippingMethodClient,
    WebhookClient,
)
from woocommerce_api.domain.models import Coupon, Customer, ProductCategory, Webhook


class TestSyntheticLists:
    """Tests para listados sintéticos."""

    @pytest.mark.asyncio
    async def test_list_returns_exactly_per_page_items(self, transport, faker_config):
        """Con faker activo y per_page=5 se obtienen exactamente 5 categorías."""
        client = ProductCategoryClient(transport, faker_config)

        categories = await client.list(CategoryQuery(per_page=5))

        assert len(categories) == 5
        assert all(isinstance(c, ProductCategory) for c in categories)
        assert all(c.name for c in categories)
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_filters_do_not_change_count(self, transport, faker_config):
        """Los filtros se ignoran: el tamaño sigue siendo per_page."""
        client = CouponClient(transport, faker_config)

        coupons = await client.list(CouponQuery(per_page=3, code="nothing-matches", include=[1]))

        assert len(coupons) == 3
        assert all(c.code for c in coupons)

    @pytest.mark.asyncio
    async def test_unpaginated_resource_uses_default_count(self, transport, credential_store):
        """Recursos sin paginación devuelven default_per_page elementos."""
        config = ClientConfig(use_faker=True, credential_store=credential_store, default_per_page=4)

        methods = await ShippingMethodClient(transport, config).list()

        assert len(methods) == 4

    @pytest.mark.asyncio
    async def test_invalid_pagination_still_raises(self, transport, faker_config):
        """La validación de paginación aplica también en modo faker."""
        with pytest.raises(ValueError):
            await OrderClient(transport, faker_config).list(OrderQuery(per_page=0))


class TestSyntheticSingleItems:
    """Tests para operaciones de un elemento."""

    @pytest.mark.asyncio
    async def test_retrieve_pins_requested_id(self, transport, faker_config):
        """retrieve debe devolver un modelo con el id solicitado."""
        order = await OrderClient(transport, faker_config).retrieve(727)

        assert order.id == 727

    @pytest.mark.asyncio
    async def test_create_overlays_caller_fields(self, transport, faker_config):
        """create debe conservar los campos enviados por el llamador."""
        webhook = Webhook(name="Order created", topic="order.created", delivery_url="https://hooks.example.com/wc")

        created = await WebhookClient(transport, faker_config).create(webhook)

        assert created.name == "Order created"
        assert created.topic == "order.created"
        assert created.delivery_url == "https://hooks.example.com/wc"
        assert created.id is not None

    @pytest.mark.asyncio
    async def test_update_keeps_id(self, transport, faker_config):
        """update debe devolver el mismo id con los campos actualizados."""
        updated = await CouponClient(transport, faker_config).update(Coupon(id=719, code="SUMMER", amount="15.00"))

        assert updated.id == 719
        assert updated.code == "SUMMER"
        assert updated.amount == "15.00"

    @pytest.mark.asyncio
    async def test_delete_returns_true(self, transport, faker_config):
        """delete sintético siempre tiene éxito."""
        assert await CouponClient(transport, faker_config).delete(719, force=True) is True
        assert transport.calls == []


class TestSyntheticBatch:
    """Tests para batch sintético."""

    @pytest.mark.asyncio
    async def test_batch_returns_one_success_per_entry(self, transport, faker_config):
        """Cada entrada de la petición debe tener un resultado exitoso."""
        request = BatchRequest(
            create=[ProductCategory(name="A"), ProductCategory(name="B")],
            update=[ProductCategory(id=9, name="Renamed")],
            delete=[4],
        )

        response = await ProductCategoryClient(transport, faker_config).batch(request)
        report = response.correlate(request)

        assert [item.model.name for item in response.create] == ["A", "B"]
        assert response.update[0].model.name == "Renamed"
        assert response.delete[0].resource_id == 4
        assert all(o.status == BatchOutcomeStatus.SUCCEEDED for o in report.outcomes)
        assert report.all_succeeded


class TestBackendSelection:
    """Tests para la elección del backend."""

    @pytest.mark.asyncio
    async def test_per_call_override_enables_faker(self, transport, config):
        """use_faker=True por llamada evita la red aunque la configuración diga lo contrario."""
        categories = await ProductCategoryClient(transport, config).list(CategoryQuery(per_page=2), use_faker=True)

        assert len(categories) == 2
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_per_call_override_disables_faker(self, transport, faker_config):
        """use_faker=False por llamada usa la red aunque la configuración active faker."""
        transport.queue_json([{"id": 1, "name": "Real"}])

        categories = await ProductCategoryClient(transport, faker_config).list(use_faker=False)

        assert categories[0].name == "Real"
        assert len(transport.calls) == 1


class TestSyntheticAuthentication:
    """Tests para autenticación en modo faker."""

    @pytest.mark.asyncio
    async def test_login_stores_synthetic_user(self, transport, faker_config, credential_store):
        """login sintético debe guardar un user_id."""
        client = AuthenticationClient(transport, faker_config)

        user_id = await client.login("jane@example.com", "secret")

        assert await credential_store.get_user_id() == user_id
        assert await client.is_authenticated()
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_register_and_logout(self, transport, faker_config, credential_store):
        """register guarda el usuario y logout lo elimina."""
        client = AuthenticationClient(transport, faker_config)

        await client.register(Customer(email="new@example.com", password="pw"))
        await client.logout()

        assert await credential_store.get_user_id() is None

    @pytest.mark.asyncio
    async def test_password_routes(self, transport, faker_config, credential_store):
        """Cambio y recuperación de contraseña sintéticos no usan la red."""
        await credential_store.set_user_id(3)
        client = AuthenticationClient(transport, faker_config)

        change = await client.change_password("n3w-secret")
        reset = await client.forgot_password("jane@example.com")

        assert change.status is True
        assert reset.user_id is not None
        assert reset.code
        assert await credential_store.get_user_id() == 3
        assert transport.calls == []
