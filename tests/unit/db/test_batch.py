"""Tests unitarios del agregador de operaciones batch."""

import pytest

from woocommerce_api.db.woo_clients.batch import (
    BatchOperation,
    BatchOutcomeStatus,
    BatchRequest,
    BatchResponse,
)
from woocommerce_api.domain.models import ProductCategory


def error_element(resource_id, code="woocommerce_rest_term_invalid", message="Resource does not exist.", status=400):
    return {"id": resource_id, "error": {"code": code, "message": message, "data": {"status": status}}}


class TestBatchRequestEncode:
    """Tests para el cuerpo de la petición batch."""

    def test_only_create_sends_only_create_key(self):
        """Una petición solo con create no debe enviar update ni delete."""
        request = BatchRequest(create=[ProductCategory(name="A"), ProductCategory(name="B")])

        body = request.encode()

        assert body == {"create": [{"name": "A"}, {"name": "B"}]}

    def test_delete_accepts_ids_and_models(self):
        """delete debe aceptar identificadores o modelos."""
        request = BatchRequest(delete=[4, ProductCategory(id=7, name="x")])

        assert request.encode() == {"delete": [4, 7]}

    def test_update_requires_id(self):
        """Actualizar sin id es un error del llamador."""
        with pytest.raises(ValueError):
            BatchRequest(update=[ProductCategory(name="no id")])

    def test_empty_request(self):
        """Una petición vacía se codifica como objeto vacío."""
        request = BatchRequest()

        assert request.is_empty
        assert request.encode() == {}


class TestBatchResponseDecode:
    """Tests para la decodificación de la respuesta batch."""

    def test_decodes_each_operation(self):
        """Cada arreglo debe decodificarse en BatchItems con su modelo."""
        response = BatchResponse.decode(
            {
                "create": [{"id": 11, "name": "A"}],
                "update": [{"id": 9, "name": "Renamed"}],
                "delete": [{"id": 4, "name": "Gone"}],
            },
            ProductCategory,
        )

        assert [item.model.name for item in response.items] == ["A", "Renamed", "Gone"]
        assert [item.resource_id for item in response.items] == [11, 9, 4]
        assert response.errors == []

    def test_missing_keys_are_empty(self):
        """Los arreglos ausentes se tratan como vacíos."""
        response = BatchResponse.decode({"create": [{"id": 1, "name": "A"}]}, ProductCategory)

        assert response.update == []
        assert response.delete == []

    def test_item_error_is_not_raised(self):
        """Un elemento con 'error' debe quedar como item fallido."""
        response = BatchResponse.decode(
            {"update": [{"id": 9, "name": "ok"}, error_element(25)]},
            ProductCategory,
        )

        failed = response.update[1]
        assert not failed.ok
        assert failed.model is None
        assert failed.resource_id == 25
        assert failed.error.code == "woocommerce_rest_term_invalid"
        assert failed.error.status == 400
        assert len(response.errors) == 1

    def test_wrong_shape_raises_type_error(self):
        """Un arreglo que no es lista debe fallar."""
        with pytest.raises(TypeError):
            BatchResponse.decode({"create": {"id": 1}}, ProductCategory)


class TestCorrelate:
    """Tests para la correlación entre petición y respuesta."""

    def test_create_correlates_by_position(self):
        """Las creaciones se emparejan por posición."""
        request = BatchRequest(create=[ProductCategory(name="A"), ProductCategory(name="B")])
        response = BatchResponse.decode(
            {"create": [{"id": 10, "name": "A"}, error_element(0, code="term_exists")]},
            ProductCategory,
        )

        report = response.correlate(request)

        first, second = report.outcomes
        assert first.status == BatchOutcomeStatus.SUCCEEDED
        assert first.resource_id == 10
        assert second.status == BatchOutcomeStatus.FAILED
        assert second.error.code == "term_exists"
        assert second.index == 1

    def test_update_and_delete_correlate_by_id(self):
        """Actualizaciones y eliminaciones se emparejan por identificador, no por posición."""
        request = BatchRequest(
            update=[ProductCategory(id=1, name="one"), ProductCategory(id=2, name="two")],
            delete=[5],
        )
        response = BatchResponse.decode(
            {
                "update": [{"id": 2, "name": "two"}, error_element(1)],
                "delete": [{"id": 5, "name": "deleted"}],
            },
            ProductCategory,
        )

        report = response.correlate(request)

        by_key = {(o.operation, o.resource_id): o.status for o in report.outcomes}
        assert by_key[(BatchOperation.UPDATE, 1)] == BatchOutcomeStatus.FAILED
        assert by_key[(BatchOperation.UPDATE, 2)] == BatchOutcomeStatus.SUCCEEDED
        assert by_key[(BatchOperation.DELETE, 5)] == BatchOutcomeStatus.SUCCEEDED
        assert report.unmatched == []

    def test_text_ids_match_numeric_echo(self):
        """Un id enviado como texto debe emparejarse con el id numérico devuelto."""
        request = BatchRequest(update=[ProductCategory(id=2, name="two")], delete=["7"])
        response = BatchResponse.decode(
            {"update": [{"id": "2", "name": "two"}], "delete": [{"id": 7, "name": "gone"}]},
            ProductCategory,
        )

        report = response.correlate(request)

        assert [o.status for o in report.outcomes] == [BatchOutcomeStatus.SUCCEEDED] * 2
        assert report.missing == []
        assert report.unmatched == []

    def test_missing_and_unmatched_elements(self):
        """Entradas sin respuesta son MISSING y respuestas sin petición son unmatched."""
        request = BatchRequest(update=[ProductCategory(id=1, name="one")], delete=[3])
        response = BatchResponse.decode(
            {"update": [{"id": 99, "name": "other"}], "delete": [{"id": 3}]},
            ProductCategory,
        )

        report = response.correlate(request)

        assert [o.status for o in report.missing] == [BatchOutcomeStatus.MISSING]
        assert report.missing[0].resource_id == 1
        assert [item.resource_id for item in report.unmatched] == [99]
        assert not report.all_succeeded

    def test_all_succeeded(self):
        """Un batch completo y exitoso debe reportarse como tal."""
        request = BatchRequest(create=[ProductCategory(name="A")], delete=[4])
        response = BatchResponse.decode(
            {"create": [{"id": 10, "name": "A"}], "delete": [{"id": 4}]},
            ProductCategory,
        )

        report = response.correlate(request)

        assert report.all_succeeded
        assert len(report.succeeded) == 2
