# tests\core\test_domain_models.py
import pytest
from pydantic import ValidationError

from pricing_gateway.core.domain.exceptions import PayloadValidationError
from pricing_gateway.core.domain.models import (
    ProxyPayload,
    SessionIdentity,
    SessionSource,
    UpstreamOutcome,
    UpstreamResult,
)


class TestProxyPayload:
    def test_valid_payload_keeps_values_verbatim(self):
        payload = ProxyPayload.from_body({"product_id": "sku-42", "new_price": 19.99})
        assert payload.product_id == "sku-42"
        assert payload.new_price == 19.99

    def test_numeric_product_id_is_accepted(self):
        payload = ProxyPayload.from_body({"product_id": 42, "new_price": "12.50"})
        assert payload.product_id == 42
        assert payload.new_price == "12.50"

    def test_zero_price_is_not_missing(self):
        payload = ProxyPayload.from_body({"product_id": "sku-1", "new_price": 0})
        assert payload.new_price == 0

    def test_missing_fields_are_all_named(self):
        """Should name every absent field, in a stable order."""
        with pytest.raises(PayloadValidationError) as excinfo:
            ProxyPayload.from_body({})

        assert excinfo.value.missing_fields == ["product_id", "new_price"]
        assert "product_id" in excinfo.value.message
        assert "new_price" in excinfo.value.message

    @pytest.mark.parametrize("blank", [None, "", "   "])
    def test_blank_values_count_as_missing(self, blank):
        with pytest.raises(PayloadValidationError) as excinfo:
            ProxyPayload.from_body({"product_id": "sku-1", "new_price": blank})
        assert excinfo.value.missing_fields == ["new_price"]

    @pytest.mark.parametrize("body", [None, [], "product_id", 12])
    def test_non_object_body_lacks_everything(self, body):
        with pytest.raises(PayloadValidationError) as excinfo:
            ProxyPayload.from_body(body)
        assert excinfo.value.missing_fields == ["product_id", "new_price"]

    def test_upstream_body_always_targets_the_shop(self):
        payload = ProxyPayload.from_body({"product_id": "sku-1", "new_price": 10})
        assert payload.to_upstream_body() == {
            "product_id": "sku-1",
            "new_price": 10,
            "apply_to_shopify": True,
        }


class TestUpstreamResult:
    def test_success_carries_body(self):
        result = UpstreamResult.success(201, {"id": 7})
        assert result.ok
        assert result.outcome == UpstreamOutcome.SUCCESS
        assert result.body == {"id": 7}
        assert result.error is None

    def test_no_content_differs_from_null_body(self):
        empty = UpstreamResult.no_content(204)
        null = UpstreamResult.success(200, None)

        assert empty.ok and null.ok
        assert not empty.has_body
        assert null.has_body
        assert null.body is None

    def test_failure_carries_message(self):
        result = UpstreamResult.failure(422, "invalid price")
        assert not result.ok
        assert result.status_code == 422
        assert result.error == "invalid price"
        assert result.body is None


class TestSessionIdentity:
    def test_empty_value_is_rejected(self):
        with pytest.raises(ValidationError):
            SessionIdentity(value="", source=SessionSource.COOKIE)
