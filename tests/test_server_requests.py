import uuid
from decimal import Decimal

import pytest

pytest.importorskip("rest_framework")

import django
from django.conf import settings

if not settings.configured:
    settings.configure(
        INSTALLED_APPS=[
            "django.contrib.contenttypes",
            "django.contrib.auth",
            "rest_framework",
            "server.advisory",
        ],
        DATABASES={"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}},
        ROOT_URLCONF="server.advisory.urls",
        DEFAULT_AUTO_FIELD="django.db.models.AutoField",
    )
    django.setup()

from django.urls import resolve, reverse
from rest_framework.test import APIRequestFactory

from server.advisory.serializers import ProjectionRequestSerializer, validation_message
from server.advisory.views import ProjectionView


@pytest.mark.parametrize("rate", ["4.12345", "0.00001", "123456.5", 4.12345])
def test_projection_request_accepts_any_non_negative_rate(rate):
    serializer = ProjectionRequestSerializer(data={"annualRate": rate})
    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["annualRate"] == Decimal(str(rate))


def test_projection_request_defaults_and_rejects_negative_rate():
    default = ProjectionRequestSerializer(data={})
    assert default.is_valid(), default.errors
    assert default.validated_data["annualRate"] == Decimal(4)

    negative = ProjectionRequestSerializer(data={"annualRate": "-0.5"})
    assert not negative.is_valid()
    assert validation_message(negative.errors).startswith("annualRate: ")


def test_validation_message_joins_fields():
    errors = {"annualRate": ["A valid number is required."], "non_field_errors": ["Bad body."]}
    assert validation_message(errors) == "annualRate: A valid number is required.; non_field_errors: Bad body."


def test_projection_view_invalid_body_returns_message():
    request = APIRequestFactory().post(
        f"/clients/{uuid.uuid4()}/projections", {"annualRate": "abc"}, format="json"
    )
    response = ProjectionView.as_view()(request, client_id=uuid.uuid4())

    assert response.status_code == 400
    assert set(response.data) == {"message"}
    assert response.data["message"].startswith("annualRate: ")


def test_stats_route_sits_beside_client_routes():
    client_id = uuid.uuid4()

    assert reverse("client-stats") == "/clients/stats"
    assert resolve("/clients/stats").url_name == "client-stats"
    assert resolve(f"/clients/{client_id}/alignment").kwargs == {"client_id": client_id}
    assert resolve(f"/clients/{client_id}/projections").url_name == "client-projection"
