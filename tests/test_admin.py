"""Tests for the admin site."""

from datetime import date

import pytest
from django.urls import reverse

from CONTRATOS.models import Contract


@pytest.mark.django_db
class TestContractAdmin:
    """Status actions go through the state machine."""

    @pytest.fixture
    def changelist(self):
        return reverse("admin:CONTRATOS_contract_changelist")

    def test_activate_action(self, admin_client, changelist, make_contract, p1, c1) -> None:
        contract = make_contract(p1, c1, date(2024, 1, 1), date(2024, 12, 31))

        response = admin_client.post(
            changelist,
            {"action": "activate_contracts", "_selected_action": [contract.pk]},
        )

        assert response.status_code == 302
        contract.refresh_from_db()
        assert contract.status == Contract.STATUS_ACTIVE

    def test_activate_action_reports_conflict(self, admin_client, changelist, make_contract, p1, c1, c2) -> None:
        first = make_contract(p1, c1, date(2024, 1, 1), date(2024, 12, 31), status=Contract.STATUS_ACTIVE)
        second = make_contract(p1, c2, date(2024, 6, 1), date(2024, 6, 30))

        response = admin_client.post(
            changelist,
            {"action": "activate_contracts", "_selected_action": [second.pk]},
            follow=True,
        )

        messages = [str(message) for message in response.context["messages"]]
        assert messages == [
            f"{second.get_display_id()}: Ya existe un contrato activo para este inmueble en las fechas especificadas"
        ]
        second.refresh_from_db()
        assert second.status == Contract.STATUS_DRAFT
        assert first.status == Contract.STATUS_ACTIVE

    def test_finish_action_on_draft_is_refused(self, admin_client, changelist, make_contract, p1, c1) -> None:
        contract = make_contract(p1, c1, date(2024, 1, 1), date(2024, 12, 31))

        admin_client.post(changelist, {"action": "finish_contracts", "_selected_action": [contract.pk]})

        contract.refresh_from_db()
        assert contract.status == Contract.STATUS_DRAFT

    def test_changelist_renders(self, admin_client, changelist, make_contract, p1, c1) -> None:
        make_contract(p1, c1, date(2024, 1, 1), date(2024, 12, 31))

        assert admin_client.get(changelist).status_code == 200


@pytest.mark.django_db
@pytest.mark.parametrize(
    "name",
    [
        "admin:INMUEBLES_property_changelist",
        "admin:CLIENTES_client_changelist",
        "admin:CLIENTES_agent_changelist",
        "admin:OPERACIONES_sale_changelist",
        "admin:OPERACIONES_rental_changelist",
        "admin:OPERACIONES_visit_changelist",
    ],
)
def test_catalog_changelists_render(admin_client, name) -> None:
    assert admin_client.get(reverse(name)).status_code == 200
