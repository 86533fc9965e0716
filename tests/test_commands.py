"""Tests for the check_expiring_contracts command."""

from datetime import timedelta
from io import StringIO

import pytest
from django.core.management import call_command
from django.utils import timezone

from CONTRATOS.models import Contract


def run_command(*args):
    out = StringIO()
    call_command("check_expiring_contracts", *args, stdout=out)
    return out.getvalue()


@pytest.mark.django_db
class TestCheckExpiringContracts:
    def test_nothing_to_report(self) -> None:
        output = run_command("--days", "15")

        assert "No hay contratos activos por vencer en 15 días." in output

    def test_lists_active_contracts_in_window(self, make_contract, make_property, p1, c1, c2) -> None:
        today = timezone.localdate()
        expiring = make_contract(
            p1, c1, today - timedelta(days=60), today + timedelta(days=5), status=Contract.STATUS_ACTIVE
        )
        make_contract(
            make_property(), c2, today - timedelta(days=60), today + timedelta(days=5),
        )
        make_contract(
            make_property(), c2, today - timedelta(days=60), today + timedelta(days=45),
            status=Contract.STATUS_ACTIVE,
        )

        output = run_command("--days", "30")

        assert "1 contrato(s) vencen en los próximos 30 días:" in output
        assert expiring.get_display_id() in output
        assert "Ana Gómez" in output
        assert "(5 días)" in output

    def test_days_are_clamped(self, settings) -> None:
        settings.CONTRACT_EXPIRING_MAX_DAYS = 60

        output = run_command("--days", "365")

        assert "en 60 días" in output
