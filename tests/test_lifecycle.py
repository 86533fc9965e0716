"""Tests for the contract state machine."""

from datetime import date

import pytest

from CONTRATOS.exceptions import InvalidTransition, NotFound, SchedulingConflict, ValidationError
from CONTRATOS.lifecycle import (
    TERMINAL_STATUSES,
    VALID_TRANSITIONS,
    can_transition,
    request_transition,
    valid_transitions,
)
from CONTRATOS.models import Contract
from CONTRATOS.transactions import execute_status_change

ALL_STATUSES = [status for status, _ in Contract.STATUS_CHOICES]


class TestTransitionTable:
    """The adjacency map is the single source of legal transitions."""

    def test_covers_every_status(self) -> None:
        assert set(VALID_TRANSITIONS) == set(ALL_STATUSES)

    def test_draft_targets(self) -> None:
        assert valid_transitions(Contract.STATUS_DRAFT) == [Contract.STATUS_ACTIVE, Contract.STATUS_CANCELLED]

    def test_active_targets(self) -> None:
        assert valid_transitions(Contract.STATUS_ACTIVE) == [Contract.STATUS_FINISHED, Contract.STATUS_CANCELLED]

    def test_terminal_statuses(self) -> None:
        assert TERMINAL_STATUSES == {Contract.STATUS_FINISHED, Contract.STATUS_CANCELLED}
        for status in TERMINAL_STATUSES:
            assert valid_transitions(status) == []

    @pytest.mark.parametrize("status", ALL_STATUSES)
    def test_same_state_is_never_a_transition(self, status) -> None:
        assert not can_transition(status, status)

    def test_unknown_status_has_no_targets(self) -> None:
        assert valid_transitions("ARCHIVED") == []


@pytest.mark.django_db
class TestRequestTransition:
    """Applying transitions against stored contracts."""

    def test_scenario_a_draft_to_active_then_active_again(self, make_contract, p1, c1) -> None:
        contract = make_contract(p1, c1, date(2024, 1, 1), date(2024, 12, 31))
        assert contract.status == Contract.STATUS_DRAFT

        result = execute_status_change(contract.pk, Contract.STATUS_ACTIVE)

        assert result.previous_status == Contract.STATUS_DRAFT
        assert result.new_status == Contract.STATUS_ACTIVE
        contract.refresh_from_db()
        assert contract.status == Contract.STATUS_ACTIVE

        with pytest.raises(InvalidTransition) as exc_info:
            execute_status_change(contract.pk, Contract.STATUS_ACTIVE)

        assert exc_info.value.data == {
            "current_status": Contract.STATUS_ACTIVE,
            "requested_status": Contract.STATUS_ACTIVE,
            "valid_transitions": [Contract.STATUS_FINISHED, Contract.STATUS_CANCELLED],
        }

    def test_scenario_b_overlapping_activation_is_rejected(self, make_contract, p1, c1, c2) -> None:
        first = make_contract(p1, c1, date(2024, 1, 1), date(2024, 12, 31))
        execute_status_change(first.pk, Contract.STATUS_ACTIVE)
        second = make_contract(p1, c2, date(2024, 6, 1), date(2024, 6, 30))

        with pytest.raises(SchedulingConflict) as exc_info:
            execute_status_change(second.pk, Contract.STATUS_ACTIVE)

        assert exc_info.value.contract_id == first.pk
        assert exc_info.value.data["conflicting_contract_id"] == first.pk
        second.refresh_from_db()
        assert second.status == Contract.STATUS_DRAFT

    def test_activation_without_overlap_succeeds(self, make_contract, p1, c1, c2) -> None:
        first = make_contract(p1, c1, date(2024, 1, 1), date(2024, 6, 30))
        execute_status_change(first.pk, Contract.STATUS_ACTIVE)
        second = make_contract(p1, c2, date(2024, 7, 1), date(2024, 12, 31))

        result = execute_status_change(second.pk, Contract.STATUS_ACTIVE)

        assert result.new_status == Contract.STATUS_ACTIVE

    def test_cancel_draft(self, make_contract, p1, c1) -> None:
        contract = make_contract(p1, c1, date(2024, 1, 1), date(2024, 12, 31))

        result = request_transition(contract.pk, Contract.STATUS_CANCELLED)

        assert result.as_dict() == {
            "id": contract.pk,
            "previous_status": Contract.STATUS_DRAFT,
            "new_status": Contract.STATUS_CANCELLED,
        }

    def test_draft_cannot_finish(self, make_contract, p1, c1) -> None:
        contract = make_contract(p1, c1, date(2024, 1, 1), date(2024, 12, 31))

        with pytest.raises(InvalidTransition) as exc_info:
            request_transition(contract.pk, Contract.STATUS_FINISHED)

        assert exc_info.value.valid_transitions == [Contract.STATUS_ACTIVE, Contract.STATUS_CANCELLED]

    @pytest.mark.parametrize("terminal", [Contract.STATUS_FINISHED, Contract.STATUS_CANCELLED])
    @pytest.mark.parametrize("target", ALL_STATUSES)
    def test_terminal_contracts_never_change(self, make_contract, p1, c1, terminal, target) -> None:
        contract = make_contract(p1, c1, date(2024, 1, 1), date(2024, 12, 31), status=terminal)

        with pytest.raises(InvalidTransition):
            execute_status_change(contract.pk, target)

        contract.refresh_from_db()
        assert contract.status == terminal

    def test_rejection_is_idempotent(self, make_contract, p1, c1) -> None:
        contract = make_contract(
            p1, c1, date(2024, 1, 1), date(2024, 12, 31), status=Contract.STATUS_FINISHED
        )
        before = contract.updated_at

        errors = []
        for _ in range(2):
            with pytest.raises(InvalidTransition) as exc_info:
                execute_status_change(contract.pk, Contract.STATUS_ACTIVE)
            errors.append((exc_info.value.message, exc_info.value.data))

        assert errors[0] == errors[1]
        contract.refresh_from_db()
        assert contract.status == Contract.STATUS_FINISHED
        assert contract.updated_at == before

    def test_success_touches_updated_at(self, make_contract, p1, c1) -> None:
        contract = make_contract(p1, c1, date(2024, 1, 1), date(2024, 12, 31))
        before = contract.updated_at

        execute_status_change(contract.pk, Contract.STATUS_ACTIVE)

        contract.refresh_from_db()
        assert contract.updated_at >= before

    def test_missing_contract(self) -> None:
        with pytest.raises(NotFound):
            execute_status_change(999999, Contract.STATUS_ACTIVE)

    def test_missing_contract_wins_over_unknown_status(self) -> None:
        with pytest.raises(NotFound):
            execute_status_change(999999, "ARCHIVED")

    def test_unknown_target_status(self, make_contract, p1, c1) -> None:
        contract = make_contract(p1, c1, date(2024, 1, 1), date(2024, 12, 31))

        with pytest.raises(ValidationError):
            execute_status_change(contract.pk, "ARCHIVED")
