"""Máquina de estados de los contratos.

``VALID_TRANSITIONS`` es la única tabla de transiciones: la usan tanto la
validación como la lista de opciones que se devuelve a la interfaz.
"""
import logging
from dataclasses import dataclass

from . import store
from .conflicts import ensure_no_conflict
from .exceptions import InvalidTransition, ValidationError
from .models import Contract

logger = logging.getLogger(__name__)

VALID_TRANSITIONS = {
    Contract.STATUS_DRAFT: (Contract.STATUS_ACTIVE, Contract.STATUS_CANCELLED),
    Contract.STATUS_ACTIVE: (Contract.STATUS_FINISHED, Contract.STATUS_CANCELLED),
    Contract.STATUS_FINISHED: (),
    Contract.STATUS_CANCELLED: (),
}

TERMINAL_STATUSES = frozenset(
    status for status, targets in VALID_TRANSITIONS.items() if not targets
)


@dataclass(frozen=True)
class TransitionResult:
    contract_id: int
    previous_status: str
    new_status: str

    def as_dict(self):
        return {
            "id": self.contract_id,
            "previous_status": self.previous_status,
            "new_status": self.new_status,
        }


def valid_transitions(status):
    return list(VALID_TRANSITIONS.get(status, ()))


def can_transition(current_status, target_status):
    return target_status in VALID_TRANSITIONS.get(current_status, ())


def request_transition(contract_id, target_status):
    """Aplica el cambio de estado pedido; debe correr dentro de una transacción.

    Pasar a ACTIVE vuelve a comprobar los cruces con los demás contratos
    activos del inmueble, con la fila del inmueble bloqueada.
    """
    contract = store.get_contract(contract_id, lock=True)
    current_status = contract.status

    if target_status not in VALID_TRANSITIONS:
        raise ValidationError(
            "Estado inválido",
            errors={"status": f"Estado desconocido: {target_status}"},
        )

    if not can_transition(current_status, target_status):
        raise InvalidTransition(current_status, target_status, valid_transitions(current_status))

    if target_status == Contract.STATUS_ACTIVE:
        store.get_property(contract.property_id, lock=True)
        ensure_no_conflict(
            contract.property_id,
            contract.start_date,
            contract.end_date,
            exclude_contract_id=contract.pk,
        )

    contract.status = target_status
    contract.save(update_fields=["status", "updated_at"])

    logger.info("Contrato %s: %s -> %s", contract.pk, current_status, target_status)
    return TransitionResult(
        contract_id=contract.pk,
        previous_status=current_status,
        new_status=target_status,
    )
