"""Detección de cruces entre contratos activos de un mismo inmueble."""
from dataclasses import dataclass
from typing import Optional

from . import store
from .exceptions import SchedulingConflict


@dataclass(frozen=True)
class ConflictCheck:
    conflict: bool
    contract_id: Optional[int] = None

    def __bool__(self):
        return self.conflict


def intervals_overlap(start_a, end_a, start_b, end_b):
    """Días completos: [s1, e1] y [s2, e2] se cruzan si s1 <= e2 y s2 <= e1.

    Un fin en ``None`` es abierto hacia adelante. Que un contrato termine el
    mismo día en que empieza el otro cuenta como cruce.
    """
    if end_b is not None and start_a > end_b:
        return False
    if end_a is not None and start_b > end_a:
        return False
    return True


def has_conflict(property_id, start_date, end_date=None, exclude_contract_id=None):
    contract = store.find_overlapping_active_contract(
        property_id,
        start_date,
        end_date,
        exclude_contract_id=exclude_contract_id,
    )
    if contract is None:
        return ConflictCheck(conflict=False)
    return ConflictCheck(conflict=True, contract_id=contract.pk)


def ensure_no_conflict(property_id, start_date, end_date=None, exclude_contract_id=None):
    check = has_conflict(property_id, start_date, end_date, exclude_contract_id)
    if check:
        raise SchedulingConflict(check.contract_id)
    return check
