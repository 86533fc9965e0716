"""Coordinador de transacciones del motor de contratos.

Cada operación que modifica datos corre completa dentro de
``transaction.atomic()``: si una verificación falla o la base de datos lanza
un error, la transacción se revierte y no queda ningún cambio parcial.
"""
import logging
from dataclasses import dataclass, field
from functools import partial
from typing import List

from django.db import DatabaseError, transaction

from . import store
from .conflicts import ensure_no_conflict, has_conflict
from .exceptions import (
    ContractEngineError,
    ContractNotDeletable,
    DependencyBlocked,
    PersistenceFailure,
)
from .guards import check_deletable
from .lifecycle import request_transition
from .models import Contract

logger = logging.getLogger(__name__)

DELETABLE_CONTRACT_STATUSES = (Contract.STATUS_DRAFT, Contract.STATUS_CANCELLED)

CONTRACT_FIELDS = ("contract_type", "start_date", "end_date", "value", "notes")


@dataclass(frozen=True)
class DeleteResult:
    entity_type: str
    entity_id: int
    removed_files: List[str] = field(default_factory=list)


def _remove_files(files):
    # El sistema de archivos queda fuera de la transacción: se intenta y se registra
    for field_file in files:
        name = field_file.name
        try:
            field_file.delete(save=False)
        except Exception:
            logger.warning("No se pudo eliminar el archivo %s", name, exc_info=True)
        else:
            logger.info("Archivo eliminado: %s", name)


def _persistence_failure(operation, exc):
    logger.exception("Error de base de datos en %s: %s", operation, exc)
    return PersistenceFailure()


def execute_delete(entity_type, entity_id):
    try:
        with transaction.atomic():
            entity = store.get_entity(entity_type, entity_id, lock=True)
            check = check_deletable(entity_type, entity_id)
            if not check.deletable:
                raise DependencyBlocked(store.entity_label(entity_type), check.reasons)

            files = store.side_asset_files(entity)
            # el callback vacía f.name al borrar el archivo
            removed_files = [f.name for f in files]
            entity.delete()
            transaction.on_commit(partial(_remove_files, files))
    except ContractEngineError:
        raise
    except DatabaseError as exc:
        raise _persistence_failure(f"eliminación de {entity_type} {entity_id}", exc) from exc

    logger.info("%s %s eliminado", store.entity_label(entity_type).capitalize(), entity_id)
    return DeleteResult(
        entity_type=entity_type,
        entity_id=entity_id,
        removed_files=removed_files,
    )


def execute_status_change(contract_id, target_status):
    try:
        with transaction.atomic():
            return request_transition(contract_id, target_status)
    except ContractEngineError:
        raise
    except DatabaseError as exc:
        raise _persistence_failure(f"cambio de estado del contrato {contract_id}", exc) from exc


def execute_bulk_status_change(contract_ids, target_status):
    """Cada contrato en su propia transacción; un rechazo no revierte los demás."""
    results = []
    for contract_id in contract_ids:
        try:
            transition = execute_status_change(contract_id, target_status)
        except ContractEngineError as exc:
            results.append({"id": contract_id, "success": False, "message": exc.message})
        else:
            results.append({
                "id": contract_id,
                "success": True,
                "message": f"Estado actualizado de {transition.previous_status} a {transition.new_status}",
            })
    success_count = sum(1 for result in results if result["success"])
    return {
        "results": results,
        "success_count": success_count,
        "total_count": len(results),
    }


def _resolve_parties(cleaned_data, lock_property=False):
    parties = {
        "property": store.get_property(cleaned_data["property_id"], lock=lock_property),
        "client": store.get_client(cleaned_data["client_id"]),
        "agent": None,
    }
    if cleaned_data.get("agent_id"):
        parties["agent"] = store.get_agent(cleaned_data["agent_id"])
    return parties


def execute_create_contract(cleaned_data):
    """Crea el contrato en borrador; los cruces se verifican al activarlo."""
    try:
        with transaction.atomic():
            parties = _resolve_parties(cleaned_data)
            contract = Contract.objects.create(
                status=Contract.STATUS_DRAFT,
                **{name: cleaned_data.get(name) for name in CONTRACT_FIELDS},
                **parties,
            )
    except ContractEngineError:
        raise
    except DatabaseError as exc:
        raise _persistence_failure("creación de contrato", exc) from exc

    logger.info("Contrato %s creado para el inmueble %s", contract.pk, contract.property_id)
    return contract


def execute_update_contract(contract_id, cleaned_data):
    """Actualiza los datos del contrato; el estado solo cambia por transiciones."""
    try:
        with transaction.atomic():
            contract = store.get_contract(contract_id, lock=True)
            is_active = contract.status == Contract.STATUS_ACTIVE
            parties = _resolve_parties(cleaned_data, lock_property=is_active)

            for name in CONTRACT_FIELDS:
                setattr(contract, name, cleaned_data.get(name))
            for name, value in parties.items():
                setattr(contract, name, value)

            if is_active:
                ensure_no_conflict(
                    contract.property_id,
                    contract.start_date,
                    contract.end_date,
                    exclude_contract_id=contract.pk,
                )
            contract.save()
    except ContractEngineError:
        raise
    except DatabaseError as exc:
        raise _persistence_failure(f"actualización del contrato {contract_id}", exc) from exc

    logger.info("Contrato %s actualizado", contract.pk)
    return contract


def execute_contract_delete(contract_id):
    try:
        with transaction.atomic():
            contract = store.get_contract(contract_id, lock=True)
            if contract.status not in DELETABLE_CONTRACT_STATUSES:
                raise ContractNotDeletable(contract.status)
            contract.delete()
    except ContractEngineError:
        raise
    except DatabaseError as exc:
        raise _persistence_failure(f"eliminación del contrato {contract_id}", exc) from exc

    logger.info("Contrato %s eliminado", contract_id)
    return DeleteResult(entity_type="CONTRACT", entity_id=contract_id)


def validate_date_range(property_id, start_date, end_date=None, exclude_contract_id=None):
    """Consulta de solo lectura para validar un rango antes de enviarlo."""
    store.get_property(property_id)
    check = has_conflict(property_id, start_date, end_date, exclude_contract_id)
    if check:
        return {
            "valid": False,
            "message": "Ya existe un contrato activo para este inmueble en las fechas especificadas",
            "conflicting_contract_id": check.contract_id,
        }
    return {"valid": True, "message": "Rango de fechas disponible", "conflicting_contract_id": None}
