from django.conf import settings
from django.contrib.admin.views.decorators import staff_member_required
from django.utils import timezone
from django.views.decorators.http import require_GET, require_POST

from . import store
from .forms import (
    BulkStatusChangeForm,
    ContractForm,
    DateRangeForm,
    StatusChangeForm,
    clean_or_raise,
)
from .lifecycle import valid_transitions
from .responses import json_endpoint, json_response, read_payload
from .transactions import (
    execute_bulk_status_change,
    execute_contract_delete,
    execute_create_contract,
    execute_status_change,
    execute_update_contract,
    validate_date_range,
)


def contract_to_dict(contract):
    return {
        "id": contract.id,
        "display_id": contract.get_display_id(),
        "contract_type": contract.contract_type,
        "start_date": contract.start_date,
        "end_date": contract.end_date,
        "value": contract.value,
        "status": contract.status,
        "status_display": contract.get_status_display(),
        "valid_transitions": valid_transitions(contract.status),
        "notes": contract.notes,
        "property_id": contract.property_id,
        "client_id": contract.client_id,
        "agent_id": contract.agent_id,
        "updated_at": contract.updated_at,
    }


@staff_member_required
@require_POST
@json_endpoint
def contract_create(request):
    cleaned_data = clean_or_raise(ContractForm, read_payload(request))
    contract = execute_create_contract(cleaned_data)
    return json_response(
        True,
        "Contrato creado exitosamente",
        {"id": contract.id, "contract": contract_to_dict(contract)},
        status=201,
    )


@staff_member_required
@require_POST
@json_endpoint
def contract_update(request, contract_id):
    cleaned_data = clean_or_raise(ContractForm, read_payload(request))
    contract = execute_update_contract(contract_id, cleaned_data)
    return json_response(
        True,
        "Contrato actualizado exitosamente",
        {"id": contract.id, "contract": contract_to_dict(contract)},
    )


@staff_member_required
@require_POST
@json_endpoint
def contract_status_change(request, contract_id):
    cleaned_data = clean_or_raise(StatusChangeForm, read_payload(request))
    result = execute_status_change(contract_id, cleaned_data["status"])
    return json_response(
        True,
        f"Estado actualizado de {result.previous_status} a {result.new_status}",
        result.as_dict(),
    )


@staff_member_required
@require_POST
@json_endpoint
def contract_bulk_status_change(request):
    payload = read_payload(request)
    contract_ids = payload.get("contract_ids")
    if isinstance(contract_ids, (list, tuple)):
        payload["contract_ids"] = ",".join(str(contract_id) for contract_id in contract_ids)
    cleaned_data = clean_or_raise(BulkStatusChangeForm, payload)
    summary = execute_bulk_status_change(cleaned_data["contract_ids"], cleaned_data["status"])
    return json_response(
        summary["success_count"] > 0,
        f"Procesados {summary['success_count']} de {summary['total_count']} contratos",
        summary,
    )


@staff_member_required
@require_POST
@json_endpoint
def contract_delete(request, contract_id):
    execute_contract_delete(contract_id)
    return json_response(True, "Contrato eliminado exitosamente", {"id": contract_id})


@staff_member_required
@require_POST
@json_endpoint
def contract_validate_range(request):
    cleaned_data = clean_or_raise(DateRangeForm, read_payload(request))
    result = validate_date_range(
        cleaned_data["property_id"],
        cleaned_data["start_date"],
        cleaned_data.get("end_date"),
        cleaned_data.get("exclude_contract_id"),
    )
    return json_response(True, result["message"], result)


@staff_member_required
@require_GET
@json_endpoint
def contract_detail(request, contract_id):
    contract = store.get_contract(contract_id)
    data = contract_to_dict(contract)
    data["property"] = str(contract.property)
    data["client"] = contract.client.get_full_name()
    data["agent"] = contract.agent.name if contract.agent else "Sin agente"
    return json_response(True, "Contrato encontrado", {"contract": data})


@staff_member_required
@require_GET
@json_endpoint
def contract_expiring_list(request):
    default_days = getattr(settings, "CONTRACT_EXPIRING_DEFAULT_DAYS", 30)
    max_days = getattr(settings, "CONTRACT_EXPIRING_MAX_DAYS", 90)
    try:
        days = int(request.GET.get("days") or default_days)
    except ValueError:
        days = default_days
    days = max(0, min(days, max_days))

    today = timezone.localdate()
    contracts = store.expiring_contracts(days, today=today)
    data = []
    for contract in contracts:
        item = contract_to_dict(contract)
        item["property"] = str(contract.property)
        item["client"] = contract.client.get_full_name()
        item["days_remaining"] = (contract.end_date - today).days
        data.append(item)
    return json_response(
        True,
        "Contratos próximos a vencer obtenidos",
        {"contracts": data, "count": len(data), "days": days},
    )
