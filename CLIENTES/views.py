from django.contrib.admin.views.decorators import staff_member_required
from django.views.decorators.http import require_GET, require_POST

from CONTRATOS import store
from CONTRATOS.responses import json_endpoint, json_response
from CONTRATOS.transactions import execute_delete


@staff_member_required
@require_GET
@json_endpoint
def client_detail(request, client_id):
    client = store.get_client(client_id)
    data = {
        "id": client.id,
        "display_id": client.get_display_id(),
        "full_name": client.get_full_name(),
        "document_type": client.document_type,
        "document_number": client.document_number,
        "email": client.email,
        "phone": client.phone,
        "client_type": client.client_type,
    }
    return json_response(
        True,
        "Cliente encontrado",
        {"client": data, "related": store.count_dependents(store.CLIENT, client.id)},
    )


@staff_member_required
@require_POST
@json_endpoint
def client_delete(request, client_id):
    result = execute_delete(store.CLIENT, client_id)
    return json_response(True, "Cliente eliminado exitosamente", {"id": result.entity_id})


@staff_member_required
@require_POST
@json_endpoint
def agent_delete(request, agent_id):
    result = execute_delete(store.AGENT, agent_id)
    return json_response(True, "Agente eliminado exitosamente", {"id": result.entity_id})
