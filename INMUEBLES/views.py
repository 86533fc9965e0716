from django.contrib.admin.views.decorators import staff_member_required
from django.views.decorators.http import require_GET, require_POST

from CONTRATOS import store
from CONTRATOS.responses import json_endpoint, json_response
from CONTRATOS.transactions import execute_delete


@staff_member_required
@require_GET
@json_endpoint
def property_detail(request, property_id):
    prop = store.get_property(property_id)
    data = {
        "id": prop.id,
        "display_id": prop.get_display_id(),
        "property_type": prop.property_type,
        "address": prop.address,
        "city": prop.city,
        "price": prop.price,
        "status": prop.status,
        "built_area_m2": prop.built_area_m2,
        "lot_area_m2": prop.lot_area_m2,
        "rooms": prop.rooms,
        "baths": prop.baths,
        "garage": prop.garage,
        "photos": [photo.image.url for photo in prop.photos.all() if photo.image],
        "dependencies": store.count_dependents(store.PROPERTY, prop.id),
    }
    return json_response(True, "Inmueble encontrado", {"property": data})


@staff_member_required
@require_POST
@json_endpoint
def property_delete(request, property_id):
    result = execute_delete(store.PROPERTY, property_id)
    return json_response(
        True,
        "Inmueble eliminado correctamente",
        {"id": result.entity_id, "removed_files": result.removed_files},
    )
