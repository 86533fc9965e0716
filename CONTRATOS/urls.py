from django.urls import path
from .views import (
    contract_bulk_status_change,
    contract_create,
    contract_delete,
    contract_detail,
    contract_expiring_list,
    contract_status_change,
    contract_update,
    contract_validate_range,
)

urlpatterns = [
    path('api/crear/', contract_create, name='contract_create'),
    path('api/validar/', contract_validate_range, name='contract_validate_range'),
    path('api/por-vencer/', contract_expiring_list, name='contract_expiring_list'),
    path('api/estado-masivo/', contract_bulk_status_change, name='contract_bulk_status_change'),
    path('api/<int:contract_id>/', contract_detail, name='contract_detail'),
    path('api/<int:contract_id>/actualizar/', contract_update, name='contract_update'),
    path('api/<int:contract_id>/estado/', contract_status_change, name='contract_status_change'),
    path('api/<int:contract_id>/eliminar/', contract_delete, name='contract_delete'),
]
