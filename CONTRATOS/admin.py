from django.contrib import admin, messages

from .models import Contract
from .transactions import execute_bulk_status_change


def _change_status(modeladmin, request, queryset, target_status):
    summary = execute_bulk_status_change(
        list(queryset.values_list("id", flat=True)),
        target_status,
    )
    for result in summary["results"]:
        level = messages.SUCCESS if result["success"] else messages.ERROR
        modeladmin.message_user(request, f"CON{result['id']:03d}: {result['message']}", level)


@admin.action(description="Activar contratos seleccionados")
def activate_contracts(modeladmin, request, queryset):
    _change_status(modeladmin, request, queryset, Contract.STATUS_ACTIVE)


@admin.action(description="Finalizar contratos seleccionados")
def finish_contracts(modeladmin, request, queryset):
    _change_status(modeladmin, request, queryset, Contract.STATUS_FINISHED)


@admin.action(description="Cancelar contratos seleccionados")
def cancel_contracts(modeladmin, request, queryset):
    _change_status(modeladmin, request, queryset, Contract.STATUS_CANCELLED)


@admin.register(Contract)
class ContractAdmin(admin.ModelAdmin):
    list_display = ("id", "contract_type", "property", "client", "start_date", "end_date", "value", "status")
    list_filter = ("contract_type", "status")
    search_fields = ("id", "property__address", "client__email", "client__last_name")
    # El estado solo cambia con las acciones, que pasan por la máquina de estados
    readonly_fields = ("status", "created_at", "updated_at")
    actions = [activate_contracts, finish_contracts, cancel_contracts]
