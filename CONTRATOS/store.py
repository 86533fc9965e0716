"""Acceso a los registros que usa el motor de contratos.

Es el único módulo del motor que consulta la base de datos. Las lecturas con
``lock=True`` usan ``select_for_update`` y deben ejecutarse dentro de
``transaction.atomic()``.
"""
from datetime import timedelta

from django.db.models import Q
from django.utils import timezone

from CLIENTES.models import Agent, Client
from INMUEBLES.models import Property
from OPERACIONES.models import Rental, Sale, Visit
from .exceptions import NotFound
from .models import Contract

PROPERTY = "PROPERTY"
CLIENT = "CLIENT"
AGENT = "AGENT"

# tipo de entidad -> (modelo, etiqueta, columna en las tablas dependientes)
ENTITIES = {
    PROPERTY: (Property, "inmueble", "property_id"),
    CLIENT: (Client, "cliente", "client_id"),
    AGENT: (Agent, "agente", "agent_id"),
}

DEPENDENT_TABLES = (
    (Sale, "venta"),
    (Contract, "contrato"),
    (Rental, "arriendo"),
    (Visit, "visita"),
)


def entity_label(entity_type):
    try:
        return ENTITIES[entity_type][1]
    except KeyError:
        raise NotFound(f"Tipo de entidad desconocido: {entity_type}")


def get_entity(entity_type, entity_id, lock=False):
    if entity_type not in ENTITIES:
        raise NotFound(f"Tipo de entidad desconocido: {entity_type}")
    model, label, _ = ENTITIES[entity_type]
    queryset = model.objects.all()
    if lock:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(pk=entity_id)
    except model.DoesNotExist:
        raise NotFound(
            f"{label.capitalize()} no encontrado",
            errors={label: f"{label.capitalize()} {entity_id} no existe"},
        )


def get_property(property_id, lock=False):
    return get_entity(PROPERTY, property_id, lock=lock)


def get_client(client_id):
    return get_entity(CLIENT, client_id)


def get_agent(agent_id):
    return get_entity(AGENT, agent_id)


def get_contract(contract_id, lock=False):
    if lock:
        # sin select_related: FOR UPDATE no admite el lado nulo del LEFT JOIN con agente
        queryset = Contract.objects.select_for_update()
    else:
        queryset = Contract.objects.select_related("property", "client", "agent")
    try:
        return queryset.get(pk=contract_id)
    except Contract.DoesNotExist:
        raise NotFound(
            "Contrato no encontrado",
            errors={"contrato": f"Contrato {contract_id} no existe"},
        )


def count_dependents(entity_type, entity_id):
    """Cuenta filas en venta, contrato, arriendo y visita que apuntan a la entidad."""
    column = ENTITIES[entity_type][2]
    return {
        label: model.objects.filter(**{column: entity_id}).count()
        for model, label in DEPENDENT_TABLES
    }


def side_asset_files(entity):
    if isinstance(entity, Property):
        return entity.photo_files()
    return []


def find_overlapping_active_contract(property_id, start_date, end_date=None, exclude_contract_id=None):
    """Primer contrato activo del inmueble cuyo intervalo se cruza con [start_date, end_date].

    Un ``end_date`` nulo, propio o ajeno, se trata como intervalo abierto.
    """
    queryset = Contract.objects.filter(
        property_id=property_id,
        status=Contract.STATUS_ACTIVE,
    ).filter(Q(end_date__isnull=True) | Q(end_date__gte=start_date))
    if end_date is not None:
        queryset = queryset.filter(start_date__lte=end_date)
    if exclude_contract_id:
        queryset = queryset.exclude(pk=exclude_contract_id)
    return queryset.order_by("start_date", "id").first()


def expiring_contracts(days, today=None):
    today = today or timezone.localdate()
    return (
        Contract.objects.select_related("property", "client")
        .filter(
            status=Contract.STATUS_ACTIVE,
            end_date__isnull=False,
            end_date__gte=today,
            end_date__lte=today + timedelta(days=days),
        )
        .order_by("end_date", "id")
    )
