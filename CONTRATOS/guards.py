"""Verificación de dependencias antes de eliminar inmuebles, clientes o agentes."""
from dataclasses import dataclass, field

from . import store


@dataclass(frozen=True)
class DeletionCheck:
    entity_type: str
    entity_id: int
    counts: dict = field(default_factory=dict)

    @property
    def deletable(self):
        return not any(self.counts.values())

    @property
    def reasons(self):
        return [f"{count} {label}(s)" for label, count in self.counts.items() if count]


def check_deletable(entity_type, entity_id):
    # NotFound si la entidad no existe
    store.get_entity(entity_type, entity_id)
    return DeletionCheck(
        entity_type=entity_type,
        entity_id=entity_id,
        counts=store.count_dependents(entity_type, entity_id),
    )
