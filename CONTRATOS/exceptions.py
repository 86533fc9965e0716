"""Errores del motor de contratos.

Cada error lleva el mensaje, los datos y los errores por campo que el
manejador devuelve al cliente en el sobre ``{success, message, data, errors}``.
"""


class ContractEngineError(Exception):
    """Base de todos los errores del motor."""

    default_message = "No se pudo completar la operación"
    status_code = 400

    def __init__(self, message=None, data=None, errors=None):
        self.message = message or self.default_message
        self.data = data
        self.errors = errors if errors is not None else []
        super().__init__(self.message)


class NotFound(ContractEngineError):
    default_message = "Registro no encontrado"
    status_code = 404


class ValidationError(ContractEngineError):
    default_message = "Errores de validación"
    status_code = 400


class InvalidTransition(ContractEngineError):
    status_code = 409

    def __init__(self, current_status, requested_status, valid_transitions):
        self.current_status = current_status
        self.requested_status = requested_status
        self.valid_transitions = list(valid_transitions)
        super().__init__(
            f"No se puede cambiar el estado de {current_status} a {requested_status}",
            data={
                "current_status": current_status,
                "requested_status": requested_status,
                "valid_transitions": self.valid_transitions,
            },
        )


class SchedulingConflict(ContractEngineError):
    status_code = 409

    def __init__(self, contract_id):
        self.contract_id = contract_id
        super().__init__(
            "Ya existe un contrato activo para este inmueble en las fechas especificadas",
            data={
                "conflicting_contract_id": contract_id,
                "conflicting_display_id": f"CON{contract_id:03d}",
            },
        )


class DependencyBlocked(ContractEngineError):
    status_code = 409

    def __init__(self, label, reasons):
        self.reasons = list(reasons)
        super().__init__(
            f"No se puede eliminar el {label} porque tiene registros relacionados: "
            + ", ".join(self.reasons),
            data={"dependencies": self.reasons, "can_force_delete": False},
        )


class ContractNotDeletable(ContractEngineError):
    status_code = 409

    def __init__(self, current_status):
        self.current_status = current_status
        super().__init__(
            f"No se puede eliminar un contrato en estado {current_status}. Cancélelo primero.",
            data={"current_status": current_status, "can_delete": False},
        )


class PersistenceFailure(ContractEngineError):
    """Fallo de la base de datos; el detalle solo queda en el log."""

    default_message = "Error de base de datos, intente nuevamente"
    status_code = 500
