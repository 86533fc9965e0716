"""Frontera entre los manejadores HTTP y el motor de contratos.

Todas las respuestas usan el mismo sobre JSON:
``{"success": bool, "message": str, "data": object|null, "errors": object|array}``.
"""
import json
import logging
from functools import wraps

from django.http import JsonResponse

from .exceptions import ContractEngineError, PersistenceFailure, ValidationError

logger = logging.getLogger(__name__)


def envelope(success, message, data=None, errors=None):
    return {
        "success": success,
        "message": message,
        "data": data,
        "errors": errors if errors is not None else [],
    }


def json_response(success, message, data=None, errors=None, status=200):
    return JsonResponse(envelope(success, message, data, errors), status=status)


def error_response(exc):
    return json_response(False, exc.message, exc.data, exc.errors, status=exc.status_code)


def read_payload(request):
    """Cuerpo JSON o campos de formulario, como un dict plano."""
    if request.content_type == "application/json":
        if not request.body:
            return {}
        try:
            payload = json.loads(request.body)
        except (ValueError, UnicodeDecodeError):
            raise ValidationError("JSON inválido", errors={"body": "El cuerpo no es JSON válido"})
        if not isinstance(payload, dict):
            raise ValidationError("JSON inválido", errors={"body": "Se esperaba un objeto JSON"})
        return payload
    data = request.POST
    return {key: data.getlist(key) if len(data.getlist(key)) > 1 else data.get(key) for key in data}


def json_endpoint(view_func):
    """Traduce los errores del motor al sobre JSON; nunca expone el detalle interno."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        try:
            return view_func(request, *args, **kwargs)
        except ContractEngineError as exc:
            return error_response(exc)
        except Exception:
            logger.exception("Error inesperado en %s %s", request.method, request.path)
            return error_response(PersistenceFailure())
    return wrapper
