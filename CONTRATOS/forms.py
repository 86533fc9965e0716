from django import forms

from .exceptions import ValidationError
from .lifecycle import VALID_TRANSITIONS
from .models import Contract


class ContractForm(forms.Form):
    contract_type = forms.ChoiceField(choices=Contract.TYPE_CHOICES)
    start_date = forms.DateField()
    end_date = forms.DateField(required=False)
    value = forms.DecimalField(max_digits=14, decimal_places=2)
    property_id = forms.IntegerField(min_value=1)
    client_id = forms.IntegerField(min_value=1)
    agent_id = forms.IntegerField(min_value=1, required=False)
    notes = forms.CharField(required=False)

    def clean_value(self):
        value = self.cleaned_data.get("value")
        if value is not None and value <= 0:
            raise forms.ValidationError("El valor del contrato debe ser mayor a 0")
        return value

    def clean_notes(self):
        return (self.cleaned_data.get("notes") or "").strip()

    def clean(self):
        cleaned_data = super().clean()
        contract_type = cleaned_data.get("contract_type")
        start_date = cleaned_data.get("start_date")
        end_date = cleaned_data.get("end_date")

        if contract_type == Contract.TYPE_RENTAL and not end_date and "end_date" not in self.errors:
            self.add_error("end_date", "La fecha de fin es obligatoria para contratos de arriendo")

        if start_date and end_date and end_date <= start_date:
            self.add_error("end_date", "La fecha de fin debe ser posterior a la fecha de inicio")

        return cleaned_data


class DateRangeForm(forms.Form):
    property_id = forms.IntegerField(min_value=1)
    start_date = forms.DateField()
    end_date = forms.DateField(required=False)
    exclude_contract_id = forms.IntegerField(min_value=1, required=False)

    def clean(self):
        cleaned_data = super().clean()
        start_date = cleaned_data.get("start_date")
        end_date = cleaned_data.get("end_date")
        if start_date and end_date and end_date <= start_date:
            self.add_error("end_date", "La fecha de fin debe ser posterior a la fecha de inicio")
        return cleaned_data


class StatusChangeForm(forms.Form):
    status = forms.ChoiceField(choices=[(status, status) for status in VALID_TRANSITIONS])


class BulkStatusChangeForm(StatusChangeForm):
    contract_ids = forms.CharField()

    def clean_contract_ids(self):
        raw = self.cleaned_data.get("contract_ids") or ""
        ids = []
        for part in raw.split(","):
            part = part.strip()
            if not part:
                continue
            if not part.isdigit() or int(part) <= 0:
                raise forms.ValidationError(f"ID de contrato inválido: {part}")
            ids.append(int(part))
        if not ids:
            raise forms.ValidationError("No se seleccionaron contratos")
        return ids


def clean_or_raise(form_class, data):
    """Valida ``data`` con el formulario o lanza ValidationError con los errores por campo."""
    form = form_class(data)
    if not form.is_valid():
        raise ValidationError(
            "Errores de validación",
            errors={name: list(messages) for name, messages in form.errors.items()},
        )
    return form.cleaned_data
