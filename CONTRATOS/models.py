from django.db import models

from CLIENTES.models import Agent, Client
from INMUEBLES.models import Property


class Contract(models.Model):
    TYPE_SALE = 'SALE'
    TYPE_RENTAL = 'RENTAL'
    TYPE_CHOICES = (
        (TYPE_SALE, 'Venta'),
        (TYPE_RENTAL, 'Arriendo'),
    )

    STATUS_DRAFT = 'DRAFT'
    STATUS_ACTIVE = 'ACTIVE'
    STATUS_FINISHED = 'FINISHED'
    STATUS_CANCELLED = 'CANCELLED'
    STATUS_CHOICES = (
        (STATUS_DRAFT, 'Borrador'),
        (STATUS_ACTIVE, 'Activo'),
        (STATUS_FINISHED, 'Finalizado'),
        (STATUS_CANCELLED, 'Cancelado'),
    )

    contract_type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    start_date = models.DateField()
    # Obligatoria para arriendos, abierta (NULL) en ventas sin fecha de cierre
    end_date = models.DateField(blank=True, null=True)
    value = models.DecimalField(max_digits=14, decimal_places=2)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    notes = models.TextField(blank=True, default="")
    property = models.ForeignKey(Property, on_delete=models.PROTECT, related_name="contracts")
    client = models.ForeignKey(Client, on_delete=models.PROTECT, related_name="contracts")
    agent = models.ForeignKey(Agent, on_delete=models.PROTECT, related_name="contracts", blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "contrato"
        ordering = ["-start_date", "-id"]
        indexes = [
            models.Index(fields=["property", "status"], name="contrato_inmueble_estado_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__isnull=True) | models.Q(end_date__gt=models.F("start_date")),
                name="contrato_fin_posterior_inicio",
            ),
        ]

    def __str__(self):
        return f"{self.get_display_id()} - {self.get_contract_type_display()}"

    def get_display_id(self):
        return f"CON{self.pk:03d}"
