from django.db import models

from CLIENTES.models import Agent, Client
from INMUEBLES.models import Property


class Sale(models.Model):
    sale_date = models.DateField()
    value = models.DecimalField(max_digits=14, decimal_places=2)
    commission = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    notes = models.TextField(blank=True, default="")
    property = models.ForeignKey(Property, on_delete=models.PROTECT, related_name="sales")
    client = models.ForeignKey(Client, on_delete=models.PROTECT, related_name="sales")
    agent = models.ForeignKey(Agent, on_delete=models.PROTECT, related_name="sales", blank=True, null=True)

    class Meta:
        db_table = "venta"


class Rental(models.Model):
    STATUS_CHOICES = (
        ('ACTIVE', 'Activo'),
        ('EXPIRED', 'Vencido'),
        ('TERMINATED', 'Terminado'),
        ('DELINQUENT', 'Moroso'),
    )

    start_date = models.DateField()
    end_date = models.DateField()
    monthly_rent = models.DecimalField(max_digits=12, decimal_places=2)
    deposit = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='ACTIVE')
    notes = models.TextField(blank=True, default="")
    property = models.ForeignKey(Property, on_delete=models.PROTECT, related_name="rentals")
    client = models.ForeignKey(Client, on_delete=models.PROTECT, related_name="rentals")
    agent = models.ForeignKey(Agent, on_delete=models.PROTECT, related_name="rentals", blank=True, null=True)

    class Meta:
        db_table = "arriendo"


class Visit(models.Model):
    STATUS_CHOICES = (
        ('SCHEDULED', 'Programada'),
        ('DONE', 'Realizada'),
        ('CANCELLED', 'Cancelada'),
        ('RESCHEDULED', 'Reprogramada'),
    )

    INTEREST_CHOICES = (
        ('VERY_INTERESTED', 'Muy Interesado'),
        ('INTERESTED', 'Interesado'),
        ('SLIGHTLY_INTERESTED', 'Poco Interesado'),
        ('NOT_INTERESTED', 'No Interesado'),
    )

    visit_date = models.DateField()
    visit_time = models.TimeField()
    status = models.CharField(max_length=12, choices=STATUS_CHOICES, default='SCHEDULED')
    interest = models.CharField(max_length=20, choices=INTEREST_CHOICES, blank=True, default="")
    notes = models.TextField(blank=True, default="")
    property = models.ForeignKey(Property, on_delete=models.PROTECT, related_name="visits")
    client = models.ForeignKey(Client, on_delete=models.PROTECT, related_name="visits")
    agent = models.ForeignKey(Agent, on_delete=models.PROTECT, related_name="visits", blank=True, null=True)

    class Meta:
        db_table = "visita"
