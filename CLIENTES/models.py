from django.db import models


class Client(models.Model):
    DOCUMENT_TYPE_CHOICES = (
        ('CC', 'Cédula de Ciudadanía'),
        ('CE', 'Cédula de Extranjería'),
        ('PP', 'Pasaporte'),
        ('NIT', 'NIT'),
    )

    TYPE_CHOICES = (
        ('BUYER', 'Comprador'),
        ('SELLER', 'Vendedor'),
        ('TENANT', 'Arrendatario'),
        ('LANDLORD', 'Arrendador'),
    )

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    document_type = models.CharField(max_length=3, choices=DOCUMENT_TYPE_CHOICES)
    document_number = models.CharField(max_length=20)
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=20, blank=True, default="")
    address = models.CharField(max_length=255, blank=True, default="")
    client_type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "cliente"
        constraints = [
            models.UniqueConstraint(
                fields=["document_type", "document_number"],
                name="cliente_documento_unico",
            ),
        ]

    def __str__(self):
        return self.get_full_name()

    def get_full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def get_display_id(self):
        return f"CLI{self.pk:03d}"


class Agent(models.Model):
    name = models.CharField(max_length=150)
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=20, blank=True, default="")
    advisor = models.CharField(max_length=150, blank=True, default="")
    active = models.BooleanField(default=True)

    class Meta:
        db_table = "agente"

    def __str__(self):
        return self.name
