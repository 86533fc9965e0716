from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Client",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("first_name", models.CharField(max_length=100)),
                ("last_name", models.CharField(max_length=100)),
                (
                    "document_type",
                    models.CharField(
                        choices=[
                            ("CC", "Cédula de Ciudadanía"),
                            ("CE", "Cédula de Extranjería"),
                            ("PP", "Pasaporte"),
                            ("NIT", "NIT"),
                        ],
                        max_length=3,
                    ),
                ),
                ("document_number", models.CharField(max_length=20)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("phone", models.CharField(blank=True, default="", max_length=20)),
                ("address", models.CharField(blank=True, default="", max_length=255)),
                (
                    "client_type",
                    models.CharField(
                        choices=[
                            ("BUYER", "Comprador"),
                            ("SELLER", "Vendedor"),
                            ("TENANT", "Arrendatario"),
                            ("LANDLORD", "Arrendador"),
                        ],
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "cliente",
                "constraints": [
                    models.UniqueConstraint(
                        fields=("document_type", "document_number"),
                        name="cliente_documento_unico",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Agent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=150)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("phone", models.CharField(blank=True, default="", max_length=20)),
                ("advisor", models.CharField(blank=True, default="", max_length=150)),
                ("active", models.BooleanField(default=True)),
            ],
            options={
                "db_table": "agente",
            },
        ),
    ]
