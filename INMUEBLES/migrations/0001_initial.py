from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Property",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "property_type",
                    models.CharField(
                        choices=[
                            ("HOUSE", "Casa"),
                            ("APARTMENT", "Apartamento"),
                            ("COMMERCIAL", "Local Comercial"),
                            ("OFFICE", "Oficina"),
                            ("LOT", "Lote"),
                        ],
                        max_length=20,
                    ),
                ),
                ("address", models.CharField(max_length=255)),
                ("city", models.CharField(max_length=100)),
                ("price", models.DecimalField(decimal_places=2, max_digits=14)),
                ("description", models.TextField(blank=True, default="")),
                ("built_area_m2", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("lot_area_m2", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("rooms", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("baths", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("garage", models.BooleanField(default=False)),
                (
                    "status",
                    models.CharField(
                        choices=[("AVAILABLE", "Disponible"), ("RENTED", "Arrendado"), ("SOLD", "Vendido")],
                        default="AVAILABLE",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "inmueble",
            },
        ),
        migrations.CreateModel(
            name="PropertyPhoto",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("image", models.FileField(upload_to="property_photos/")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "property",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="photos",
                        to="INMUEBLES.property",
                    ),
                ),
            ],
            options={
                "db_table": "inmueble_foto",
            },
        ),
    ]
