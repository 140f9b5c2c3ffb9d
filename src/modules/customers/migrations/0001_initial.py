from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "deleted_at",
                    models.DateTimeField(
                        blank=True, db_index=True, default=None, null=True
                    ),
                ),
                ("name", models.CharField(max_length=100)),
                ("email", models.EmailField(max_length=100, unique=True)),
                ("cpf", models.CharField(max_length=11, unique=True)),
                ("phone", models.CharField(blank=True, default="", max_length=15)),
            ],
            options={
                "db_table": "customers",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["name"], name="customers_name_idx"),
                ],
            },
        ),
    ]
