from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Attachment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("file", models.ImageField(height_field="height", upload_to="attachments/%Y/%m/", verbose_name="Dosya", width_field="width")),
                ("width", models.PositiveIntegerField(blank=True, editable=False, null=True, verbose_name="Genişlik")),
                ("height", models.PositiveIntegerField(blank=True, editable=False, null=True, verbose_name="Yükseklik")),
                ("title", models.CharField(blank=True, max_length=200, verbose_name="Başlık")),
                ("alt", models.CharField(blank=True, max_length=300, verbose_name="Alternatif metin")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Oluşturulma")),
            ],
            options={
                "verbose_name": "Medya",
                "verbose_name_plural": "Medya kütüphanesi",
                "ordering": ["-created_at", "-pk"],
            },
        ),
    ]
