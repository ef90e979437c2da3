import django.db.models.deletion
import image_crop.fields
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("media_library", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Post",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("baslik", models.CharField(max_length=200, verbose_name="Başlık")),
                ("slug", models.SlugField(max_length=200, unique=True, verbose_name="Kısa ad")),
                ("icerik", models.TextField(blank=True, verbose_name="İçerik")),
                (
                    "one_cikan_gorsel",
                    image_crop.fields.ImageCropField(
                        blank=True,
                        help_text="Görsele tıklayarak medya penceresini açın; kırpma için 'Düzenle / kırp' bağlantısını kullanın.",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        save_format="url",
                        to="media_library.attachment",
                        verbose_name="Öne çıkan görsel",
                    ),
                ),
                ("yayinda", models.BooleanField(default=False, verbose_name="Yayında")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Oluşturulma")),
            ],
            options={
                "verbose_name": "Yazı",
                "verbose_name_plural": "Yazılar",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="PostImage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "gorsel",
                    image_crop.fields.ImageCropField(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        preview_size="medium",
                        related_name="+",
                        save_format="id",
                        to="media_library.attachment",
                        verbose_name="Görsel",
                    ),
                ),
                ("aciklama", models.CharField(blank=True, max_length=300, verbose_name="Açıklama")),
                ("sira", models.PositiveSmallIntegerField(default=0, verbose_name="Sıra")),
                (
                    "post",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="gorseller",
                        to="core.post",
                        verbose_name="Yazı",
                    ),
                ),
            ],
            options={
                "verbose_name": "Galeri görseli",
                "verbose_name_plural": "Galeri görselleri",
                "ordering": ["post", "sira", "pk"],
            },
        ),
    ]
