from django.db import models

from image_crop.fields import ImageCropField


class Post(models.Model):
    """Yazı. Öne çıkan görsel medya kütüphanesinden seçilir; API'de URL olarak döner."""
    baslik = models.CharField("Başlık", max_length=200)
    slug = models.SlugField("Kısa ad", max_length=200, unique=True)
    icerik = models.TextField("İçerik", blank=True)
    one_cikan_gorsel = ImageCropField(
        verbose_name="Öne çıkan görsel",
        save_format="url",
        help_text="Görsele tıklayarak medya penceresini açın; kırpma için 'Düzenle / kırp' bağlantısını kullanın.",
    )
    yayinda = models.BooleanField("Yayında", default=False)
    created_at = models.DateTimeField("Oluşturulma", auto_now_add=True)

    class Meta:
        verbose_name = "Yazı"
        verbose_name_plural = "Yazılar"
        ordering = ["-created_at"]

    def __str__(self):
        return self.baslik


class PostImage(models.Model):
    """Yazı galerisi satırı. Medya penceresinde birden fazla görsel seçilince her biri ayrı satır olur."""
    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        related_name="gorseller",
        verbose_name="Yazı",
    )
    gorsel = ImageCropField(
        verbose_name="Görsel",
        save_format="id",
        preview_size="medium",
    )
    aciklama = models.CharField("Açıklama", max_length=300, blank=True)
    sira = models.PositiveSmallIntegerField("Sıra", default=0)

    class Meta:
        verbose_name = "Galeri görseli"
        verbose_name_plural = "Galeri görselleri"
        ordering = ["post", "sira", "pk"]

    def __str__(self):
        return f"{self.post} #{self.sira}"
