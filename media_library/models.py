import io
import logging
import os

from django.core.files.base import ContentFile
from django.db import models
from PIL import Image, UnidentifiedImageError

from image_crop.conf import get_preview_size

logger = logging.getLogger(__name__)

RENDITIONS_DIR = "renditions"


class Attachment(models.Model):
    """Medya kütüphanesindeki görsel. Kırpma, admin düzenleme sayfasındaki kırpma modalı ile yapılır."""
    file = models.ImageField(
        "Dosya",
        upload_to="attachments/%Y/%m/",
        width_field="width",
        height_field="height",
    )
    width = models.PositiveIntegerField("Genişlik", null=True, blank=True, editable=False)
    height = models.PositiveIntegerField("Yükseklik", null=True, blank=True, editable=False)
    title = models.CharField("Başlık", max_length=200, blank=True)
    alt = models.CharField("Alternatif metin", max_length=300, blank=True)
    created_at = models.DateTimeField("Oluşturulma", auto_now_add=True)

    class Meta:
        verbose_name = "Medya"
        verbose_name_plural = "Medya kütüphanesi"
        ordering = ["-created_at", "-pk"]

    def __str__(self):
        return self.title or os.path.basename(self.file.name or "") or f"({self.pk})"

    @property
    def url(self):
        """Orijinal dosyanın URL'si."""
        return self.file.url if self.file else None

    def rendition_name(self, width, height):
        base, ext = os.path.splitext(os.path.basename(self.file.name))
        return f"{RENDITIONS_DIR}/{width}x{height}/{self.pk}-{base}{ext}"

    def image_src(self, size="thumbnail"):
        """
        İstenen boyut için (url, genişlik, yükseklik) döner.
        'full' orijinal dosyadır; diğer boyutlar orantılı küçültülmüş kopya olarak bir kez üretilir.
        Dosya okunamazsa None döner. Bilinmeyen boyut KeyError verir.
        """
        dims = get_preview_size(size)
        if not self.file:
            return None
        if dims is None:
            return self.file.url, self.width, self.height
        storage = self.file.storage
        name = self.rendition_name(*dims)
        if not storage.exists(name):
            try:
                content, rendered = self._render(dims)
            except (OSError, ValueError, UnidentifiedImageError) as e:
                logger.warning("Önizleme üretilemedi (attachment=%s, size=%s): %s", self.pk, size, e)
                return None
            name = storage.save(name, content)
            logger.debug("Önizleme üretildi: %s", name)
            return storage.url(name), rendered[0], rendered[1]
        try:
            with storage.open(name) as f, Image.open(f) as img:
                w, h = img.size
        except (OSError, UnidentifiedImageError) as e:
            logger.warning("Önizleme okunamadı (%s): %s", name, e)
            return None
        return storage.url(name), w, h

    def _render(self, dims):
        self.file.open("rb")
        try:
            with Image.open(self.file) as img:
                fmt = img.format or "PNG"
                img.thumbnail(dims)
                if fmt == "JPEG" and img.mode not in ("RGB", "L"):
                    img = img.convert("RGB")
                buf = io.BytesIO()
                img.save(buf, format=fmt)
                size = img.size
        finally:
            self.file.close()
        return ContentFile(buf.getvalue()), size

    def delete_renditions(self):
        """Bu eke ait tüm küçültülmüş kopyaları siler (dosya değiştiğinde)."""
        storage = self.file.storage
        try:
            size_dirs, _files = storage.listdir(RENDITIONS_DIR)
        except (FileNotFoundError, NotImplementedError):
            return
        prefix = f"{self.pk}-"
        for size_dir in size_dirs:
            _dirs, files = storage.listdir(f"{RENDITIONS_DIR}/{size_dir}")
            for fname in files:
                if fname.startswith(prefix):
                    storage.delete(f"{RENDITIONS_DIR}/{size_dir}/{fname}")
