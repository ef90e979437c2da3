from .fields import ImageCropField


class ImageCropAdminMixin:
    """
    ModelAdmin / inline için: ImageCropField alanlarını ilişki bağlantıları (ekle/değiştir ikonları)
    ve tema select widget'ı olmadan, kendi widget'ıyla çizer.
    """

    def formfield_for_dbfield(self, db_field, request, **kwargs):
        if isinstance(db_field, ImageCropField):
            return db_field.formfield(**kwargs)
        return super().formfield_for_dbfield(db_field, request, **kwargs)
