from django.contrib import admin
from django.db import models
from django.utils.html import format_html
from unfold.admin import ModelAdmin

from .models import Attachment
from .widgets import ImageCropInput


@admin.register(Attachment)
class AttachmentAdmin(ModelAdmin):
    """Medya düzenleyici: görsel yüklenirken veya değiştirilirken kırpma modalı açılır."""
    list_display = ("title", "thumb", "width", "height", "created_at")
    list_filter = ("created_at",)
    search_fields = ("title", "alt", "file")
    readonly_fields = ("width", "height", "created_at")
    fields = ("file", "title", "alt", "width", "height", "created_at")
    formfield_overrides = {models.ImageField: {"widget": ImageCropInput}}

    def thumb(self, obj):
        src = obj.image_src("thumbnail") if obj.file else None
        if src:
            return format_html(
                '<img src="{}" alt="" style="height:28px;width:28px;object-fit:cover;border-radius:4px;">',
                src[0],
            )
        return "—"

    thumb.short_description = "Önizleme"

    def save_model(self, request, obj, form, change):
        # Yeni (kırpılmış) dosya eski önizlemeleri geçersiz kılar
        if change and "file" in form.changed_data:
            obj.delete_renditions()
        super().save_model(request, obj, form, change)
