from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html
from unfold.admin import ModelAdmin, TabularInline

from image_crop.admin import ImageCropAdminMixin
from image_crop.templatetags.image_crop import preview_src

from .models import Post, PostImage


class PostImageInline(ImageCropAdminMixin, TabularInline):
    """Galeri satırları. Medya penceresinde seçilen her görsel için yeni satır eklenir."""
    model = PostImage
    extra = 0
    fields = ("gorsel", "aciklama", "sira")


@admin.register(Post)
class PostAdmin(ImageCropAdminMixin, ModelAdmin):
    list_display = ("baslik", "gorsel_thumb", "yayinda", "api_link", "created_at")
    list_filter = ("yayinda", "created_at")
    search_fields = ("baslik", "slug")
    prepopulated_fields = {"slug": ("baslik",)}
    list_select_related = ("one_cikan_gorsel",)
    inlines = [PostImageInline]

    def gorsel_thumb(self, obj):
        src = preview_src(obj.one_cikan_gorsel, "thumbnail")
        if src:
            return format_html(
                '<img src="{}" alt="" style="height:28px;width:28px;object-fit:cover;border-radius:4px;">',
                src,
            )
        return "—"

    gorsel_thumb.short_description = "Görsel"

    def api_link(self, obj):
        if obj.pk:
            return format_html('<a href="{}" target="_blank">JSON</a>', reverse("post_detail_api", args=[obj.pk]))
        return "-"

    api_link.short_description = "API"
