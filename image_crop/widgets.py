"""Admin formunda önizleme + medya penceresi ile görsel seçme widget'ı."""
from urllib.parse import urlencode

from django import forms
from django.urls import reverse

from .conf import get_setting
from .previews import get_preview_url


class ImageCropWidget(forms.Widget):
    """
    Gizli input + önizleme görseli. Görsele veya "Görsel ekle" düğmesine tıklanınca medya penceresi açılır;
    seçilen ekin ID'si gizli input'a yazılır.
    """
    template_name = "image_crop/widgets/image_crop.html"

    def __init__(self, attrs=None, preview_size=None):
        self.preview_size = preview_size or get_setting("DEFAULT_PREVIEW_SIZE")
        super().__init__(attrs)

    class Media:
        css = {"all": ("image_crop/css/image_crop_field.css",)}
        js = ("image_crop/js/image_crop_field.js",)

    def popup_url(self):
        query = urlencode({"field_type": "image", "preview_size": self.preview_size})
        return f"{reverse('image_crop:popup')}?{query}"

    def get_context(self, name, value, attrs):
        context = super().get_context(name, value, attrs)
        preview_url = get_preview_url(value, self.preview_size)
        context["widget"].update({
            "preview_url": preview_url or "",
            "active": bool(preview_url),
            "preview_size": self.preview_size,
            "popup_url": self.popup_url(),
            "preview_endpoint": reverse("image_crop:preview"),
        })
        return context

    def value_from_datadict(self, data, files, name):
        return data.get(name)

    def value_omitted_from_data(self, data, files, name):
        return name not in data
