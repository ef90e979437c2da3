"""Medya düzenleyicide görsel kırpma için dosya yükleme widget'ı."""

from django.forms import ClearableFileInput

CROPPER_CSS = "https://cdn.jsdelivr.net/npm/cropperjs@1.6.2/dist/cropper.min.css"
CROPPER_JS = "https://cdn.jsdelivr.net/npm/cropperjs@1.6.2/dist/cropper.min.js"


class ImageCropInput(ClearableFileInput):
    """
    Görsel seçildiğinde kırpma modalı açar. Kullanıcı hizalayıp kırpar, kırpılmış görsel kaydedilir.
    aspect_ratio verilmezse serbest kırpma yapılır (örn. kare için 1).
    """

    def __init__(self, attrs=None, aspect_ratio=None, *args, **kwargs):
        default_attrs = {"accept": "image/*", "class": "image-crop-input"}
        if aspect_ratio:
            default_attrs["data-aspect-ratio"] = str(aspect_ratio)
        if attrs:
            default_attrs.update(attrs)
        super().__init__(attrs=default_attrs, *args, **kwargs)

    class Media:
        css = {"all": (CROPPER_CSS,)}
        js = (
            CROPPER_JS,
            "media_library/js/image_crop.js",
        )
