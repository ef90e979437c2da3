from django.apps import AppConfig


class ImageCropConfig(AppConfig):
    name = "image_crop"
    verbose_name = "Görsel kırpma alanı"
