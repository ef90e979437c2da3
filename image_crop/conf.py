"""Image Crop alanı ayarları. settings.IMAGE_CROP sözlüğü varsayılanların üzerine yazılır."""
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

FULL_SIZE = "full"

SAVE_FORMAT_URL = "url"
SAVE_FORMAT_ID = "id"
SAVE_FORMAT_CHOICES = [
    (SAVE_FORMAT_URL, "Görsel URL"),
    (SAVE_FORMAT_ID, "Ek ID"),
]

DEFAULTS = {
    "PREVIEW_SIZES": {
        "thumbnail": (150, 150),
        "medium": (300, 300),
        "large": (1024, 1024),
    },
    "DEFAULT_PREVIEW_SIZE": "thumbnail",
    "DEFAULT_SAVE_FORMAT": SAVE_FORMAT_URL,
    "POLL_INTERVAL": 500,
}

# Bilinen boyutların etiketleri; ayarlardan gelen ek boyutlar adıyla gösterilir
SIZE_LABELS = {
    "thumbnail": "Küçük resim",
    "medium": "Orta",
    "large": "Büyük",
    FULL_SIZE: "Tam boyut",
}


def get_setting(name):
    user_settings = getattr(settings, "IMAGE_CROP", None) or {}
    if name not in DEFAULTS:
        raise ImproperlyConfigured(f"Bilinmeyen IMAGE_CROP ayarı: {name}")
    return user_settings.get(name, DEFAULTS[name])


def get_preview_sizes():
    """Boyut adı -> (genişlik, yükseklik). 'full' burada yer almaz."""
    sizes = get_setting("PREVIEW_SIZES")
    for name, dims in sizes.items():
        if name == FULL_SIZE:
            raise ImproperlyConfigured("'full' boyutu tanımlanamaz; orijinal dosyayı ifade eder.")
        try:
            width, height = dims
        except (TypeError, ValueError):
            raise ImproperlyConfigured(f"Geçersiz önizleme boyutu: {name}={dims!r}")
        if int(width) <= 0 or int(height) <= 0:
            raise ImproperlyConfigured(f"Önizleme boyutu pozitif olmalı: {name}={dims!r}")
    return sizes


def get_preview_size(name):
    """Boyutun (w, h) değerini döner; 'full' için None. Bilinmeyen ad KeyError verir."""
    if name == FULL_SIZE:
        return None
    width, height = get_preview_sizes()[name]
    return int(width), int(height)


def is_valid_preview_size(name):
    return name == FULL_SIZE or name in get_preview_sizes()


def preview_size_choices():
    names = list(get_preview_sizes()) + [FULL_SIZE]
    return [(n, SIZE_LABELS.get(n, n)) for n in names]


def save_format_values():
    return [value for value, _label in SAVE_FORMAT_CHOICES]
