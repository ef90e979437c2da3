"""Unfold admin sidebar: uygulama listesinden gruplar (yetkiye göre gizleme) + medya kısayolları."""

from django.contrib import admin
from django.urls import reverse

# Nav bar öğeleri için Material Symbols ikon adları (https://fonts.google.com/icons)
NAV_ICONS = {
    "core.post": "article",
    "core.postimage": "photo_library",
    "media_library.attachment": "perm_media",
    "auth.user": "person",
    "auth.group": "group",
}


def _model_label(model_dict):
    """Model dict'ten app_label.model_name döner (küçük harf)."""
    m = model_dict.get("model")
    if m is None:
        return None
    return m._meta.label_lower


def get_sidebar_navigation(request):
    """
    Sol menüyü admin panelinin app/model yapısından üretir.
    - Her uygulama AppConfig.verbose_name ile tek grup.
    - Öğeler = Kullanıcının yetkisi olan modeller. Yetkisi kaldırılanlar menüde görünmez.
    - Medya kütüphanesini görebilen kullanıcıya "Görsel yükle" kısayolu eklenir.
    """
    app_list = admin.site.get_app_list(request)
    navigation = []

    for app in app_list:
        items = []
        for model in app["models"]:
            if not model.get("admin_url"):
                continue
            label = _model_label(model)
            items.append({
                "title": model["name"],
                "link": model["admin_url"],
                "icon": NAV_ICONS.get(label) if label else None,
            })
        if items:
            navigation.append({
                "title": app["name"],
                "collapsible": True,
                "items": items,
            })

    if request.user.has_perm("media_library.add_attachment"):
        navigation.append({
            "title": "Kısayollar",
            "collapsible": True,
            "items": [
                {
                    "title": "Görsel yükle",
                    "link": reverse("admin:media_library_attachment_add"),
                    "icon": "add_photo_alternate",
                },
            ],
        })

    return navigation
