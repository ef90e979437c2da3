"""Medya penceresi ve önizleme AJAX uç noktası (yalnızca personel)."""
import logging

from django.contrib.admin.views.decorators import staff_member_required
from django.db.models import Q
from django.http import JsonResponse
from django.shortcuts import render
from django.template.loader import render_to_string
from django.views.decorators.http import require_http_methods, require_POST

from media_library.forms import AttachmentUploadForm
from media_library.models import Attachment

from .conf import get_setting, is_valid_preview_size
from .previews import get_preview_images, parse_ids

logger = logging.getLogger(__name__)

TAB_UPLOAD = "type"
TAB_LIBRARY = "library"
TABS = {
    TAB_UPLOAD: "Bilgisayardan yükle",
    TAB_LIBRARY: "Medya kütüphanesi",
}
LIBRARY_PAGE_SIZE = 60


def _preview_size_from(params):
    return params.get("preview_size") or get_setting("DEFAULT_PREVIEW_SIZE")


def _invalid_size_response(preview_size):
    return JsonResponse({"error": f"Tanımsız önizleme boyutu: {preview_size}"}, status=400)


@staff_member_required
@require_http_methods(["GET", "POST"])
def preview_image(request):
    """
    Virgülle ayrılmış ek ID'leri için önizleme URL'leri: [{"id": .., "url": ..}, ...].
    id yoksa boş liste döner.
    """
    params = request.POST if request.method == "POST" else request.GET
    preview_size = _preview_size_from(params)
    if not is_valid_preview_size(preview_size):
        return _invalid_size_response(preview_size)
    ids = parse_ids(params.get("id", ""))
    return JsonResponse(get_preview_images(ids, preview_size), safe=False)


@staff_member_required
@require_http_methods(["GET"])
def media_popup(request):
    """Medya penceresi: yükleme sekmesi (varsayılan) ve kütüphane sekmesi; öğelere seçim düğmeleri script ile eklenir."""
    preview_size = _preview_size_from(request.GET)
    if not is_valid_preview_size(preview_size):
        return _invalid_size_response(preview_size)
    tab = request.GET.get("tab", TAB_UPLOAD)
    if tab not in TABS:
        tab = TAB_UPLOAD
    q = request.GET.get("q", "").strip()

    items = []
    if tab == TAB_LIBRARY:
        qs = Attachment.objects.all()
        if q:
            qs = qs.filter(Q(title__icontains=q) | Q(alt__icontains=q) | Q(file__icontains=q))
        items = list(qs[:LIBRARY_PAGE_SIZE])

    context = {
        "title": "Görsel seç",
        "tabs": TABS,
        "tab": tab,
        "is_upload_tab": tab == TAB_UPLOAD,
        "q": q,
        "items": items,
        "preview_size": preview_size,
        "field_type": request.GET.get("field_type", "image"),
        "multiple": request.GET.get("multiple") == "1",
        "poll_interval": get_setting("POLL_INTERVAL"),
        "upload_form": AttachmentUploadForm(),
    }
    return render(request, "image_crop/popup.html", context)


@staff_member_required
@require_POST
def media_upload(request):
    """Yüklenen görselleri kaydeder ve medya öğelerinin HTML'ini döner."""
    form = AttachmentUploadForm(request.POST, request.FILES)
    if not form.is_valid():
        return JsonResponse({"errors": form.errors.get_json_data()}, status=400)
    attachments = form.save()
    logger.info(
        "%s görsel yüklendi (kullanıcı=%s): %s",
        len(attachments),
        request.user.get_username(),
        ", ".join(str(a.pk) for a in attachments),
    )
    html = render_to_string(
        "image_crop/_media_items.html",
        {"items": attachments},
        request=request,
    )
    return JsonResponse({"html": html, "ids": [a.pk for a in attachments]})
