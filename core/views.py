from django.contrib.admin.views.decorators import staff_member_required
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_http_methods

from .models import Post


def serialize_post(post):
    """Yazıyı API sözlüğüne çevirir. Görsel alanları alanın save_format ayarına göre URL ya da ID döner."""
    return {
        "id": post.pk,
        "baslik": post.baslik,
        "slug": post.slug,
        "icerik": post.icerik,
        "one_cikan_gorsel": post.get_one_cikan_gorsel_for_api(),
        "gorseller": [
            {
                "gorsel": item.get_gorsel_for_api(),
                "aciklama": item.aciklama,
                "sira": item.sira,
            }
            for item in post.gorseller.select_related("gorsel")
        ],
    }


@staff_member_required
@require_http_methods(["GET"])
def post_detail_api(request, pk):
    """Yazının JSON gösterimi (admin önizleme)."""
    post = get_object_or_404(Post.objects.select_related("one_cikan_gorsel"), pk=pk)
    return JsonResponse(serialize_post(post))
