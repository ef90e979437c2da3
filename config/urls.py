"""URL configuration for config project."""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

from core.views import post_detail_api

admin.site.site_header = "Medya Yönetim Paneli"
admin.site.site_title = "Medya"
admin.site.index_title = "Yönetim Paneli"

urlpatterns = [
    # Admin alanının altında: admin.site.urls'ten önce eşleşmeli
    path("admin/image-crop/", include("image_crop.urls")),
    path("admin/api/posts/<int:pk>/", post_detail_api, name="post_detail_api"),
    path("admin/", admin.site.urls),
]
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
