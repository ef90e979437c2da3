from django.urls import path

from . import views

app_name = "image_crop"

urlpatterns = [
    path("popup/", views.media_popup, name="popup"),
    path("upload/", views.media_upload, name="upload"),
    path("preview/", views.preview_image, name="preview"),
]
