import io

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from media_library.models import Attachment


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path / "media"
    settings.MEDIA_URL = "/media/"
    return settings.MEDIA_ROOT


def make_image_bytes(size=(600, 300), fmt="PNG", color=(200, 40, 40)):
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format=fmt)
    return buf.getvalue()


def make_upload(name="photo.png", size=(600, 300), fmt="PNG"):
    content_type = "image/png" if fmt == "PNG" else "image/jpeg"
    return SimpleUploadedFile(name, make_image_bytes(size, fmt), content_type=content_type)


@pytest.fixture
def make_attachment(db):
    def _make(name="photo.png", size=(600, 300), fmt="PNG", **kwargs):
        kwargs.setdefault("title", name.rsplit(".", 1)[0])
        return Attachment.objects.create(file=make_upload(name, size, fmt), **kwargs)
    return _make


@pytest.fixture
def attachment(make_attachment):
    return make_attachment()
