import pytest
from django import forms
from django.forms import modelform_factory

from core.models import Post, PostImage
from image_crop.fields import ImageCropField, ImageCropFormField
from image_crop.widgets import ImageCropWidget


def test_model_field_options():
    featured = Post._meta.get_field("one_cikan_gorsel")
    gallery = PostImage._meta.get_field("gorsel")
    assert (featured.save_format, featured.preview_size) == ("url", "thumbnail")
    assert (gallery.save_format, gallery.preview_size) == ("id", "medium")
    assert featured.null and featured.blank


def test_options_fall_back_to_settings(settings):
    settings.IMAGE_CROP = {"DEFAULT_SAVE_FORMAT": "id", "DEFAULT_PREVIEW_SIZE": "large"}
    field = ImageCropField()
    assert field.save_format == "id"
    assert field.preview_size == "large"


def test_deconstruct_keeps_explicit_options_only():
    name, path, args, kwargs = Post._meta.get_field("one_cikan_gorsel").deconstruct()
    assert path == "image_crop.fields.ImageCropField"
    assert kwargs["save_format"] == "url"
    assert "preview_size" not in kwargs
    assert kwargs["to"] == "media_library.attachment"
    assert kwargs["related_name"] == "+"

    _name, _path, _args, kwargs = PostImage._meta.get_field("gorsel").deconstruct()
    assert kwargs["preview_size"] == "medium"
    assert kwargs["save_format"] == "id"


def test_option_checks():
    assert ImageCropField(save_format="url", preview_size="full")._check_save_format() == []
    assert ImageCropField(save_format="url", preview_size="full")._check_preview_size() == []

    errors = ImageCropField(save_format="path")._check_save_format()
    assert [e.id for e in errors] == ["image_crop.E001"]

    errors = ImageCropField(preview_size="poster")._check_preview_size()
    assert [e.id for e in errors] == ["image_crop.E002"]


def test_model_checks_pass():
    assert Post._meta.get_field("one_cikan_gorsel").check() == []


def test_formfield_uses_image_crop_widget():
    form_class = modelform_factory(Post, fields=["baslik", "slug", "one_cikan_gorsel"])
    field = form_class.base_fields["one_cikan_gorsel"]
    assert isinstance(field, ImageCropFormField)
    assert isinstance(field.widget, ImageCropWidget)
    assert field.widget.preview_size == "thumbnail"
    assert not field.required


def test_formfield_replaces_foreign_widget():
    field = Post._meta.get_field("one_cikan_gorsel").formfield(widget=forms.Select)
    assert isinstance(field.widget, ImageCropWidget)


def test_inline_formfield_preview_size():
    form_class = modelform_factory(PostImage, fields=["gorsel"])
    assert form_class.base_fields["gorsel"].widget.preview_size == "medium"


@pytest.mark.django_db
def test_form_field_clean(attachment):
    field = ImageCropFormField(required=False)
    assert field.clean("") is None
    assert field.clean(None) is None
    assert field.clean(str(attachment.pk)) == attachment


@pytest.mark.django_db
@pytest.mark.parametrize("value", ["999999", "abc", "1.5"])
def test_form_field_rejects_unknown_ids(value):
    field = ImageCropFormField(required=False)
    with pytest.raises(forms.ValidationError) as exc:
        field.clean(value)
    assert exc.value.messages == ["Seçilen görsel medya kütüphanesinde bulunamadı."]


@pytest.mark.django_db
def test_required_form_field():
    with pytest.raises(forms.ValidationError):
        ImageCropFormField(required=True).clean("")


@pytest.mark.django_db
def test_model_form_saves_attachment_id(attachment):
    form_class = modelform_factory(Post, fields=["baslik", "slug", "one_cikan_gorsel"])
    form = form_class(data={"baslik": "Merhaba", "slug": "merhaba", "one_cikan_gorsel": str(attachment.pk)})
    assert form.is_valid(), form.errors
    post = form.save()
    assert post.one_cikan_gorsel_id == attachment.pk


@pytest.mark.django_db
def test_value_for_api_url_format(attachment):
    post = Post.objects.create(baslik="A", slug="a", one_cikan_gorsel=attachment)
    assert post.get_one_cikan_gorsel_for_api() == attachment.url
    assert post.get_one_cikan_gorsel_for_api().startswith("/media/attachments/")


@pytest.mark.django_db
def test_value_for_api_id_format(attachment):
    post = Post.objects.create(baslik="A", slug="a")
    item = PostImage.objects.create(post=post, gorsel=attachment)
    assert item.get_gorsel_for_api() == attachment.pk


@pytest.mark.django_db
def test_value_for_api_empty():
    post = Post.objects.create(baslik="A", slug="a")
    assert post.get_one_cikan_gorsel_for_api() is None
    item = PostImage.objects.create(post=post)
    assert item.get_gorsel_for_api() is None


@pytest.mark.django_db
def test_deleted_attachment_clears_value(attachment):
    post = Post.objects.create(baslik="A", slug="a", one_cikan_gorsel=attachment)
    attachment.delete()
    post.refresh_from_db()
    assert post.one_cikan_gorsel_id is None
    assert post.get_one_cikan_gorsel_for_api() is None
