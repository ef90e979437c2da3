"""Image Crop alan tipi: model alanı ve form alanı."""
import logging
from functools import partialmethod

from django import forms
from django.core import checks
from django.core.exceptions import ObjectDoesNotExist
from django.db import models

from media_library.models import Attachment

from .conf import (
    SAVE_FORMAT_URL,
    get_setting,
    is_valid_preview_size,
    preview_size_choices,
    save_format_values,
)
from .widgets import ImageCropWidget

logger = logging.getLogger(__name__)


class ImageCropFormField(forms.ModelChoiceField):
    """Gizli input'tan gelen ek ID'sini Attachment'a çevirir. Boş değer None olur."""
    default_error_messages = {
        "invalid_choice": "Seçilen görsel medya kütüphanesinde bulunamadı.",
    }

    def __init__(self, queryset=None, *, preview_size=None, **kwargs):
        if queryset is None:
            queryset = Attachment.objects.all()
        widget = kwargs.pop("widget", None)
        if not _is_image_crop_widget(widget):
            widget = ImageCropWidget(preview_size=preview_size)
        kwargs.setdefault("empty_label", None)
        super().__init__(queryset, widget=widget, **kwargs)


def _is_image_crop_widget(widget):
    if widget is None:
        return False
    if isinstance(widget, type):
        return issubclass(widget, ImageCropWidget)
    return isinstance(widget, ImageCropWidget)


def _get_value_for_api(instance, field):
    return field.value_for_api(instance)


class ImageCropField(models.ForeignKey):
    """
    Medya kütüphanesindeki bir eke bağlanan görsel alanı.

    save_format: "url" ise API değeri görselin URL'si, "id" ise ek ID'sidir.
    preview_size: admin formunda gösterilecek önizleme boyutu.
    Modele get_<alan>_for_api() metodu eklenir.
    """
    description = "Kırpılabilir görsel (medya kütüphanesi eki)"

    def __init__(
        self,
        to="media_library.Attachment",
        on_delete=models.SET_NULL,
        save_format=None,
        preview_size=None,
        **kwargs,
    ):
        self._save_format = save_format
        self._preview_size = preview_size
        kwargs.setdefault("null", True)
        kwargs.setdefault("blank", True)
        kwargs.setdefault("related_name", "+")
        super().__init__(to, on_delete, **kwargs)

    @property
    def save_format(self):
        return self._save_format or get_setting("DEFAULT_SAVE_FORMAT")

    @property
    def preview_size(self):
        return self._preview_size or get_setting("DEFAULT_PREVIEW_SIZE")

    def check(self, **kwargs):
        return [
            *super().check(**kwargs),
            *self._check_save_format(),
            *self._check_preview_size(),
        ]

    def _check_save_format(self):
        if self.save_format not in save_format_values():
            return [
                checks.Error(
                    f"save_format şunlardan biri olmalı: {', '.join(save_format_values())}.",
                    obj=self,
                    id="image_crop.E001",
                )
            ]
        return []

    def _check_preview_size(self):
        if not is_valid_preview_size(self.preview_size):
            return [
                checks.Error(
                    f"Tanımsız önizleme boyutu: {self.preview_size!r}. Geçerli boyutlar: "
                    f"{', '.join(name for name, _label in preview_size_choices())}.",
                    hint="IMAGE_CROP['PREVIEW_SIZES'] ayarına ekleyin veya 'full' kullanın.",
                    obj=self,
                    id="image_crop.E002",
                )
            ]
        return []

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        if self._save_format is not None:
            kwargs["save_format"] = self._save_format
        if self._preview_size is not None:
            kwargs["preview_size"] = self._preview_size
        return name, path, args, kwargs

    def contribute_to_class(self, cls, name, **kwargs):
        super().contribute_to_class(cls, name, **kwargs)
        if not cls._meta.abstract:
            setattr(cls, f"get_{self.name}_for_api", partialmethod(_get_value_for_api, field=self))

    def formfield(self, **kwargs):
        if not _is_image_crop_widget(kwargs.get("widget")):
            kwargs["widget"] = ImageCropWidget(preview_size=self.preview_size)
        return super().formfield(**{
            "form_class": ImageCropFormField,
            "preview_size": self.preview_size,
            **kwargs,
        })

    def value_for_api(self, instance):
        """Kaydedilen değeri API için döner: save_format'a göre URL veya ek ID'si; boşsa None."""
        attachment_id = getattr(instance, self.attname)
        if attachment_id is None:
            return None
        if self.save_format != SAVE_FORMAT_URL:
            return attachment_id
        try:
            attachment = getattr(instance, self.name)
        except ObjectDoesNotExist:
            logger.warning("Ek bulunamadı: %s.%s=%s", instance._meta.label, self.name, attachment_id)
            return None
        return attachment.url
