from django import forms

from .models import Attachment


class MultipleImageInput(forms.ClearableFileInput):
    allow_multiple_selected = True


class MultipleImageField(forms.ImageField):
    """Birden fazla görsel kabul eden alan; her dosya ayrı doğrulanır."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("widget", MultipleImageInput(attrs={"accept": "image/*"}))
        super().__init__(*args, **kwargs)

    def clean(self, data, initial=None):
        single_clean = super().clean
        if isinstance(data, (list, tuple)):
            if not data and self.required:
                raise forms.ValidationError(self.error_messages["required"], code="required")
            return [single_clean(d, initial) for d in data]
        return [single_clean(data, initial)]


class AttachmentUploadForm(forms.Form):
    """Medya penceresindeki yükleme sekmesi (bir veya birden fazla görsel)."""
    images = MultipleImageField(label="Görseller")

    def save(self):
        attachments = []
        for upload in self.cleaned_data["images"]:
            title = upload.name.rsplit(".", 1)[0]
            attachments.append(Attachment.objects.create(file=upload, title=title[:200]))
        return attachments
