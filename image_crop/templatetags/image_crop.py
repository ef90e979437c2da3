from django import template

from ..conf import FULL_SIZE, is_valid_preview_size

register = template.Library()


@register.filter
def preview_src(attachment, size="thumbnail"):
    """Şablonda ekin önizleme URL'si; tanımsız boyutta orijinal dosya kullanılır."""
    if attachment is None:
        return ""
    if not is_valid_preview_size(size):
        size = FULL_SIZE
    src = attachment.image_src(size)
    return src[0] if src else ""
