"""Ek ID'lerini önizleme URL'lerine çeviren yardımcılar (widget ve AJAX uç noktası ortak kullanır)."""
from media_library.models import Attachment


def parse_ids(id_string):
    """
    Virgülle ayrılmış ID metnini sıralı listeye çevirir.
    Sayısal parçalar int olur, diğerleri olduğu gibi kalır; boş parçalar atlanır.
    """
    if not id_string:
        return []
    ids = []
    for part in str(id_string).split(","):
        part = part.strip()
        if not part:
            continue
        ids.append(int(part) if part.isdigit() else part)
    return ids


def get_preview_images(ids, preview_size="thumbnail"):
    """
    Her ID için {"id", "url"} döner; istek sırası korunur.
    Sayısal olmayan veya bulunamayan eklerin url'si None olur.
    """
    numeric = [i for i in ids if isinstance(i, int)]
    attachments = Attachment.objects.in_bulk(numeric) if numeric else {}
    result = []
    for attachment_id in ids:
        attachment = attachments.get(attachment_id) if isinstance(attachment_id, int) else None
        src = attachment.image_src(preview_size) if attachment else None
        result.append({
            "id": attachment_id,
            "url": src[0] if src else None,
        })
    return result


def get_preview_url(value, preview_size="thumbnail"):
    """Form değeri için önizleme URL'si; değer sayısal değilse veya ek yoksa None."""
    if value is None or value == "":
        return None
    if isinstance(value, Attachment):
        attachment = value
    else:
        value = str(value).strip()
        if not value.isdigit():
            return None
        attachment = Attachment.objects.filter(pk=int(value)).first()
        if attachment is None:
            return None
    src = attachment.image_src(preview_size)
    return src[0] if src else None
