import pytest

from image_crop.previews import get_preview_images, get_preview_url, parse_ids


def test_parse_ids():
    assert parse_ids("") == []
    assert parse_ids(None) == []
    assert parse_ids("12") == [12]
    assert parse_ids("3, 1,,abc ") == [3, 1, "abc"]


@pytest.mark.django_db
def test_preview_images_keep_request_order(make_attachment):
    a = make_attachment(name="a.png")
    b = make_attachment(name="b.png")
    result = get_preview_images([b.pk, a.pk], "thumbnail")
    assert [item["id"] for item in result] == [b.pk, a.pk]
    assert result[0]["url"] == f"/media/renditions/150x150/{b.pk}-b.png"


@pytest.mark.django_db
def test_preview_images_unknown_and_non_numeric(attachment):
    result = get_preview_images([attachment.pk, 999999, "abc"], "full")
    assert result == [
        {"id": attachment.pk, "url": attachment.url},
        {"id": 999999, "url": None},
        {"id": "abc", "url": None},
    ]


@pytest.mark.django_db
def test_preview_url_for_form_values(attachment):
    assert get_preview_url(None) is None
    assert get_preview_url("") is None
    assert get_preview_url("abc") is None
    assert get_preview_url("999999") is None
    assert get_preview_url(str(attachment.pk), "full") == attachment.url
    assert get_preview_url(attachment.pk, "full") == attachment.url
    assert get_preview_url(attachment, "full") == attachment.url
