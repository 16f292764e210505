import pytest

from plantcare.utils.validators import (
    check_alphanumeric_name, check_image, check_image_data_uri, check_letters_name,
    check_required_text, normalize_name,
)

PNG = "data:image/png;base64,iVBORw0KGgo="


def test_required_text_is_trimmed():
    assert check_required_text("  hello ", "notes") == "hello"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_required_text_rejects_blank(value):
    with pytest.raises(ValueError, match="notes must not be empty"):
        check_required_text(value, "notes")


def test_required_text_length_limit():
    check_required_text("a" * 500, "notes")
    with pytest.raises(ValueError, match="at most 500"):
        check_required_text("a" * 501, "notes")


def test_letters_name_accepts_diacritics():
    assert check_letters_name("Costela de Adão", "name") == "Costela de Adão"


@pytest.mark.parametrize("value", ["Plant 2", "Ficus-lyrata", "Rosa!"])
def test_letters_name_rejects_digits_and_symbols(value):
    with pytest.raises(ValueError, match="letters"):
        check_letters_name(value, "name")


def test_letters_name_length_limit():
    with pytest.raises(ValueError, match="at most 100"):
        check_letters_name("a" * 101, "name")


def test_alphanumeric_name_allows_digits():
    assert check_alphanumeric_name("Quarto 2", "name") == "Quarto 2"
    with pytest.raises(ValueError):
        check_alphanumeric_name("Quarto #2", "name")


def test_image_accepts_data_uri_and_http_url():
    assert check_image(PNG) == PNG
    assert check_image("https://example.com/plant.jpg") == "https://example.com/plant.jpg"
    assert check_image("") is None
    assert check_image(None) is None
    with pytest.raises(ValueError):
        check_image("ftp://example.com/plant.jpg")
    with pytest.raises(ValueError):
        check_image("not an image")


def test_image_data_uri_rejects_urls():
    assert check_image_data_uri(PNG) == PNG
    with pytest.raises(ValueError, match="data URI"):
        check_image_data_uri("https://example.com/plant.jpg")


def test_normalize_name():
    assert normalize_name("  Costela   de ADÃO ") == "costela de adao"
