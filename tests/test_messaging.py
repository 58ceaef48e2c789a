import pytest

from services.order_service.messaging import (
    build_payment_message,
    build_whatsapp_url,
    contact_digits,
    format_rupiah,
)


@pytest.mark.parametrize(
    "amount,expected",
    [
        (0, "Rp 0"),
        (15000, "Rp 15.000"),
        (1234567.5, "Rp 1.234.567,5"),
        (999.999, "Rp 1.000"),
    ],
)
def test_format_rupiah(amount, expected):
    assert format_rupiah(amount) == expected


def test_contact_digits():
    assert contact_digits("+62 (812) 3456-7890") == "6281234567890"
    assert contact_digits("siti@mail") == ""


def test_payment_message_contents():
    message = build_payment_message("Siti", "Mangga", 3, 75000)
    assert message.startswith("Halo Siti! 🍎")
    assert "• Jumlah: 3kg" in message
    assert "• Total: Rp 75.000" in message
    assert "BCA: 1234567890" in message


def test_whatsapp_url_escapes_like_encode_uri_component():
    url = build_whatsapp_url("0812-3456", "Halo Siti!\nTotal: Rp 5.000 (lunas)")
    assert url == "https://wa.me/08123456?text=Halo%20Siti!%0ATotal%3A%20Rp%205.000%20(lunas)"


def test_whatsapp_url_without_digits():
    with pytest.raises(ValueError):
        build_whatsapp_url("siti@mail", "Halo")
