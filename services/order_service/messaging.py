import re
from urllib.parse import quote

from shared.config.settings import (
    APP_NAME,
    PAYMENT_ACCOUNT_HOLDER,
    PAYMENT_ACCOUNT_NUMBER,
    PAYMENT_BANK_NAME,
)

WHATSAPP_BASE_URL = "https://wa.me/"

# Characters encodeURIComponent leaves unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"


def format_rupiah(amount: float) -> str:
    """15000 -> 'Rp 15.000'; at most two decimals, written with a comma."""
    rounded = round(float(amount), 2)
    sign = "-" if rounded < 0 else ""
    whole, _, fraction = f"{abs(rounded):.2f}".partition(".")
    grouped = f"{int(whole):,}".replace(",", ".")
    fraction = fraction.rstrip("0")
    return f"{sign}Rp {grouped}" + (f",{fraction}" if fraction else "")


def contact_digits(contact: str) -> str:
    return re.sub(r"\D", "", contact or "")


def build_payment_message(customer_name: str, fruit_name: str, quantity: int, total: float) -> str:
    return (
        f"Halo {customer_name}! 🍎\n"
        f"\n"
        f"Terima kasih sudah memesan di {APP_NAME}!\n"
        f"\n"
        f"📋 *Detail Pesanan:*\n"
        f"• Produk: {fruit_name}\n"
        f"• Jumlah: {quantity}kg\n"
        f"• Total: {format_rupiah(total)}\n"
        f"\n"
        f"💰 *Silakan transfer ke:*\n"
        f"{PAYMENT_BANK_NAME}: {PAYMENT_ACCOUNT_NUMBER}\n"
        f"A.n: {PAYMENT_ACCOUNT_HOLDER}\n"
        f"\n"
        f"Setelah transfer, mohon kirim bukti pembayaran ke nomor ini ya! 😊"
    )


def build_whatsapp_url(contact: str, message: str) -> str:
    digits = contact_digits(contact)
    if not digits:
        raise ValueError("Contact has no phone digits")
    return f"{WHATSAPP_BASE_URL}{digits}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"
