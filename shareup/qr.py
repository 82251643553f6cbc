from urllib.parse import urlencode

from shareup.constants import QRCode


def qr_code_url(data: str, size: int = QRCode.SIZE) -> str:
    """Return the URL of a rendered QR code image encoding `data`

    Example:
        >>> qr_code_url('https://share-up.example.com/V1StGX')
        'https://api.qrserver.com/v1/create-qr-code/?size=200x200&data=https%3A%2F%2Fshare-up.example.com%2FV1StGX'
    """
    return f'{QRCode.SERVICE_URL}?{urlencode({"size": f"{size}x{size}", "data": data})}'
