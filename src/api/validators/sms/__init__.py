"""Validators para SMS.

Responsabilidades:
- Validar formato E.164 dos números
- Validar limites de conteúdo
"""

from api.validators.sms.limits import E164_PATTERN, MAX_CONTENT_LENGTH
from api.validators.sms.validator import SmsMessageValidator, is_valid_phone_number

__all__ = [
    "E164_PATTERN",
    "MAX_CONTENT_LENGTH",
    "SmsMessageValidator",
    "is_valid_phone_number",
]
