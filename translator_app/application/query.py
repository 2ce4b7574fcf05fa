from __future__ import annotations

from translate_core.languages import is_auto_detect
from translate_core.models import TranslationRequest, ValidationError, ValidationReason


def validate_request(text: str, from_code: str, to_code: str) -> TranslationRequest:
    if not text or not text.strip():
        raise ValidationError(ValidationReason.EMPTY_INPUT)
    if from_code == to_code:
        raise ValidationError(ValidationReason.SAME_LANGUAGE)
    if is_auto_detect(to_code):
        raise ValidationError(ValidationReason.INVALID_TARGET)
    return TranslationRequest(source_text=text, from_code=from_code, to_code=to_code)
