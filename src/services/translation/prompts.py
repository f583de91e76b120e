"""primary provider 공용 프롬프트"""

TRANSLATE_INSTRUCTION = (
    "You are a professional translator. "
    "Translate the following text from {source_language} to {target_language}. "
    "Return ONLY the translated text, no explanations or additional content. "
    "Make the translation natural and contextually appropriate."
)

_SOURCE_LANGUAGE_NAMES = {"en": "English"}


def build_instruction(source_language: str, target_language: str) -> str:
    return TRANSLATE_INSTRUCTION.format(
        source_language=_SOURCE_LANGUAGE_NAMES.get(source_language, source_language),
        target_language=target_language,
    )
