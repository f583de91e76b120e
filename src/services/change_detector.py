def should_retranslate(old_text: str | None, new_text: str | None) -> bool:
    """원문이 실제로 바뀌었고 비어있지 않을 때만 재번역

    생성 시에는 old_text=None, 수정 시에는 반영 전 저장값을 넘긴다.
    """
    if new_text is None or not new_text.strip():
        return False
    return new_text != old_text
