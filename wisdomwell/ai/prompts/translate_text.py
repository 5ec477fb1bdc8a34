def create_prompt(text_to_translate: str, target_language: str) -> str:
    return (
        f'Translate the following text to {target_language} ({target_language}):\n\n'
        f'"{text_to_translate}"\n\n'
        f'Return ONLY the translated text.'
    )
