"""Recognition locales and app languages."""

from __future__ import annotations

RECOGNITION_LANGUAGES: dict[str, str] = {
    'en-US': 'English (US)',
    'en-GB': 'English (UK)',
    'es-ES': 'Spanish',
    'fr-FR': 'French',
    'de-DE': 'German',
    'it-IT': 'Italian',
    'pt-BR': 'Portuguese (Brazil)',
    'ja-JP': 'Japanese',
    'ko-KR': 'Korean',
    'zh-CN': 'Chinese (Mandarin)',
    'ru-RU': 'Russian',
    'ar-SA': 'Arabic',
}

APP_LANGUAGES: dict[str, str] = {
    'en': 'English',
    'es': 'Español',
}

DEFAULT_RECOGNITION_LANGUAGE = 'en-US'
FALLBACK_SUMMARY_LANGUAGE = 'en'
