# -*- coding: utf-8 -*-
"""Centralized Translation Manager for i18n support."""

from utils.logger import get_logger

logger = get_logger(__name__)

SUPPORTED_LANGUAGES = ("en", "ar")


class TranslationManager:
    """Singleton Translation Manager with English fallback."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            from app.config import Config
            cls._instance = super().__new__(cls)
            cls._instance._current_language = (
                Config.DEFAULT_LANGUAGE if Config.DEFAULT_LANGUAGE in SUPPORTED_LANGUAGES else "en"
            )
            cls._instance._translations = {}
            cls._instance._load_translations()
        return cls._instance

    def _load_translations(self):
        from services.translations.ar import AR_TRANSLATIONS
        from services.translations.en import EN_TRANSLATIONS
        self._translations = {
            "en": EN_TRANSLATIONS,
            "ar": AR_TRANSLATIONS,
        }

    def set_language(self, lang_code: str):
        if lang_code not in self._translations:
            logger.warning(f"Unsupported language '{lang_code}', using English")
            lang_code = "en"
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")

    def get_language(self) -> str:
        return self._current_language

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(self._current_language, {}).get(key)
        if translation is None:
            # Fall back to English before giving up on the key
            translation = self._translations.get("en", {}).get(key)
        if translation is None:
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                pass
        return translation


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()
