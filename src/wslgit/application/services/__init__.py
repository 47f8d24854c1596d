from .translation_service import TranslationServices, build_dispatcher, build_services

__all__ = ["TranslationServices", "build_dispatcher", "build_services"]
