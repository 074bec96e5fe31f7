from .core import LANGUAGES, load_lang, t

__all__ = ["LANGUAGES", "load_lang", "t"]
