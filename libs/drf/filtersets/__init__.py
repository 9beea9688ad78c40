from .search import PhraseSearchFilter

__all__ = ["PhraseSearchFilter"]
