"""Initializes the texts module and aggregates texts from all submodules."""

from .system import get_texts as get_system_texts


def get_all_texts() -> dict[str, str | list[str]]:
    """
    Returns a dictionary of all available texts from all text files.
    """
    texts = {}
    texts.update(get_system_texts())
    return texts
