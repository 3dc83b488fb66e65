"""Word list loading for the word variant."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Optional, Union

from .paths import dictionary_path


class DictionaryLoadError(RuntimeError):
    """The word list could not be read, or held no words."""


def load_words(path: Optional[Union[str, Path]] = None) -> FrozenSet[str]:
    """Load a newline-delimited word list into an uppercase set.

    With no path, the location comes from paths.dictionary_path().
    """
    p = Path(path) if path is not None else dictionary_path()
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise DictionaryLoadError(f"Cannot read dictionary {p}: {e}") from e
    words = frozenset(w.strip().upper() for w in text.splitlines() if w.strip())
    if not words:
        raise DictionaryLoadError(f"Dictionary {p} contains no words")
    logging.debug("Loaded %d words from %s", len(words), p)
    return words
