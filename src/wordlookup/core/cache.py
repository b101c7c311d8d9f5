# src/wordlookup/core/cache.py
"""
On-disk cache of WordsAPI responses.

One file per word under the cache root:
"fire engine" → ~/.word/fire_engine.json

The file holds the response body exactly as received. Nothing expires.
"""

import logging
import os
import re
import tempfile
from pathlib import Path


logger = logging.getLogger(__name__)

CACHE_DIR_NAME = ".word"

_WHITESPACE = re.compile(r"\s+")


def lookup_key(word: str) -> str:
    """Turn a word into a safe file name stem. Spaces become underscores."""
    key = _WHITESPACE.sub("_", word.strip())
    key = key.replace("/", "_").replace("\\", "_")
    if not key:
        raise ValueError(f"cannot derive a cache key from {word!r}")
    return key


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def default_cache_root() -> Path:
    try:
        home = Path.home()
    except RuntimeError:
        return Path(".") / CACHE_DIR_NAME
    return home / CACHE_DIR_NAME


class CacheStore:
    def __init__(self, root: Path | None = None):
        self.root = Path(root) if root is not None else default_cache_root()

    def path_for(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def ensure_root(self) -> bool:
        """Create the cache root and any missing parents. Failure is only logged."""
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("could not create cache directory %s: %s", self.root, e)
            return False
        return True

    def read(self, key: str) -> str | None:
        """Return the cached JSON text, or None if absent or unreadable."""
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("could not read cache file %s: %s", path, e)
            return None

    def write(self, key: str, json_text: str) -> bool:
        """Store json_text for key. Returns False (after warning) on failure."""
        path = self.path_for(key)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{key}.", suffix=".tmp")
        except OSError as e:
            logger.warning("could not write cache file %s: %s", path, e)
            return False

        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(json_text)
            # mkstemp creates 0600; give the entry the mode a plain create would have
            os.chmod(tmp_name, 0o666 & ~_current_umask())
            os.replace(tmp_name, path)
        except OSError as e:
            logger.warning("could not write cache file %s: %s", path, e)
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            return False

        return True
