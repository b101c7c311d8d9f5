# src/wordlookup/core/resolve.py
"""
Cache-then-network resolution of a word to its WordsAPI JSON.

A cached entry is always served as is; the network is only used on a miss,
and a successful fetch is written back before it is returned.
"""

import logging
from typing import Callable

from wordlookup.core.cache import CacheStore, lookup_key
from wordlookup.core.wordsapi import LookupResponse


logger = logging.getLogger(__name__)

Fetch = Callable[[str], LookupResponse]


class Resolver:
    def __init__(self, store: CacheStore, fetch: Fetch):
        self.store = store
        self.fetch = fetch

    def resolve(self, word: str) -> str:
        """Return the JSON text for word. FetchError from the fetcher propagates."""
        key = lookup_key(word)
        logger.info("cache_dir is %s", self.store.root)
        self.store.ensure_root()

        cached = self.store.read(key)
        if cached is not None:
            logger.info("using cached json from '%s'", self.store.path_for(key))
            return cached

        logger.info("could not find cached json, calling service...")
        response = self.fetch(word)

        if self.store.write(key, response.response_json):
            logger.info("saved to '%s'", self.store.path_for(key))
        return response.response_json
