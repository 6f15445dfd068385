"""Module contenant le service de recherche de plats."""
# dishsearch/search/search_service.py
import time
from typing import Any, Dict, List, Optional

import psutil
from pydantic import ValidationError
from redis.exceptions import RedisError

from dishsearch.cache import CacheManager, cache_manager
from dishsearch.catalog.loader import CatalogLoader
from dishsearch.config import settings
from dishsearch.logger import logger
from dishsearch.models import Catalog, SearchOptions, SearchResponse
from dishsearch.scoring.distance import normalize
from dishsearch.scoring.ranking import StringSimilarityRanker


class DishSearchService:
    """Classement du catalogue de plats par similarité avec la requête, avec cache Redis."""

    def __init__(
        self,
        loader: Optional[CatalogLoader] = None,
        ranker: Optional[StringSimilarityRanker] = None,
        cache: Optional[CacheManager] = None,
        cache_enabled: Optional[bool] = None,
    ):
        self.loader = loader or CatalogLoader()
        self.ranker = ranker or StringSimilarityRanker()
        self.cache = cache or cache_manager
        self.cache_enabled = settings.CACHE_ENABLED if cache_enabled is None else cache_enabled
        self._catalog: Optional[Catalog] = None

    @property
    def catalog(self) -> Catalog:
        """Catalogue courant, chargé au premier accès."""
        if self._catalog is None:
            self.refresh_catalog()
        return self._catalog

    def refresh_catalog(self) -> Catalog:
        """(Re)charge le catalogue ; la nouvelle version invalide les clés de cache."""
        self._catalog = self.loader.load_dishes()
        return self._catalog

    def list_dishes(self) -> List[Dict[str, Any]]:
        """Catalogue complet dans l'ordre du fichier."""
        return [dish.model_dump() for dish in self.catalog.dishes]

    def _cache_key(self, query: str, options: SearchOptions) -> str:
        # La pagination ne fait pas partie de la clé : on met en cache le classement complet.
        return f"search:{self.catalog.version}:{normalize(query)}:{int(options.include_scores)}"

    async def _cache_get(self, key: str) -> Optional[SearchResponse]:
        if not self.cache_enabled:
            return None
        try:
            cached = await self.cache.get(key)
        except RedisError as e:
            logger.warning("Cache indisponible (lecture) : {error}", error=e)
            return None
        if not cached:
            logger.info("Cache MISS for key: {key}", key=key)
            return None
        try:
            response = SearchResponse.model_validate_json(cached)
        except ValidationError as e:
            logger.warning("Entrée de cache illisible ({key}) : {error}", key=key, error=e)
            return None
        logger.info("Cache HIT for key: {key}", key=key)
        return response

    async def _cache_set(self, key: str, response: SearchResponse) -> None:
        if not self.cache_enabled:
            return
        try:
            await self.cache.set(key, response.model_dump_json(), expire=settings.CACHE_TTL)
        except RedisError as e:
            logger.warning("Cache indisponible (écriture) : {error}", error=e)

    def _execute_search(self, query: str, options: SearchOptions) -> SearchResponse:
        """Classe tout le catalogue, sans cache ni pagination."""
        start_time = time.time()
        catalog = self.catalog

        hits = []
        for item in self.ranker.rank_with_scores(query, catalog.records()):
            hit = {"name": item.record.label, **item.record.payload}
            if options.include_scores:
                hit["_score"] = item.score
            hits.append(hit)

        duration = time.time() - start_time
        memory_mb = psutil.Process().memory_info().rss / 1024 / 1024

        logger.info(
            "Recherche (query: '{query}') : {count} plats | Durée = {duration:.4f}s | RAM = {memory:.2f} Mo",
            query=query, count=len(hits), duration=duration, memory=memory_mb
        )

        return SearchResponse(
            hits=hits,
            total=len(hits),
            query=query,
            catalog_version=catalog.version,
            query_time_ms=duration * 1000,
            memory_used_mb=memory_mb,
        )

    async def search(self, query: str, options: Optional[SearchOptions] = None) -> SearchResponse:
        """Effectue une recherche en utilisant un système de cache.

        Args:
            query: Texte saisi par l'utilisateur (casse et espaces ignorés).
            options: Pagination et inclusion des scores.

        Returns:
            Un objet SearchResponse avec la page demandée ; ``total`` compte
            tous les plats classés.
        """
        options = options or SearchOptions()
        cache_key = self._cache_key(query, options)

        full_response = await self._cache_get(cache_key)
        if full_response is None:
            full_response = self._execute_search(query, options)
            await self._cache_set(cache_key, full_response)

        offset = options.offset
        per_page = options.per_page
        paginated_response = full_response.model_copy(deep=True)
        paginated_response.query = query
        paginated_response.hits = full_response.hits[offset : offset + per_page]
        return paginated_response
