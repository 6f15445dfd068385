"""Main module for the FastAPI application."""
import json
from contextlib import asynccontextmanager
from typing import Any, Dict, List

from fastapi import Depends, FastAPI, HTTPException, status
from redis.exceptions import RedisError
from .models import HomeFeed, SearchRequest, SearchResponse
from .search.search_service import DishSearchService
from .home.home_feed import HomeFeedService
from .catalog.loader import CatalogLoader
from .cache import cache_manager
from .logger import logger


# --- Initialisation des variables globales ---

catalog_loader: CatalogLoader = CatalogLoader()

search_service: DishSearchService = DishSearchService(loader=catalog_loader, cache=cache_manager)
home_feed_service: HomeFeedService = HomeFeedService(loader=catalog_loader)

# Alias `service` pour les tests qui patchent `main.service`
service = search_service

# ---------------------------------------------------------------------------------------
## Gestion des événements de cycle de vie (Startup/Shutdown)
@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Handle FastAPI startup and shutdown events."""
    logger.info("Starting up DishSearch API...")

    # 1. Chargement du catalogue
    catalog = search_service.refresh_catalog()
    if not catalog.dishes:
        logger.warning("Catalogue vide : la recherche ne retournera aucun plat.")

    # 2. Initialisation du cache
    try:
        await cache_manager.ping()
        logger.info("Redis cache connected successfully.")
    except RedisError as e:
        logger.error("Failed to connect to Redis: {error}", error=e)

    yield

    logger.info("Shutting down DishSearch API...")
    await cache_manager.close()
    logger.info("Redis connection closed.")

app = FastAPI(
    title="DishSearch - Dish Search Service",
    lifespan=lifespan
)

def get_service() -> DishSearchService:
    """Dépendance FastAPI pour obtenir l'instance du service de recherche."""
    return service


def get_home_feed_service() -> HomeFeedService:
    """Dépendance FastAPI pour obtenir le service de l'accueil."""
    return home_feed_service


@app.post("/search", response_model=SearchResponse)
async def search(req: SearchRequest, svc: DishSearchService = Depends(get_service)):
    """POST /search endpoint : classe le catalogue par similarité avec `query`."""
    try:
        pretty_request_body = json.dumps(req.model_dump(), indent=2, ensure_ascii=False)
        logger.info("Received request:\n{request_body}", request_body=pretty_request_body)

        return await svc.search(query=req.query, options=req.options)
    except Exception as e:
        logger.exception("Error processing search request")
        raise HTTPException(status_code=500, detail={"error": str(e)}) from e


@app.get("/dishes", response_model=List[Dict[str, Any]])
def list_dishes(svc: DishSearchService = Depends(get_service)):
    """Catalogue complet, dans l'ordre du fichier."""
    return svc.list_dishes()


@app.get("/home", response_model=HomeFeed)
def home(feed: HomeFeedService = Depends(get_home_feed_service)):
    """Plats mis en avant et rangées de recommandations."""
    return feed.home_feed()


@app.get("/")
def root():
    """Root endpoint to check API status."""
    return {"status": "ok", "message": "DishSearch API is running 🚀"}


@app.get("/health", status_code=status.HTTP_200_OK, tags=["Monitoring"])
async def health_check(svc: DishSearchService = Depends(get_service)):
    """
    Health check endpoint.

    Checks the loaded catalog and the Redis connection.
    Returns 200 OK if both are usable, otherwise 503 Service Unavailable.
    """
    services_status = {"catalog": "ok", "redis": "ok"}
    if not svc.catalog.dishes:
        services_status["catalog"] = "error"
        logger.error("Health check failed: empty catalog.")

    try:
        await cache_manager.ping()
    except RedisError:
        services_status["redis"] = "error"
        logger.error("Health check failed: Redis connection error.")

    if "error" in services_status.values():
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=services_status)

    return services_status
