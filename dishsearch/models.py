"""Modèles Pydantic pour le catalogue, les requêtes et les réponses."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from dishsearch.config import settings


class Record(BaseModel): # pylint: disable=too-few-public-methods
    """Élément classable : un libellé comparé à la requête et un payload opaque."""
    label: str
    payload: Dict[str, Any] = Field(default_factory=dict)


class Dish(BaseModel): # pylint: disable=too-few-public-methods
    """Plat du catalogue avec ses informations nutritionnelles."""
    name: str
    calories: float
    fat: float
    protein: float
    sugar: float
    carbs: float

    model_config = ConfigDict(strict=True)

    def to_record(self) -> Record:
        """Convertit le plat en Record (le nom devient le libellé)."""
        return Record(label=self.name, payload=self.model_dump(exclude={"name"}))


class Catalog(BaseModel): # pylint: disable=too-few-public-methods
    """Catalogue chargé, identifié par un hash de son contenu."""
    dishes: List[Dish] = Field(default_factory=list)
    version: str = ""
    skipped: int = 0

    def records(self) -> List[Record]:
        return [dish.to_record() for dish in self.dishes]


class SearchOptions(BaseModel): # pylint: disable=too-few-public-methods
    """Options de pagination et de présentation d'une recherche."""
    per_page: int = Field(default=settings.DEFAULT_PER_PAGE, ge=1, le=settings.MAX_PER_PAGE)
    offset: int = Field(default=0, ge=0)
    include_scores: bool = False


class SearchRequest(BaseModel): # pylint: disable=too-few-public-methods
    """Requête de recherche."""
    query: str = ""
    options: SearchOptions = Field(default_factory=SearchOptions)


class SearchResponse(BaseModel): # pylint: disable=too-few-public-methods
    """Réponse de recherche."""
    hits: List[Dict[str, Any]]
    total: int # Nombre total de plats classés avant pagination
    query: str
    catalog_version: str
    query_time_ms: float
    memory_used_mb: Optional[float] = None

    model_config = ConfigDict(extra="allow")


class HomeFeed(BaseModel): # pylint: disable=too-few-public-methods
    """Contenu de l'écran d'accueil."""
    featured: List[str]
    recommended_for_you: List[str]
    popular: List[str]
