"""Composition de l'écran d'accueil."""
from typing import List, Optional

from dishsearch.catalog.loader import CatalogLoader
from dishsearch.config import settings
from dishsearch.models import HomeFeed


class HomeFeedService:
    """Plats mis en avant et rangées de recommandations de l'accueil."""

    def __init__(self, loader: Optional[CatalogLoader] = None, row_size: Optional[int] = None):
        self.loader = loader or CatalogLoader()
        self.row_size = settings.HOME_ROW_SIZE if row_size is None else row_size

    def featured(self) -> List[str]:
        return list(settings.FEATURED_DISHES)

    def recommended_for_you(self) -> List[str]:
        """Rangée « Recommended for you »."""
        return self.loader.load_recommendations(settings.RECOMMENDATION_USER_PATH)[:self.row_size]

    def popular(self) -> List[str]:
        """Rangée « Popular foods »."""
        return self.loader.load_recommendations(settings.RECOMMENDATION_POPULAR_PATH)[:self.row_size]

    def home_feed(self) -> HomeFeed:
        return HomeFeed(
            featured=self.featured(),
            recommended_for_you=self.recommended_for_you(),
            popular=self.popular(),
        )
