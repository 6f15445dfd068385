"""Chargement du catalogue de plats et des listes de recommandations."""
import hashlib
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from dishsearch.config import settings
from dishsearch.logger import logger
from dishsearch.models import Catalog, Dish


class CatalogLoader:
    """Lit les fichiers JSON statiques de l'application.

    Une entrée invalide est ignorée (avec un warning) sans interrompre le
    chargement des autres.
    """

    def __init__(
        self,
        dishes_path: Optional[Path] = None,
        debug: Optional[bool] = None,
    ):
        self.dishes_path = Path(dishes_path or settings.DISHES_PATH)
        self.debug = settings.DEBUG_CATALOG if debug is None else debug

    def load_json(self, path: Path) -> Optional[Dict[str, Any]]:
        """Lit un fichier JSON dont la racine doit être un objet."""
        path = Path(path)
        if not path.exists():
            logger.error("Fichier introuvable : {path}", path=path)
            return None

        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Erreur de lecture JSON ({path}) : {error}", path=path, error=e)
            return None

        if not isinstance(data, dict):
            logger.error(
                "Racine JSON invalide dans {path} : objet attendu, {kind} reçu",
                path=path, kind=type(data).__name__
            )
            return None
        return data

    @staticmethod
    def catalog_version(dishes: List[Dish]) -> str:
        """Hash SHA-1 du contenu accepté, stable d'un chargement à l'autre."""
        canonical = json.dumps(
            [dish.model_dump() for dish in dishes], sort_keys=True, ensure_ascii=False
        )
        return hashlib.sha1(canonical.encode("utf-8")).hexdigest()

    def load_dishes(self) -> Catalog:
        """
        Charge le catalogue de plats.

        Le fichier associe un nom de plat à ses valeurs nutritionnelles
        (calories, fat, protein, sugar, carbs). Les entrées incomplètes ou
        non numériques sont ignorées.

        Returns:
            Catalog avec les plats valides, dans l'ordre du fichier
        """
        data = self.load_json(self.dishes_path) or {}
        dishes: List[Dish] = []
        skipped = 0

        for dish_name, nutrition in data.items():
            if not isinstance(nutrition, dict):
                logger.warning("Plat ignoré '{name}' : objet attendu", name=dish_name)
                skipped += 1
                continue
            try:
                dishes.append(Dish(name=dish_name, **nutrition))
            except (ValidationError, TypeError) as e:
                logger.warning("Plat ignoré '{name}' : {error}", name=dish_name, error=e)
                skipped += 1

        if self.debug:
            for dish in dishes:
                logger.debug(
                    "Plat {name} | calories={calories} fat={fat} protein={protein} "
                    "sugar={sugar} carbs={carbs}",
                    **dish.model_dump()
                )

        catalog = Catalog(dishes=dishes, version=self.catalog_version(dishes), skipped=skipped)
        logger.info(
            "Catalogue chargé : {count} plats, {skipped} ignorés (version {version})",
            count=len(dishes), skipped=skipped, version=catalog.version[:12]
        )
        return catalog

    def load_recommendations(self, path: Path) -> List[str]:
        """
        Charge une liste de recommandations ``clé -> nom de plat``.

        Les valeurs sont retournées dans l'ordre lexicographique des clés.
        """
        data = self.load_json(path) or {}
        recommendations = []
        for key in sorted(data):
            dish_name = data[key]
            if not isinstance(dish_name, str):
                logger.warning(
                    "Recommandation ignorée '{key}' dans {path} : texte attendu",
                    key=key, path=path
                )
                continue
            recommendations.append(dish_name)

        if self.debug:
            for dish_name in recommendations:
                logger.debug("Recommandation : {name}", name=dish_name)
        return recommendations
