"""
Types enumeres utilises dans les chemins et parametres de l'API Trakt.

Chaque membre porte la valeur "wire" attendue par l'API, ce qui permet de
l'inserer directement dans un chemin via api_path().
"""

from enum import Enum


class TimePeriod(Enum):
    """Periode pour les classements played/watched/collected."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    ALL = "all"


class MediaType(Enum):
    """Categorie de media au pluriel (genres, langues, pays, watched)."""

    MOVIES = "movies"
    SHOWS = "shows"


class CertificationsType(Enum):
    """Categorie pour l'endpoint /certifications."""

    MOVIES = "movies"
    SHOWS = "shows"


class ItemType(Enum):
    """Types d'elements pour l'historique et la watchlist."""

    MOVIES = "movies"
    SHOWS = "shows"
    SEASONS = "seasons"
    EPISODES = "episodes"


class AllItemType(Enum):
    """ItemType avec la valeur "all" (notes, hidden items)."""

    MOVIES = "movies"
    SHOWS = "shows"
    SEASONS = "seasons"
    EPISODES = "episodes"
    ALL = "all"


class WatchableType(Enum):
    """Elements pouvant etre regardes (playback, historique)."""

    MOVIES = "movies"
    EPISODES = "episodes"


class SearchItemType(Enum):
    """Type d'un resultat de recherche (champ "type" singulier)."""

    MOVIE = "movie"
    SHOW = "show"
    EPISODE = "episode"
    PERSON = "person"
    LIST = "list"


class IdType(Enum):
    """Source d'identifiant pour la recherche par ID."""

    TRAKT = "trakt"
    IMDB = "imdb"
    TMDB = "tmdb"
    TVDB = "tvdb"


class CommentType(Enum):
    """Nature d'un commentaire: review (>200 mots) ou shout."""

    REVIEWS = "reviews"
    SHOUTS = "shouts"
    ALL = "all"


class CommentableItemType(Enum):
    """Type d'element commente (champ "type" singulier)."""

    MOVIE = "movie"
    SHOW = "show"
    SEASON = "season"
    EPISODE = "episode"
    LIST = "list"


class AllCommentableItemType(Enum):
    """Filtre de type d'element pour les listes de commentaires."""

    MOVIES = "movies"
    SHOWS = "shows"
    SEASONS = "seasons"
    EPISODES = "episodes"
    LISTS = "lists"
    ALL = "all"


class ListFilter(Enum):
    """Filtre sur le type de liste (/movies/{id}/lists/{type})."""

    ALL = "all"
    PERSONAL = "personal"
    OFFICIAL = "official"
    WATCHLISTS = "watchlists"


class ListSort(Enum):
    """Tri des listes contenant un element."""

    POPULAR = "popular"
    LIKES = "likes"
    COMMENTS = "comments"
    ITEMS = "items"
    ADDED = "added"
    UPDATED = "updated"


class ListItemType(Enum):
    """Type d'un element de liste."""

    MOVIE = "movie"
    SHOW = "show"
    SEASON = "season"
    EPISODE = "episode"
    PERSON = "person"


class LikeableType(Enum):
    """Elements pouvant etre likes par un utilisateur."""

    COMMENTS = "comments"
    LISTS = "lists"


class ShowStatus(Enum):
    """Statut de diffusion d'une serie."""

    RETURNING = "returning series"
    CONTINUING = "continuing"
    IN_PRODUCTION = "in production"
    PLANNED = "planned"
    UPCOMING = "upcoming"
    PILOT = "pilot"
    CANCELED = "canceled"
    ENDED = "ended"


class ExtendedInfo(Enum):
    """Niveau de detail demande via le parametre "extended"."""

    FULL = "full"
    METADATA = "metadata"
    NOSEASONS = "noseasons"
    EPISODES = "episodes"
