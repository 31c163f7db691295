"""Endpoints de metadonnees : certifications, pays, genres, langues, reseaux."""

from trakt_api.adapters.api.resources.base import ResourceMixin
from trakt_api.core.entities import Certifications, Country, Genre, Language, Network
from trakt_api.core.value_objects import CertificationsType, MediaType
from trakt_api.utils import api_path


class MetadataMixin(ResourceMixin):
    def certifications(self, certifications_type: CertificationsType):
        return self.get(api_path("certifications", certifications_type), Certifications)

    def countries(self, media_type: MediaType):
        return self.get(api_path("countries", media_type), list[Country])

    def genres(self, media_type: MediaType):
        return self.get(api_path("genres", media_type), list[Genre])

    def languages(self, media_type: MediaType):
        return self.get(api_path("languages", media_type), list[Language])

    def networks(self):
        return self.get(api_path("networks"), list[Network])
