"""
Typed results decoded from API responses.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .constants import DEFAULT_CONFIG, SIZE_MEDIUM_500


@dataclass
class Photo:
    """A photo record as returned by ``flickr.photos.search``."""

    id: str
    owner: str
    secret: str
    server: str
    farm: str
    title: str
    is_public: bool = False
    is_friend: bool = False
    is_family: bool = False

    def url(self, size: str = SIZE_MEDIUM_500,
            static_host: str = DEFAULT_CONFIG['static_host']) -> str:
        """Return the static URL of this photo in the given size."""
        return (f"http://farm{self.farm}.{static_host}/"
                f"{self.server}/{self.id}_{self.secret}_{size}.jpg")


@dataclass
class SearchResult:
    """One page of search results."""

    page: str
    pages: str
    per_page: str
    total: str
    photos: List[Photo] = field(default_factory=list)


@dataclass
class User:
    nsid: str
    username: str
    fullname: str


@dataclass
class Auth:
    """Outcome of a successful token exchange."""

    token: str
    perms: str
    user: Optional[User] = None
