from functools import lru_cache

from account_api.api.v1.models import UserDetails as UserDetailsModel
from account_api.core.repositories import BaseRepository


class UserDetailsRepository(BaseRepository[UserDetailsModel]):
    """
    Details are owned by their user; only point lookups are exposed.
    """
    def __init__(self):
        super().__init__(UserDetailsModel)


@lru_cache()
def get_user_details_repository() -> UserDetailsRepository:
    return UserDetailsRepository()
