"""
Endpoint declarations for version 5 of the MangaDex API.
"""

from .account import AccountBuilder, RecoverAccount
from .auth import AuthBuilder, Login, Logout, RefreshToken
from .rating import DeleteMangaRating, RatingBuilder
from .settings import CreateOrUpdateUserSettings, SettingsBuilder
from .upload import AbandonUploadSession, UploadBuilder
from .user import ListUser, UserBuilder

__all__ = [
    'AccountBuilder',
    'RecoverAccount',
    'AuthBuilder',
    'Login',
    'Logout',
    'RefreshToken',
    'DeleteMangaRating',
    'RatingBuilder',
    'CreateOrUpdateUserSettings',
    'SettingsBuilder',
    'AbandonUploadSession',
    'UploadBuilder',
    'ListUser',
    'UserBuilder'
]
