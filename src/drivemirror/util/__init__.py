from .mime import FOLDER_MIME, GOOGLE_APP_PREFIX, classify, is_folder, is_google_app

__all__ = [
    "FOLDER_MIME",
    "GOOGLE_APP_PREFIX",
    "classify",
    "is_folder",
    "is_google_app",
]
