class GameStoreError(Exception):
    """Base error for game operations; carries the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(GameStoreError):
    status_code = 400


class NotFoundError(GameStoreError):
    status_code = 404


class StorageError(GameStoreError):
    status_code = 500
