from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_413_CONTENT_TOO_LARGE,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class ScheduleError(Exception):
    """
    Erreur métier de base. Chaque sous-classe porte son code HTTP,
    le handler global de l'app fait la traduction.
    """

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ScheduleError):
    status_code = HTTP_400_BAD_REQUEST


class AuthenticationError(ScheduleError):
    status_code = HTTP_401_UNAUTHORIZED


class NotFoundError(ScheduleError):
    status_code = HTTP_404_NOT_FOUND


class ConflictError(ScheduleError):
    status_code = HTTP_409_CONFLICT


class PayloadTooLargeError(ScheduleError):
    status_code = HTTP_413_CONTENT_TOO_LARGE


class StoreError(ScheduleError):
    """Fichier JSON illisible ou corrompu."""
