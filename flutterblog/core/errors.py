SERVER_ERROR_MESSAGE = "An error occurred on the server. Try again later."


class FlutterError(Exception):
    """Базовая ошибка приложения: HTTP-статус и текст для клиента."""

    status_code = 500
    message = SERVER_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidArgument(FlutterError):
    status_code = 400
    message = "Missing one or more of the required params."


class UnknownAvatar(InvalidArgument):
    message = "Yikes. Avatar does not exist."


class NotFound(FlutterError):
    # Клиент получает 400, как и при неверных параметрах
    status_code = 400
    message = "Nothing was found."


class InternalError(FlutterError):
    pass
