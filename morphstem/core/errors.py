class AppError(Exception):
    """Base class for every error raised by morphstem."""


class ProcessSpawnError(AppError):
    pass


class PartOfSpeechError(AppError):
    def __init__(self, code: str) -> None:
        super().__init__(f"Не удалось определить часть речи: {code!r}")
        self.code = code


class GrammemError(AppError):
    def __init__(self, code: str) -> None:
        super().__init__(f"Не удалось определить граммему: {code!r}")
        self.code = code


class ResponseDecodeError(AppError):
    pass


class WorkerIOError(AppError):
    pass
