__all__ = ["Error", "DomainDoesNotExistError", "DomainAlreadyExistsError", "StepError", "ValidationError"]


class Error(Exception):
    pass


class DomainDoesNotExistError(Error):
    pass


class DomainAlreadyExistsError(Error):
    pass


class StepError(Error):
    pass


class ValidationError(Error):
    def __init__(self, errors: list[tuple[str, str]]):
        self.errors = errors
        super().__init__("\n".join(f"{field}: {message}" for field, message in errors))
