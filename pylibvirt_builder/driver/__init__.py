from .base import Driver  # noqa
