import logging

logger = logging.getLogger(__name__)


class Ui:
    def say(self, message: str):
        raise NotImplementedError()

    def error(self, message: str):
        raise NotImplementedError()


class LoggingUi(Ui):
    """
    Reports build progress through the `pylibvirt_builder.ui` logger, prefixed with the build name.
    """

    def __init__(self, build_name: str):
        self.build_name = build_name

    def say(self, message):
        logger.info("==> %s: %s", self.build_name, message)

    def error(self, message):
        logger.error("==> %s: %s", self.build_name, message)
