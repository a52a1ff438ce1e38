import logging

import libvirt

from ..error import Error
from .connection import Connection
from .service_delegate import ServiceDelegate

logger = logging.getLogger(__name__)


class ConnectionManager:
    def __init__(self, service_delegate: ServiceDelegate):
        self.service_delegate = service_delegate
        self.connections: list[Connection] = []

        libvirt.registerErrorHandler(self._libvirt_error_handler, None)

    def create(self, uri: str) -> Connection:
        connection = Connection(self, uri)
        self.connections.append(connection)
        return connection

    def open(self, uri: str):
        self.service_delegate.ensure_started()

        try:
            return libvirt.open(uri)
        except libvirt.libvirtError as e:
            raise Error(f"Failed to open libvirt connection to {uri!r}: {e}")

    def close(self):
        for connection in self.connections:
            try:
                connection.close()
            except Error:
                logger.warning("Failed to close libvirt connection to %r", connection.uri, exc_info=True)

        self.connections = []

    def _libvirt_error_handler(self, _, error):
        # Errors are raised as `libvirt.libvirtError`, keep libvirt from printing them to stderr as well
        pass
