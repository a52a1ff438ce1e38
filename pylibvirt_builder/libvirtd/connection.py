import enum
import logging
from typing import TYPE_CHECKING

import libvirt

from ..error import Error

if TYPE_CHECKING:
    from .connection_manager import ConnectionManager

logger = logging.getLogger(__name__)


class DomainState(enum.Enum):
    NOSTATE = "NOSTATE"
    RUNNING = "RUNNING"
    BLOCKED = "BLOCKED"
    SUSPENDED = "SUSPENDED"
    SHUTDOWN = "SHUTDOWN"
    SHUTOFF = "SHUTOFF"
    CRASHED = "CRASHED"
    PMSUSPENDED = "PMSUSPENDED"


class Connection:
    def __init__(self, manager: "ConnectionManager", uri: str):
        self.manager = manager
        self.uri = uri
        self._connection = None

    @property
    def connection(self):
        # A connection may silently die together with the daemon, open a new one if so
        if self._connection and self._connection.isAlive():
            return self._connection

        self._open()
        return self._connection

    def define_domain(self, xml: str):
        if not self.connection.defineXML(xml):
            raise Error("Failed to define a domain from an XML definition")

    def get_domain(self, name: str):
        try:
            return self.connection.lookupByName(name)
        except libvirt.libvirtError as e:
            if e.get_error_code() == libvirt.VIR_ERR_NO_DOMAIN:
                return None

            raise

    def domain_xml(self, domain) -> str:
        return domain.XMLDesc(libvirt.VIR_DOMAIN_XML_INACTIVE)

    def domain_state(self, domain) -> DomainState:
        return {
            libvirt.VIR_DOMAIN_NOSTATE: DomainState.NOSTATE,
            libvirt.VIR_DOMAIN_RUNNING: DomainState.RUNNING,
            libvirt.VIR_DOMAIN_BLOCKED: DomainState.BLOCKED,
            libvirt.VIR_DOMAIN_PAUSED: DomainState.SUSPENDED,
            libvirt.VIR_DOMAIN_SHUTDOWN: DomainState.SHUTDOWN,
            libvirt.VIR_DOMAIN_SHUTOFF: DomainState.SHUTOFF,
            libvirt.VIR_DOMAIN_CRASHED: DomainState.CRASHED,
            libvirt.VIR_DOMAIN_PMSUSPENDED: DomainState.PMSUSPENDED,
        }[domain.state()[0]]

    def close(self):
        if self._connection is None:
            return

        try:
            self._connection.close()
        except libvirt.libvirtError as e:
            raise Error(f"Failed to close libvirt connection: {e}")
        finally:
            self._connection = None

    def _open(self):
        logger.debug("Opening libvirt connection to %r", self.uri)
        connection = self.manager.open(self.uri)
        self._connection = connection
