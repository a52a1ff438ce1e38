class ServiceDelegate:
    """
    Makes sure the service managing the hypervisor is up before a connection to it is opened.
    """

    def ensure_started(self):
        raise NotImplementedError()
