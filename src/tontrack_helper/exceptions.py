class TontrackError(Exception):
    pass


class ConfigUnavailable(TontrackError):
    """Raised when no log directory can be resolved."""
    pass


class IoTransient(TontrackError):
    """File or directory access failed, retried on the next poll."""
    pass


class SidecarNotFound(TontrackError):
    def __init__(self, candidates: list) -> None:
        self.candidates = candidates
        super().__init__("VR overlay binary not found")


class SidecarSpawnFailed(TontrackError):
    pass


class SidecarIoError(TontrackError):
    pass


class PersistenceFailed(TontrackError):
    pass


class StateLockError(TontrackError):
    pass
