class MounterError(Exception):
    """Base class for errors that end the current invocation."""


class DeviceListingError(MounterError):
    """lsblk failed or its output could not be turned into partitions."""


class NoDrivesError(MounterError):
    """Nothing is left to offer after filtering."""


class SelectionError(MounterError):
    """The picker returned something we cannot act on."""


class InteractionError(MounterError):
    """Reading from the terminal failed."""
