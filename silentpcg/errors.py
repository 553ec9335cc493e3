"""Exception hierarchy for pseudorandom correlation generator operations."""


class PcgError(Exception):
    """Base class for every error raised by this package."""


class SeedGenError(PcgError):
    """Seed generation failed."""


class ExpandError(PcgError):
    """Seed expansion failed."""


class DpfError(PcgError):
    """A distributed point function could not be generated or evaluated."""


class LpnError(PcgError):
    """An LPN code or matrix operation failed."""


class ChannelError(PcgError):
    """A message could not be sent or received over a channel."""


class InvalidPartyIndex(PcgError):
    """A seed was used by the wrong party."""


class MissingParameter(PcgError):
    """A required parameter was not supplied."""


class SvoleError(PcgError):
    """An sVOLE operation failed."""


class FieldMismatch(PcgError):
    """Values from incompatible fields were combined."""


class InvalidInput(PcgError):
    """An argument has the wrong shape or value."""


class CrhfError(PcgError):
    """A correlation-robust hash could not be computed."""


class SerializationError(PcgError):
    """A value could not be serialized or deserialized."""


class NotImplementedPcgError(PcgError, NotImplementedError):
    """The requested operation has no implementation."""