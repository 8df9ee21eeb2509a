"""Exception classes for tsdoc-render."""


class TsdocRenderError(Exception):
    """Base exception for all tsdoc-render errors."""


class ContractError(TsdocRenderError):
    """A variant tag arrived without its payload.

    The extractor guarantees that every tagged node carries the payload
    matching its ``kind``; a missing payload is an upstream bug and is
    never defaulted.
    """

    def __init__(self, kind: str, field: str, name: str | None = None):
        self.kind = kind
        self.field = field
        self.name = name

        subject = f"{kind} node '{name}'" if name is not None else f"{kind} type"
        super().__init__(f"{subject} is missing '{field}'")


class DocFormatError(TsdocRenderError):
    """The documentation dump does not have the expected shape."""
