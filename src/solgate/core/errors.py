"""Error taxonomy for the gateway.

Commands never raise for bad input. They return one of the variants below,
and the API layer converts it into the uniform error envelope:
- InvalidInput: a field failed decoding or validation
- PrimitiveFailed: the ledger SDK rejected otherwise well-formed input
- SimulatedFailure: explicit test override on /keypair
"""

from __future__ import annotations

from dataclasses import dataclass

SIMULATED_FAILURE_MESSAGE = "Simulated failure via query param"


@dataclass(frozen=True)
class InvalidInput:
    """A request field could not be decoded or validated."""

    field: str
    message: str


@dataclass(frozen=True)
class PrimitiveFailed:
    """The underlying instruction or signature builder failed."""

    detail: str
    prefix: str = "Failed to create instruction"

    @property
    def message(self) -> str:
        return f"{self.prefix}: {self.detail}"


@dataclass(frozen=True)
class SimulatedFailure:
    """Forced failure requested by the caller."""

    @property
    def message(self) -> str:
        return SIMULATED_FAILURE_MESSAGE


GatewayError = InvalidInput | PrimitiveFailed | SimulatedFailure
