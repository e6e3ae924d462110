"""Pydantic models for the gateway API.

Request bodies keep the wire field names used by existing clients
(`mintAuthority`, `from`, `isSigner`), mapped onto snake_case attributes.
"""

from typing import Annotated, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

U8_MAX = 2**8 - 1
U64_MAX = 2**64 - 1

DEFAULT_TRANSFER_DECIMALS = 6

# Upper bound for address, secret and signature text
MAX_KEY_CHARS = 128

KeyText = Annotated[str, Field(max_length=MAX_KEY_CHARS)]

T = TypeVar("T")


# ============================================================================
# Envelope
# ============================================================================


class SuccessResponse(BaseModel, Generic[T]):
    """Envelope for successful responses."""

    success: Literal[True] = True
    data: T


class ErrorResponse(BaseModel):
    """Envelope for failed responses."""

    success: Literal[False] = False
    error: str


# ============================================================================
# Requests
# ============================================================================


class CreateTokenRequest(BaseModel):
    """Body for /token/create."""

    model_config = ConfigDict(populate_by_name=True)

    mint_authority: KeyText = Field(alias="mintAuthority")
    mint: KeyText
    decimals: int = Field(ge=0, le=U8_MAX)


class MintTokenRequest(BaseModel):
    """Body for /token/mint."""

    mint: KeyText
    destination: KeyText
    authority: KeyText
    amount: int = Field(ge=0, le=U64_MAX)


class SignMessageRequest(BaseModel):
    """Body for /message/sign."""

    message: str
    secret: KeyText


class VerifyMessageRequest(BaseModel):
    """Body for /message/verify."""

    message: str
    signature: KeyText
    pubkey: KeyText


class SendSolRequest(BaseModel):
    """Body for /send/sol."""

    model_config = ConfigDict(populate_by_name=True)

    from_: KeyText = Field(alias="from")
    to: KeyText
    lamports: int = Field(ge=0, le=U64_MAX)


class SendTokenRequest(BaseModel):
    """Body for /send/token."""

    destination: KeyText
    mint: KeyText
    owner: KeyText
    amount: int = Field(ge=0, le=U64_MAX)
    decimals: int = Field(default=DEFAULT_TRANSFER_DECIMALS, ge=0, le=U8_MAX)


# ============================================================================
# Response payloads
# ============================================================================


class KeypairData(BaseModel):
    """Newly generated keypair, base58 encoded."""

    pubkey: str
    secret: str


class AccountMetaInfo(BaseModel):
    """Account reference of an instruction."""

    pubkey: str
    is_signer: bool
    is_writable: bool


class InstructionData(BaseModel):
    """Encoded instruction for /token/create and /token/mint."""

    program_id: str
    accounts: list[AccountMetaInfo]
    instruction_data: str  # base64


class SolTransferData(BaseModel):
    """Encoded system transfer; accounts are plain addresses."""

    program_id: str
    accounts: list[str]
    instruction_data: str


class TokenAccountInfo(BaseModel):
    """Account reference of a token transfer."""

    model_config = ConfigDict(populate_by_name=True)

    pubkey: str
    is_signer: bool = Field(alias="isSigner")


class TokenTransferData(BaseModel):
    """Encoded TransferChecked instruction."""

    program_id: str
    accounts: list[TokenAccountInfo]
    instruction_data: str


class SignatureData(BaseModel):
    """Result of /message/sign."""

    signature: str  # base64
    public_key: str
    message: str


class VerificationData(BaseModel):
    """Result of /message/verify."""

    valid: bool
    message: str
    pubkey: str
