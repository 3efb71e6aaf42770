"""Banking API response schemas.

Pydantic schemas for the JSON bodies the banking server returns with a 200
status. Includes:
- Wire schemas (server -> client), keyed by the server's camelCase names
- Conversion methods to domain value objects

Unknown keys are ignored; wrongly typed values fail validation and are
reported as MalformedResponse by the response interpreter.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from bankclient.domain.value_objects import Credential, TransferResult

# RFC 6750 b64token; anything else cannot be sent in an HTTP header
BEARER_TOKEN_PATTERN = r"^[A-Za-z0-9\-._~+/]+=*$"


class TransferResponseSchema(BaseModel):
    """Body of a 200 response from POST /transfer.

    Attributes:
        transaction_id: Server transaction identifier.
        status: Business outcome (e.g., "SUCCESS", "FAILED").
        message: Human-readable server message.
        from_account: Echoed source account.
        to_account: Echoed destination account.
        amount: Echoed amount.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    transaction_id: str | None = Field(None, alias="transactionId")
    status: str | None = Field(None, description="Transfer status")
    message: str | None = Field(None, description="Server message")
    from_account: str | None = Field(None, alias="fromAccount")
    to_account: str | None = Field(None, alias="toAccount")
    amount: Decimal | None = Field(None, description="Transferred amount")

    def to_domain(self) -> TransferResult:
        """Convert wire schema to TransferResult.

        Returns:
            TransferResult with absent strings normalized to "".
        """
        return TransferResult(
            transaction_id=self.transaction_id or "",
            status=self.status or "",
            message=self.message or "",
            from_account=self.from_account,
            to_account=self.to_account,
            amount=self.amount,
        )


class TokenResponseSchema(BaseModel):
    """Body of a 200 response from POST /authToken.

    Attributes:
        token: Bearer token.
        expires_in: Token lifetime in seconds.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    token: str = Field(
        ...,
        min_length=1,
        pattern=BEARER_TOKEN_PATTERN,
        description="Bearer token (RFC 6750 b64token characters only)",
    )
    expires_in: int = Field(0, alias="expiresIn", ge=0)

    def to_domain(self) -> Credential:
        """Convert wire schema to a Credential issued now."""
        return Credential(token=self.token, expires_in=self.expires_in)
