"""Banking API client.

Async HTTP client for the banking service's transfer, account-validation and
authentication endpoints. Each operation runs validate -> build -> send ->
interpret and returns a Result (no exceptions for business errors).

This class is responsible for:
- Owning the connection pool (one httpx.AsyncClient per instance)
- Holding the optional bearer Credential behind an asyncio.Lock
- Translating transport exceptions into TransportFailure
- Structured logging of every call

Request construction lives in ``request_builder`` and status/body handling
in ``response_interpreter``; this module only wires them together.

Example:
    >>> async with BankingClient("http://localhost:8123") as client:
    ...     await client.authenticate()
    ...     result = await client.transfer_funds("ACC1000", "ACC1001", 100)
    ...     match result:
    ...         case Success(value=transfer) if transfer.is_successful:
    ...             print(transfer.transaction_id)
    ...         case Failure(error=error):
    ...             print(error.message)
"""

import asyncio
from types import TracebackType
from typing import Self

import httpx

from bankclient.core.config import BankingSettings, get_settings
from bankclient.core.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from bankclient.core.container import get_logger
from bankclient.core.result import Failure, Result, Success
from bankclient.domain.errors import BankingError, TransportFailure
from bankclient.domain.protocols import LoggerProtocol
from bankclient.domain.validators import AmountInput, is_valid_account_format
from bankclient.domain.value_objects import (
    ClientConfig,
    Credential,
    TransferRequest,
    TransferResult,
)
from bankclient.infrastructure.banking.request_builder import (
    build_account_validation_request,
    build_auth_request,
    build_transfer_payload,
    build_transfer_request,
)
from bankclient.infrastructure.banking.response_interpreter import (
    interpret_auth_response,
    interpret_transfer_response,
    interpret_transport_error,
    interpret_validation_response,
)
from bankclient.infrastructure.banking.transfer_order import TransferOrder


class BankingClient:
    """HTTP client for the banking API.

    Safe to share between concurrent tasks: requests are independent and
    the only mutable state, the Credential, is read and written under a
    lock.

    Attributes:
        config: Connection settings, fixed at construction.
    """

    def __init__(
        self,
        base_url: str | None = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        logger: LoggerProtocol | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Banking server base URL.
            timeout: Connect and per-request timeout in seconds.
            logger: Structured logger (defaults to the application logger).
            transport: Optional httpx transport (e.g., for tests or proxies).

        Raises:
            ClientConfigError: If base_url is None/blank or timeout <= 0.
        """
        self.config = ClientConfig(base_url, timeout)  # type: ignore[arg-type]
        self._logger = (logger or get_logger()).bind(base_url=self.config.base_url)
        self._http = httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.timeout),
            transport=transport,
        )
        self._credential: Credential | None = None
        self._credential_lock = asyncio.Lock()
        self._closed = False

        self._logger.info("banking_client_initialized", timeout=self.config.timeout)

    @classmethod
    def from_settings(
        cls,
        settings: BankingSettings | None = None,
        *,
        logger: LoggerProtocol | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> Self:
        """Create a client from BankingSettings (environment by default).

        Args:
            settings: Settings to use; ``get_settings()`` when omitted.
            logger: Structured logger.
            transport: Optional httpx transport.
        """
        settings = settings or get_settings()
        return cls(
            settings.base_url,
            timeout=settings.timeout,
            logger=logger,
            transport=transport,
        )

    # -------------------------------------------------------------------------
    # Credential
    # -------------------------------------------------------------------------

    @property
    def credential(self) -> Credential | None:
        """Current bearer credential, None until ``authenticate`` succeeds."""
        return self._credential

    @property
    def is_authenticated(self) -> bool:
        """Whether a credential is currently attached to requests."""
        return self._credential is not None

    async def _current_credential(self) -> Credential | None:
        async with self._credential_lock:
            return self._credential

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    async def _send(
        self,
        request: httpx.Request,
        operation: str,
    ) -> Result[httpx.Response, TransportFailure]:
        """Send a request, converting transport exceptions to TransportFailure.

        Args:
            request: Prepared request.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Any response, whatever its status.
            Failure(TransportFailure): On timeout or connection error.
        """
        try:
            response = await self._http.send(request)
        except httpx.TimeoutException as e:
            self._logger.warning(
                "banking_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(error=interpret_transport_error(e, operation))
        except httpx.RequestError as e:
            self._logger.warning(
                "banking_api_connection_error",
                operation=operation,
                error=str(e),
                hint="check that the banking server is running",
            )
            return Failure(error=interpret_transport_error(e, operation))

        self._logger.debug(
            "banking_api_response",
            operation=operation,
            status_code=response.status_code,
        )
        return Success(value=response)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def authenticate(self) -> Result[Credential, BankingError]:
        """Obtain a bearer token and attach it to all later requests.

        Returns:
            Success(Credential): Token stored on the client.
            Failure(AuthenticationFailed): Non-200 from /authToken.
            Failure(MalformedResponse): 200 without a usable token.
            Failure(TransportFailure): Server unreachable.
        """
        self._logger.info("banking_authentication_started")

        sent = await self._send(build_auth_request(self.config), "authenticate")
        if isinstance(sent, Failure):
            return sent

        result = interpret_auth_response(sent.value)
        match result:
            case Success(value=credential):
                async with self._credential_lock:
                    self._credential = credential
                self._logger.info(
                    "banking_authentication_succeeded",
                    expires_in=credential.expires_in,
                )
            case Failure(error=error):
                self._logger.warning(
                    "banking_authentication_failed",
                    error_code=error.code.value,
                    status_code=error.status_code,
                )
        return result

    async def transfer_funds(
        self,
        from_account: str | None,
        to_account: str | None,
        amount: AmountInput | None,
    ) -> Result[TransferResult, BankingError]:
        """Transfer funds between two accounts.

        Inputs are validated before any request is built; a validation
        failure never reaches the network.

        Args:
            from_account: Source account (``ACC####``).
            to_account: Destination account (``ACC####``).
            amount: Amount in (0, 1,000,000].

        Returns:
            Success(TransferResult): Server answered 200. The transfer itself
                may still have failed; check ``is_successful``.
            Failure(InvalidFormatError): Malformed account identifier.
            Failure(InvalidAmountError): Amount out of bounds.
            Failure(TransferRejected): Non-200; carries status and raw body.
            Failure(MalformedResponse): 200 with an undecodable body.
            Failure(TransportFailure): Server unreachable.
        """
        self._logger.info(
            "banking_transfer_started",
            from_account=from_account,
            to_account=to_account,
            amount=str(amount),
        )

        created = TransferRequest.create(from_account, to_account, amount)
        if isinstance(created, Failure):
            self._logger.warning(
                "banking_transfer_validation_failed",
                error_code=created.error.code.value,
                reason=created.error.message,
            )
            return created

        credential = await self._current_credential()
        request = build_transfer_request(
            self.config,
            build_transfer_payload(created.value),
            credential,
        )
        self._logger.debug(
            "banking_transfer_request_built",
            body=request.content.decode("utf-8"),
            authenticated=credential is not None,
        )

        sent = await self._send(request, "transfer")
        if isinstance(sent, Failure):
            return sent

        result = interpret_transfer_response(sent.value)
        match result:
            case Success(value=transfer) if transfer.is_successful:
                self._logger.info(
                    "banking_transfer_completed",
                    transaction_id=transfer.transaction_id,
                )
            case Success(value=transfer):
                self._logger.warning(
                    "banking_transfer_not_successful",
                    status=transfer.status,
                    server_message=transfer.message,
                )
            case Failure(error=error):
                self._logger.error(
                    "banking_transfer_failed",
                    error_code=error.code.value,
                    status_code=error.status_code,
                    reason=error.message,
                )
        return result

    async def validate_account(self, account_id: str | None) -> bool:
        """Ask the server whether an account exists.

        A malformed identifier returns False without any request. A missing
        response (timeout, connection error) also counts as invalid.

        Args:
            account_id: Identifier to check.

        Returns:
            True iff the id is well-formed and the server answers 200.
        """
        self._logger.info("banking_account_validation_started", account_id=account_id)

        if not is_valid_account_format(account_id):
            self._logger.warning("banking_account_invalid_format", account_id=account_id)
            return False

        credential = await self._current_credential()
        request = build_account_validation_request(
            self.config,
            account_id,  # type: ignore[arg-type]
            credential,
        )
        sent = await self._send(request, "validate_account")
        if isinstance(sent, Failure):
            return False

        is_valid = interpret_validation_response(sent.value)
        self._logger.info(
            "banking_account_validation_completed",
            account_id=account_id,
            result="VALID" if is_valid else "INVALID",
        )
        return is_valid

    def transfer(self) -> TransferOrder:
        """Start a fluent transfer: ``client.transfer().from_(a).to(b).amount(x)``."""
        return TransferOrder(client=self)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def close(self) -> None:
        """Release the connection pool. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        await self._http.aclose()
        self._logger.info("banking_client_closed")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
