"""
BLiP adapter - BLiP HTTP commands client.

Provides:
- BlipClient: the interface the service layer depends on
- BlipHttpClient: sends LIME commands to BLiP's HTTP commands endpoint
- BlipClientFactory: builds a client bound to a caller's Authorization key

BLiP authenticates every command with the bot's ``Key`` credential, so a
client is built per request from the request's own header.
"""

import logging
from typing import Optional, Protocol

import httpx
from pydantic import ValidationError as PydanticValidationError

from contacts_api.config.settings import settings
from contacts_api.shared.core.exceptions import ExternalServiceError
from contacts_api.shared.core.logging import mask_authorization
from contacts_api.shared.schemas.command import Command

logger = logging.getLogger(__name__)


class BlipClient(Protocol):
    """Anything able to process a LIME command on BLiP."""

    async def process_command(self, command: Command) -> Command:
        ...


class BlipHttpClient:
    """
    Client for BLiP's HTTP commands endpoint.

    Each call opens its own connection and waits for BLiP's answer.
    A command BLiP refuses still comes back as a normal response with
    ``status == "failure"``; only transport problems raise here.
    """

    SERVICE_NAME = "BLiP"

    def __init__(
        self,
        authorization: str,
        commands_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize BLiP client.

        Args:
            authorization: Full Authorization header value ("Key <token>")
            commands_url: Commands endpoint. If not provided, uses settings.
            timeout_seconds: Request timeout, None waits indefinitely
            transport: Optional httpx transport (used to stub BLiP in tests)
        """
        self.authorization = authorization
        self.commands_url = commands_url or settings.BLIP_COMMANDS_URL
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def process_command(self, command: Command) -> Command:
        """
        Send a command to BLiP and return its response command.

        Args:
            command: Command to process

        Returns:
            Response command as sent back by BLiP

        Raises:
            ExternalServiceError: If BLiP cannot be reached or its answer is unreadable
        """
        headers = {
            "Authorization": self.authorization,
            "Content-Type": "application/json",
        }
        logger.debug(
            "Sending BLiP command %s %s (id=%s, key=%s)",
            command.method.value,
            command.uri,
            command.id,
            mask_authorization(self.authorization),
        )

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self.commands_url,
                    json=command.to_wire(),
                    headers=headers,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("BLiP answered HTTP %d for %s", e.response.status_code, command.uri)
            raise ExternalServiceError(
                self.SERVICE_NAME,
                message=f"BLiP answered HTTP {e.response.status_code} for {command.uri}",
                details={"http_status": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            logger.error("BLiP connection error: %s", e)
            raise ExternalServiceError(
                self.SERVICE_NAME,
                message=f"Could not reach BLiP: {e}",
            ) from e

        try:
            return Command.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            logger.error("Unreadable BLiP response: %s", response.text[:200])
            raise ExternalServiceError(
                self.SERVICE_NAME,
                message="BLiP returned an unreadable command response",
            ) from e


class BlipClientFactory:
    """Builds BLiP clients bound to a given Authorization key."""

    def __init__(
        self,
        commands_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.commands_url = commands_url or settings.BLIP_COMMANDS_URL
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else settings.BLIP_TIMEOUT_SECONDS
        )
        self._transport = transport

    def build(self, authorization: str) -> BlipClient:
        """Build a client that authenticates with ``authorization``."""
        return BlipHttpClient(
            authorization=authorization,
            commands_url=self.commands_url,
            timeout_seconds=self.timeout_seconds,
            transport=self._transport,
        )
