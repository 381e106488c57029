from typing import Any, Generic, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

from app.features.analyzers.schemas.result import (
    AnalyzerConfig,
    AnalyzerFailure,
    AnalyzerSuccess,
)
from app.platform.logger import get_logger

logger = get_logger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class AnalyzerClient(Generic[PayloadT]):
    """
    Shared failure contract for the external analyzers.

    Subclasses build and send the request in `_send` and name the schema the
    response body is decoded into. Any non-2xx status, transport error,
    timeout or undecodable body is logged and returned as AnalyzerFailure;
    `analyze` never raises for a remote failure.
    """

    response_model: Type[PayloadT]

    def __init__(
        self,
        config: AnalyzerConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.name = config.name
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout_seconds,
            transport=self._transport,
            follow_redirects=True,
        )

    async def _send(self, client: httpx.AsyncClient, payload: Any) -> httpx.Response:
        raise NotImplementedError

    def _decode(self, response: httpx.Response) -> PayloadT:
        return self.response_model.model_validate(response.json())

    async def analyze(self, payload: Any) -> Union[AnalyzerSuccess[PayloadT], AnalyzerFailure]:
        try:
            async with self._client() as client:
                response = await self._send(client, payload)
                response.raise_for_status()
                result = self._decode(response)
        except httpx.TimeoutException as e:
            logger.error(f"[{self.name}] request timed out after {self.config.timeout_seconds}s: {e}")
            return AnalyzerFailure(analyzer=self.name, reason="timeout")
        except httpx.HTTPStatusError as e:
            logger.error(f"[{self.name}] returned status {e.response.status_code}")
            return AnalyzerFailure(
                analyzer=self.name, reason=f"status {e.response.status_code}"
            )
        except httpx.HTTPError as e:
            logger.error(f"[{self.name}] transport error: {e}")
            return AnalyzerFailure(analyzer=self.name, reason=f"transport error: {e}")
        except ValueError as e:
            # json decoding and pydantic validation errors
            logger.error(f"[{self.name}] could not decode response: {e}")
            return AnalyzerFailure(analyzer=self.name, reason="malformed response")
        except Exception as e:
            logger.exception(f"[{self.name}] unexpected error: {e}")
            return AnalyzerFailure(analyzer=self.name, reason="unexpected error")

        logger.info(f"[{self.name}] analysis succeeded")
        return AnalyzerSuccess[self.response_model](analyzer=self.name, payload=result)


def require_html_or_url(analyzer: str, html: Optional[str], url: Optional[str]) -> None:
    """Accessibility and validation analyzers take exactly one of html or url."""
    if (html is None) == (url is None):
        raise ValueError(f"{analyzer} requires exactly one of html or url")
