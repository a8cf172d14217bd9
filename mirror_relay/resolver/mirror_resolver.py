"""
On-demand video resolver for Invidious-style mirrors.
"""
from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import httpx

from .errors import MissingFieldError, UpstreamFetchError, VideoFetchError
from .extraction import extract_fields, missing_fields
from .mirrors import FetchTarget, MirrorKey, MirrorPlan, s1_plan, s2_plan
from .models import VideoRecord

if TYPE_CHECKING:
    from ..relay_api.settings import RelaySettings

logger = logging.getLogger(__name__)


class MirrorResolver:
    """Fetches the documents of a mirror plan and turns them into a VideoRecord."""

    def __init__(
        self,
        plan: MirrorPlan,
        *,
        timeout: Optional[float] = 5.0,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.plan = plan
        self._timeout = timeout
        self._user_agent = user_agent
        self._transport = transport

    @property
    def key(self) -> MirrorKey:
        return self.plan.key

    @property
    def host(self) -> str:
        return self.plan.host

    def _create_client(self) -> httpx.AsyncClient:
        headers = {"User-Agent": self._user_agent} if self._user_agent else None
        return httpx.AsyncClient(
            timeout=self._timeout,
            headers=headers,
            transport=self._transport,
            follow_redirects=True,
        )

    async def _fetch(self, client: httpx.AsyncClient, target: FetchTarget, video_id: str) -> Any:
        url = target.build_url(video_id)
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise UpstreamFetchError(target.document, url, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise UpstreamFetchError(target.document, url, str(exc) or type(exc).__name__) from exc

        if target.kind == "html":
            return response.text

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamFetchError(target.document, url, "invalid JSON") from exc
        if not isinstance(payload, dict):
            raise UpstreamFetchError(target.document, url, "response must be a JSON object")
        return payload

    async def fetch_documents(self, video_id: str) -> Dict[str, Any]:
        """Fetch every document of the plan concurrently.

        The first failure cancels the remaining fetches and is re-raised.
        """

        async with self._create_client() as client:
            tasks = [
                asyncio.create_task(self._fetch(client, target, video_id))
                for target in self.plan.fetches
            ]
            try:
                results = await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        return {target.document: result for target, result in zip(self.plan.fetches, results)}

    async def resolve(self, video_id: str) -> VideoRecord:
        """Resolve ``video_id`` into a fully populated record.

        Every failure is collapsed into a VideoFetchError whose ``kind``
        records what went wrong; the cause is logged and chained only.
        """

        try:
            documents = await self.fetch_documents(video_id)
            values = extract_fields(documents, self.plan.rules)
            missing = missing_fields(values, self.plan.rules)
            if missing:
                raise MissingFieldError(missing)
            record = VideoRecord(videoId=video_id, **values)
        except UpstreamFetchError as exc:
            logger.error(f"[{self.host}] fetch failed for video {video_id}: {exc}")
            raise VideoFetchError("fetch") from exc
        except MissingFieldError as exc:
            logger.error(f"[{self.host}] incomplete data for video {video_id}: {exc}")
            raise VideoFetchError("missing_data") from exc
        except Exception as exc:
            logger.exception(f"[{self.host}] unexpected error for video {video_id}")
            raise VideoFetchError("unexpected") from exc

        logger.debug(f"[{self.host}] resolved video {video_id}")
        return record


def build_resolvers(
    settings: "RelaySettings",
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[MirrorKey, MirrorResolver]:
    """Instantiate one resolver per supported mirror from the settings."""

    plans = (
        s1_plan(
            settings.s1_page_url,
            settings.s1_api_url,
            description_source=settings.s1_description_source,
            channel_image_source=settings.s1_channel_image_source,
        ),
        s2_plan(settings.s2_page_url),
    )
    return {
        plan.key: MirrorResolver(
            plan,
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
            transport=transport,
        )
        for plan in plans
    }
