"""AdService: serve an ad for a placement and refresh the catalog on demand."""

from __future__ import annotations

import logging

from ..domain.selection import select_creative
from ..errors import NotFoundError
from ..models import AdRequest, AdResponse, Creative, ServeOutcome, ServeStatus
from ..ports.id_gen import UserIdProvider, UuidUserIdProvider
from .catalog_cache import CatalogCache

logger = logging.getLogger(__name__)


class AdService:
    """Orchestrates placement lookup, creative selection and response assembly."""

    def __init__(
        self,
        cache: CatalogCache,
        user_id_provider: UserIdProvider | None = None,
    ) -> None:
        self._cache = cache
        self._user_id = user_id_provider or UuidUserIdProvider()

    @property
    def cache(self) -> CatalogCache:
        return self._cache

    def serve_ad(self, request: AdRequest) -> ServeOutcome:
        user_id = request.user_id or self._user_id.new_user_id()
        placement_id = request.placement_id

        try:
            placement = self._cache.get_placement_by_id(placement_id)
        except NotFoundError as exc:
            return self._outcome(ServeStatus.placement_not_found, placement_id, user_id, str(exc))

        try:
            creatives = self._cache.get_all_creatives()
        except NotFoundError as exc:
            return self._outcome(ServeStatus.no_creatives, placement_id, user_id, str(exc))

        selected = select_creative(placement, creatives)
        if selected is None:
            return self._outcome(
                ServeStatus.no_applicable_creative,
                placement_id,
                user_id,
                "no applicable creative found",
            )

        outcome = ServeOutcome(
            status=ServeStatus.served,
            placement_id=placement_id,
            user_id=user_id,
            response=_prepare_response(selected, user_id),
        )
        logger.info(
            "ad_served",
            extra={
                "placement_id": placement_id,
                "creative_id": selected.creative_id,
                "price": selected.price,
            },
        )
        return outcome

    def refresh_now(self) -> dict[str, int]:
        """Reload the catalog immediately. Store errors propagate to the caller."""
        return self._cache.refresh()

    @staticmethod
    def _outcome(status: ServeStatus, placement_id: str, user_id: str, detail: str) -> ServeOutcome:
        logger.info("ad_not_served", extra={"placement_id": placement_id, "status": status.value})
        return ServeOutcome(status=status, placement_id=placement_id, user_id=user_id, detail=detail)


def _prepare_response(creative: Creative, user_id: str) -> AdResponse:
    return AdResponse(
        creative_id=creative.creative_id,
        content=creative.content,
        price=creative.price,
        user_id=user_id,
    )
