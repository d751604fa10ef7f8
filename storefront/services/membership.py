from __future__ import annotations
import logging
import httpx

from ..config import settings
from ..http.client import HttpClient
from ..utils.ids import normalize_id

logger = logging.getLogger(__name__)

class MembershipResolver:
    """
    Obtiene el conjunto de ids de producto de una categoría.
    Nunca falla: 404, errores HTTP/transporte o JSON inválido -> conjunto vacío,
    para que una categoría rota se vea como "sin productos" y no rompa la página.
    """
    def __init__(self, http: HttpClient, api_prefix: str | None = None) -> None:
        self.http = http
        self.api_prefix = (settings.API_PREFIX if api_prefix is None else api_prefix).rstrip("/")

    def _path(self, category_id: int | str) -> str:
        return f"{self.api_prefix}/categories/{category_id}/products"

    async def resolve(self, category_id: int | str) -> frozenset[str]:
        if category_id is None or str(category_id) == "":
            raise ValueError("category_id must be non-empty")

        try:
            payload = await self.http.get_json(self._path(category_id))
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                logger.info("membership: 404 category=%s -> empty", category_id)
            else:
                logger.warning("membership: status=%s category=%s -> empty",
                               e.response.status_code, category_id)
            return frozenset()
        except httpx.HTTPError as e:
            logger.warning("membership: transport error category=%s err=%r -> empty", category_id, e)
            return frozenset()
        except ValueError as e:
            logger.warning("membership: invalid json category=%s err=%r -> empty", category_id, e)
            return frozenset()

        if not isinstance(payload, list):
            logger.warning("membership: unexpected payload type=%s category=%s -> empty",
                           type(payload).__name__, category_id)
            return frozenset()

        ids = frozenset(normalize_id(v) for v in payload if v is not None)
        logger.info("membership: category=%s ids=%s", category_id, len(ids))
        return ids
