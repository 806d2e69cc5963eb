"""
Chamber of Deputies (Câmara dos Deputados) Open Data API client.

Base URL: https://dadosabertos.camara.leg.br/api/v2

Notes:
  - All responses are wrapped in {"dados": [...], "links": [...]}
  - A missing, null or non-list "dados" is treated as an empty list
  - No .json suffix — returns JSON by default
  - Only the first page is ever requested; the provider's default page
    size applies unless ``itens`` is passed

Usage example:
    with CamaraApiClient() as client:
        deputados = client.list_deputados()
        despesas = client.list_despesas("204554", ano=2024)
"""

import logging
from typing import Any

import httpx

from .config import ROSTER_PAGE_SIZE, settings
from .exceptions import CamaraApiError

logger = logging.getLogger(__name__)


class CamaraApiClient:
    """
    HTTP client for the Chamber of Deputies open-data API v2.

    Parameters
    ----------
    base_url : str, optional
        API root, defaults to ``settings.camara_base_url``.
    timeout : float, optional
        HTTP request timeout in seconds, defaults to
        ``settings.request_timeout_s``.

    ``httpx.Client`` is thread-safe, so one instance can serve the ranking
    worker pool.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url = (base_url or settings.camara_base_url).rstrip("/")
        self._client = httpx.Client(
            timeout=timeout if timeout is not None else settings.request_timeout_s,
            follow_redirects=True,
            headers={"Accept": "application/json"},
        )

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> dict:
        """
        GET one page from the Chamber API.

        Returns the full envelope dict: {"dados": [...], "links": [...]}.
        Raises ``CamaraApiError`` on a non-2xx status; transport errors
        propagate as ``httpx.HTTPError``.
        """
        url = f"{self._base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        kwargs: dict[str, Any] = {"params": params}
        if timeout is not None:
            kwargs["timeout"] = timeout
        resp = self._client.get(url, **kwargs)
        if not resp.is_success:
            raise CamaraApiError(resp.status_code, url)
        return resp.json()

    def get_dados(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> list[dict]:
        """GET one page and return its ``dados`` list ([] when absent)."""
        data = self.get(path, params, timeout=timeout)
        dados = data.get("dados") if isinstance(data, dict) else None
        return dados if isinstance(dados, list) else []

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    def list_deputados(self, *, itens: int | None = ROSTER_PAGE_SIZE) -> list[dict]:
        """Deputies ordered by name. ``itens=None`` keeps the provider default."""
        params: dict[str, Any] = {"ordem": "ASC", "ordenarPor": "nome"}
        if itens is not None:
            params["itens"] = itens
        return self.get_dados("/deputados", params)

    def list_eventos(self, deputado_id: str) -> list[dict]:
        return self.get_dados(
            f"/deputados/{deputado_id}/eventos",
            {"ordem": "ASC", "ordenarPor": "dataHoraInicio"},
        )

    def list_despesas(
        self,
        deputado_id: str,
        ano: int | None = None,
        *,
        timeout: float | None = None,
    ) -> list[dict]:
        params: dict[str, Any] = {"ordem": "ASC", "ordenarPor": "ano"}
        if ano is not None:
            params = {"ano": ano, **params}
        return self.get_dados(
            f"/deputados/{deputado_id}/despesas", params, timeout=timeout
        )

    def list_frentes(self, deputado_id: str) -> list[dict]:
        return self.get_dados(f"/deputados/{deputado_id}/frentes")

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()
