import logging
from typing import Dict, Mapping, Optional

import requests
from pydantic import ValidationError

from ..config import Config, SerpApiConfig
from ..exceptions import ScholarServiceError
from ..model.publication import ApiResponse

logger = logging.getLogger(__name__)


class ScholarApiClient:
    """
    Thin HTTP client for Google Scholar results served by SerpApi.

    ``get(params)`` adds the configured engine and api key, performs a GET
    against ``base_url`` and returns the parsed envelope. Any transport or
    parse problem is raised as an UPSTREAM ScholarServiceError.
    """

    def __init__(self, config: Optional[SerpApiConfig] = None):
        self.config = config or Config.serpapi

    def get(self, params: Mapping[str, str]) -> ApiResponse:
        query = self._build_query(params)
        url = self.config.base_url

        logger.info(f"🔎 Google Scholar request: q={query.get('q')!r} engine={query['engine']}")

        try:
            resp = requests.get(
                url,
                params=query,
                headers={"Accept": "application/json"},
                timeout=(self.config.connect_timeout, self.config.timeout),
            )
        except requests.RequestException as exc:
            raise ScholarServiceError.upstream(
                f"API request failed: {exc}",
                status_code=500,
                cause=exc,
            ) from exc

        if resp.status_code != 200:
            raise ScholarServiceError.upstream(
                f"API request failed with status: {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            return ApiResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise ScholarServiceError.upstream(
                f"Failed to parse API response: {exc}",
                status_code=500,
                cause=exc,
            ) from exc

    def _build_query(self, params: Mapping[str, str]) -> Dict[str, str]:
        query = dict(params)
        query["engine"] = self.config.engine
        if self.config.api_key:
            query["api_key"] = self.config.api_key
        return query
