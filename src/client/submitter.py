from typing import Protocol

import httpx

from src.config.settings import settings
from src.guests.features.submit_rsvp.dtos import SubmitRSVPResponse
from src.guests.urls import SUBMIT_RSVP_URL


class RSVPSubmitter(Protocol):
    """Sends the RSVP form fields to the submission handler."""

    async def __call__(self, fields: dict[str, str]) -> SubmitRSVPResponse: ...


class HttpRSVPSubmitter:
    """Posts the form fields to the RSVP endpoint as a urlencoded form."""

    def __init__(
        self,
        base_url: str = settings.api_base_url,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._base_url = base_url
        self._http_client_class = http_client_class

    async def __call__(self, fields: dict[str, str]) -> SubmitRSVPResponse:
        async with self._http_client_class(base_url=self._base_url) as client:
            response = await client.post(SUBMIT_RSVP_URL, data=fields)
            response.raise_for_status()
            return SubmitRSVPResponse.model_validate(response.json())
