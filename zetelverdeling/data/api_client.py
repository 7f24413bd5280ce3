"""Client voor de REST-backend met verkiezingsuitslagen.

Eindpunten :
  - GET /nationalResult/{election_id}/national       (stemtotalen uit de XML-cache)
  - GET /elections/{election_id}/parties/db          (opgeslagen stemmen en zetels)
  - GET /elections/municipalities/{naam}             (uitslag van één gemeente)
  - GET /elections/municipalities/all-results        (uitslag van alle gemeenten)
  - GET /elections/{election_id}/regions/gemeenten   (gemeentenamen)
  - GET /constituencies/{election_id}/results        (uitslag per kieskring)
  - GET /elections/kieskring/names                   (kieskringnamen)
  - GET /elections/Getprovince                       (provincies met kieskringen)
  - GET /ScaledElectionResults/Result                (statusbericht)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests
from pydantic import ValidationError

from zetelverdeling.config import API_BASE_URL, API_TIMEOUT
from zetelverdeling.data.schemas import (
    ApiErrorResponse,
    ConstituencyDataDto,
    MunicipalityDataDto,
    MunicipalityResultDto,
    NationalResult,
    PartyDTO,
    ProvinceDto,
    RegionDataDto,
)

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: Dict[str, str] = {"Accept": "application/json"}
SERVER_ERROR_STATUSES = {500, 502, 503, 504}
BACKEND_UNREACHABLE_MESSAGE = "Kon geen verbinding maken met de backend."


class ApiError(Exception):
    """Fout van de backend, met HTTP-status en eventueel het foutobject."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        status_text: str = "",
        details: Optional[ApiErrorResponse] = None,
    ):
        super().__init__(message)
        self.status = status
        self.status_text = status_text
        self.details = details


class NetworkError(ApiError):
    """Geen antwoord van de server (verbinding, timeout)."""


def _error_details(resp: requests.Response) -> Tuple[Optional[str], Optional[ApiErrorResponse]]:
    """Haalt de foutmelding uit de body ; (None, None) als die geen JSON is."""
    try:
        body: Any = resp.json()
    except ValueError:
        return None, None

    try:
        details = ApiErrorResponse.model_validate(body)
    except ValidationError:
        return str(body), None
    return details.message, details


class ElectionApiClient:
    """Client voor de verkiezingsbackend."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = API_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, endpoint: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{endpoint}"
        logger.debug("GET %s", url)
        try:
            return self.session.get(url, headers=DEFAULT_HEADERS, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.error("Netwerkfout bij %s : %s", url, exc)
            raise NetworkError(
                "Failed to connect to the server. Please check your network connection."
            ) from exc

    def _get_json(self, endpoint: str) -> Any:
        """GET met de standaard foutafhandeling ; None bij een leeg antwoord.

        Raises:
            ApiError: foutstatus ; de melding komt uit het foutobject van de
                backend, anders "HTTP error! status: <n>".
            NetworkError: de server is onbereikbaar.
        """
        resp = self._get(endpoint)

        if not resp.ok:
            message, details = _error_details(resp)
            if details is None:
                message = f"HTTP error! status: {resp.status_code}"
            logger.warning("GET %s mislukt : %s", endpoint, message)
            raise ApiError(message, resp.status_code, resp.reason or "", details)

        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    # --- Landelijke uitslag ---

    def get_national_results(self, election_id: str) -> List[NationalResult]:
        """Landelijke stemtotalen per partij.

        Args:
            election_id: verkiezing (bijv. "TK2021").

        Returns:
            Lijst van NationalResult ; leeg bij een leeg antwoord.
        """
        body = self._get_json(f"/nationalResult/{election_id}/national") or []
        return [NationalResult.model_validate(item) for item in body]

    def get_parties_from_db(self, election_id: str) -> List[PartyDTO]:
        """Opgeslagen partijresultaten (stemmen, zetels) van een verkiezing.

        HTTP 204 geeft een lege lijst. Fouten worden geclassificeerd :
        400 ongeldig verzoek, 404 onbekende verkiezing, 5xx tijdelijk
        onbeschikbaar, overige statussen onverwacht.

        Raises:
            ApiError: de server antwoordt met een foutstatus.
            NetworkError: de server is onbereikbaar.
        """
        logger.info("Partijdata ophalen voor verkiezing %s", election_id)
        resp = self._get(f"/elections/{election_id}/parties/db")

        if resp.status_code == 204:
            logger.info("Geen partijdata voor verkiezing %s", election_id)
            return []

        if not resp.ok:
            raise self._classify_error(resp, election_id)

        logger.info("Partijdata opgehaald voor verkiezing %s", election_id)
        return [PartyDTO.model_validate(item) for item in resp.json()]

    def _classify_error(self, resp: requests.Response, election_id: str) -> ApiError:
        message, details = _error_details(resp)
        detail = message or resp.reason or ""
        status = resp.status_code
        status_text = resp.reason or ""

        if status == 400:
            logger.warning("Ongeldig verzoek voor %s : %s", election_id, detail)
            return ApiError(f"Invalid request: {detail}", status, status_text, details)
        if status == 404:
            logger.warning("Geen partijdata gevonden voor %s", election_id)
            return ApiError(
                f"No party data found for election ID '{election_id}'.",
                status, status_text, details,
            )
        if status in SERVER_ERROR_STATUSES:
            logger.error("Serverfout %s : %s", status, detail)
            return ApiError(
                "The service is temporarily unavailable. Please try again later.",
                status, status_text, details,
            )
        logger.error("Onverwachte HTTP-fout %s : %s", status, detail)
        return ApiError(
            f"An unexpected error occurred. Status: {status}",
            status, status_text, details,
        )

    # --- Gemeenten ---

    def get_municipality_results(self, municipality: str) -> List[MunicipalityResultDto]:
        """Uitslag per partij van één gemeente (naam wordt URL-gecodeerd)."""
        body = self._get_json(f"/elections/municipalities/{quote(municipality, safe='')}") or []
        return [MunicipalityResultDto.model_validate(item) for item in body]

    def get_all_municipality_results(self) -> List[MunicipalityDataDto]:
        """Uitslag van alle gemeenten in één verzoek."""
        body = self._get_json("/elections/municipalities/all-results") or []
        return [MunicipalityDataDto.model_validate(item) for item in body]

    def get_municipality_names(self, election_id: str = "TK2023") -> List[str]:
        body = self._get_json(f"/elections/{election_id}/regions/gemeenten") or []
        return [item["name"] for item in body]

    # --- Kieskringen en provincies ---

    def get_constituency_results(self, election_id: str = "TK2025") -> List[ConstituencyDataDto]:
        """Uitslag per kieskring (opgeteld uit de gemeenten)."""
        body = self._get_json(f"/constituencies/{election_id}/results") or []
        return [ConstituencyDataDto.model_validate(item) for item in body]

    def get_kieskring_names(self) -> List[str]:
        body = self._get_json("/elections/kieskring/names") or []
        return [RegionDataDto.model_validate(item).name for item in body]

    def get_provinces(self) -> List[ProvinceDto]:
        """Provincies met hun kieskringen."""
        body = self._get_json("/elections/Getprovince") or []
        return [ProvinceDto.model_validate(item) for item in body]

    # --- Status ---

    def get_scaled_results_message(self) -> str:
        """Statusbericht van de backend ; een vaste melding als die onbereikbaar is."""
        try:
            resp = self._get("/ScaledElectionResults/Result")
            resp.raise_for_status()
            return resp.json()["message"]
        except (ApiError, requests.RequestException, ValueError, KeyError, TypeError) as exc:
            logger.error("Backend onbereikbaar : %s", exc)
            return BACKEND_UNREACHABLE_MESSAGE
