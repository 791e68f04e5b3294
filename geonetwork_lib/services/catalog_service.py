"""
Servico de requisicoes CSW ao catalogo.
"""

from typing import Optional

import requests

from ..config import CSW_VERSION, XML_CONTENT_TYPE
from ..core import GeonetworkHttpClient, CatalogRequestError
from ..utils import get_logger, resumir_corpo


class CatalogService:
    """Requisicoes CSW cruas. As respostas sao devolvidas como texto."""

    def __init__(self, http_client: GeonetworkHttpClient, csw_url: str):
        self.client = http_client
        self.csw_url = csw_url
        self.logger = get_logger()

    def get_capabilities(self, version: str = CSW_VERSION) -> str:
        resp = self.client.get(self.csw_url, params={
            "service": "CSW",
            "request": "GetCapabilities",
            "version": version,
        })
        return self._texto(resp, "GetCapabilities")

    def get_record_by_id(
        self,
        identifier: str,
        element_set: str = "full",
        output_schema: Optional[str] = None,
    ) -> str:
        params = {
            "service": "CSW",
            "request": "GetRecordById",
            "version": CSW_VERSION,
            "id": identifier,
            "elementSetName": element_set,
        }
        if output_schema:
            params["outputSchema"] = output_schema
        resp = self.client.get(self.csw_url, params=params)
        return self._texto(resp, f"GetRecordById {identifier}")

    def post(self, xml_body: str) -> str:
        """Envia uma requisicao CSW em XML."""
        resp = self.client.post(
            self.csw_url,
            data=xml_body.encode("utf-8"),
            headers={"Content-Type": XML_CONTENT_TYPE},
        )
        return self._texto(resp, "POST CSW")

    def _texto(self, resp: requests.Response, operacao: str) -> str:
        if not resp.ok:
            self.logger.warning(
                f"{operacao} retornou HTTP {resp.status_code}: {resumir_corpo(resp.text, 200)}"
            )
            raise CatalogRequestError(resp.status_code, resp.url or self.csw_url)
        self.logger.debug(f"{operacao}: {len(resp.content)} bytes")
        return resp.text
