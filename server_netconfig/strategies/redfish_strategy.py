import logging
from typing import Dict, Iterator, List

import requests

from ..config import AppConfig
from ..models import NicInfo
from ..parsers import FqddParser
from .base_strategy import InventoryStrategy

logger = logging.getLogger(__name__)


class RedfishStrategy(InventoryStrategy):
    """Dell iDRAC Redfish NIC inventory"""

    SYSTEM_PATH = "/redfish/v1/Systems/System.Embedded.1"

    def __init__(self, credentials: Dict[str, str]):
        super().__init__(credentials)
        self.base_url = f"https://{self.host}" if self.host else None

    def ensure_connected(self) -> None:
        """Open an HTTP session against the iDRAC"""
        if self._session:
            return

        logger.info(f"Connecting to iDRAC at {self.host}...")
        self._session = requests.Session()
        self._session.verify = AppConfig.VERIFY_SSL
        self._session.auth = (self.credentials["username"], self.credentials["password"])
        self._session.headers.update({"Accept": "application/json"})

    def _get(self, path: str) -> dict:
        response = self._session.get(f"{self.base_url}{path}", timeout=AppConfig.API_TIMEOUT)
        response.raise_for_status()
        return response.json()

    def _members(self, path: str) -> List[str]:
        return [member["@odata.id"] for member in self._get(path).get("Members", [])]

    def _iter_device_functions(self) -> Iterator[dict]:
        """Yield every NetworkDeviceFunction resource of the system"""
        self.ensure_connected()

        adapter_paths = self._members(f"{self.SYSTEM_PATH}/NetworkAdapters")
        logger.debug(f"Found {len(adapter_paths)} network adapters on {self.host}")

        for adapter_path in adapter_paths:
            adapter = self._get(adapter_path)
            functions_link = adapter.get("NetworkDeviceFunctions", {}).get("@odata.id")
            if not functions_link:
                logger.debug(f"No device functions listed for {adapter_path}")
                continue

            for function_path in self._members(functions_link):
                function = self._get(function_path)
                fqdd = function.get("Id", "")
                if not FqddParser.is_nic(fqdd):
                    logger.debug(f"Skipping non-NIC device function {fqdd}")
                    continue
                yield function

    def list_discovered_adapters(self) -> List[NicInfo]:
        """Get all NIC partitions with their current MAC addresses"""
        nics = []
        for function in self._iter_device_functions():
            mac = (function.get("Ethernet") or {}).get("MACAddress")
            nics.append(NicInfo.from_fqdd(function["Id"], mac_address=mac))

        logger.info(f"Retrieved {len(nics)} NIC partitions from {self.host}")
        return nics

    def get_permanent_addresses(self) -> Dict[str, str]:
        """Get permanent MAC addresses by FQDD"""
        permanent_macs = {}
        for function in self._iter_device_functions():
            mac = (function.get("Ethernet") or {}).get("PermanentMACAddress")
            if mac:
                permanent_macs[function["Id"]] = mac

        logger.info(f"Retrieved {len(permanent_macs)} permanent MAC addresses from {self.host}")
        return permanent_macs

    def disconnect(self) -> None:
        """Close the HTTP session"""
        if self._session:
            self._session.close()
            self._session = None
            logger.debug(f"Closed session to {self.host}")
