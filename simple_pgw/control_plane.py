"""Control plane: registry of APNs, PDN connections and bearers."""

from __future__ import annotations

from ipaddress import IPv4Address
from itertools import count
from typing import Optional

from simple_pgw.pdn_connection import AddressLike, Bearer, PdnConnection

_UE_NETWORK = int(IPv4Address("10.0.0.0"))


class UnknownApnError(KeyError):
    """Raised when a PDN connection is requested for an unregistered APN."""


class ControlPlane:
    """Allocates TEIDs and UE addresses and keeps the session tables."""

    def __init__(self) -> None:
        self._pdns: dict[int, PdnConnection] = {}
        self._pdns_by_ue_ip_addr: dict[IPv4Address, PdnConnection] = {}
        self._bearers: dict[int, Bearer] = {}
        self._apns: dict[str, IPv4Address] = {}

    def find_pdn_by_cp_teid(self, cp_teid: int) -> Optional[PdnConnection]:
        return self._pdns.get(cp_teid)

    def find_pdn_by_ip_address(self, ip: AddressLike) -> Optional[PdnConnection]:
        return self._pdns_by_ue_ip_addr.get(IPv4Address(ip))

    def find_bearer_by_dp_teid(self, dp_teid: int) -> Optional[Bearer]:
        return self._bearers.get(dp_teid)

    def create_pdn_connection(
        self, apn: str, sgw_addr: AddressLike, sgw_cp_teid: int
    ) -> PdnConnection:
        """Open a PDN connection to a registered APN.

        The connection gets the lowest free control-plane TEID and the lowest
        free UE address in 10.0.0.0/8, starting from 10.0.0.1.
        """
        try:
            apn_gw = self._apns[apn]
        except KeyError:
            raise UnknownApnError(apn) from None
        cp_teid = next(t for t in count(1) if t not in self._pdns)
        ue_ip = next(
            ip
            for ip in (IPv4Address(_UE_NETWORK | host) for host in count(1))
            if ip not in self._pdns_by_ue_ip_addr
        )
        pdn = PdnConnection(cp_teid, apn_gw, ue_ip)
        pdn.sgw_cp_teid = sgw_cp_teid
        pdn.sgw_address = IPv4Address(sgw_addr)
        self._pdns[cp_teid] = pdn
        self._pdns_by_ue_ip_addr[ue_ip] = pdn
        return pdn

    def delete_pdn_connection(self, cp_teid: int) -> None:
        """Drop the PDN connection with the given control-plane TEID, if any."""
        if self._pdns.pop(cp_teid, None) is None:
            return
        self._bearers.pop(cp_teid, None)

    def create_bearer(self, pdn: Optional[PdnConnection], sgw_teid: int) -> Bearer:
        """Create a bearer on a PDN connection with the lowest free data TEID."""
        if pdn is None:
            raise ValueError("a bearer needs a PDN connection")
        dp_teid = next(t for t in count(1) if t not in self._bearers)
        bearer = Bearer(dp_teid, pdn)
        bearer.sgw_dp_teid = sgw_teid
        self._bearers[dp_teid] = bearer
        pdn.add_bearer(bearer)
        return bearer

    def delete_bearer(self, dp_teid: int) -> None:
        """Drop a bearer and detach it from its PDN connection."""
        bearer = self._bearers.pop(dp_teid, None)
        if bearer is None:
            return
        pdn = bearer.pdn_connection
        if pdn is not None:
            if pdn.default_bearer is bearer:
                pdn.default_bearer = None
            pdn.remove_bearer(dp_teid)

    def add_apn(self, apn_name: str, apn_gateway: AddressLike) -> None:
        """Register (or replace) an APN and its gateway address."""
        self._apns[apn_name] = IPv4Address(apn_gateway)