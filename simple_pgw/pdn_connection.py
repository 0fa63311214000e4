"""PDN connections and the EPS bearers that belong to them."""

from __future__ import annotations

from ipaddress import IPv4Address
from types import MappingProxyType
from typing import Mapping, Optional, Union

AddressLike = Union[IPv4Address, str, int]


class Bearer:
    """An EPS bearer identified by its data-plane TEID."""

    def __init__(self, dp_teid: int, pdn: "PdnConnection") -> None:
        self.dp_teid = dp_teid
        self.sgw_dp_teid = 0
        self._pdn = pdn

    @property
    def pdn_connection(self) -> "PdnConnection":
        """The PDN connection this bearer belongs to."""
        return self._pdn

    def __repr__(self) -> str:
        return (
            f"Bearer(dp_teid={self.dp_teid}, sgw_dp_teid={self.sgw_dp_teid}, "
            f"cp_teid={self._pdn.cp_teid})"
        )


class PdnConnection:
    """A PDN connection of one UE to one APN."""

    def __init__(
        self, cp_teid: int, apn_gw: AddressLike, ue_ip_addr: AddressLike
    ) -> None:
        self.cp_teid = cp_teid
        self.apn_gw = IPv4Address(apn_gw)
        self.ue_ip_addr = IPv4Address(ue_ip_addr)
        self.sgw_cp_teid = 0
        self.sgw_address = IPv4Address(0)
        self.default_bearer: Optional[Bearer] = None
        self._bearers: dict[int, Bearer] = {}

    def add_bearer(self, bearer: Optional[Bearer]) -> None:
        """Attach a bearer, keyed by its data-plane TEID; None is ignored."""
        if bearer is None:
            return
        self._bearers[bearer.dp_teid] = bearer

    def remove_bearer(self, dp_teid: int) -> None:
        """Detach the bearer with the given data-plane TEID, if any."""
        self._bearers.pop(dp_teid, None)

    @property
    def bearers(self) -> Mapping[int, Bearer]:
        """Read-only view of the attached bearers by data-plane TEID."""
        return MappingProxyType(self._bearers)

    def __repr__(self) -> str:
        return (
            f"PdnConnection(cp_teid={self.cp_teid}, apn_gw={self.apn_gw}, "
            f"ue_ip_addr={self.ue_ip_addr})"
        )