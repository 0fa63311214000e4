"""Data plane: routes user packets between the SGW and APN gateways."""

from __future__ import annotations

from abc import ABC, abstractmethod
from ipaddress import IPv4Address

from simple_pgw.control_plane import ControlPlane
from simple_pgw.pdn_connection import AddressLike


class DataPlane(ABC):
    """Looks up sessions in a control plane and hands packets to forwarders.

    Subclasses decide how packets actually leave the gateway.
    """

    def __init__(self, control_plane: ControlPlane) -> None:
        self.control_plane = control_plane

    def handle_uplink(self, dp_teid: int, packet: bytes) -> None:
        """Send a packet received on a bearer to its APN gateway."""
        bearer = self.control_plane.find_bearer_by_dp_teid(dp_teid)
        if bearer is None:
            return
        pdn = bearer.pdn_connection
        if pdn is None:
            return
        self.forward_packet_to_apn(pdn.apn_gw, packet)

    def handle_downlink(self, ue_ip: AddressLike, packet: bytes) -> None:
        """Send a packet addressed to a UE to the SGW on its default bearer."""
        pdn = self.control_plane.find_pdn_by_ip_address(ue_ip)
        if pdn is None:
            return
        bearer = pdn.default_bearer
        if bearer is None:
            return
        self.forward_packet_to_sgw(pdn.sgw_address, bearer.sgw_dp_teid, packet)

    @abstractmethod
    def forward_packet_to_sgw(
        self, sgw_addr: IPv4Address, sgw_dp_teid: int, packet: bytes
    ) -> None:
        """Deliver a downlink packet to the SGW."""

    @abstractmethod
    def forward_packet_to_apn(self, apn_gateway: IPv4Address, packet: bytes) -> None:
        """Deliver an uplink packet to the APN gateway."""