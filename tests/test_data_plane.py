from collections import defaultdict
from ipaddress import IPv4Address

import pytest

from simple_pgw.control_plane import ControlPlane
from simple_pgw.data_plane import DataPlane

APN = "test.apn"
APN_GW = IPv4Address("127.0.0.1")
SGW_ADDR = IPv4Address("127.1.0.1")
SGW_DEFAULT_BEARER_TEID = 1
SGW_DED_BEARER_TEID = 2
UINT32_MAX = 2**32 - 1


class RecordingDataPlane(DataPlane):
    def __init__(self, control_plane):
        super().__init__(control_plane)
        self.forwarded_to_sgw = defaultdict(lambda: defaultdict(list))
        self.forwarded_to_apn = defaultdict(list)

    def forward_packet_to_sgw(self, sgw_addr, sgw_dp_teid, packet):
        self.forwarded_to_sgw[sgw_addr][sgw_dp_teid].append(packet)

    def forward_packet_to_apn(self, apn_gateway, packet):
        self.forwarded_to_apn[apn_gateway].append(packet)


@pytest.fixture
def setup():
    cp = ControlPlane()
    cp.add_apn(APN, APN_GW)
    pdn = cp.create_pdn_connection(APN, SGW_ADDR, SGW_DEFAULT_BEARER_TEID)
    default = cp.create_bearer(pdn, SGW_DEFAULT_BEARER_TEID)
    pdn.default_bearer = default
    dedicated = cp.create_bearer(pdn, SGW_DED_BEARER_TEID)
    return cp, pdn, default, dedicated, RecordingDataPlane(cp)


def test_handle_downlink_for_pdn(setup):
    _, pdn, _, dedicated, dp = setup
    packet1 = bytes([1, 2, 3])
    dp.handle_uplink(pdn.default_bearer.dp_teid, packet1)
    packet2 = bytes([4, 5, 6])
    dp.handle_uplink(dedicated.dp_teid, packet2)
    packet3 = bytes([7])
    dp.handle_downlink(pdn.ue_ip_addr, packet3)

    assert len(dp.forwarded_to_sgw) == 1
    assert dp.forwarded_to_sgw[SGW_ADDR][SGW_DEFAULT_BEARER_TEID][0] == packet3

    assert len(dp.forwarded_to_apn) == 1
    assert len(dp.forwarded_to_apn[APN_GW]) == 2
    assert dp.forwarded_to_apn[APN_GW][0] == packet1
    assert dp.forwarded_to_apn[APN_GW][1] == packet2


def test_handle_uplink_for_default_bearer(setup):
    _, pdn, _, _, dp = setup
    packet1 = bytes([1, 2, 3])
    dp.handle_uplink(pdn.default_bearer.dp_teid, packet1)
    assert len(dp.forwarded_to_apn) == 1
    assert len(dp.forwarded_to_apn[APN_GW]) == 1
    assert dp.forwarded_to_apn[APN_GW][0] == packet1


def test_handle_uplink_for_dedicated_bearer(setup):
    _, _, _, dedicated, dp = setup
    packet1 = bytes([1, 2, 3])
    dp.handle_uplink(dedicated.dp_teid, packet1)
    assert len(dp.forwarded_to_apn) == 1
    assert len(dp.forwarded_to_apn[APN_GW]) == 1
    assert dp.forwarded_to_apn[APN_GW][0] == packet1


def test_didnt_handle_uplink_for_unknown_bearer(setup):
    *_, dp = setup
    dp.handle_uplink(UINT32_MAX, bytes([1, 2, 3]))
    assert len(dp.forwarded_to_apn) == 0


def test_didnt_handle_downlink_for_unknown_ue_ip(setup):
    *_, dp = setup
    dp.handle_downlink(IPv4Address("0.0.0.0"), bytes([1, 2, 3]))
    assert len(dp.forwarded_to_apn) == 0
    assert len(dp.forwarded_to_sgw) == 0


def test_downlink_dropped_without_default_bearer(setup):
    cp, pdn, default, _, dp = setup
    cp.delete_bearer(default.dp_teid)
    dp.handle_downlink(pdn.ue_ip_addr, bytes([7]))
    assert len(dp.forwarded_to_sgw) == 0


def test_uplink_dropped_after_bearer_deleted(setup):
    cp, _, _, dedicated, dp = setup
    cp.delete_bearer(dedicated.dp_teid)
    dp.handle_uplink(dedicated.dp_teid, bytes([1]))
    assert len(dp.forwarded_to_apn) == 0


def test_data_plane_is_abstract():
    with pytest.raises(TypeError):
        DataPlane(ControlPlane())