# simple_pgw

A small in-memory model of a PDN gateway (PGW) as found in an LTE/EPC core.
It keeps the control-plane state (APNs, PDN connections, EPS bearers) and
routes user-plane packets between the serving gateway (SGW) and the APN
gateway.

## Installation

```
pip install .
```

## Modules

- `simple_pgw.pdn_connection`: `PdnConnection` and `Bearer`.
- `simple_pgw.control_plane`: `ControlPlane` and `UnknownApnError`.
- `simple_pgw.data_plane`: the abstract `DataPlane`.

Addresses may be given as `ipaddress.IPv4Address`, a dotted string or an
integer; they are stored as `IPv4Address`.

## Concepts

- **APN**: a named access point with a gateway IPv4 address, registered (or
  replaced) with `ControlPlane.add_apn(apn_name, apn_gateway)`.
- **PDN connection** (`PdnConnection`): a UE session on an APN, created with
  `ControlPlane.create_pdn_connection(apn, sgw_addr, sgw_cp_teid)`. It gets
  the lowest free control-plane TEID starting at 1 and the lowest free UE
  address starting at `10.0.0.1`. Its attributes are `cp_teid`, `apn_gw`,
  `ue_ip_addr`, `sgw_cp_teid`, `sgw_address` and `default_bearer`; the
  `bearers` property is a read-only mapping of its bearers by data-plane TEID.
  Asking for an APN that was not registered raises `UnknownApnError` (a
  `KeyError`).
- **Bearer** (`Bearer`): a data-plane tunnel inside a PDN connection, created
  with `ControlPlane.create_bearer(pdn, sgw_teid)`. It gets the lowest free
  data-plane TEID starting at 1 (`dp_teid`), keeps the SGW's TEID
  (`sgw_dp_teid`), and its `pdn_connection` property gives the connection it
  belongs to. Passing `None` as the connection raises `ValueError`.
  A PDN connection's default bearer is set by assigning `default_bearer`;
  downlink traffic is sent over it.

Lookups return `None` when nothing matches:
`find_pdn_by_cp_teid`, `find_pdn_by_ip_address`, `find_bearer_by_dp_teid`.

`delete_bearer(dp_teid)` drops the bearer, detaches it from its connection and
clears the connection's default bearer if it was that one.
`delete_pdn_connection(cp_teid)` removes the connection from the
control-plane TEID table only; its UE address stays taken and
`find_pdn_by_ip_address` still finds it. Unknown TEIDs are ignored by both.

## Usage

`DataPlane` does the routing; subclass it and override the two forwarding
methods to send packets wherever you need.

```python
from ipaddress import IPv4Address

from simple_pgw.control_plane import ControlPlane
from simple_pgw.data_plane import DataPlane


class PrintingDataPlane(DataPlane):
    def forward_packet_to_sgw(self, sgw_addr, sgw_dp_teid, packet):
        print("to SGW", sgw_addr, sgw_dp_teid, packet)

    def forward_packet_to_apn(self, apn_gateway, packet):
        print("to APN", apn_gateway, packet)


cp = ControlPlane()
cp.add_apn("test.apn", IPv4Address("127.0.0.1"))

pdn = cp.create_pdn_connection("test.apn", IPv4Address("127.1.0.1"), 1)
default = cp.create_bearer(pdn, 1)
pdn.default_bearer = default

dp = PrintingDataPlane(cp)
dp.handle_uplink(default.dp_teid, b"\x01\x02\x03")   # -> APN gateway
dp.handle_downlink(pdn.ue_ip_addr, b"\x07")          # -> SGW over default bearer
```

`handle_uplink` sends the packet to the APN gateway of the bearer's
connection; `handle_downlink` sends it to the connection's SGW address with
the default bearer's `sgw_dp_teid`. Packets for an unknown bearer, an unknown
UE address, or a PDN connection with no default bearer are dropped without
error.

## What it does not do

This is a library only. It has no command to run, opens no sockets, does not
encode or decode GTP, and keeps all state in memory; actual packet delivery
is up to your `DataPlane` subclass.

## Running the tests

```
pip install .[test]
pytest
```