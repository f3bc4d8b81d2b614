from zoneinfo import ZoneInfo

import pytest

EXAMPLE_BLOCK = (
    "lease 10.0.0.5 {\n"
    "  starts 2 2023/01/10 08:00:00;\n"
    "  ends 2 2023/01/10 20:00:00;\n"
    "  hardware ethernet aa:bb:cc:dd:ee:ff;\n"
    "  binding state active;\n"
    "}"
)

SNAPSHOT = """\
# The format of this file is documented in the dhcpd.leases(5) manual page.
# This lease file was written by isc-dhcp-4.4.3

authoring-byte-order little-endian;

host printer {
  dynamic;
  hardware ethernet 00:11:22:33:44:55;
  fixed-address 10.0.0.200;
}
lease 10.0.0.5 {
  starts 2 2023/01/10 08:00:00;
  ends 2 2023/01/10 20:00:00;
  cltt 2 2023/01/10 08:00:00;
  binding state active;
  next binding state free;
  rewind binding state free;
  hardware ethernet aa:bb:cc:dd:ee:ff;
  option agent.circuit-id "olt1 eth 1/1/1:100";
  client-hostname "legends";
}
lease 10.0.0.10 {
  starts 3 2023/01/11 09:15:00;
  ends 3 2023/01/11 21:15:00;
  binding state free;
  hardware ethernet 11:22:33:44:55:66;
}
lease 10.0.0.5 {
  starts 3 2023/01/11 10:00:00;
  ends 3 2023/01/11 22:00:00;
  binding state active;
  hardware ethernet aa:bb:cc:dd:ee:ff;
  option agent.circuit-id "olt1 eth 1/1/1:100";
}
lease 10.0.0.7 {
  starts 3 2023/01/11 25:00:00;
  ends 3 2023/01/11 22:00:00;
  binding state active;
  hardware ethernet 77:77:77:77:77:77;
}
lease 10.0.0.9 {
  starts 3 2023/01/11 10:00:00;
  ends 3 2023/01/11 22:00:00;
  binding state act"""


@pytest.fixture
def tz():
    return ZoneInfo("America/New_York")


@pytest.fixture
def snapshot_bytes():
    return SNAPSHOT.encode("utf-8")
