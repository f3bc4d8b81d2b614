import ipaddress
from typing import Any, Dict, List, Mapping

from leasereport.models.lease import LeaseRecord, format_lease_time

REPORT_HEADER = ["IP", "MAC", "Circuit ID", "Binding State", "Starts", "Ends"]


def address_sort_key(address: str):
    # IP по числовому значению, всё остальное — в конце по тексту
    try:
        ip = ipaddress.ip_address(address)
        return (0, ip.version, int(ip), address)
    except ValueError:
        return (1, 0, 0, address)


class LeaseNormalizer:
    @classmethod
    def normalize(cls, leases: Mapping[str, LeaseRecord]) -> Dict[str, Any]:
        normalized: List[Dict[str, str]] = []

        for address in sorted(leases, key=address_sort_key):
            lease = leases[address]
            normalized.append({
                "ip": lease.address,
                "mac": lease.hardware_identifier,
                "circuit_id": lease.circuit_identifier,
                "binding_state": lease.binding_state,
                "starts": format_lease_time(lease.starts_at),
                "ends": format_lease_time(lease.ends_at),
            })

        return {"leases_normalized": normalized}
