# leasereport/parsers/__init__.py
from .registry import register_parser, get_parser
from .isc_dhcpd import IscDhcpdLeasesParser, LeaseFile  # ← регистрирует парсер isc_dhcpd
