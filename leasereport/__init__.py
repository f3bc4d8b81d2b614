"""Parse ISC dhcpd.leases snapshots into lease records for reporting."""

__version__ = "0.1.0"
