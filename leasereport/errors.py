class LeaseReportError(Exception):
    """Базовая ошибка отчёта по аренде."""


class ConfigError(LeaseReportError):
    """Конфигурация не загружается или содержит неверные значения."""


class LeaseTimeError(LeaseReportError, ValueError):
    """Время аренды не соответствует формату dhcpd.leases."""
