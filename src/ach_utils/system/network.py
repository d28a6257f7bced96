"""
Network — Определение локального non-loopback IPv4 адреса хоста

Адреса перебираются по таблице сетевых интерфейсов хоста
(psutil.net_if_addrs) в порядке, который возвращает ОС. Возвращается
первый IPv4 адрес, который не является loopback или unspecified.
"""

import ipaddress
import socket

import psutil

from ach_utils.exceptions import NoAddressFound
from ach_utils.logging_config import get_logger

logger = get_logger(__name__)


def interface_ipv4_addresses() -> list[tuple[str, str]]:
    """
    IPv4 адреса всех интерфейсов хоста.

    Returns:
        Список (interface_name, address) в порядке перечисления интерфейсов

    Raises:
        OSError: Если таблицу интерфейсов прочитать не удалось
    """
    addresses: list[tuple[str, str]] = []
    for name, interface_addrs in psutil.net_if_addrs().items():
        for addr in interface_addrs:
            if addr.family == socket.AF_INET:
                addresses.append((name, addr.address))
    return addresses


def get_local_ip() -> str:
    """
    Первый non-loopback IPv4 адрес хоста.

    Returns:
        IPv4 адрес в dotted-quad форме

    Raises:
        NoAddressFound: Если подходящего адреса нет
    """
    addresses = interface_ipv4_addresses()
    for _, address in addresses:
        try:
            ip = ipaddress.ip_address(address)
        except ValueError:
            continue

        if ip.version == 4 and not ip.is_loopback and not ip.is_unspecified:
            return str(ip)

    logger.debug("local_ip_not_found", interfaces=sorted({name for name, _ in addresses}))
    raise NoAddressFound("no ip address found")
