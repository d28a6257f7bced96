"""
Тесты для граничных утилит: filenames, network, randomness

Сеть хоста и текущее время подменяются через monkeypatch или передаются
явно; реальная таблица интерфейсов проверяется только по форме.
"""

import os
import random
import re
import socket
from collections import namedtuple
from datetime import datetime, timedelta, timezone
from pathlib import Path

import psutil
import pytest

from ach_utils.exceptions import NoAddressFound
from ach_utils.system import (
    RANDOM_ALPHABET,
    format_file_timestamp,
    get_local_ip,
    make_file_name,
    random_hex_string,
)
from ach_utils.system import network

TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}\.\d{3}$")

# =============================================================================
# FILENAMES
# =============================================================================


class TestMakeFileName:
    """Тесты для make_file_name"""

    def test_fixed_time(self) -> None:
        """Имя файла строится из заданного момента времени"""
        now = datetime(2016, 7, 1, 9, 30, 5, 123456)
        result = make_file_name(".ach", "test/", now=now)
        assert Path(result) == Path("test") / "2016-07-01T09-30-05.123.ach"

    def test_extension_preserved(self) -> None:
        """Расширение сохраняется"""
        result = make_file_name(".ach", "test/")
        assert result != ""
        assert Path(result).suffix == ".ach"

    def test_default_now_shape(self) -> None:
        """Без now используется текущее время UTC в нужном формате"""
        name = Path(make_file_name(".ach", "out")).name
        assert TIMESTAMP_RE.match(name[: -len(".ach")])

    def test_aware_datetime_converted_to_utc(self) -> None:
        """Aware datetime переводится в UTC"""
        tz = timezone(timedelta(hours=2))
        now = datetime(2016, 7, 1, 11, 0, 0, 999999, tzinfo=tz)
        assert format_file_timestamp(now) == "2016-07-01T09-00-00.999"

    def test_milliseconds_zero_padded(self) -> None:
        """Миллисекунды дополняются нулями до трёх цифр"""
        now = datetime(2016, 1, 2, 3, 4, 5, 7000)
        assert format_file_timestamp(now) == "2016-01-02T03-04-05.007"

    def test_empty_directory(self) -> None:
        """Пустой каталог даёт только имя файла"""
        now = datetime(2016, 7, 1, tzinfo=timezone.utc)
        assert make_file_name(".txt", "", now=now) == "2016-07-01T00-00-00.000.txt"

    def test_directory_normalized(self) -> None:
        """Сегменты "..", "." и лишние разделители схлопываются"""
        now = datetime(2016, 7, 1, tzinfo=timezone.utc)
        expected = os.path.join("out", "2016-07-01T00-00-00.000.ach")
        assert make_file_name(".ach", "a/../out", now=now) == expected
        assert make_file_name(".ach", "./out//", now=now) == expected
        assert make_file_name(".ach", Path("out"), now=now) == expected


# =============================================================================
# NETWORK
# =============================================================================

# Форма элемента psutil.net_if_addrs()
IfAddr = namedtuple("IfAddr", ["family", "address", "netmask", "broadcast", "ptp"])


def _ipv4(address: str) -> IfAddr:
    return IfAddr(socket.AF_INET, address, "255.255.255.0", None, None)


def _ipv6(address: str) -> IfAddr:
    return IfAddr(socket.AF_INET6, address, None, None, None)


def _link(address: str) -> IfAddr:
    return IfAddr(psutil.AF_LINK, address, None, None, None)


class TestInterfaceIpv4Addresses:
    """Тесты для interface_ipv4_addresses"""

    def test_only_ipv4_in_interface_order(self, monkeypatch) -> None:
        """Только AF_INET адреса, в порядке интерфейсов"""
        table = {
            "lo": [_ipv4("127.0.0.1"), _ipv6("::1")],
            "eth0": [_link("00:11:22:33:44:55"), _ipv4("10.0.0.5"), _ipv6("fe80::1")],
            "eth1": [_ipv4("192.168.1.2")],
        }
        monkeypatch.setattr(network.psutil, "net_if_addrs", lambda: table)
        assert network.interface_ipv4_addresses() == [
            ("lo", "127.0.0.1"),
            ("eth0", "10.0.0.5"),
            ("eth1", "192.168.1.2"),
        ]

    def test_no_interfaces(self, monkeypatch) -> None:
        """Пустая таблица интерфейсов"""
        monkeypatch.setattr(network.psutil, "net_if_addrs", lambda: {})
        assert network.interface_ipv4_addresses() == []

    def test_real_host_table_shape(self) -> None:
        """Реальная таблица хоста возвращает пары (имя, IPv4)"""
        for name, address in network.interface_ipv4_addresses():
            assert isinstance(name, str)
            socket.inet_aton(address)


class TestGetLocalIp:
    """Тесты для get_local_ip"""

    def _with_table(self, monkeypatch, table: dict) -> None:
        monkeypatch.setattr(network.psutil, "net_if_addrs", lambda: table)

    def test_first_non_loopback(self, monkeypatch) -> None:
        """Возвращается первый non-loopback адрес"""
        self._with_table(
            monkeypatch,
            {"lo": [_ipv4("127.0.0.1")], "eth0": [_ipv4("10.0.0.5")], "eth1": [_ipv4("192.168.1.2")]},
        )
        assert get_local_ip() == "10.0.0.5"

    def test_interface_found_without_hostname_or_route(self, monkeypatch) -> None:
        """Адрес интерфейса находится без разрешения имени хоста и маршрута"""

        def _unreachable(*args, **kwargs):
            raise OSError("network is unreachable")

        monkeypatch.setattr(socket, "getaddrinfo", _unreachable)
        monkeypatch.setattr(socket, "create_connection", _unreachable)
        self._with_table(monkeypatch, {"lo": [_ipv4("127.0.1.1")], "eth0": [_ipv4("172.16.0.9")]})
        assert get_local_ip() == "172.16.0.9"

    def test_ipv6_and_link_skipped(self, monkeypatch) -> None:
        """IPv6 и link-layer адреса пропускаются"""
        self._with_table(
            monkeypatch,
            {"eth0": [_link("00:11:22:33:44:55"), _ipv6("fe80::1"), _ipv4("192.168.1.2")]},
        )
        assert get_local_ip() == "192.168.1.2"

    def test_no_address_raises(self, monkeypatch) -> None:
        """Только loopback/unspecified → NoAddressFound"""
        self._with_table(monkeypatch, {"lo": [_ipv4("127.0.0.1")], "tun0": [_ipv4("0.0.0.0")]})
        with pytest.raises(NoAddressFound, match="no ip address found"):
            get_local_ip()

    def test_no_interfaces_raises(self, monkeypatch) -> None:
        """Нет интерфейсов → NoAddressFound"""
        self._with_table(monkeypatch, {})
        with pytest.raises(NoAddressFound):
            get_local_ip()

    def test_interface_table_error_propagates(self, monkeypatch) -> None:
        """Ошибка чтения таблицы интерфейсов не подменяется NoAddressFound"""

        def _fail():
            raise OSError("permission denied")

        monkeypatch.setattr(network.psutil, "net_if_addrs", _fail)
        with pytest.raises(OSError, match="permission denied"):
            get_local_ip()


# =============================================================================
# RANDOMNESS
# =============================================================================


class TestRandomHexString:
    """Тесты для random_hex_string"""

    @pytest.mark.parametrize(
        "length, expected",
        [(0, 0), (1, 2), (2, 4), (20, 40), (-1, 0)],
    )
    def test_length_and_hex(self, length: int, expected: int) -> None:
        """Длина результата 2 * length, строка декодируется как hex"""
        result = random_hex_string(length)
        bytes.fromhex(result)
        assert len(result) == expected

    def test_lowercase_hex(self) -> None:
        """Только строчные hex символы"""
        assert re.fullmatch(r"[0-9a-f]+", random_hex_string(32))

    def test_decoded_chars_from_alphabet(self) -> None:
        """Исходные символы взяты из RANDOM_ALPHABET"""
        decoded = bytes.fromhex(random_hex_string(64)).decode("ascii")
        assert len(decoded) == 64
        assert set(decoded) <= set(RANDOM_ALPHABET)

    def test_seeded_generator_reproducible(self) -> None:
        """Одинаковый seed даёт одинаковый результат"""
        assert random_hex_string(16, random.Random(42)) == random_hex_string(
            16, random.Random(42)
        )

    def test_injected_generator_advances(self) -> None:
        """Переданный генератор не пересоздаётся между вызовами"""
        rng = random.Random(7)
        first = random_hex_string(16, rng)
        second = random_hex_string(16, rng)
        assert first != second
