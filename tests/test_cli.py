#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

import argparse
from unittest import mock

import pytest

from usbid.cli import class_triple, cli, main, vendor_product
from usbid.describe import Descriptor, InterfaceSetup
from usbid.parse import USB_IDS_URL
from usbid.table import Table, get_table, set_table


def test_vendor_product():
    assert vendor_product("1d6b:0002") == Descriptor(0x1D6B, 0x0002)
    assert vendor_product("0x046D:0xC52B") == Descriptor(0x046D, 0xC52B)
    for text in ("1d6b", "1d6b:", "1d6b:00002", "zz:0001", "1:2:3"):
        with pytest.raises(argparse.ArgumentTypeError):
            vendor_product(text)


def test_class_triple():
    assert class_triple("09") == InterfaceSetup(0x09, 0x00, 0x00)
    assert class_triple("03.01") == InterfaceSetup(0x03, 0x01, 0x00)
    assert class_triple("e0.01.01") == InterfaceSetup(0xE0, 0x01, 0x01)
    for text in ("", "100", "03..01", "03.01.01.01", "xx"):
        with pytest.raises(argparse.ArgumentTypeError):
            class_triple(text)


def test_cli_requires_command(capsys):
    with pytest.raises(SystemExit) as error:
        cli().parse_args([])
    assert error.value.code == 2


def test_describe_command(published, sample_file, capsys):
    main(["--ids", str(sample_file), "describe", "1d6b:0002", "1d6b:ffff", "ffff:0001"])
    assert capsys.readouterr().out.splitlines() == [
        "2.0 root hub (Linux Foundation)",
        "Unknown (Linux Foundation)",
        "Unknown ffff:0001",
    ]
    assert get_table().source == str(sample_file)


def test_classify_command(published, sample_file, capsys):
    main(["--ids", str(sample_file), "classify", "03.00.02", "03.01", "09", "0e.01.00"])
    assert capsys.readouterr().out.splitlines() == [
        "Human Interface Device (No Subclass) Mouse",
        "Human Interface Device (Boot Interface Subclass)",
        "Hub",
        "Unknown 0e.01.00",
    ]


def test_invalid_code(published, capsys):
    with pytest.raises(SystemExit) as error:
        main(["describe", "1d6b"])
    assert error.value.code == 2
    assert "expected VVVV:PPPP" in capsys.readouterr().err


def test_missing_ids_file(published, tmp_path, capsys):
    with pytest.raises(SystemExit) as error:
        main(["--ids", str(tmp_path / "missing.ids"), "describe", "1d6b:0002"])
    assert error.value.code == 1
    assert capsys.readouterr().err.startswith("usbid: ")


def test_malformed_ids_file(published, tmp_path, capsys):
    path = tmp_path / "usb.ids"
    path.write_text("\t0001  orphan\n")
    with pytest.raises(SystemExit) as error:
        main(["--ids", str(path), "describe", "1d6b:0002"])
    assert error.value.code == 1
    assert "line 1" in capsys.readouterr().err


def test_url(published, capsys):
    def load_from_url(url=USB_IDS_URL):
        table = Table.from_dicts({0x1D6B: {"name": url, "children": {}}}, {})
        table.source = url
        set_table(table)
        return table

    with mock.patch("usbid.cli.load_from_url", side_effect=load_from_url) as loader:
        main(["--url", "http://example.com/usb.ids", "describe", "1d6b:0001"])
        loader.assert_called_once_with("http://example.com/usb.ids")
        assert capsys.readouterr().out == "Unknown (http://example.com/usb.ids)\n"

        main(["--download", "describe", "1d6b:0001"])
        loader.assert_called_with()
        assert capsys.readouterr().out == f"Unknown ({USB_IDS_URL})\n"


def test_system(published, capsys):
    with mock.patch("usbid.cli.load_system") as loader:
        main(["--system", "classify", "ff.ff.ff"])
    loader.assert_called_once_with()


def test_exclusive_sources(sample_file):
    with pytest.raises(SystemExit) as error:
        main(["--ids", str(sample_file), "--download", "describe", "1d6b:0002"])
    assert error.value.code == 2


def test_ls_command(published, sample_file, tmp_path, capsys):
    dev = tmp_path / "devices" / "usb1"
    dev.mkdir(parents=True)
    attrs = {"busnum": "1", "devnum": "1", "idVendor": "1d6b", "idProduct": "0002"}
    for name, value in attrs.items():
        (dev / name).write_text(value)
    main(["--ids", str(sample_file), "ls", "--path", str(tmp_path / "devices")])
    assert capsys.readouterr().out == "Bus 001 Device 001: ID 1d6b:0002 2.0 root hub (Linux Foundation)\n"


def test_keyboard_interrupt(published, capsys):
    with mock.patch("usbid.cli.run", side_effect=KeyboardInterrupt):
        main(["describe", "1d6b:0002"])
    assert "Ctrl-C pressed" in capsys.readouterr().out
