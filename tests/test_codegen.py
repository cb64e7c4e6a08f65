#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

import argparse
import io
import runpy
from unittest import mock

import pytest

from usbid.codegen.usbids import filter_vendors, main, run, vendor_list
from usbid.parse import parse


def test_run(sample_file, tmp_path):
    output_dir = tmp_path / "ids"
    output_dir.mkdir()
    table = run(str(sample_file), output_dir)
    vendors, classes = table.to_dicts()

    vendor_text = (output_dir / "vendor.py").read_text()
    assert vendor_text.startswith("#\n# This file is part of the usbid project")
    assert "# This file has been generated by usbid.codegen.usbids" in vendor_text
    assert f"# Source: {sample_file}" in vendor_text
    assert '"Linux Foundation"' in vendor_text
    assert "0x1D6B" in vendor_text

    vendor_module = runpy.run_path(str(output_dir / "vendor.py"))
    assert vendor_module["version"] == "2024.07.04"
    assert vendor_module["vendor"] == vendors

    klass_module = runpy.run_path(str(output_dir / "klass.py"))
    assert klass_module["klass"] == classes
    assert klass_module["klass"][0x03]["children"][0x00]["children"][0x02] == {"name": "Mouse"}


def test_run_vendor_filter(sample_file, tmp_path, caplog):
    run(str(sample_file), tmp_path, vendor_ids={0x1D6B, 0xFFFF})
    vendor_module = runpy.run_path(str(tmp_path / "vendor.py"))
    assert set(vendor_module["vendor"]) == {0x1D6B}
    assert "Vendors not found: ffff" in caplog.text


def test_filter_vendors(sample):
    table = parse(io.StringIO(sample), source="sample")
    filtered = filter_vendors(table, {0x046D})
    assert set(filtered.vendors) == {0x046D}
    assert filtered.classes is table.classes
    assert filtered.source == "sample"
    assert filtered.version == table.version


def test_vendor_list():
    assert vendor_list("1d6b,046d") == {0x1D6B, 0x046D}
    assert vendor_list("1d6b, 0x046D,") == {0x1D6B, 0x046D}
    with pytest.raises(argparse.ArgumentTypeError):
        vendor_list("1d6b,xyz")


def test_main(sample_file, tmp_path):
    with mock.patch("usbid.codegen.usbids.run") as run_mock:
        main(["--source", str(sample_file), "--vendors", "1d6b", "--output-dir", str(tmp_path)])
    run_mock.assert_called_once_with(str(sample_file), tmp_path, {0x1D6B})
