#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

from unittest import mock

import pytest

SAMPLE = """\
#
#\tList of USB ID's
#
# Version: 2024.07.04
# Date:    2024-07-04 20:34:02
#

# Syntax:
# vendor  vendor_name
#\tdevice  device_name\t\t\t\t<-- single tab
#\t\tinterface  interface_name\t\t<-- two tabs

1d6b  Linux Foundation
\t0001  1.1 root hub
\t0002  2.0 root hub
\t0003  3.0 root hub
046d  Logitech, Inc.
\tc52b  Unifying Receiver
\t\t00  Keyboard interface

# List of known device classes, subclasses and protocols

C 03  Human Interface Device
\t00  No Subclass
\t\t00  None
\t\t01  Keyboard
\t\t02  Mouse
\t01  Boot Interface Subclass
\t\t01  Keyboard
C 09  Hub
C ff  Vendor Specific Class

# List of Audio Class Terminal Types
AT 0100  USB Undefined
AT 0101  USB Streaming

# List of languages
L 0001  Arabic
\t01  Saudi Arabia
\t02  Iraq

# List of HID Usages
HUT 01  Generic Desktop Controls
\t000  Undefined
\t001  Pointer
"""


@pytest.fixture
def sample():
    return SAMPLE


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "usb.ids"
    path.write_text(SAMPLE)
    return path


@pytest.fixture
def published():
    """No table published during the test. The previous one is restored afterwards"""
    with mock.patch("usbid.table._TABLE", None):
        yield
