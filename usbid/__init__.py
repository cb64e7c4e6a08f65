#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
Human readable text for USB vendor, product and class codes.

On first use the library builds a table from the embedded usb.ids snapshot
(or from the file named by the USBID_IDS environment variable). A fresh
table can be loaded from a URL, a file or a stream.

The bread and butter of this package are the two functions:

* [`describe`][usbid.describe.describe]: product and vendor of a device
* [`classify`][usbid.describe.classify]: class, subclass and protocol of a device or interface
"""

from .describe import Descriptor, InterfaceSetup, classify, describe
from .parse import UsbIdError, load, load_from_file, load_from_url, load_system, parse
from .table import Table, get_table, set_table

__all__ = [
    "Descriptor",
    "InterfaceSetup",
    "Table",
    "UsbIdError",
    "classify",
    "describe",
    "get_table",
    "load",
    "load_from_file",
    "load_from_url",
    "load_system",
    "parse",
    "set_table",
]
