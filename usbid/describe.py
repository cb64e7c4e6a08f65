#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
Human readable text for USB devices and interfaces.

[`describe`][usbid.describe.describe] gives the product and vendor of a
device and [`classify`][usbid.describe.classify] its class, subclass and
protocol (or those of an interface):

```python
>>> from usbid.describe import Descriptor, describe, classify
>>> root_hub = Descriptor(0x1D6B, 0x0002, 0x09, 0x00, 0x01)
>>> describe(root_hub)
'2.0 root hub (Linux Foundation)'
>>> classify(root_hub)
'Hub (Unused) Single TT'
```

Any object with the standard USB descriptor field names is accepted
(pyusb devices and interfaces, [`usbid.sysfs`][usbid.sysfs] devices...).
Neither function raises: unknown codes are reported in the text.
"""

from .table import Table, get_table
from .types import NamedTuple, Optional, Protocol, runtime_checkable


@runtime_checkable
class HasVendorProduct(Protocol):
    idVendor: int
    idProduct: int


@runtime_checkable
class HasDeviceClass(Protocol):
    bDeviceClass: int
    bDeviceSubClass: int
    bDeviceProtocol: int


@runtime_checkable
class HasInterfaceClass(Protocol):
    bInterfaceClass: int
    bInterfaceSubClass: int
    bInterfaceProtocol: int


class Descriptor(NamedTuple):
    """Device identification codes"""

    idVendor: int
    idProduct: int
    bDeviceClass: int = 0
    bDeviceSubClass: int = 0
    bDeviceProtocol: int = 0


class InterfaceSetup(NamedTuple):
    """Interface identification codes"""

    bInterfaceClass: int
    bInterfaceSubClass: int = 0
    bInterfaceProtocol: int = 0


def _unknown_type(value) -> str:
    return f"Unknown ({type(value).__name__})"


def _code(value, digits: int) -> str:
    try:
        return f"{value:0{digits}x}"
    except (TypeError, ValueError):
        return str(value)


def class_codes(value) -> Optional[tuple[int, int, int]]:
    """(class, subclass, protocol) of a device or interface or None"""
    if isinstance(value, HasDeviceClass):
        return value.bDeviceClass, value.bDeviceSubClass, value.bDeviceProtocol
    elif isinstance(value, HasInterfaceClass):
        return value.bInterfaceClass, value.bInterfaceSubClass, value.bInterfaceProtocol


def describe(value, table: Optional[Table] = None) -> str:
    """
    Product and vendor of the given device as "Product (Vendor)".

    Gives "Unknown (Vendor)" if only the vendor is known, "Unknown vvvv:pppp"
    if the vendor is not known and "Unknown (<type>)" if value is not a
    device descriptor.
    """
    if not isinstance(value, HasVendorProduct):
        return _unknown_type(value)
    if table is None:
        table = get_table()
    vendor = table.get_vendor(value.idVendor)
    if vendor is None:
        return f"Unknown {_code(value.idVendor, 4)}:{_code(value.idProduct, 4)}"
    product = vendor.get(value.idProduct)
    if product is None:
        return f"Unknown ({vendor})"
    return f"{product} ({vendor})"


def classify(value, table: Optional[Table] = None) -> str:
    """
    Class, subclass and protocol of the given device or interface as
    "Class (SubClass) Protocol".

    The subclass and protocol are omitted when they are not known.
    Gives "Unknown cc.ss.pp" if the class is not known and "Unknown (<type>)"
    if value is neither a device descriptor nor an interface.
    """
    codes = class_codes(value)
    if codes is None:
        return _unknown_type(value)
    if table is None:
        table = get_table()
    class_id, subclass_id, protocol_id = codes
    klass = table.get_class(class_id)
    if klass is None:
        return f"Unknown {_code(class_id, 2)}.{_code(subclass_id, 2)}.{_code(protocol_id, 2)}"
    subclass = klass.get(subclass_id)
    if subclass is None:
        return str(klass)
    protocol = subclass.get(protocol_id)
    if protocol is None:
        return f"{klass} ({subclass})"
    return f"{klass} ({subclass}) {protocol}"
