#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
USB devices and interfaces as exposed by sysfs.

Only the plain text attribute files are read (no descriptor is parsed and
the devices are never opened) so listing does not resume autosuspended
devices. Devices and interfaces carry the standard USB field names
(`idVendor`, `bDeviceClass`, `bInterfaceClass`...) so they can be given
directly to [`describe`][usbid.describe.describe] and
[`classify`][usbid.describe.classify].
"""

import functools
import pathlib

from .types import Callable, Iterable, Optional, PathLike
from .util import int16, make_find

SYSFS_PATH = pathlib.Path("/sys")
DEVICE_PATH = SYSFS_PATH / "bus" / "usb" / "devices"


class Attr:
    def __init__(self, filename: Optional[str] = None, decode: Callable = str):
        self.filename = filename
        self.decode = decode

    def __set_name__(self, owner, name):
        if self.filename is None:
            self.filename = name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        with (obj.syspath / self.filename).open() as f:
            return self.decode(f.read().strip())


Int = functools.partial(Attr, decode=int)
Hex = functools.partial(Attr, decode=int16)


class Node:
    def __init__(self, syspath: PathLike):
        self.syspath = pathlib.Path(syspath)

    def __enter__(self):
        return self

    def __exit__(self, *_):
        pass


class Interface(Node):
    bInterfaceNumber = Hex()
    bAlternateSetting = Int()
    bInterfaceClass = Hex()
    bInterfaceSubClass = Hex()
    bInterfaceProtocol = Hex()

    def __repr__(self):
        return f"{type(self).__name__}(syspath={self.syspath.name})"


class Device(Node):
    bus_number = Int("busnum")
    device_number = Int("devnum")
    idVendor = Hex()
    idProduct = Hex()
    bDeviceClass = Hex()
    bDeviceSubClass = Hex()
    bDeviceProtocol = Hex()

    def __repr__(self):
        return f"{type(self).__name__}(bus={self.bus_number}, device={self.device_number}, syspath={self.syspath.name})"

    @property
    def vendor_id(self) -> int:
        return self.idVendor

    @property
    def product_id(self) -> int:
        return self.idProduct

    @property
    def interfaces(self) -> list[Interface]:
        paths = (path for path in self.syspath.iterdir() if (path / "bInterfaceClass").is_file())
        result = [Interface(path) for path in paths]
        return sorted(result, key=lambda interface: interface.bInterfaceNumber)


def iter_paths(path: Optional[PathLike] = None) -> Iterable[pathlib.Path]:
    path = DEVICE_PATH if path is None else pathlib.Path(path)
    for syspath in path.iterdir():
        name = syspath.name
        if (not name[0].isdigit() and not name.startswith("usb")) or ":" in name:
            continue
        yield syspath


def iter_devices(path: Optional[PathLike] = None) -> Iterable[Device]:
    for syspath in iter_paths(path):
        yield Device(syspath)


find = make_find(iter_devices, needs_open=False)
