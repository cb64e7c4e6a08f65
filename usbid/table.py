#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
The reference table mapping USB codes to names.

A single [`Table`][usbid.table.Table] is published for the whole process.
It is built on the first call to [`get_table`][usbid.table.get_table] and
replaced in one go by [`set_table`][usbid.table.set_table] (which the
loaders in [`usbid.parse`][usbid.parse] use). Tables are never mutated after
they have been published so they can be read from any thread without
locking.
"""

import datetime
import logging

from .ids.base import Class, Product, Protocol, SubClass, Vendor
from .types import Mapping, Optional, Self

log = logging.getLogger(__name__)


class Table:
    """
    Vendors and classes known to the library.

    Attributes:
        vendors (dict[int, Vendor]): vendor code -> Vendor
        classes (dict[int, Class]): class code -> Class
        source (str): where the data came from
        version (str): version of the usb.ids data (empty if unknown)
        last_update (datetime.datetime): when the table was built
    """

    def __init__(self, vendors=None, classes=None, source: str = "", version: str = "", last_update=None):
        self.vendors: dict[int, Vendor] = {} if vendors is None else vendors
        self.classes: dict[int, Class] = {} if classes is None else classes
        self.source = source
        self.version = version
        self.last_update = datetime.datetime.now() if last_update is None else last_update

    def __repr__(self):
        return f"<{type(self).__name__} source={self.source!r} vendors={len(self.vendors)} classes={len(self.classes)}>"

    @classmethod
    def from_dicts(cls, vendors: Mapping, classes: Mapping, source: str = "", version: str = "") -> Self:
        """
        Build a table from the plain dict format of the generated modules:
        `{code: {"name": name, "children": {code: {"name": name, ...}}}}`
        """
        table = cls(source=source, version=version)
        for vid, vdata in vendors.items():
            vendor = Vendor(vid, vdata["name"])
            for pid, pdata in vdata.get("children", {}).items():
                vendor.add(Product(pid, pdata["name"]))
            table.vendors[vid] = vendor
        for cid, cdata in classes.items():
            klass = Class(cid, cdata["name"])
            for sid, sdata in cdata.get("children", {}).items():
                subclass = klass.add(SubClass(sid, sdata["name"]))
                for pid, pdata in sdata.get("children", {}).items():
                    subclass.add(Protocol(pid, pdata["name"]))
            table.classes[cid] = klass
        return table

    def to_dicts(self) -> tuple[dict, dict]:
        """The inverse of [`from_dicts`][usbid.table.Table.from_dicts]"""
        vendors = {
            vid: {"name": vendor.name, "children": {pid: {"name": p.name} for pid, p in vendor.items()}}
            for vid, vendor in self.vendors.items()
        }
        classes = {
            cid: {
                "name": klass.name,
                "children": {
                    sid: {"name": sub.name, "children": {pid: {"name": p.name} for pid, p in sub.items()}}
                    for sid, sub in klass.items()
                },
            }
            for cid, klass in self.classes.items()
        }
        return vendors, classes

    def get_vendor(self, vendor_id: int) -> Optional[Vendor]:
        return self.vendors.get(vendor_id)

    def get_product(self, vendor_id: int, product_id: int) -> Optional[Product]:
        vendor = self.get_vendor(vendor_id)
        return None if vendor is None else vendor.get(product_id)

    def get_class(self, class_id: int) -> Optional[Class]:
        return self.classes.get(class_id)

    def get_subclass(self, class_id: int, subclass_id: int) -> Optional[SubClass]:
        klass = self.get_class(class_id)
        return None if klass is None else klass.get(subclass_id)

    def get_protocol(self, class_id: int, subclass_id: int, protocol_id: int) -> Optional[Protocol]:
        subclass = self.get_subclass(class_id, subclass_id)
        return None if subclass is None else subclass.get(protocol_id)


_TABLE: Optional[Table] = None


def get_table() -> Table:
    """The currently published table. Builds the default one on first call"""
    table = _TABLE
    if table is None:
        from .parse import default_table

        table = default_table()
        set_table(table)
    return table


def set_table(table: Table) -> Table:
    """Publish the given table for the whole process. Returns the previous one"""
    global _TABLE
    previous, _TABLE = _TABLE, table
    log.info("published %r", table)
    return previous


def get_vendor(vendor_id: int) -> Optional[Vendor]:
    return get_table().get_vendor(vendor_id)


def get_vendor_name(vendor_id: int) -> str:
    vendor = get_vendor(vendor_id)
    return "" if vendor is None else vendor.name


def get_product(vendor_id: int, product_id: int) -> Optional[Product]:
    return get_table().get_product(vendor_id, product_id)


def get_product_name(vendor_id: int, product_id: int) -> str:
    product = get_product(vendor_id, product_id)
    return "" if product is None else product.name


def get_class(class_id: int) -> Optional[Class]:
    return get_table().get_class(class_id)


def get_class_name(class_id: int) -> str:
    klass = get_class(class_id)
    return "" if klass is None else klass.name


def get_subclass(class_id: int, subclass_id: int) -> Optional[SubClass]:
    return get_table().get_subclass(class_id, subclass_id)


def get_subclass_name(class_id: int, subclass_id: int) -> str:
    subclass = get_subclass(class_id, subclass_id)
    return "" if subclass is None else subclass.name


def get_protocol(class_id: int, subclass_id: int, protocol_id: int) -> Optional[Protocol]:
    return get_table().get_protocol(class_id, subclass_id, protocol_id)


def get_protocol_name(class_id: int, subclass_id: int, protocol_id: int) -> str:
    protocol = get_protocol(class_id, subclass_id, protocol_id)
    return "" if protocol is None else protocol.name
