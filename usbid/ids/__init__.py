#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

from .base import Class, Leaf, Node, Product, Protocol, SubClass, Vendor

__all__ = ["Class", "Leaf", "Node", "Product", "Protocol", "SubClass", "Vendor"]
