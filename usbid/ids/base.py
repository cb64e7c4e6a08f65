#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""Entries of the reference table.

Inner nodes are dicts keyed by the numeric code of their children.
`str()` of any entry gives its human readable name.
"""


class Node(dict):
    def __init__(self, nid, name):
        self.id = nid
        self.name = name
        super().__init__()

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"{type(self).__name__}(id=0x{self.id:X}, name={self.name!r}, children={len(self)})"

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id and self.name == other.name and super().__eq__(other)

    def __ne__(self, other):
        # dict.__ne__ would only compare the children
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def add(self, child):
        self[child.id] = child
        return child


class Leaf:
    __slots__ = ["id", "name"]

    def __init__(self, lid, name):
        self.id = lid
        self.name = name

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"{type(self).__name__}(id=0x{self.id:X}, name={self.name!r})"

    def __eq__(self, other):
        if not isinstance(other, Leaf):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id and self.name == other.name

    def __hash__(self):
        return hash((type(self), self.id, self.name))


class Vendor(Node):
    """Vendor entry: product code -> Product"""


class Product(Leaf):
    pass


class Class(Node):
    """Class entry: subclass code -> SubClass"""


class SubClass(Node):
    """Subclass entry: protocol code -> Protocol"""


class Protocol(Leaf):
    pass
