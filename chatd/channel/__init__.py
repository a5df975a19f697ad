"""
    project............: Hasenbau
    description........: chat state engine
    date...............: 10/2026
    copyright..........: The Hasenbau authors

    Permission is hereby granted, free of charge, to any person obtaining
    a copy of this software and associated documentation files (the
    "Software"), to deal in the Software without restriction, including
    without limitation the rights to use, copy, modify, merge, publish,
    distribute, sublicense, and/or sell copies of the Software, and to
    permit persons to whom the Software is furnished to do so, subject to
    the following conditions:

    The above copyright notice and this permission notice shall be
    included in all copies or substantial portions of the Software.

    THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
    EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
    MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
    IN NO EVENT SHALL THE AUTHORS BE LIABLE FOR ANY CLAIM, DAMAGES OR
    OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE,
    ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
    OTHER DEALINGS IN THE SOFTWARE.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Set

class Control(Enum):
    PUBLIC = 112
    PRIVATE = 105

    def __init__(self, _):
        super().__init__()

        self.__names = {112: "public",
                        105: "private"}

    def __str__(self):
        return self.__names[self.value]

@dataclass
class ChannelInfo:
    display_name: str = None
    owner: int = None
    control: Control = Control.PUBLIC
    members: Set[int] = field(default_factory=set)

    def __str__(self):
        return self.display_name

    @property
    def key(self):
        return str(self)

    @property
    def private(self):
        return self.control == Control.PRIVATE

class Registry:
    def create(self, name, owner, control=Control.PUBLIC):
        raise NotImplementedError

    def join(self, name, id):
        raise NotImplementedError

    def leave(self, name, id):
        raise NotImplementedError

    def send(self, name, id):
        raise NotImplementedError

    def remove_connection_everywhere(self, id):
        raise NotImplementedError

    def get(self, name):
        raise NotImplementedError

    def exists(self, name):
        raise NotImplementedError

    def owner(self, name):
        raise NotImplementedError

    def members(self, name):
        raise NotImplementedError

    def control(self, name):
        raise NotImplementedError

    def channel_names(self):
        raise NotImplementedError

    def channels_of(self, id):
        raise NotImplementedError
