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
import copy
from chatd import channel
from chatd import validate
from chatd.core import ErrorCode
from chatd.exception import ProtocolException, UnknownChannelException

class Registry(channel.Registry):
    def __init__(self):
        self.__m = {}

    def create(self, name, owner, control=channel.Control.PUBLIC):
        if not validate.is_valid_name(name):
            raise ProtocolException(ErrorCode.INVALID_NAME)

        if name in self.__m:
            raise ProtocolException(ErrorCode.CHANNEL_ALREADY_EXISTS)

        info = channel.ChannelInfo(display_name=name, owner=owner, control=control, members={owner})

        self.__m[info.key] = info

    def join(self, name, id):
        info = self.__find__(name)

        added = id not in info.members

        info.members.add(id)

        return added

    def leave(self, name, id):
        info = self.__find_member__(name, id)

        info.members.remove(id)

        return self.__drop_if_orphaned__(info, id)

    def send(self, name, id):
        return frozenset(self.__find_member__(name, id).members)

    def remove_connection_everywhere(self, id):
        removed = []

        for info in sorted([info for info in self.__m.values() if id in info.members], key=str):
            info.members.remove(id)

            removed.append((str(info), frozenset(info.members)))

            self.__drop_if_orphaned__(info, id)

        return removed

    def __drop_if_orphaned__(self, info, id):
        orphaned = not info.members or info.owner == id

        if orphaned:
            del self.__m[info.key]

        return orphaned

    def __find__(self, name):
        info = self.__m.get(name)

        if not info:
            raise ProtocolException(ErrorCode.NO_SUCH_CHANNEL)

        return info

    def __find_member__(self, name, id):
        info = self.__find__(name)

        if id not in info.members:
            raise ProtocolException(ErrorCode.USER_NOT_IN_CHANNEL)

        return info

    def get(self, name):
        return copy.deepcopy(self.__existing__(name))

    def exists(self, name):
        return name in self.__m

    def owner(self, name):
        return self.__existing__(name).owner

    def members(self, name):
        return frozenset(self.__existing__(name).members)

    def control(self, name):
        return self.__existing__(name).control

    def channel_names(self):
        return sorted(self.__m.keys())

    def channels_of(self, id):
        return sorted([k for k, v in self.__m.items() if id in v.members])

    def __existing__(self, name):
        try:
            return self.__m[name]
        except KeyError:
            raise UnknownChannelException(name)

    def __len__(self):
        return len(self.__m)
