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
from chatd import core
from chatd import dateutils
from chatd import directory
from chatd.exception import ConnectionInUseException, UnknownConnectionException, UnknownNicknameException

class Directory(directory.Directory):
    def __init__(self, prefix=core.DEFAULT_NICKNAME_PREFIX):
        self.__prefix = prefix
        self.__m = {}
        self.__ids = {}

    def register(self, id):
        if id in self.__m:
            raise ConnectionInUseException(id)

        nick = self.__guess_nick__()

        self.__m[id] = directory.ConnectionInfo(id=id, nick=nick, signon=dateutils.now())
        self.__ids[nick] = id

        return nick

    def __guess_nick__(self):
        suffix = 0

        while "%s%d" % (self.__prefix, suffix) in self.__ids:
            suffix += 1

        return "%s%d" % (self.__prefix, suffix)

    def deregister(self, id):
        info = self.__lookup__(id)

        del self.__ids[info.nick]
        del self.__m[id]

    def rename(self, id, nick):
        info = self.__lookup__(id)

        del self.__ids[info.nick]

        self.__m[id] = directory.ConnectionInfo(id=id, nick=nick, signon=info.signon)
        self.__ids[nick] = id

    def lookup_nickname(self, id):
        return self.__lookup__(id).nick

    def lookup_id(self, nick):
        try:
            return self.__ids[nick]
        except KeyError:
            raise UnknownNicknameException(nick)

    def lookup_signon(self, id):
        return self.__lookup__(id).signon

    def is_registered(self, id):
        return id in self.__m

    def nickname_in_use(self, nick):
        return nick in self.__ids

    def all_nicknames(self):
        return [info.nick for info in self.__m.values()]

    def __lookup__(self, id):
        try:
            return self.__m[id]
        except KeyError:
            raise UnknownConnectionException(id)

    def __len__(self):
        return len(self.__m)

    def __iter__(self):
        for k, v in self.__m.items():
            yield k, v
