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
from dataclasses import dataclass
from datetime import datetime

@dataclass(frozen=True)
class ConnectionInfo:
    id: int
    nick: str
    signon: datetime

class Directory:
    def register(self, id):
        raise NotImplementedError

    def deregister(self, id):
        raise NotImplementedError

    def rename(self, id, nick):
        raise NotImplementedError

    def lookup_nickname(self, id):
        raise NotImplementedError

    def lookup_id(self, nick):
        raise NotImplementedError

    def lookup_signon(self, id):
        raise NotImplementedError

    def is_registered(self, id):
        raise NotImplementedError

    def nickname_in_use(self, nick):
        raise NotImplementedError

    def all_nicknames(self):
        raise NotImplementedError
