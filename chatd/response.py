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
from collections import Counter
from dataclasses import dataclass
from typing import Any, Tuple
from chatd.core import ErrorCode

@dataclass(frozen=True)
class Connected:
    id: int
    nickname: str

    @property
    def recipient(self):
        return self.id

@dataclass(frozen=True)
class Disconnected:
    id: int
    nickname: str

    @property
    def recipient(self):
        return self.id

@dataclass(frozen=True)
class Ok:
    recipient_id: int
    nickname: str
    command: Any

    @property
    def recipient(self):
        return self.recipient_id

@dataclass(frozen=True)
class Names:
    recipient_id: int
    nickname: str
    channel: str
    nicknames: Tuple[str, ...]
    owner: str

    @property
    def recipient(self):
        return self.recipient_id

@dataclass(frozen=True)
class Error:
    command: Any
    code: ErrorCode

    @property
    def recipient(self):
        return self.command.sender_id

class ResponseSet:
    """Responses produced by a single command.

    Two sets are equal when they hold the same multiset of responses. Responses
    addressed to the same recipient keep the order they were added in.
    """
    def __init__(self, responses=None):
        self.__responses = []

        if responses:
            self.extend(responses)

    @staticmethod
    def single(response):
        return ResponseSet([response])

    def add(self, response):
        self.__responses.append(response)

    def extend(self, responses):
        for r in responses:
            self.add(r)

    def recipients(self):
        return sorted({r.recipient for r in self.__responses})

    def for_recipient(self, id):
        return [r for r in self.__responses if r.recipient == id]

    def __len__(self):
        return len(self.__responses)

    def __iter__(self):
        return iter(list(self.__responses))

    def __eq__(self, other):
        if not isinstance(other, ResponseSet):
            return NotImplemented

        return Counter(self.__responses) == Counter(other.__responses)

    __hash__ = None

    def __repr__(self):
        return "ResponseSet(%r)" % self.__responses
