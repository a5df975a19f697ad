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
from logging import Logger
from chatd import broker

class Broker(broker.Broker):
    def __init__(self, log: Logger):
        self.log = log

        self.__sessions = {}

    def add_session(self, session_id, handler):
        added = session_id not in self.__sessions

        if added:
            self.__sessions[session_id] = handler

        return added

    def session_exists(self, session_id):
        return session_id in self.__sessions

    def remove_session(self, session_id):
        del self.__sessions[session_id]

    def deliver(self, receiver, response):
        delivered = receiver in self.__sessions

        if delivered:
            self.__sessions[receiver](response)
        else:
            self.log.warning("Couldn't deliver %s, session %s not registered.", type(response).__name__, receiver)

        return delivered

    def deliver_all(self, responses):
        count = 0

        for r in responses:
            if self.deliver(r.recipient, r):
                count += 1

        return count

class Queue:
    """Delivery handler buffering responses until the transport pops them."""
    def __init__(self):
        self.__items = []

    def __call__(self, response):
        self.__items.append(response)

    def pop(self):
        msg = None

        if self.__items:
            msg = self.__items.pop(0)

        return msg

    def __len__(self):
        return len(self.__items)
