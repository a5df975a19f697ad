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
import logging
import threading
from chatd import broker
from chatd import dateutils
from chatd.engine import Engine
from chatd.exception import ConnectionInUseException, UnknownEntityException

def serialized(fn):
    def wrapper(self, *args):
        with self.lock:
            try:
                return fn(self, *args)

            except UnknownEntityException as ex:
                self.log.error("%s failed: %s", fn.__name__, ex)

                raise

    return wrapper

class Dispatcher:
    """Feeds commands into the engine one at a time and hands the responses to the broker.

    Responses are delivered before the lock is released, so every recipient sees
    them in the order the engine generated them.
    """
    def __init__(self, log: logging.Logger, engine: Engine, broker: broker.Broker):
        self.log = log
        self.engine = engine
        self.broker = broker
        self.lock = threading.Lock()

    @serialized
    def connect(self, id, handler):
        if self.engine.is_registered(id) or not self.broker.add_session(id, handler):
            raise ConnectionInUseException(id)

        responses = self.engine.register(id)

        self.log.info("Connection %d signed on as %s.", id, self.engine.nickname(id))

        self.broker.deliver_all(responses)

        return responses

    @serialized
    def disconnect(self, id):
        nick = self.engine.nickname(id)
        signon = self.engine.signon(id)

        responses = self.engine.deregister(id)

        if self.broker.session_exists(id):
            self.broker.remove_session(id)

        self.log.info("Connection %d (%s) signed off after %s.",
                      id,
                      nick,
                      dateutils.elapsed_time(dateutils.seconds_since(signon)))

        self.broker.deliver_all(responses)

        return responses

    @serialized
    def dispatch(self, cmd):
        self.log.debug("Processing '%s' from connection %d.", cmd.command, cmd.sender_id)

        responses = cmd.apply(self.engine)

        count = self.broker.deliver_all(responses)

        self.log.debug("'%s' produced %d response(s), %d delivered.", cmd.command, len(responses), count)

        return responses
