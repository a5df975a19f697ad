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
from chatd import config
from chatd import log
import chatd.config.json
import chatd.directory.memory
import chatd.channel.memory
import chatd.broker.memory
from chatd.engine import Engine
from chatd.dispatcher import Dispatcher

def load_config(filename):
    return config.from_mapping(chatd.config.json.load(filename))

def new_dispatcher(preferences=None):
    if preferences is None:
        preferences = config.Config()

    logger = log.new_logger(core.NAME.lower(), preferences.logging_verbosity, preferences.logging_format)

    logger.info("Starting %s %s.", core.NAME, core.VERSION)

    engine = Engine(logger,
                    chatd.directory.memory.Directory(preferences.nickname_prefix),
                    chatd.channel.memory.Registry())

    return Dispatcher(logger, engine, chatd.broker.memory.Broker(logger))
