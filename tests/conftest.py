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
import pytest
import chatd.directory.memory
import chatd.channel.memory
import chatd.broker.memory
from chatd.engine import Engine
from chatd.dispatcher import Dispatcher

@pytest.fixture
def log():
    return logging.getLogger("chatd.test")

@pytest.fixture
def directory():
    return chatd.directory.memory.Directory()

@pytest.fixture
def registry():
    return chatd.channel.memory.Registry()

@pytest.fixture
def engine(log, directory, registry):
    return Engine(log, directory, registry)

@pytest.fixture
def broker(log):
    return chatd.broker.memory.Broker(log)

@pytest.fixture
def dispatcher(log, engine, broker):
    return Dispatcher(log, engine, broker)
