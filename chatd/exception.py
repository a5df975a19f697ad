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
from chatd.core import ErrorCode

class ChatdException(Exception):
    pass

class UnknownEntityException(ChatdException):
    def __init__(self, kind, key):
        super().__init__("Unknown %s: %s" % (kind, key))

        self.key = key

class UnknownConnectionException(UnknownEntityException):
    def __init__(self, id):
        super().__init__("connection", id)

class UnknownNicknameException(UnknownEntityException):
    def __init__(self, nick):
        super().__init__("nickname", nick)

class UnknownChannelException(UnknownEntityException):
    def __init__(self, name):
        super().__init__("channel", name)

class ProtocolException(ChatdException):
    def __init__(self, code: ErrorCode):
        super().__init__(str(code))

        self.code = code

class ConnectionInUseException(ChatdException):
    def __init__(self, id):
        super().__init__("Connection already in use: %s" % id)

        self.key = id
