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
from enum import Enum

NAME = "Hasenbau"
VERSION = "0.1.0"

DEFAULT_NICKNAME_PREFIX = "User"

class Verbosity(Enum):
    DEBUG = 4
    INFO = 3
    WARNING = 2
    ERROR = 1
    CRITICAL = 0

class ErrorCode(Enum):
    INVALID_NAME = 1
    NAME_ALREADY_IN_USE = 2
    NO_SUCH_CHANNEL = 3
    USER_NOT_IN_CHANNEL = 4
    CHANNEL_ALREADY_EXISTS = 5
    NO_SUCH_USER = 6
    USER_NOT_OWNER = 7
    INVITE_TO_PUBLIC_CHANNEL = 8
    JOIN_PRIVATE_CHANNEL = 9

    def __str__(self):
        return self.name.lower().replace("_", " ")
