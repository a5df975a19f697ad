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

def command(name):
    def decorator(cls):
        cls.command = name

        return cls

    return decorator

@command("nick")
@dataclass(frozen=True)
class Nickname:
    sender_id: int
    new_nickname: str

    def apply(self, engine):
        return engine.rename(self)

@command("create")
@dataclass(frozen=True)
class Create:
    sender_id: int
    channel: str
    invite_only: bool = False

    def apply(self, engine):
        return engine.create_channel(self)

@command("join")
@dataclass(frozen=True)
class Join:
    sender_id: int
    channel: str

    def apply(self, engine):
        return engine.join_channel(self)

@command("msg")
@dataclass(frozen=True)
class Message:
    sender_id: int
    channel: str
    message: str

    def apply(self, engine):
        return engine.send_message(self)

@command("leave")
@dataclass(frozen=True)
class Leave:
    sender_id: int
    channel: str

    def apply(self, engine):
        return engine.leave_channel(self)

@command("invite")
@dataclass(frozen=True)
class Invite:
    sender_id: int
    channel: str
    user: str

    def apply(self, engine):
        return engine.invite_user(self)

@command("kick")
@dataclass(frozen=True)
class Kick:
    sender_id: int
    channel: str
    user: str

    def apply(self, engine):
        return engine.kick_user(self)

COMMANDS = {cls.command: cls for cls in filter(lambda cls: isinstance(cls, type) and "command" in cls.__dict__,
                                               list(globals().values()))}
