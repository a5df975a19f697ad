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
import pytest
from chatd import assembler
from chatd.command import Nickname, Create, Join, Message, Leave, Invite, Kick
from chatd.core import ErrorCode
from chatd.exception import (ConnectionInUseException,
                             UnknownConnectionException,
                             UnknownNicknameException,
                             UnknownChannelException)
from chatd.response import ResponseSet, Connected, Disconnected, Ok, Names, Error

def rejected(cmd, code):
    return ResponseSet.single(Error(command=cmd, code=code))

def test_register_single_user(engine):
    expected = ResponseSet.single(Connected(id=0, nickname="User0"))

    assert engine.register(0) == expected
    assert engine.registered_nicknames() == ["User0"]
    assert engine.nickname(0) == "User0"

def test_register_multiple_users(engine):
    responses = [engine.register(id) for id in (5, 2, 9)]

    assert [list(r)[0].nickname for r in responses] == ["User0", "User1", "User2"]
    assert all(engine.is_registered(id) for id in (5, 2, 9))
    assert len(engine.registered_nicknames()) == 3

def test_register_and_deregister_multiple_users(engine):
    for id in range(3):
        engine.register(id)

    engine.deregister(1)

    assert not engine.is_registered(1)
    assert sorted(engine.registered_nicknames()) == ["User0", "User2"]

    with pytest.raises(UnknownConnectionException):
        engine.nickname(1)

def test_deregister_unknown_user(engine):
    with pytest.raises(UnknownConnectionException):
        engine.deregister(99)

def test_empty_state_queries(engine):
    assert engine.registered_nicknames() == []
    assert engine.channel_names() == []

    with pytest.raises(UnknownNicknameException):
        engine.user_id("NonExistentUser")

    with pytest.raises(UnknownConnectionException):
        engine.nickname(123)

    for name in ("nonexistent", "", " "):
        with pytest.raises(UnknownChannelException):
            engine.owner(name)

        with pytest.raises(UnknownChannelException):
            engine.member_nicknames(name)

def test_rename_invalid_nickname(engine):
    engine.register(0)

    cmd = Nickname(0, "!nv@l!d!")

    assert cmd.apply(engine) == rejected(cmd, ErrorCode.INVALID_NAME)
    assert engine.registered_nicknames() == ["User0"]
    assert engine.nickname(0) == "User0"

def test_rename_to_name_in_use(engine):
    engine.register(0)
    engine.register(1)

    cmd = Nickname(0, "User1")

    assert engine.rename(cmd) == rejected(cmd, ErrorCode.NAME_ALREADY_IN_USE)
    assert engine.nickname(0) == "User0"

def test_rename_to_own_nickname(engine):
    engine.register(0)

    cmd = Nickname(0, "User0")

    assert engine.rename(cmd) == rejected(cmd, ErrorCode.NAME_ALREADY_IN_USE)

def test_rename_round_trip(engine):
    engine.register(0)

    cmd = Nickname(0, "Alice")

    assert engine.rename(cmd) == ResponseSet.single(Ok(recipient_id=0, nickname="User0", command=cmd))
    assert engine.user_id("Alice") == 0
    assert engine.nickname(0) == "Alice"
    assert not engine.nickname_in_use("User0")

def test_rename_notifies_each_channel_member_once(engine):
    for id in range(4):
        engine.register(id)

    engine.create_channel(Create(0, "java"))
    engine.create_channel(Create(1, "python"))
    engine.join_channel(Join(1, "java"))
    engine.join_channel(Join(0, "python"))
    engine.join_channel(Join(2, "python"))

    cmd = Nickname(0, "Alice")

    expected = ResponseSet([Ok(recipient_id=id, nickname="User0", command=cmd) for id in (0, 1, 2)])

    assert engine.rename(cmd) == expected
    assert engine.member_nicknames("java") == ["Alice", "User1"]

def test_create_channel(engine):
    engine.register(0)

    cmd = Create(0, "java")

    assert engine.create_channel(cmd) == ResponseSet.single(Ok(recipient_id=0, nickname="User0", command=cmd))
    assert engine.channel_names() == ["java"]
    assert engine.owner("java") == "User0"
    assert engine.member_nicknames("java") == ["User0"]

def test_create_channel_with_invalid_name(engine):
    engine.register(0)

    cmd = Create(0, "invalid@name!")

    assert engine.create_channel(cmd) == rejected(cmd, ErrorCode.INVALID_NAME)
    assert "invalid@name!" not in engine.channel_names()

def test_create_duplicate_channel(engine):
    engine.register(0)
    engine.register(1)
    engine.create_channel(Create(0, "java"))

    cmd = Create(1, "java")

    assert engine.create_channel(cmd) == rejected(cmd, ErrorCode.CHANNEL_ALREADY_EXISTS)
    assert engine.owner("java") == "User0"
    assert engine.member_nicknames("java") == ["User0"]

def test_join_channel(engine):
    engine.register(0)
    engine.register(1)
    engine.create_channel(Create(0, "java"))

    cmd = Join(1, "java")

    expected = ResponseSet([Ok(recipient_id=0, nickname="User1", command=cmd),
                            Ok(recipient_id=1, nickname="User1", command=cmd),
                            Names(recipient_id=1,
                                  nickname="User1",
                                  channel="java",
                                  nicknames=("User0", "User1"),
                                  owner="User0")])

    assert engine.join_channel(cmd) == expected
    assert engine.member_nicknames("java") == ["User0", "User1"]

def test_join_twice_changes_nothing(engine):
    engine.register(0)
    engine.register(1)
    engine.create_channel(Create(0, "java"))
    engine.join_channel(Join(1, "java"))

    responses = engine.join_channel(Join(1, "java"))

    assert len(responses) == 3
    assert engine.member_ids("java") == {0, 1}

def test_join_nonexistent_channel(engine):
    engine.register(0)

    cmd = Join(0, "nonexistent")

    assert engine.join_channel(cmd) == rejected(cmd, ErrorCode.NO_SUCH_CHANNEL)
    assert engine.channel_names() == []

def test_send_message(engine):
    for id in range(3):
        engine.register(id)

    engine.create_channel(Create(0, "java"))
    engine.join_channel(Join(1, "java"))
    engine.join_channel(Join(2, "java"))
    engine.rename(Nickname(1, "Bob"))

    cmd = Message(1, "java", "hello")

    responses = engine.send_message(cmd)

    assert responses == ResponseSet([Ok(recipient_id=id, nickname="Bob", command=cmd) for id in range(3)])
    assert all(r.command.message == "hello" for r in responses)

def test_send_message_errors(engine):
    engine.register(0)
    engine.register(1)
    engine.create_channel(Create(0, "java"))

    outsider = Message(1, "java", "hi")
    nowhere = Message(0, "python", "hi")

    assert engine.send_message(outsider) == rejected(outsider, ErrorCode.USER_NOT_IN_CHANNEL)
    assert engine.send_message(nowhere) == rejected(nowhere, ErrorCode.NO_SUCH_CHANNEL)

def test_leave_channel(engine):
    for id in range(3):
        engine.register(id)

    engine.create_channel(Create(0, "java"))
    engine.join_channel(Join(1, "java"))
    engine.join_channel(Join(2, "java"))

    cmd = Leave(1, "java")

    expected = ResponseSet([Ok(recipient_id=id, nickname="User1", command=cmd) for id in range(3)])

    assert engine.leave_channel(cmd) == expected
    assert engine.member_nicknames("java") == ["User0", "User2"]

def test_owner_leaving_deletes_channel(engine):
    for id in range(3):
        engine.register(id)

    engine.create_channel(Create(0, "java"))
    engine.join_channel(Join(1, "java"))
    engine.join_channel(Join(2, "java"))

    cmd = Leave(0, "java")

    responses = engine.leave_channel(cmd)

    assert responses == ResponseSet([Ok(recipient_id=id, nickname="User0", command=cmd) for id in range(3)])
    assert len(responses.for_recipient(0)) == 1
    assert "java" not in engine.channel_names()

def test_last_member_leaving_deletes_channel(engine):
    engine.register(0)
    engine.create_channel(Create(0, "java"))

    assert len(engine.leave_channel(Leave(0, "java"))) == 1
    assert engine.channel_names() == []

def test_leave_channel_non_member(engine):
    engine.register(0)
    engine.register(1)
    engine.create_channel(Create(0, "java"))

    cmd = Leave(1, "java")

    assert engine.leave_channel(cmd) == rejected(cmd, ErrorCode.USER_NOT_IN_CHANNEL)

def test_leave_nonexistent_channel(engine):
    engine.register(0)

    cmd = Leave(0, "java")

    assert engine.leave_channel(cmd) == rejected(cmd, ErrorCode.NO_SUCH_CHANNEL)

def test_deregister_owner_removes_multiple_owned_channels(engine):
    engine.register(0)
    engine.register(1)
    engine.create_channel(Create(0, "java"))
    engine.create_channel(Create(0, "python"))
    engine.join_channel(Join(1, "java"))

    assert engine.deregister(0) == ResponseSet.single(Disconnected(id=1, nickname="User0"))
    assert engine.channel_names() == []
    assert not engine.is_registered(0)

def test_deregister_notifies_each_member_once(engine):
    for id in range(3):
        engine.register(id)

    engine.create_channel(Create(1, "java"))
    engine.create_channel(Create(2, "python"))
    engine.join_channel(Join(0, "java"))
    engine.join_channel(Join(0, "python"))
    engine.join_channel(Join(1, "python"))

    expected = ResponseSet([Disconnected(id=1, nickname="User0"), Disconnected(id=2, nickname="User0")])

    assert engine.deregister(0) == expected
    assert engine.channel_names() == ["java", "python"]
    assert engine.member_ids("java") == {1}
    assert engine.member_ids("python") == {1, 2}

def test_unregistered_sender_is_a_caller_error(engine):
    with pytest.raises(UnknownConnectionException):
        engine.create_channel(Create(3, "java"))

    assert engine.channel_names() == []

def test_invite_and_kick_errors(engine):
    engine.register(0)
    engine.register(1)
    engine.create_channel(Create(0, "java"))
    engine.create_channel(Create(0, "secret", invite_only=True))

    cases = [(Invite(0, "nowhere", "User1"), ErrorCode.NO_SUCH_CHANNEL),
             (Invite(0, "secret", "Nobody"), ErrorCode.NO_SUCH_USER),
             (Invite(1, "secret", "User0"), ErrorCode.USER_NOT_OWNER),
             (Invite(0, "java", "User1"), ErrorCode.INVITE_TO_PUBLIC_CHANNEL),
             (Kick(0, "nowhere", "User1"), ErrorCode.NO_SUCH_CHANNEL),
             (Kick(0, "java", "Nobody"), ErrorCode.NO_SUCH_USER),
             (Kick(1, "java", "User0"), ErrorCode.USER_NOT_OWNER),
             (Kick(0, "java", "User1"), ErrorCode.USER_NOT_IN_CHANNEL)]

    for cmd, code in cases:
        assert cmd.apply(engine) == rejected(cmd, code)

def test_invite_and_kick_leave_state_unchanged(engine):
    engine.register(0)
    engine.register(1)
    engine.create_channel(Create(0, "secret", invite_only=True))
    engine.join_channel(Join(1, "secret"))

    assert len(engine.invite_user(Invite(0, "secret", "User1"))) == 0
    assert len(engine.kick_user(Kick(0, "secret", "User1"))) == 0
    assert engine.member_ids("secret") == {0, 1}

def test_kick_is_pluggable(log, directory, registry):
    from chatd.engine import Engine

    class KickingEngine(Engine):
        def __kick__(self, cmd, target):
            return self.leave_channel(Leave(target, cmd.channel))

    engine = KickingEngine(log, directory, registry)

    engine.register(0)
    engine.register(1)
    engine.create_channel(Create(0, "java"))
    engine.join_channel(Join(1, "java"))

    assert len(engine.kick_user(Kick(0, "java", "User1"))) == 2
    assert engine.member_ids("java") == {0}

def test_queries_return_copies(engine):
    engine.register(0)
    engine.create_channel(Create(0, "java"))

    engine.registered_nicknames().append("Mallory")
    engine.channel_names().append("rust")
    engine.member_nicknames("java").append("Mallory")
    engine.channel_info("java").members.add(7)

    assert engine.registered_nicknames() == ["User0"]
    assert engine.channel_names() == ["java"]
    assert engine.member_nicknames("java") == ["User0"]
    assert engine.member_ids("java") == {0}

def test_assembler_names_sorts_nicknames():
    names = assembler.names(0, "b", "java", ["c", "a", "b"], "a")

    assert names.nicknames == ("a", "b", "c")

def test_register_live_id_leaves_state_intact(engine):
    engine.register(0)

    with pytest.raises(ConnectionInUseException):
        engine.register(0)

    assert engine.registered_nicknames() == ["User0"]
    assert engine.nickname(0) == "User0"

    engine.deregister(0)

    assert engine.registered_nicknames() == []
    assert not engine.nickname_in_use("User0")

def test_deleted_channel_name_can_be_reused(engine):
    for id in range(3):
        engine.register(id)

    engine.create_channel(Create(0, "java"))
    engine.join_channel(Join(1, "java"))
    engine.leave_channel(Leave(0, "java"))

    assert "java" not in engine.channel_names()

    cmd = Create(2, "java")

    assert engine.create_channel(cmd) == ResponseSet.single(Ok(recipient_id=2, nickname="User2", command=cmd))
    assert engine.owner("java") == "User2"
    assert engine.member_ids("java") == {2}
    assert engine.member_nicknames("java") == ["User2"]
