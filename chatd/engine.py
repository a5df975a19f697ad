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
from chatd import assembler
from chatd import channel
from chatd import directory
from chatd import validate
from chatd.core import ErrorCode
from chatd.exception import ProtocolException, UnknownNicknameException
from chatd.response import ResponseSet

def reports_errors(fn):
    def wrapper(self, cmd):
        try:
            return fn(self, cmd)

        except ProtocolException as ex:
            self.log.debug("Command rejected: %s, error='%s'", cmd, ex.code.name)

            return assembler.rejected(cmd, ex.code)

    return wrapper

class Engine:
    """Authoritative chat state.

    Every operation validates completely before it touches the directory or the
    channel registry. Protocol errors come back as a single Error response
    addressed to the sender; an unregistered sender id raises
    UnknownConnectionException.

    Callers must serialize access.
    """
    def __init__(self, log: logging.Logger, directory: directory.Directory, channels: channel.Registry):
        self.log = log
        self.directory = directory
        self.channels = channels

    def register(self, id):
        nick = self.directory.register(id)

        self.log.debug("Connection %d registered as %s.", id, nick)

        return ResponseSet.single(assembler.connected(id, nick))

    def deregister(self, id):
        nick = self.directory.lookup_nickname(id)

        self.log.debug("Removing %s (%d) from all channels.", nick, id)

        recipients = set()

        for name, remaining in self.channels.remove_connection_everywhere(id):
            self.log.debug("%s left channel %s, %d member(s) remaining.", nick, name, len(remaining))

            recipients.update(remaining)

        self.directory.deregister(id)

        self.log.debug("Connection %d (%s) deregistered.", id, nick)

        return ResponseSet([assembler.disconnected(member, nick) for member in sorted(recipients)])

    @reports_errors
    def rename(self, cmd):
        old_nick = self.directory.lookup_nickname(cmd.sender_id)

        if not validate.is_valid_name(cmd.new_nickname):
            raise ProtocolException(ErrorCode.INVALID_NAME)

        if self.directory.nickname_in_use(cmd.new_nickname):
            raise ProtocolException(ErrorCode.NAME_ALREADY_IN_USE)

        recipients = set()

        for name in self.channels.channels_of(cmd.sender_id):
            recipients.update(self.channels.members(name))

        self.directory.rename(cmd.sender_id, cmd.new_nickname)

        self.log.debug("Renamed %s to %s, notifying %d channel member(s).", old_nick, cmd.new_nickname, len(recipients))

        return ResponseSet(assembler.multicast(recipients, old_nick, cmd, first=cmd.sender_id))

    @reports_errors
    def create_channel(self, cmd):
        nick = self.directory.lookup_nickname(cmd.sender_id)

        control = channel.Control.PRIVATE if cmd.invite_only else channel.Control.PUBLIC

        self.channels.create(cmd.channel, cmd.sender_id, control)

        self.log.debug("%s created %s channel %s.", nick, control, cmd.channel)

        return ResponseSet.single(assembler.okay(cmd.sender_id, nick, cmd))

    @reports_errors
    def join_channel(self, cmd):
        nick = self.directory.lookup_nickname(cmd.sender_id)

        if not self.channels.join(cmd.channel, cmd.sender_id):
            self.log.debug("%s is already a member of %s.", nick, cmd.channel)

        members = self.channels.members(cmd.channel)

        responses = ResponseSet(assembler.multicast(members, nick, cmd))

        responses.add(assembler.names(cmd.sender_id,
                                      nick,
                                      cmd.channel,
                                      [self.directory.lookup_nickname(id) for id in members],
                                      self.directory.lookup_nickname(self.channels.owner(cmd.channel))))

        return responses

    @reports_errors
    def send_message(self, cmd):
        nick = self.directory.lookup_nickname(cmd.sender_id)

        members = self.channels.send(cmd.channel, cmd.sender_id)

        return ResponseSet(assembler.multicast(members, nick, cmd))

    @reports_errors
    def leave_channel(self, cmd):
        nick = self.directory.lookup_nickname(cmd.sender_id)

        members = self.channels.send(cmd.channel, cmd.sender_id) - {cmd.sender_id}

        if self.channels.leave(cmd.channel, cmd.sender_id):
            self.log.debug("Channel %s closed after %s left.", cmd.channel, nick)

        return ResponseSet(assembler.multicast(members, nick, cmd, first=cmd.sender_id))

    @reports_errors
    def invite_user(self, cmd):
        target = self.__authorize__(cmd)

        if self.channels.control(cmd.channel) == channel.Control.PUBLIC:
            raise ProtocolException(ErrorCode.INVITE_TO_PUBLIC_CHANNEL)

        return self.__invite__(cmd, target)

    @reports_errors
    def kick_user(self, cmd):
        target = self.__authorize__(cmd)

        if target not in self.channels.members(cmd.channel):
            raise ProtocolException(ErrorCode.USER_NOT_IN_CHANNEL)

        return self.__kick__(cmd, target)

    def __authorize__(self, cmd):
        self.directory.lookup_nickname(cmd.sender_id)

        if not self.channels.exists(cmd.channel):
            raise ProtocolException(ErrorCode.NO_SUCH_CHANNEL)

        try:
            target = self.directory.lookup_id(cmd.user)
        except UnknownNicknameException:
            raise ProtocolException(ErrorCode.NO_SUCH_USER)

        if self.channels.owner(cmd.channel) != cmd.sender_id:
            raise ProtocolException(ErrorCode.USER_NOT_OWNER)

        return target

    def __invite__(self, cmd, target):
        self.log.warning("Invitations are not supported, ignoring invite of %d to %s.", target, cmd.channel)

        return ResponseSet()

    def __kick__(self, cmd, target):
        self.log.warning("Kicking is not supported, ignoring kick of %d from %s.", target, cmd.channel)

        return ResponseSet()

    def registered_nicknames(self):
        return self.directory.all_nicknames()

    def channel_names(self):
        return self.channels.channel_names()

    def member_ids(self, name):
        return self.channels.members(name)

    def member_nicknames(self, name):
        return sorted([self.directory.lookup_nickname(id) for id in self.channels.members(name)])

    def owner(self, name):
        return self.directory.lookup_nickname(self.channels.owner(name))

    def nickname(self, id):
        return self.directory.lookup_nickname(id)

    def user_id(self, nick):
        return self.directory.lookup_id(nick)

    def is_registered(self, id):
        return self.directory.is_registered(id)

    def nickname_in_use(self, nick):
        return self.directory.nickname_in_use(nick)

    def channel_info(self, name):
        return self.channels.get(name)

    def signon(self, id):
        return self.directory.lookup_signon(id)
