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
from chatd import response

def connected(id, nick):
    return response.Connected(id=id, nickname=nick)

def disconnected(id, nick):
    return response.Disconnected(id=id, nickname=nick)

def okay(recipient, nick, command):
    return response.Ok(recipient_id=recipient, nickname=nick, command=command)

def names(recipient, nick, channel, nicknames, owner):
    return response.Names(recipient_id=recipient,
                          nickname=nick,
                          channel=channel,
                          nicknames=tuple(sorted(nicknames)),
                          owner=owner)

def error(command, code):
    return response.Error(command=command, code=code)

def rejected(command, code):
    return response.ResponseSet.single(error(command, code))

def multicast(recipients, nick, command, first=None):
    """Ok notices for every recipient, 'first' (if given) ahead of the rest in ascending id order."""
    responses = []

    if first is not None:
        responses.append(okay(first, nick, command))

    responses.extend(okay(id, nick, command) for id in sorted(recipients) if id != first)

    return responses
