# -*- coding: utf-8 -*-
# FlowMix: Stream and Mixer Modules for Process Flow Networks
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
This module includes the bounded stream sequences used as inlets and outlets
of unit operations.

"""
from .._stream import Stream
from ..exceptions import Port, CapacityExceeded

__all__ = ('StreamSequence', 'Inlets', 'Outlets')

# %% List objects for inlet and outlet streams

class StreamSequence:
    """
    Create a StreamSequence object which holds up to `capacity` streams in
    insertion order. Streams are held by reference and may be docked in any
    number of sequences at the same time.

    Parameters
    ----------
    owner : Unit, optional
        Unit operation that owns the sequence.
    capacity : int
        Maximum number of streams.
    streams : Iterable[Stream], optional
        Streams to dock at creation.

    Examples
    --------
    >>> from flowmix import Stream
    >>> from flowmix.utils import Inlets
    >>> ins = Inlets(None, 1, [Stream('s1')])
    >>> ins
    [<Stream: s1>]
    >>> ins.isfull()
    True

    """
    __slots__ = ('_owner', '_capacity', '_streams')

    #: [Port] Side of the unit where streams are docked; defines the error
    #: raised when the sequence is full.
    port = None

    def __init__(self, owner, capacity, streams=None):
        if capacity < 0:
            raise ValueError(f"capacity must be a non-negative integer, not {capacity!r}")
        self._owner = owner
        self._capacity = int(capacity)
        self._streams = []
        if streams is not None: self.extend(streams)

    @property
    def owner(self):
        """Unit operation that owns the sequence."""
        return self._owner

    @property
    def capacity(self):
        """[int] Maximum number of streams."""
        return self._capacity

    @property
    def size(self):
        return self._streams.__len__()

    def isfull(self):
        """Return whether no more streams can be docked."""
        return self._streams.__len__() >= self._capacity

    def _as_stream(self, stream):
        if not isinstance(stream, Stream):
            raise TypeError(
                f"'{type(self).__name__}' object can only contain "
                f"streams; not '{type(stream).__name__}' objects"
            )
        return stream

    def _assert_room_for(self, N):
        size = self._streams.__len__()
        if size + N > self._capacity:
            raise CapacityExceeded(self.port, size, self._capacity, self._owner)

    def append(self, stream):
        """Dock stream at the end of the sequence."""
        stream = self._as_stream(stream)
        self._assert_room_for(1)
        self._streams.append(stream)

    def extend(self, streams):
        """Dock all streams at the end of the sequence. Nothing is docked if
        the streams do not all fit."""
        streams = [self._as_stream(i) for i in streams]
        self._assert_room_for(len(streams))
        self._streams.extend(streams)

    def index(self, stream):
        return self._streams.index(stream)

    def __add__(self, other):
        return self._streams + other
    def __radd__(self, other):
        return other + self._streams

    def __len__(self):
        return self._streams.__len__()

    def __bool__(self):
        return bool(self._streams)

    def __contains__(self, stream):
        return any([i is stream for i in self._streams])

    def __iter__(self):
        return iter(self._streams)

    def __getitem__(self, index):
        return self._streams[index]

    def __repr__(self):
        return repr(self._streams)


class Inlets(StreamSequence):
    """Create an Inlets object which serves as input streams for a unit."""
    __slots__ = ()
    port = Port.INLET

    @property
    def sink(self):
        return self._owner


class Outlets(StreamSequence):
    """Create an Outlets object which serves as output streams for a unit."""
    __slots__ = ()
    port = Port.OUTLET

    @property
    def source(self):
        return self._owner
