# -*- coding: utf-8 -*-
# FlowMix: Stream and Mixer Modules for Process Flow Networks
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from __future__ import annotations
from typing import Optional, Iterable, TYPE_CHECKING
from ._preferences import preferences
from ._stream import Stream
from .exceptions import UnitInheritanceError, OutputsNotConfigured
from .utils import Inlets, Outlets, format_title
if TYPE_CHECKING:
    from .utils import TicketCounter

__all__ = ('Unit',)

# %% Default run method

class MissingRunMethod:
    """
    Default `_run` method of abstract units. It is a false value, so unit
    classes that keep it are recognized as abstract; calling it raises an
    error because `update_outputs` has no way to compute outlets.

    """
    __slots__ = ()

    def __bool__(self): return False

    def __call__(self):
        raise UnitInheritanceError(
            "abstract units do not implement a `_run` method; "
            "`update_outputs` cannot compute outlet streams"
        )

    def __repr__(self): return "MissingRunMethod"

# %% Unit Operation

class Unit:
    """
    Abstract class for Unit objects. Child objects must contain a
    :attr:`~Unit._run` method to compute outlet streams from inlet streams.
    Inlets and outlets are bounded sequences; their capacities default to the
    :attr:`~Unit._N_ins` and :attr:`~Unit._N_outs` class attributes.

    Parameters
    ----------
    ID :
        A unique identification. If None and `tickets` is given, a default ID
        (e.g. 'M1') is taken from the ticket counter.
    ins :
        Inlet streams.
    outs :
        Outlet streams.
    tickets :
        Ticket counter used to create a default ID.
    N_ins :
        Inlet capacity. Defaults to :attr:`~Unit._N_ins`.
    N_outs :
        Outlet capacity. Defaults to :attr:`~Unit._N_outs`.

    """
    Stream = Stream

    #: **class-attribute** Default number of streams in :attr:`~Unit.ins`.
    _N_ins: int = 1

    #: **class-attribute** Default number of streams in :attr:`~Unit.outs`.
    _N_outs: int = 1

    #: **class-attribute** Name denoting the type of Unit class.
    line: str = 'Unit'

    #: **class-attribute** Prefix of default unit IDs.
    ticket_name: str = 'U'

    def __init_subclass__(cls, isabstract=False):
        super().__init_subclass__()
        dct = cls.__dict__
        if 'update_outputs' in dct:
            raise UnitInheritanceError(
                 "the 'update_outputs' method cannot be overridden; implement `_run` instead"
            )
        if 'line' not in dct:
            cls.line = format_title(cls.__name__)
        if 'ticket_name' not in dct:
            line = cls.line.lower()
            if 'mixer' in line: cls.ticket_name = 'M'
            elif 'split' in line: cls.ticket_name = 'S'
            else: cls.ticket_name = 'U'
        if not isabstract and not cls._run:
            raise UnitInheritanceError(
                f"'{cls.__name__}' must implement a `_run` method; "
                 "pass `isabstract=True` to the class definition to leave it abstract"
            )

    def __init__(self, ID: Optional[str]=None,
                 ins: Optional[Iterable[Stream]]=None,
                 outs: Optional[Iterable[Stream]]=None,
                 tickets: Optional[TicketCounter]=None, *,
                 N_ins: Optional[int]=None,
                 N_outs: Optional[int]=None):
        if not self._run:
            raise UnitInheritanceError(
                f"cannot create '{type(self).__name__}' object; abstract units "
                 "do not implement a `_run` method"
            )
        if ID is None and tickets is not None: ID = tickets.take(self.ticket_name)
        self._ID = ID
        self._ins = Inlets(self, self._N_ins if N_ins is None else N_ins, ins)
        self._outs = Outlets(self, self._N_outs if N_outs is None else N_outs, outs)

    _run = MissingRunMethod()

    @property
    def ID(self) -> Optional[str]:
        """Unique identification."""
        return self._ID
    @ID.setter
    def ID(self, ID):
        self._ID = ID

    @property
    def ins(self) -> Inlets:
        """Inlet streams."""
        return self._ins

    @property
    def outs(self) -> Outlets:
        """Outlet streams."""
        return self._outs

    @property
    def N_ins(self) -> int:
        """[int] Maximum number of inlet streams."""
        return self._ins.capacity

    @property
    def N_outs(self) -> int:
        """[int] Maximum number of outlet streams."""
        return self._outs.capacity

    def add_input(self, stream: Stream):
        """Dock stream as the last inlet.

        Raises
        ------
        CapacityExceeded
            If all inlets are already docked.

        """
        self._ins.append(stream)

    def add_output(self, stream: Stream):
        """Dock stream as the last outlet.

        Raises
        ------
        CapacityExceeded
            If all outlets are already docked.

        """
        self._outs.append(stream)

    def update_outputs(self):
        """Recompute all outlet streams from the current inlet streams.

        Raises
        ------
        OutputsNotConfigured
            If no outlets are docked.

        """
        if not self._outs: raise OutputsNotConfigured(self)
        self._run()

    def _info(self):
        """Return string with all specifications."""
        if self._ID:
            info = f"{type(self).__name__}: {self._ID}\n"
        else:
            info = f"{type(self).__name__}\n"
        format_flow = preferences.format_flow
        for name, streams in (('ins', self._ins), ('outs', self._outs)):
            info += f"{name}...\n"
            for i, stream in enumerate(streams):
                info += f"[{i}] {stream}  flow = {format_flow(stream._F_mass)}\n"
        return info.rstrip('\n')

    def show(self):
        """Print all specifications."""
        print(self._info())
    _ipython_display_ = show

    def __str__(self):
        return self._ID or type(self).__name__

    def __repr__(self):
        if self._ID: return f'<{type(self).__name__}: {self._ID}>'
        else: return f'<{type(self).__name__}>'
