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
from typing import Optional, TYPE_CHECKING
from ._preferences import preferences
from .exceptions import UndefinedMassFlow
if TYPE_CHECKING:
    from .utils import TicketCounter

__all__ = ('Stream',)

class Stream:
    """
    Create a Stream object that carries a mass flow rate between unit
    operations. The mass flow rate may be negative (reverse flow) and is
    undefined until it is set.

    Parameters
    ----------
    ID :
        Name of the stream. If None and `tickets` is given, a default ID
        (e.g. 's1') is taken from the ticket counter.
    F_mass :
        Mass flow rate.
    tickets :
        Ticket counter used to create a default ID.

    Examples
    --------
    >>> from flowmix import Stream
    >>> s1 = Stream.from_ticket(1)
    >>> s1.set_mass_flow(10.0)
    >>> s1.print()
    Stream s1 flow = 10
    >>> s1.F_mass = -2.5
    >>> s1.get_mass_flow()
    -2.5

    Reading a mass flow rate that was never set raises an error:

    >>> Stream('s2').get_mass_flow()
    Traceback (most recent call last):
    flowmix.exceptions.UndefinedMassFlow: <Stream: s2> mass flow is undefined; it must be set before it is read

    """
    __slots__ = ('_ID', '_F_mass')

    line: str = 'Stream'

    #: Prefix of default stream IDs.
    ticket_name: str = 's'

    def __init__(self, ID: Optional[str]=None, F_mass: Optional[float]=None,
                 tickets: Optional[TicketCounter]=None):
        if ID is None and tickets is not None: ID = tickets.take(self.ticket_name)
        self._ID = ID
        self._F_mass = None
        if F_mass is not None: self.set_mass_flow(F_mass)

    @classmethod
    def from_ticket(cls, number: int, F_mass: Optional[float]=None) -> Stream:
        """Return a stream named by the ticket name followed by the number."""
        return cls(cls.ticket_name + str(number), F_mass)

    @property
    def ID(self) -> Optional[str]:
        """Name of the stream."""
        return self._ID
    @ID.setter
    def ID(self, ID):
        self._ID = ID

    def set_name(self, name: str):
        self._ID = name

    def get_name(self) -> Optional[str]:
        return self._ID

    @property
    def F_mass(self) -> float:
        """Mass flow rate."""
        return self.get_mass_flow()
    @F_mass.setter
    def F_mass(self, F_mass):
        self.set_mass_flow(F_mass)

    def set_mass_flow(self, F_mass: float):
        """Set mass flow rate. Any float is accepted, including negative and
        not-a-number values."""
        self._F_mass = float(F_mass)

    def get_mass_flow(self) -> float:
        """Return mass flow rate."""
        F_mass = self._F_mass
        if F_mass is None: raise UndefinedMassFlow(self)
        return F_mass

    def is_defined(self) -> bool:
        """Return whether the mass flow rate has been set."""
        return self._F_mass is not None

    def _info(self):
        return f"{self.line} {self} flow = {preferences.format_flow(self._F_mass)}"

    def show(self):
        """Print stream name and mass flow rate."""
        print(self._info())
    _ipython_display_ = print = show

    def __str__(self):
        if self._ID: return self._ID
        else: return type(self).__name__

    def __repr__(self):
        if self._ID: return f'<{type(self).__name__}: {self._ID}>'
        else: return f'<{type(self).__name__}>'
