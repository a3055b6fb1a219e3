# -*- coding: utf-8 -*-
# FlowMix: Stream and Mixer Modules for Process Flow Networks
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from warnings import warn
from .._unit import Unit
from .._preferences import preferences
from ..exceptions import UnitWarning

__all__ = ('Mixer', 'MIXER_OUTPUTS')

#: Number of outlets of every mixer.
MIXER_OUTPUTS = 1

class Mixer(Unit):
    """
    Create a mixer that mixes up to `N_ins` streams together. The mass
    flow rates of all inlets are summed and the total is distributed evenly
    across the outlets (a mixer has exactly one outlet).

    Parameters
    ----------
    N_ins : int
        Maximum number of inlet fluids to be mixed.
    ID : str, optional
        A unique identification.
    ins : streams, optional
        Inlet fluids to be mixed.
    outs : stream, optional
        Mixed outlet fluid.
    tickets : TicketCounter, optional
        Ticket counter used to create a default ID.

    Examples
    --------
    Mix two streams:

    >>> from flowmix import Stream, units, TicketCounter
    >>> tickets = TicketCounter()
    >>> s1 = Stream(F_mass=10.0, tickets=tickets)
    >>> s2 = Stream(F_mass=5.0, tickets=tickets)
    >>> s3 = Stream(tickets=tickets)
    >>> M1 = units.Mixer(2, tickets=tickets)
    >>> M1.add_input(s1)
    >>> M1.add_input(s2)
    >>> M1.add_output(s3)
    >>> M1.update_outputs()
    >>> M1.show()
    Mixer: M1
    ins...
    [0] s1  flow = 10
    [1] s2  flow = 5
    outs...
    [0] s3  flow = 15

    Inlets beyond the capacity of the mixer are rejected:

    >>> M1.add_input(Stream('s4'))
    Traceback (most recent call last):
    flowmix.exceptions.CapacityExceeded: <Mixer: M1> too many inputs; inlet capacity is 2 and 2 streams are already docked

    """
    _N_ins = 2
    _N_outs = MIXER_OUTPUTS

    def __init__(self, N_ins=2, ID=None, ins=None, outs=None, tickets=None):
        if isinstance(N_ins, bool) or not isinstance(N_ins, int) or N_ins < 1:
            raise ValueError(f"N_ins must be a positive integer, not {N_ins!r}")
        Unit.__init__(self, ID, ins, outs, tickets, N_ins=N_ins, N_outs=MIXER_OUTPUTS)

    def _run(self):
        ins = self._ins
        if not ins and preferences.warn_on_empty_inlets:
            warn(UnitWarning.from_source(self, "no inlets to mix; outlet mass "
                                               "flow rate is set to zero"),
                 stacklevel=3)
        # All inlets are read before any outlet is set
        flows = [i.get_mass_flow() for i in ins]
        # Plain accumulation in insertion order; builtin sum compensates
        # rounding errors on Python 3.12+
        F_mass = 0.
        for i in flows: F_mass += i
        outs = self._outs
        F_mass_share = F_mass / len(outs)
        for i in outs: i.set_mass_flow(F_mass_share)
