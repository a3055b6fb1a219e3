# -*- coding: utf-8 -*-
# FlowMix: Stream and Mixer Modules for Process Flow Networks
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
Demonstration run of a two-inlet mixer.

Examples
--------
>>> from flowmix._demo import main
>>> M1 = main()
Stream s1 flow = 10
Stream s2 flow = 5
Stream s3 flow = 15

"""
from ._stream import Stream
from .units import Mixer
from .utils import TicketCounter

__all__ = ('main',)

def main(tickets=None):
    """Mix two feeds (10 and 5), print all streams and return the mixer."""
    if tickets is None: tickets = TicketCounter()
    s1 = Stream(tickets=tickets)
    s2 = Stream(tickets=tickets)
    s3 = Stream(tickets=tickets)
    s1.set_mass_flow(10.0)
    s2.set_mass_flow(5.0)
    M1 = Mixer(2, tickets=tickets)
    M1.add_input(s1)
    M1.add_input(s2)
    M1.add_output(s3)
    M1.update_outputs()
    for i in (s1, s2, s3): i.print()
    return M1
