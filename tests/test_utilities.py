# -*- coding: utf-8 -*-
# FlowMix: Stream and Mixer Modules for Process Flow Networks
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
import pytest
import doctest
import flowmix as fm
import flowmix._demo
from flowmix.utils import ticket_key, format_title

@pytest.mark.parametrize('module', [
    fm._stream,
    fm._preferences,
    fm._demo,
    fm.report,
    fm.units._mixer,
    fm.utils.tickets,
    fm.utils.misc,
    fm.utils.piping,
])
def test_doctests(module):
    results = doctest.testmod(module)
    assert not results.failed

def test_ticket_key():
    IDs = ['s10', 'feed', 's2', 'M1', 's1']
    assert sorted(IDs, key=ticket_key) == ['feed', 'M1', 's1', 's2', 's10']

def test_format_title():
    assert format_title('Mixer') == 'Mixer'
    assert format_title('ThreeWayMixer') == 'Three way mixer'

def test_ticket_counter_repr():
    tickets = fm.TicketCounter({'s': 3})
    assert tickets.take('s') == 's4'
    assert repr(tickets) == "<TicketCounter: {'s': 4}>"

def test_demo(capsys):
    M1 = fm._demo.main()
    assert capsys.readouterr().out == (
        "Stream s1 flow = 10\n"
        "Stream s2 flow = 5\n"
        "Stream s3 flow = 15\n"
    )
    assert M1.ID == 'M1'
    assert M1.outs[0].F_mass == 15.
