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
import flowmix as fm
from flowmix.exceptions import (
    Port, CapacityExceeded, OutputsNotConfigured, UnitInheritanceError
)

def test_abstract_unit_cannot_be_created():
    with pytest.raises(UnitInheritanceError):
        fm.Unit()

def test_unit_inheritance_requires_run_method():
    with pytest.raises(UnitInheritanceError):
        class NoRun(fm.Unit): pass

    class AbstractSplitter(fm.Unit, isabstract=True): pass
    assert AbstractSplitter.ticket_name == 'S'
    with pytest.raises(UnitInheritanceError):
        AbstractSplitter()

def test_default_run_method_marks_unit_abstract():
    assert not fm.Unit._run
    assert repr(fm.Unit._run) == 'MissingRunMethod'
    with pytest.raises(UnitInheritanceError, match='update_outputs'):
        fm.Unit._run()

    class AbstractTank(fm.Unit, isabstract=True): pass
    assert AbstractTank._run is fm.Unit._run

def test_update_outputs_cannot_be_overridden():
    with pytest.raises(UnitInheritanceError):
        class NewUnit(fm.Unit):
            def _run(self): pass
            def update_outputs(self): pass

def test_unit_class_attributes():
    class StaticMixer(fm.Unit):
        def _run(self): pass

    class HeatExchanger(fm.Unit):
        line = 'Heat exchanger'
        def _run(self): pass

    assert StaticMixer.line == 'Static mixer'
    assert StaticMixer.ticket_name == 'M'
    assert HeatExchanger.line == 'Heat exchanger'
    assert HeatExchanger.ticket_name == 'U'

def test_custom_unit_with_split_outlets(tickets):
    class Splitter(fm.Unit):
        _N_outs = 2

        def _run(self):
            F_mass = sum([i.F_mass for i in self.ins], 0.)
            top, bottom = self.outs
            top.F_mass = 0.25 * F_mass
            bottom.F_mass = F_mass - top.F_mass

    feed = fm.Stream(F_mass=8., tickets=tickets)
    S1 = Splitter(tickets=tickets)
    assert S1.ID == 'S1'
    assert (S1.N_ins, S1.N_outs) == (1, 2)
    S1.add_input(feed)
    top = fm.Stream(tickets=tickets)
    S1.add_output(top)
    # One outlet is enough to update; this splitter needs both
    with pytest.raises(ValueError):
        S1.update_outputs()
    bottom = fm.Stream(tickets=tickets)
    S1.add_output(bottom)
    S1.update_outputs()
    assert (top.F_mass, bottom.F_mass) == (2., 6.)
    with pytest.raises(CapacityExceeded) as exc_info:
        S1.add_output(fm.Stream('extra'))
    assert exc_info.value.port is Port.OUTLET
    assert 'too many outputs' in str(exc_info.value)

def test_unit_capacity_keywords():
    class Junction(fm.Unit):
        def _run(self):
            for i, j in zip(self.ins, self.outs): j.F_mass = i.F_mass

    J1 = Junction('J1', N_ins=3, N_outs=3)
    assert (J1.N_ins, J1.N_outs) == (3, 3)
    assert (Junction.line, J1.ins.sink, J1.outs.source) == ('Junction', J1, J1)
    with pytest.raises(OutputsNotConfigured):
        J1.update_outputs()

def test_unit_str_and_repr():
    class Tank(fm.Unit):
        def _run(self): pass
    T1 = Tank('T1')
    assert (str(T1), repr(T1)) == ('T1', '<Tank: T1>')
    T1.ID = None
    assert (str(T1), repr(T1)) == ('Tank', '<Tank>')

if __name__ == '__main__':
    test_abstract_unit_cannot_be_created()
    test_unit_inheritance_requires_run_method()
    test_update_outputs_cannot_be_overridden()
    test_unit_class_attributes()
