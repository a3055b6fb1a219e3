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
import numpy as np
import flowmix as fm
from numpy.testing import assert_allclose

@pytest.fixture
def mixers(tickets):
    s1 = fm.Stream(F_mass=10., tickets=tickets)
    s2 = fm.Stream(F_mass=5., tickets=tickets)
    s3 = fm.Stream(tickets=tickets)
    s10 = fm.Stream.from_ticket(10, F_mass=1.)
    product = fm.Stream('product')
    M1 = fm.Mixer(2, ins=[s1, s2], outs=[s3], tickets=tickets)
    M2 = fm.Mixer(2, ins=[s3, s10], outs=[product], tickets=tickets)
    return M1, M2

def test_stream_table(mixers):
    M1, M2 = mixers
    streams = [*M1.ins, *M2.ins, *M2.outs, fm.Stream()]
    df = fm.report.stream_table(streams, units=mixers)
    assert list(df.columns) == ['product', 's1', 's2', 's3', 's10']
    assert df.columns.name == 'Stream'
    assert list(df.index) == ['Source', 'Sink', 'Mass flow (kg/hr)']
    assert df.loc['Source'].tolist() == ['M2', '-', '-', 'M1', '-']
    assert df.loc['Sink'].tolist() == ['-', 'M1', 'M1', 'M2', 'M2']
    flows = df.loc['Mass flow (kg/hr)'].to_numpy(dtype=float)
    assert np.isnan(flows[0]) and np.isnan(flows[3])
    M1.update_outputs()
    M2.update_outputs()
    df = fm.report.stream_table(streams, units=mixers, flow='lb/hr')
    assert_allclose(df.loc['Mass flow (lb/hr)'].to_numpy(dtype=float),
                    [16., 10., 5., 15., 1.])

def test_stream_table_with_shared_inlet():
    s1 = fm.Stream('s1', 1.)
    M1 = fm.Mixer(1, 'M1', ins=[s1])
    M2 = fm.Mixer(1, 'M2', ins=[s1])
    df = fm.report.stream_table([s1], units=[M1, M2])
    assert df.loc['Sink', 's1'] == 'M1, M2'
    assert fm.report.stream_table([]).empty

def test_unit_result_table(mixers):
    M1, M2 = mixers
    M1.update_outputs()
    df = fm.report.unit_result_table(M1)
    assert df.columns.name == 'M1-Mixer'
    assert list(df.index) == [('ins', 0), ('ins', 1), ('outs', 0)]
    assert df['Stream'].tolist() == ['s1', 's2', 's3']
    assert_allclose(df['Mass flow (kg/hr)'].to_numpy(dtype=float), [10., 5., 15.])
