# -*- coding: utf-8 -*-
# FlowMix: Stream and Mixer Modules for Process Flow Networks
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
This module includes functions for tabulating streams and unit operations
as pandas DataFrame objects.

"""
import numpy as np
import pandas as pd
from ._preferences import preferences
from .utils import ticket_key

__all__ = ('stream_table', 'unit_result_table')

def _flow(stream):
    F_mass = stream._F_mass
    return np.nan if F_mass is None else F_mass

def _docking_IDs(units, attr):
    IDs = {}
    for u in units:
        for s in getattr(u, attr):
            key = id(s)
            if key in IDs: IDs[key].append(str(u))
            else: IDs[key] = [str(u)]
    return IDs

def stream_table(streams, units=(), flow=None):
    """
    Return a stream table as a pandas DataFrame object.

    Parameters
    ----------
    streams : Iterable[Stream]
        Streams to tabulate. Streams without an ID are ignored.
    units : Iterable[Unit], optional
        Unit operations used to find the sources and sinks of streams.
    flow : str, optional
        Units of measure of mass flow rates (label only). Defaults to
        `preferences.flow_units`.

    Examples
    --------
    >>> from flowmix import Stream, Mixer, report
    >>> feed = Stream('feed', 2.0)
    >>> s1 = Stream('s1', 1.0)
    >>> product = Stream('product')
    >>> M1 = Mixer(2, 'M1', ins=[feed, s1], outs=[product])
    >>> M1.update_outputs()
    >>> df = report.stream_table([s1, product, feed], units=[M1])
    >>> list(df.columns)
    ['feed', 'product', 's1']
    >>> df.loc['Source'].tolist()
    ['-', 'M1', '-']
    >>> df.loc['Mass flow (kg/hr)'].tolist()
    [2.0, 3.0, 1.0]

    """
    if flow is None: flow = preferences.flow_units
    units = tuple(units)
    ss = sorted([i for i in streams if i.ID], key=ticket_key)
    sources = _docking_IDs(units, 'outs')
    sinks = _docking_IDs(units, 'ins')
    n = len(ss)
    array = np.empty((3, n), dtype=object)
    IDs = n * [None]
    for j in range(n):
        s = ss[j]
        key = id(s)
        IDs[j] = s.ID
        array[0, j] = ', '.join(sources[key]) if key in sources else '-'
        array[1, j] = ', '.join(sinks[key]) if key in sinks else '-'
        array[2, j] = _flow(s)
    df = pd.DataFrame(array, index=['Source', 'Sink', f'Mass flow ({flow})'],
                      columns=pd.Index(IDs, name='Stream'))
    return df

def unit_result_table(unit, flow=None):
    """
    Return a table of all inlet and outlet streams of a unit operation
    as a pandas DataFrame object.

    Parameters
    ----------
    unit : Unit
    flow : str, optional
        Units of measure of mass flow rates (label only). Defaults to
        `preferences.flow_units`.

    """
    if flow is None: flow = preferences.flow_units
    rows = [('ins', i, s) for i, s in enumerate(unit.ins)]
    rows += [('outs', i, s) for i, s in enumerate(unit.outs)]
    n = len(rows)
    array = np.empty((n, 2), dtype=object)
    index = n * [None]
    for j in range(n):
        port, i, s = rows[j]
        index[j] = (port, i)
        array[j, 0] = str(s)
        array[j, 1] = _flow(s)
    df = pd.DataFrame(array,
                      index=pd.MultiIndex.from_tuples(index, names=('Port', 'Index')),
                      columns=['Stream', f'Mass flow ({flow})'])
    df.columns.name = '-'.join([str(unit), unit.line])
    return df
