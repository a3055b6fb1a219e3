# -*- coding: utf-8 -*-
# FlowMix: Stream and Mixer Modules for Process Flow Networks
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
.. contents:: :local:

.. autodata:: preferences

"""
from __future__ import annotations
__version__ = '0.1.0'

# %% Initialize FlowMix

from . import exceptions
from ._preferences import preferences, DisplayPreferences, TemporaryPreferences
from ._stream import Stream
from . import utils
from .utils import TicketCounter
from ._unit import Unit
from . import units
from .units import *
from . import report

__all__ = (
    'Unit', 'Stream', 'TicketCounter', 'utils', 'units', 'exceptions',
    'report', 'preferences', 'DisplayPreferences', 'TemporaryPreferences',
    *units.__all__,
)
