# -*- coding: utf-8 -*-
# FlowMix: Stream and Mixer Modules for Process Flow Networks
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from . import (
    misc,
    tickets,
    piping,
)
__all__ = (
    *misc.__all__,
    *tickets.__all__,
    *piping.__all__,
)
from .misc import *
from .tickets import *
from .piping import *
