# -*- coding: utf-8 -*-
# FlowMix: Stream and Mixer Modules for Process Flow Networks
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
from ._demo import main

main()
