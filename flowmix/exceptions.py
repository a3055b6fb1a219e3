# -*- coding: utf-8 -*-
# FlowMix: Stream and Mixer Modules for Process Flow Networks
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
This module includes classes and functions relating exception handling.

"""
from enum import Enum

__all__ = (
    'Port',
    'FlowmixError',
    'CapacityExceeded',
    'OutputsNotConfigured',
    'UndefinedMassFlow',
    'UnitInheritanceError',
    'UnitWarning',
    'message_with_object_stamp',
)

# %% Ports

class Port(Enum):
    """Side of a unit operation where a stream is docked."""
    INLET = 'inlet'
    OUTLET = 'outlet'

    @property
    def direction(self):
        """Direction of flow as seen by the unit ('input' or 'output')."""
        return 'input' if self is Port.INLET else 'output'

# %% Object stamps

def message_with_object_stamp(object, msg):
    return repr(object) + ' ' + msg

# %% FlowMix errors

class FlowmixError(Exception):
    """Base class for all FlowMix errors."""


class CapacityExceeded(FlowmixError, RuntimeError):
    """
    RuntimeError regarding an attempt to dock more streams than a stream
    sequence can hold.

    Parameters
    ----------
    port : Port
        Side of the unit that is full.
    size : int
        Number of streams already docked.
    capacity : int
        Maximum number of streams.
    unit : Unit, optional
        Owner of the stream sequence.

    """
    def __init__(self, port, size, capacity, unit=None):
        self.port = port
        self.size = size
        self.capacity = capacity
        self.unit = unit
        msg = (f"too many {port.direction}s; {port.value} capacity "
               f"is {capacity} and {size} streams are already docked")
        if unit is not None: msg = message_with_object_stamp(unit, msg)
        super().__init__(msg)


class OutputsNotConfigured(FlowmixError, RuntimeError):
    """RuntimeError regarding an update attempted with no outlets docked."""

    def __init__(self, unit=None):
        self.unit = unit
        msg = "missing output; outlets must be set before update"
        if unit is not None: msg = message_with_object_stamp(unit, msg)
        super().__init__(msg)


class UndefinedMassFlow(FlowmixError, ValueError):
    """ValueError regarding a mass flow that was read before being set."""

    def __init__(self, stream=None):
        self.stream = stream
        msg = "mass flow is undefined; it must be set before it is read"
        if stream is not None: msg = message_with_object_stamp(stream, msg)
        super().__init__(msg)


class UnitInheritanceError(FlowmixError, TypeError):
    """TypeError regarding unit classes with wrong inheritance."""

# %% FlowMix warnings

class UnitWarning(Warning):
    """Warning regarding unit operations."""

    @classmethod
    def from_source(cls, source, msg):
        """Return a UnitWarning object with source description."""
        msg = message_with_object_stamp(source, msg)
        return cls(msg)
