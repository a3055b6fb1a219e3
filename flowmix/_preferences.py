# -*- coding: utf-8 -*-
# FlowMix: Stream and Mixer Modules for Process Flow Networks
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
import yaml
import os

__all__ = ('preferences', 'DisplayPreferences', 'TemporaryPreferences')

class DisplayPreferences:
    """
    All preferences for FlowMix stream display, reports and warnings.

    Examples
    --------
    >>> from flowmix import preferences
    >>> preferences.show()
    DisplayPreferences:
    flow_units: 'kg/hr'
    flow_notation: 'g'
    show_units: False
    warn_on_empty_inlets: False

    """
    __slots__ = ('flow_units', 'flow_notation', 'show_units',
                 'warn_on_empty_inlets')

    def __init__(self):
        #: Units of measure of mass flow rates, shown in reports.
        self.flow_units: str = 'kg/hr'

        #: Format specification of mass flow rates when displaying streams.
        self.flow_notation: str = 'g'

        #: Whether to append flow units when displaying streams.
        self.show_units: bool = False

        #: Whether to warn when a unit is updated with no inlets docked.
        self.warn_on_empty_inlets: bool = False

    def temporary(self):
        """Return a TemporaryPreferences object that will revert back to original
        preferences after context management."""
        return TemporaryPreferences()

    def reset(self, save=False):
        """Reset to FlowMix defaults."""
        self.__init__()
        if save: self.save()

    def update(self, *, save=False, **kwargs):
        for i, j in kwargs.items():
            if i not in self.__slots__:
                raise AttributeError(f"'{type(self).__name__}' object has no preference '{i}'")
            setattr(self, i, j)
        if save: self.save()

    def format_flow(self, value):
        """Return mass flow rate as a string according to preferences."""
        if value is None: return 'undefined'
        flow = format(value, self.flow_notation)
        if self.show_units: flow += ' ' + self.flow_units
        return flow

    @staticmethod
    def file():
        folder = os.path.dirname(__file__)
        return os.path.join(folder, 'preferences.yaml')

    def autoload(self):
        with open(self.file(), 'r') as stream:
            data = yaml.safe_load(stream)
            if not isinstance(data, dict):
                raise TypeError('yaml file must return a dict')
        self.update(**data)

    def to_dict(self):
        """Return dictionary of all preferences."""
        return {i: getattr(self, i) for i in self.__slots__}

    def save(self):
        """Save preferences."""
        with open(self.file(), 'w') as file:
            yaml.dump(self.to_dict(), file)

    def show(self):
        """Print all specifications."""
        dct = self.to_dict()
        print(f'{type(self).__name__}:\n' + '\n'.join([f"{i}: {repr(j)}" for i, j in dct.items()]))
    _ipython_display_ = show


class TemporaryPreferences:

    def __enter__(self):
        self.__dict__.update(preferences.to_dict())
        return preferences

    def __exit__(self, type, exception, traceback):
        preferences.update(**self.__dict__)

#:
preferences: DisplayPreferences = DisplayPreferences()

if os.environ.get("FILTER_WARNINGS"):
    from warnings import filterwarnings; filterwarnings('ignore')
if not os.environ.get("DISABLE_PREFERENCES") == "1":
    try: preferences.autoload()
    except (OSError, yaml.YAMLError, TypeError, AttributeError): pass
