# -*- coding: utf-8 -*-
# FlowMix: Stream and Mixer Modules for Process Flow Networks
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
__all__ = ('TicketCounter',)

class TicketCounter:
    """
    Create a TicketCounter object that hands out default IDs (e.g. 's1', 's2',
    'M1') for streams and units. Each counter keeps its own ticket numbers, so
    separate counters never interfere with each other.

    Examples
    --------
    >>> from flowmix.utils import TicketCounter
    >>> tickets = TicketCounter()
    >>> tickets.take('s'), tickets.take('s'), tickets.take('M')
    ('s1', 's2', 'M1')
    >>> tickets.peek('s')
    2
    >>> tickets.clear()
    >>> tickets.take('s')
    's1'

    """
    __slots__ = ('ticket_numbers',)

    def __init__(self, ticket_numbers=None):
        #: [dict[str, int]] Last ticket number taken by ticket name.
        self.ticket_numbers = {} if ticket_numbers is None else dict(ticket_numbers)

    def take_number(self, ticket_name):
        """Increment and return the ticket number for the given ticket name."""
        ticket_numbers = self.ticket_numbers
        number = ticket_numbers.get(ticket_name, 0) + 1
        ticket_numbers[ticket_name] = number
        return number

    def take(self, ticket_name):
        """Return a new ID composed of the ticket name and the next ticket number."""
        return ticket_name + str(self.take_number(ticket_name))

    def peek(self, ticket_name):
        """Return the last ticket number taken for the ticket name (0 if none)."""
        return self.ticket_numbers.get(ticket_name, 0)

    def clear(self):
        """Reset all ticket numbers."""
        self.ticket_numbers.clear()

    def __repr__(self):
        return f"<{type(self).__name__}: {self.ticket_numbers}>"
